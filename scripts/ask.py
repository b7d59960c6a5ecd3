"""Ask the BZR assistant a question from the command line.

Usage:
    python -m scripts.ask "Kako se radi procena rizika?"
    python -m scripts.ask "Obaveze poslodavca" --user 7 --create-post
    python -m scripts.ask "procena rizika" --show-scores
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path

# Fix Windows console encoding
os.environ.setdefault("PYTHONIOENCODING", "utf-8")
if sys.stdout and sys.stdout.encoding != "utf-8":
    sys.stdout.reconfigure(encoding="utf-8")

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger

from bzr import db
from bzr.agent.ai_agent import answer_and_maybe_create_post, generate_answer
from bzr.models import BlogStatus
from bzr.search.blog_search import score_blog_posts
from bzr.usage import QuestionLimitReached, increment_question_count


def show_scores(question: str) -> None:
    posts = db.get_blog_posts_by_status(BlogStatus.PUBLISHED)
    if not posts:
        print("No published blog posts.")
        return
    for post, score in score_blog_posts(question, posts):
        print(f"{score:.3f}  {post.title}  (/blog/{post.slug})")


async def run(
    question: str,
    user_id: int | None = None,
    check_blogs: bool = True,
    create_post: bool = False,
) -> int:
    db.init_db()

    if user_id is not None:
        try:
            usage = increment_question_count(user_id)
        except QuestionLimitReached as e:
            print(f"Dostignut dnevni limit pitanja ({e.used}/{e.limit}).")
            return 2
        logger.info("Questions today: {}/{}", usage.used_questions, usage.max_questions)

    post = None
    if create_post and check_blogs:
        response, post = await answer_and_maybe_create_post(question, user_id=user_id)
    else:
        response = await generate_answer(
            question, user_id=user_id, check_existing_blogs=check_blogs
        )

    print(response.answer)

    if response.relevant_blog_posts:
        print("\nPovezani članci:")
        for p in response.relevant_blog_posts:
            print(f"  - {p.title} (/blog/{p.slug})")
    if post is not None:
        print(f"\nNovi blog post čeka odobrenje: id={post.id} slug={post.slug}")

    return 1 if response.error else 0


def main() -> None:
    parser = argparse.ArgumentParser(description="BZR Savetnik — ask a question")
    parser.add_argument("question", help="Question about occupational safety and health")
    parser.add_argument("--user", type=int, help="User id (enforces the daily question limit)")
    parser.add_argument(
        "--no-blog-check",
        action="store_true",
        help="Skip searching existing blog posts",
    )
    parser.add_argument(
        "--create-post",
        action="store_true",
        help="Draft a blog post when no existing post covers the question",
    )
    parser.add_argument(
        "--show-scores",
        action="store_true",
        help="Only print relevance scores of published posts",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    if args.show_scores:
        db.init_db()
        show_scores(args.question)
        return

    sys.exit(asyncio.run(run(
        args.question,
        user_id=args.user,
        check_blogs=not args.no_blog_check,
        create_post=args.create_post,
    )))


if __name__ == "__main__":
    main()
