"""Blog post administration: review queue and status changes.

Usage:
    python -m scripts.blog_admin list --status published
    python -m scripts.blog_admin pending
    python -m scripts.blog_admin approve 12
    python -m scripts.blog_admin publish 12
    python -m scripts.blog_admin reject 12 --feedback "Nedostaje pozivanje na član zakona"
    python -m scripts.blog_admin delete 12
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

os.environ.setdefault("PYTHONIOENCODING", "utf-8")
if sys.stdout and sys.stdout.encoding != "utf-8":
    sys.stdout.reconfigure(encoding="utf-8")

sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger

from bzr import db
from bzr.blog import workflow
from bzr.models import BlogPost, BlogStatus


def _print_posts(posts: list[BlogPost]) -> None:
    if not posts:
        print("No blog posts.")
        return
    for p in posts:
        print(f"[{p.id}] {p.status.value:<16} {p.title}  (/blog/{p.slug}, views={p.view_count})")


def main() -> None:
    parser = argparse.ArgumentParser(description="BZR blog administration")
    sub = parser.add_subparsers(dest="command", required=True)

    lst = sub.add_parser("list", help="List blog posts")
    lst.add_argument("--status", choices=[s.value for s in BlogStatus], help="Filter by status")
    lst.add_argument("--category", help="Filter by category")

    sub.add_parser("pending", help="List posts waiting for approval")

    for name in ("approve", "publish", "delete"):
        cmd = sub.add_parser(name, help=f"{name.capitalize()} a post")
        cmd.add_argument("post_id", type=int)

    rej = sub.add_parser("reject", help="Reject a post with feedback")
    rej.add_argument("post_id", type=int)
    rej.add_argument("--feedback", required=True, help="Reason shown to the author")

    args = parser.parse_args()
    db.init_db()

    if args.command == "list":
        if args.status:
            posts = db.get_blog_posts_by_status(args.status)
        elif args.category:
            posts = db.get_blog_posts_by_category(args.category)
        else:
            posts = db.get_all_blog_posts()
        _print_posts(posts)
        return

    if args.command == "pending":
        _print_posts(workflow.list_pending())
        return

    if args.command == "delete":
        if not db.delete_blog_post(args.post_id):
            raise SystemExit(f"Blog post {args.post_id} not found")
        logger.info("Blog post {} deleted", args.post_id)
        return

    try:
        if args.command == "approve":
            post = workflow.approve(args.post_id)
        elif args.command == "publish":
            post = workflow.publish(args.post_id)
        else:
            post = workflow.reject(args.post_id, args.feedback)
    except (workflow.BlogPostNotFound, ValueError) as e:
        raise SystemExit(str(e))

    _print_posts([post])


if __name__ == "__main__":
    main()
