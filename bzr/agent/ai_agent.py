"""BZR Savetnik — AI assistant answering occupational safety questions.

Before asking the LLM, existing published blog posts are searched. Enough
relevant posts means the answer points the user at them and no new post is
drafted; otherwise the caller is told a new post should be created.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from bzr.agent import llm
from bzr.agent.fallback import default_response
from bzr.blog.creation import create_blog_from_ai_response
from bzr.config import MAX_CONTEXT_POSTS
from bzr.models import AIResponse, BlogPost, ChatMessage
from bzr.search.blog_search import PostFetcher, find_blog_posts_for_question

SYSTEM_PROMPT = """Ti si prijateljski i stručni AI asistent "BZR Savetnik" koji pomaže sa pitanjima o bezbednosti i zdravlju na radu prema propisima Republike Srbije.

STIL KOMUNIKACIJE:
- Uvek odgovaraj ljubazno, pristupačno i sa empatijom kao da razgovaraš sa kolegom iz struke
- Koristi jednostavan i razumljiv jezik, ali zadrži stručnu terminologiju gde je potrebno
- Obraćaj se direktno korisniku koristeći "Vi" formu iz poštovanja

FORMAT ODGOVORA:
- Započni sa jasnim, direktnim odgovorom na pitanje
- Organizuj složenije odgovore u kratke pasuse sa podnaslovima
- Ako citiraš propise, jasno navedi član i zakon

SADRŽAJ:
- Odgovaraj na srpskom jeziku, pismom (ćirilica/latinica) kojim je korisnik postavio pitanje
- Koristi relevantni kontekst kao primarni izvor informacija
- Ako nemaš dovoljno informacija, priznaj to i predloži relevantnu dokumentaciju"""

UNAVAILABLE_ANSWER = "AI servis trenutno nije dostupan. Proverite vaše API ključeve."
ERROR_ANSWER = "Došlo je do greške pri generisanju odgovora. Molimo pokušajte ponovo."


def build_blog_context(posts: list[BlogPost]) -> str:
    """Context block listing existing articles the answer must point to."""
    if not posts:
        return ""

    top = posts[:MAX_CONTEXT_POSTS]
    lines = ["Relevantni postojeći blog postovi:", ""]
    for i, post in enumerate(top, start=1):
        lines.append(f"Blog {i} - {post.title}:")
        lines.append(post.excerpt or "")
        lines.append(f"Link: /blog/{post.slug}")
        lines.append("")

    links = "\n".join(f"- [{post.title}](/blog/{post.slug})" for post in top)
    lines.append(
        "VAŽNO: U tvom odgovoru OBAVEZNO prvo naglasi korisniku da smo već objavili "
        "blog postove na ovu temu. Format obaveštenja treba da bude sledeći:\n\n"
        "\"Na našem portalu već imamo detaljne članke o ovoj temi. Preporučujemo da pogledate:\n"
        f"{links}\n\n"
        "Nakon toga možeš ukratko odgovoriti na pitanje.\"\n\n"
        "Započni odgovor sa ovim obaveštenjem i nakon toga daj kratak odgovor na pitanje."
    )
    return "\n".join(lines)


def build_messages(
    query: str,
    context: str = "",
    history: Optional[list[ChatMessage]] = None,
) -> list[ChatMessage]:
    messages = [ChatMessage(role="system", content=SYSTEM_PROMPT)]
    messages.extend(history or [])
    content = f"{context}\n\nMoje pitanje je: {query}" if context else query
    messages.append(ChatMessage(role="user", content=content))
    return messages


async def get_llm_response(messages: list[ChatMessage], query: str) -> str:
    """Ask the configured LLMs; fall back to a canned answer if none can answer."""
    try:
        return await llm.complete(messages)
    except llm.LLMError as e:
        logger.warning("LLM unavailable ({}), using canned answer", e)
        return default_response(query)


async def generate_answer(
    query: str,
    user_id: Optional[int] = None,
    history: Optional[list[ChatMessage]] = None,
    check_existing_blogs: bool = True,
    fetch_posts: PostFetcher | None = None,
) -> AIResponse:
    """Answer a user question. Never raises; failures land in AIResponse.error."""
    if not llm.is_ready():
        logger.error("No LLM API key configured, AI agent is unavailable")
        return AIResponse(answer=UNAVAILABLE_ANSWER, error="No LLM API key configured")

    try:
        relevant_posts: list[BlogPost] = []
        should_create = True

        if check_existing_blogs:
            try:
                relevant_posts, should_create = find_blog_posts_for_question(
                    query, fetch_posts=fetch_posts
                )
            except Exception as e:
                logger.error("Blog post lookup failed, continuing without it: {}", e)

        context = build_blog_context(relevant_posts)
        messages = build_messages(query, context, history)
        answer = await get_llm_response(messages, query)

        logger.info(
            "Answer ready: user={} related_posts={} create_post={}",
            user_id,
            len(relevant_posts),
            should_create,
        )
        return AIResponse(
            answer=answer,
            relevant_blog_posts=relevant_posts or None,
            should_create_blog_post=should_create,
        )
    except Exception as e:
        logger.error("Answer generation failed: {}", e)
        return AIResponse(answer=ERROR_ANSWER, error=str(e))


async def answer_and_maybe_create_post(
    query: str,
    user_id: Optional[int] = None,
    category: str = "general",
    fetch_posts: PostFetcher | None = None,
) -> tuple[AIResponse, BlogPost | None]:
    """Answer a question and draft a blog post when no existing post covers it."""
    response = await generate_answer(query, user_id=user_id, fetch_posts=fetch_posts)
    if response.error or not response.should_create_blog_post:
        return response, None

    try:
        post = create_blog_from_ai_response(
            original_question=query,
            ai_response=response.answer,
            user_id=user_id,
            category=category,
        )
    except Exception as e:
        logger.error("Failed to draft blog post from AI answer: {}", e)
        return response, None
    return response, post
