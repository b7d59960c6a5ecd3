"""SQLite database for BZR Savetnik — stores blog posts and AI question usage."""

import json
import sqlite3
from datetime import datetime, timezone

from loguru import logger

from bzr.config import DB_PATH
from bzr.models import BlogPost, BlogStatus

_BLOG_COLUMNS = (
    "title",
    "slug",
    "content",
    "excerpt",
    "image_url",
    "category",
    "tags",
    "author_id",
    "original_question",
    "call_to_action",
    "status",
    "admin_feedback",
)


def get_connection() -> sqlite3.Connection:
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(DB_PATH))
    conn.row_factory = sqlite3.Row
    return conn


def init_db() -> None:
    """Create tables if they don't exist."""
    conn = get_connection()
    try:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS blog_posts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                slug TEXT NOT NULL UNIQUE,
                content TEXT NOT NULL,
                excerpt TEXT,
                image_url TEXT,
                category TEXT NOT NULL DEFAULT 'general',
                tags TEXT NOT NULL DEFAULT '[]',
                author_id INTEGER,
                original_question TEXT,
                call_to_action TEXT,
                status TEXT NOT NULL DEFAULT 'draft',
                admin_feedback TEXT,
                view_count INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                published_at TEXT
            );

            CREATE INDEX IF NOT EXISTS idx_blog_posts_status ON blog_posts(status);

            CREATE TABLE IF NOT EXISTS user_profiles (
                user_id INTEGER PRIMARY KEY,
                subscription_type TEXT NOT NULL DEFAULT 'free'
            );

            CREATE TABLE IF NOT EXISTS ai_usage (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                usage_date TEXT NOT NULL,
                question_count INTEGER NOT NULL DEFAULT 0,
                UNIQUE(user_id, usage_date)
            );
            """
        )
        conn.commit()
    finally:
        conn.close()
    logger.info("Database initialized at {}", DB_PATH)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _status_value(status) -> str:
    return status.value if isinstance(status, BlogStatus) else str(status)


def _row_to_post(row: sqlite3.Row) -> BlogPost:
    data = dict(row)
    data["tags"] = json.loads(data["tags"]) if data.get("tags") else []
    return BlogPost(**data)


# --- BLOG POSTS ---

def create_blog_post(post: BlogPost) -> BlogPost:
    """Insert a new post. Returns the stored post with id and timestamps."""
    now = _now()
    status = _status_value(post.status)
    published_at = now if status == BlogStatus.PUBLISHED.value else None

    conn = get_connection()
    try:
        cur = conn.execute(
            """INSERT INTO blog_posts
            (title, slug, content, excerpt, image_url, category, tags, author_id,
             original_question, call_to_action, status, admin_feedback,
             view_count, created_at, updated_at, published_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, 0, ?, ?, ?)""",
            (
                post.title,
                post.slug,
                post.content,
                post.excerpt,
                post.image_url,
                post.category,
                json.dumps(post.tags, ensure_ascii=False),
                post.author_id,
                post.original_question,
                post.call_to_action,
                status,
                post.admin_feedback,
                now,
                now,
                published_at,
            ),
        )
        conn.commit()
        post_id = cur.lastrowid
    finally:
        conn.close()

    logger.debug("Blog post created: id={} slug={}", post_id, post.slug)
    return get_blog_post(post_id)


def get_blog_post(post_id: int) -> BlogPost | None:
    conn = get_connection()
    try:
        row = conn.execute("SELECT * FROM blog_posts WHERE id = ?", (post_id,)).fetchone()
        return _row_to_post(row) if row else None
    finally:
        conn.close()


def get_blog_post_by_slug(slug: str) -> BlogPost | None:
    conn = get_connection()
    try:
        row = conn.execute("SELECT * FROM blog_posts WHERE slug = ?", (slug,)).fetchone()
        return _row_to_post(row) if row else None
    finally:
        conn.close()


def get_all_blog_posts() -> list[BlogPost]:
    conn = get_connection()
    try:
        rows = conn.execute("SELECT * FROM blog_posts ORDER BY id").fetchall()
        return [_row_to_post(row) for row in rows]
    finally:
        conn.close()


def get_all_slugs() -> list[str]:
    conn = get_connection()
    try:
        rows = conn.execute("SELECT slug FROM blog_posts").fetchall()
        return [row["slug"] for row in rows]
    finally:
        conn.close()


def get_blog_posts_by_status(status: BlogStatus | str) -> list[BlogPost]:
    conn = get_connection()
    try:
        rows = conn.execute(
            "SELECT * FROM blog_posts WHERE status = ? ORDER BY id",
            (_status_value(status),),
        ).fetchall()
        return [_row_to_post(row) for row in rows]
    finally:
        conn.close()


def get_blog_posts_by_category(category: str) -> list[BlogPost]:
    conn = get_connection()
    try:
        rows = conn.execute(
            "SELECT * FROM blog_posts WHERE category = ? ORDER BY id",
            (category,),
        ).fetchall()
        return [_row_to_post(row) for row in rows]
    finally:
        conn.close()


def update_blog_post(post_id: int, **fields) -> BlogPost | None:
    """Update selected columns of a post.

    Moving a post into 'published' for the first time stamps published_at.
    Returns None if the post does not exist.
    """
    unknown = set(fields) - set(_BLOG_COLUMNS)
    if unknown:
        raise ValueError(f"Unknown blog post fields: {', '.join(sorted(unknown))}")

    existing = get_blog_post(post_id)
    if existing is None:
        return None

    values = dict(fields)
    if "tags" in values:
        values["tags"] = json.dumps(values["tags"] or [], ensure_ascii=False)
    if "status" in values:
        values["status"] = _status_value(values["status"])

    now = _now()
    values["updated_at"] = now
    if (
        values.get("status") == BlogStatus.PUBLISHED.value
        and existing.status != BlogStatus.PUBLISHED
    ):
        values["published_at"] = now

    assignments = ", ".join(f"{column} = ?" for column in values)
    conn = get_connection()
    try:
        conn.execute(
            f"UPDATE blog_posts SET {assignments} WHERE id = ?",
            (*values.values(), post_id),
        )
        conn.commit()
    finally:
        conn.close()

    return get_blog_post(post_id)


def increment_blog_view_count(post_id: int) -> BlogPost | None:
    conn = get_connection()
    try:
        conn.execute(
            "UPDATE blog_posts SET view_count = view_count + 1 WHERE id = ?",
            (post_id,),
        )
        conn.commit()
    finally:
        conn.close()
    return get_blog_post(post_id)


def delete_blog_post(post_id: int) -> bool:
    conn = get_connection()
    try:
        cur = conn.execute("DELETE FROM blog_posts WHERE id = ?", (post_id,))
        conn.commit()
        return cur.rowcount > 0
    finally:
        conn.close()


# --- SUBSCRIPTIONS & AI USAGE ---

def get_subscription_type(user_id: int) -> str:
    conn = get_connection()
    try:
        row = conn.execute(
            "SELECT subscription_type FROM user_profiles WHERE user_id = ?",
            (user_id,),
        ).fetchone()
        return row["subscription_type"] if row else "free"
    finally:
        conn.close()


def set_subscription_type(user_id: int, subscription_type: str) -> None:
    conn = get_connection()
    try:
        conn.execute(
            """INSERT INTO user_profiles (user_id, subscription_type) VALUES (?, ?)
            ON CONFLICT(user_id) DO UPDATE SET subscription_type = excluded.subscription_type""",
            (user_id, subscription_type),
        )
        conn.commit()
    finally:
        conn.close()


def get_question_count(user_id: int, usage_date: str) -> int:
    conn = get_connection()
    try:
        row = conn.execute(
            "SELECT question_count FROM ai_usage WHERE user_id = ? AND usage_date = ?",
            (user_id, usage_date),
        ).fetchone()
        return row["question_count"] if row else 0
    finally:
        conn.close()


def set_question_count(user_id: int, usage_date: str, count: int) -> None:
    conn = get_connection()
    try:
        conn.execute(
            """INSERT INTO ai_usage (user_id, usage_date, question_count) VALUES (?, ?, ?)
            ON CONFLICT(user_id, usage_date) DO UPDATE SET question_count = excluded.question_count""",
            (user_id, usage_date, count),
        )
        conn.commit()
    finally:
        conn.close()
