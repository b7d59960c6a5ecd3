"""Blog approval workflow: draft -> pending_approval -> approved -> published."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from bzr import db
from bzr.models import BlogPost, BlogStatus


class BlogPostNotFound(LookupError):
    """Raised when a blog post id does not exist."""


def change_status(
    post_id: int,
    status: BlogStatus | str,
    admin_feedback: Optional[str] = None,
) -> BlogPost:
    """Move a post to a new status.

    Rejecting requires admin feedback. Publishing stamps published_at the
    first time a post goes live.
    """
    try:
        new_status = BlogStatus(status)
    except ValueError:
        raise ValueError(f"Invalid blog status: {status}") from None

    post = db.get_blog_post(post_id)
    if post is None:
        raise BlogPostNotFound(f"Blog post {post_id} not found")

    if new_status == BlogStatus.REJECTED and not admin_feedback:
        raise ValueError("Admin feedback is required when rejecting a post")

    fields: dict = {"status": new_status}
    if admin_feedback:
        fields["admin_feedback"] = admin_feedback

    updated = db.update_blog_post(post_id, **fields)
    logger.info(
        "Blog post {} status: {} -> {}",
        post_id,
        post.status.value,
        new_status.value,
    )
    return updated


def submit_for_approval(post_id: int) -> BlogPost:
    return change_status(post_id, BlogStatus.PENDING_APPROVAL)


def approve(post_id: int) -> BlogPost:
    return change_status(post_id, BlogStatus.APPROVED)


def publish(post_id: int) -> BlogPost:
    return change_status(post_id, BlogStatus.PUBLISHED)


def reject(post_id: int, admin_feedback: str) -> BlogPost:
    return change_status(post_id, BlogStatus.REJECTED, admin_feedback)


def list_pending() -> list[BlogPost]:
    """Posts waiting for an admin decision."""
    return db.get_blog_posts_by_status(BlogStatus.PENDING_APPROVAL)
