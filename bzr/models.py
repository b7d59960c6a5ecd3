"""Data models for BZR Savetnik."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class BlogStatus(str, Enum):
    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    PUBLISHED = "published"
    REJECTED = "rejected"


class BlogPost(BaseModel):
    """Blog article, also the unit of relevance scoring."""

    id: Optional[int] = None
    title: str
    slug: str = ""
    content: str = ""
    excerpt: Optional[str] = None
    image_url: Optional[str] = None
    category: str = "general"
    tags: list[str] = Field(default_factory=list)
    author_id: Optional[int] = None  # None for AI-generated content
    original_question: Optional[str] = None
    call_to_action: Optional[str] = None
    status: BlogStatus = BlogStatus.DRAFT
    admin_feedback: Optional[str] = None
    view_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None


class ChatMessage(BaseModel):
    role: str  # system | user | assistant
    content: str


class AIResponse(BaseModel):
    """Result of one AI answer request."""

    answer: str
    source_documents: Optional[list[dict]] = None
    relevant_blog_posts: Optional[list[BlogPost]] = None
    should_create_blog_post: bool = False
    error: Optional[str] = None


class QuestionUsage(BaseModel):
    used_questions: int = 0
    max_questions: int = 0
    subscription_type: str = "free"
    reset_time: str = ""
    limit_reached: bool = False
