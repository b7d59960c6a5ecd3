"""Daily AI question quota per subscription tier."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from loguru import logger

from bzr import db
from bzr.config import FREE_DAILY_QUESTION_LIMIT, PRO_DAILY_QUESTION_LIMIT
from bzr.models import QuestionUsage


class QuestionLimitReached(Exception):
    """Free user has used up today's questions."""

    def __init__(self, used: int, limit: int):
        super().__init__(f"Daily question limit reached ({used}/{limit})")
        self.used = used
        self.limit = limit


def daily_limit(subscription_type: str) -> int:
    return PRO_DAILY_QUESTION_LIMIT if subscription_type == "pro" else FREE_DAILY_QUESTION_LIMIT


def time_until_reset(now: datetime) -> str:
    """Hours and minutes until next midnight, e.g. '5h 12m'."""
    midnight = (now + timedelta(days=1)).replace(hour=0, minute=0, second=0, microsecond=0)
    minutes = int((midnight - now).total_seconds() // 60)
    return f"{minutes // 60}h {minutes % 60}m"


def get_daily_usage(user_id: int, now: Optional[datetime] = None) -> QuestionUsage:
    now = now or datetime.now()
    subscription_type = db.get_subscription_type(user_id)
    limit = daily_limit(subscription_type)
    used = db.get_question_count(user_id, now.strftime("%Y-%m-%d"))
    return QuestionUsage(
        used_questions=used,
        max_questions=limit,
        subscription_type=subscription_type,
        reset_time=time_until_reset(now),
        limit_reached=used >= limit,
    )


def increment_question_count(user_id: int, now: Optional[datetime] = None) -> QuestionUsage:
    """Count one more question for today.

    Raises QuestionLimitReached for free users who are already at the limit.
    Pro users are never blocked.
    """
    now = now or datetime.now()
    usage_date = now.strftime("%Y-%m-%d")
    subscription_type = db.get_subscription_type(user_id)
    limit = daily_limit(subscription_type)
    used = db.get_question_count(user_id, usage_date)

    if subscription_type == "free" and used >= limit:
        logger.info("User {} hit the daily question limit ({}/{})", user_id, used, limit)
        raise QuestionLimitReached(used, limit)

    db.set_question_count(user_id, usage_date, used + 1)
    return QuestionUsage(
        used_questions=used + 1,
        max_questions=limit,
        subscription_type=subscription_type,
        reset_time=time_until_reset(now),
        limit_reached=used + 1 >= limit,
    )
