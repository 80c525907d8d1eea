"""Submission repository — the store operations used by intake and listing."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Optional

import structlog
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from eventreg.models.submission import Submission

logger = structlog.get_logger()


class SubmissionRepository:
    """Insert, lookup, listing and the single post-insert update."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(
        self,
        name: str,
        phone: str,
        business_title: str,
        district: str = "",
        mandal: str = "",
        area: str = "",
        rating: Optional[float] = None,
    ) -> Submission:
        """Insert a new submission and commit it.

        The commit makes the generated id durable before any outbound
        notification is attempted.
        """
        submission = Submission(
            name=name,
            phone=phone,
            business_title=business_title,
            district=district,
            mandal=mandal,
            area=area,
            rating=rating,
        )
        self.db.add(submission)
        await self.db.commit()

        logger.info("submission_created", submission_id=str(submission.id), phone=phone)
        return submission

    async def find_notified(self, phone: str) -> Optional[Submission]:
        """Return any submission for ``phone`` whose SMS was delivered."""
        stmt = (
            select(Submission)
            .where(
                Submission.phone == phone,
                Submission.sms_ok.is_(True),
            )
            .limit(1)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_recent(self, limit: int) -> list[Submission]:
        """Newest submissions first."""
        stmt = select(Submission).order_by(Submission.created_at.desc()).limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def attach_outcome(
        self,
        submission_id: uuid.UUID,
        reg_no: str,
        sms_ok: bool,
        sms_response: Any,
        sms_sent_at: datetime,
    ) -> None:
        """Store the registration code and SMS status on a submission."""
        stmt = (
            update(Submission)
            .where(Submission.id == submission_id)
            .values(
                reg_no=reg_no,
                sms_ok=sms_ok,
                sms_response=sms_response,
                sms_sent_at=sms_sent_at,
            )
        )
        await self.db.execute(stmt)
        await self.db.commit()
