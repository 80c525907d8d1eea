"""Submission model — one registrant's form data plus SMS outcome."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, Float, Text
from sqlalchemy.orm import Mapped, mapped_column

from eventreg.models.base import Base, CreatedAtMixin, UUIDMixin


class Submission(Base, UUIDMixin, CreatedAtMixin):
    __tablename__ = "submissions"

    # Registrant
    name: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    business_title: Mapped[str] = mapped_column(Text, nullable=False)

    # Address
    district: Mapped[str] = mapped_column(Text, nullable=False, default="")
    mandal: Mapped[str] = mapped_column(Text, nullable=False, default="")
    area: Mapped[str] = mapped_column(Text, nullable=False, default="")

    rating: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # Set once, right after insert
    reg_no: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # SMS status
    sms_ok: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    sms_response: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    sms_sent_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
