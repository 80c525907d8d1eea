"""Registration workflow — intake, one-time SMS and listing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import structlog

from eventreg.config import settings
from eventreg.models.base import utcnow
from eventreg.models.submission import Submission
from eventreg.registration.errors import SubmissionValidationError
from eventreg.repositories.submission import SubmissionRepository
from eventreg.schemas.submission import (
    AddressOut,
    SmsStatus,
    SubmissionIn,
    SubmissionRow,
)
from eventreg.sms.client import SmsGatewayClient
from eventreg.sms.phone import normalize_phone_number
from eventreg.sms.templates import registration_message

logger = structlog.get_logger()

SMS_SKIPPED = "skipped"

RATING_MIN = 0
RATING_MAX = 5


def generate_reg_no(submission_id: str, prefix: Optional[str] = None) -> str:
    """Short registration code: prefix + last 5 id characters, uppercased."""
    if prefix is None:
        prefix = settings.reg_no_prefix
    return prefix + submission_id[-5:].upper()


def clamp_rating(rating: Optional[float]) -> Optional[float]:
    if rating is None:
        return None
    return max(RATING_MIN, min(RATING_MAX, rating))


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


@dataclass
class RegistrationResult:
    id: str
    reg_no: str
    sms_status: SmsStatus


class RegistrationService:
    """Stores submissions and sends at most one SMS per phone number.

    The duplicate check is a plain read before the insert, so two
    simultaneous first submissions for one phone can both be notified.
    """

    def __init__(self, repository: SubmissionRepository, sms_client: SmsGatewayClient):
        self.repository = repository
        self.sms_client = sms_client

    async def register(self, payload: SubmissionIn) -> RegistrationResult:
        """Persist a submission and notify the registrant once.

        Raises:
            SubmissionValidationError: name, phone or business title is empty
        """
        name = _clean(payload.name)
        phone_raw = _clean(payload.phone)
        business_title = _clean(payload.business_title)

        if not name or not phone_raw or not business_title:
            raise SubmissionValidationError("Missing required fields")

        phone = normalize_phone_number(phone_raw)
        already_sent = await self.repository.find_notified(phone) is not None

        address = payload.address
        submission = await self.repository.insert(
            name=name,
            phone=phone,
            business_title=business_title,
            district=_clean(address.district) if address else "",
            mandal=_clean(address.mandal) if address else "",
            area=_clean(address.area) if address else "",
            rating=clamp_rating(payload.rating),
        )

        submission_id = str(submission.id)
        reg_no = generate_reg_no(submission_id)

        if already_sent:
            sms_status = SmsStatus(ok=False, response=SMS_SKIPPED, sent_at=utcnow())
            logger.info(
                "sms_skipped_already_sent",
                submission_id=submission_id,
                phone=phone,
            )
        else:
            result = await self.sms_client.send_sms(phone, registration_message(reg_no))
            sms_status = SmsStatus(
                ok=result.ok,
                response=result.status_payload(),
                sent_at=utcnow(),
            )

        await self.repository.attach_outcome(
            submission.id,
            reg_no=reg_no,
            sms_ok=sms_status.ok,
            sms_response=sms_status.response,
            sms_sent_at=sms_status.sent_at,
        )

        logger.info(
            "submission_registered",
            submission_id=submission_id,
            reg_no=reg_no,
            sms_ok=sms_status.ok,
        )

        return RegistrationResult(id=submission_id, reg_no=reg_no, sms_status=sms_status)

    async def list_submissions(self, limit: Optional[int] = None) -> list[SubmissionRow]:
        """Most recent submissions, with optional fields defaulted."""
        if limit is None:
            limit = settings.listing_limit
        rows = await self.repository.list_recent(limit)
        return [to_row(row) for row in rows]


def to_row(submission: Submission) -> SubmissionRow:
    sms_status = None
    if submission.sms_ok is not None and submission.sms_sent_at is not None:
        sms_status = SmsStatus(
            ok=submission.sms_ok,
            response=submission.sms_response,
            sent_at=submission.sms_sent_at,
        )

    return SubmissionRow(
        id=str(submission.id) if submission.id else "",
        name=submission.name,
        phone=submission.phone,
        business_title=submission.business_title,
        reg_no=submission.reg_no or "",
        address=AddressOut(
            district=submission.district or "",
            mandal=submission.mandal or "",
            area=submission.area or "",
        ),
        rating=submission.rating if submission.rating is not None else 0,
        created_at=submission.created_at.isoformat() if submission.created_at else None,
        sms_status=sms_status,
    )
