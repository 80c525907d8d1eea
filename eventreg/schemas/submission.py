"""Submission schemas for the public API."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _to_text(value: Any) -> Any:
    # Numbers typed into text fields (e.g. a phone sent as JSON number)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class AddressIn(CamelModel):
    district: Optional[str] = None
    mandal: Optional[str] = None
    area: Optional[str] = None

    @field_validator("district", "mandal", "area", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _to_text(value)


class SubmissionIn(CamelModel):
    """Registration form payload.

    Required fields are optional at the schema level; the intake handler
    reports a missing field as a 400.
    """

    name: Optional[str] = None
    phone: Optional[str] = None
    business_title: Optional[str] = None
    address: Optional[AddressIn] = None
    rating: Optional[float] = None

    @field_validator("name", "phone", "business_title", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _to_text(value)

    @field_validator("rating", mode="before")
    @classmethod
    def numeric_rating_only(cls, value: Any) -> Any:
        """Anything that is not a JSON number is treated as no rating."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return value


class SmsStatus(CamelModel):
    ok: bool
    response: Any = None
    sent_at: datetime


class SubmitResponse(CamelModel):
    ok: bool = True
    id: str
    reg_no: str
    sms_status: SmsStatus


class AddressOut(CamelModel):
    district: str = ""
    mandal: str = ""
    area: str = ""


class SubmissionRow(CamelModel):
    id: str = ""
    name: str
    phone: str
    business_title: str
    reg_no: str = ""
    address: AddressOut = AddressOut()
    rating: float = 0
    created_at: Optional[str] = None
    sms_status: Optional[SmsStatus] = None


class SubmissionList(CamelModel):
    ok: bool = True
    rows: list[SubmissionRow] = []


class ErrorResponse(BaseModel):
    error: str
