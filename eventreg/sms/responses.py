"""Gateway response variants and success detection.

The gateway does not commit to a response format: depending on account
settings it answers with plain text (sometimes a Python-style dict such as
``{'campid':'123'}``) or with a JSON object carrying ``ErrorCode`` /
``ErrorMessage``. Responses are parsed into a text or an object variant,
each with its own success rule; any other JSON value is malformed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Union

import httpx

STRING_SUCCESS_MARKERS = ("MessageId", "success", "campid")
SUCCESS_ERROR_CODE = "000"

_CAMPID_RE = re.compile(r"""campid['"]?\s*:\s*['"]([^'"]+)['"]""")


@dataclass(frozen=True)
class StringResponse:
    text: str

    @property
    def ok(self) -> bool:
        return any(marker in self.text for marker in STRING_SUCCESS_MARKERS)

    @property
    def campid(self) -> Optional[str]:
        match = _CAMPID_RE.search(self.text)
        return match.group(1) if match else None

    @property
    def payload(self) -> Any:
        return self.text


@dataclass(frozen=True)
class ObjectResponse:
    data: dict[str, Any]

    @property
    def ok(self) -> bool:
        if str(self.data.get("ErrorCode", "")) == SUCCESS_ERROR_CODE:
            return True
        error_message = self.data.get("ErrorMessage")
        if isinstance(error_message, str) and "success" in error_message.lower():
            return True
        return "campid" in self.data

    @property
    def campid(self) -> Optional[str]:
        campid = self.data.get("campid")
        return str(campid) if campid is not None else None

    @property
    def payload(self) -> Any:
        return self.data


@dataclass(frozen=True)
class MalformedResponse:
    """A JSON body that is neither an object nor a string, never a success."""

    value: Any

    @property
    def ok(self) -> bool:
        return False

    @property
    def campid(self) -> Optional[str]:
        return None

    @property
    def payload(self) -> Any:
        return self.value


ProviderResponse = Union[StringResponse, ObjectResponse, MalformedResponse]


def parse_provider_response(response: httpx.Response) -> ProviderResponse:
    """Pick the response variant from the body.

    A JSON object becomes an ``ObjectResponse``, non-JSON bodies and JSON
    strings a ``StringResponse``. Any other JSON value (array, number,
    bool, null) is a ``MalformedResponse``.
    """
    try:
        data = response.json()
    except ValueError:
        return StringResponse(response.text)

    if isinstance(data, dict):
        return ObjectResponse(data)
    if isinstance(data, str):
        return StringResponse(data)
    return MalformedResponse(data)
