"""SMS gateway client — delivers one message per call over HTTP GET."""

from __future__ import annotations

import asyncio
import threading
from dataclasses import dataclass
from typing import Any, Optional

import httpx
import structlog

from eventreg.config import settings
from eventreg.sms.phone import normalize_phone_number
from eventreg.sms.responses import parse_provider_response

logger = structlog.get_logger()

# Lazy singleton
_client: Optional["SmsGatewayClient"] = None
_client_lock = threading.Lock()


@dataclass
class SendResult:
    ok: bool
    provider_response: Any = None
    error: Optional[str] = None
    campid: Optional[str] = None

    def status_payload(self) -> Any:
        """Value recorded as ``smsStatus.response``."""
        if self.provider_response is not None:
            return self.provider_response
        return self.error


class SmsGatewayClient:
    """Sends messages through an HTTP SMS gateway (smslogin-style API)."""

    def __init__(
        self,
        api_url: str,
        username: str,
        api_key: str,
        sender_id: str,
        template_id: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url
        self.username = username
        self.api_key = api_key
        self.sender_id = sender_id
        self.template_id = template_id
        self.timeout = timeout
        self._transport = transport

        if not all((username, api_key, sender_id, template_id)):
            logger.warning("sms_gateway_credentials_missing", api_url=api_url)

    async def send_sms(self, to_raw: str, message: str) -> SendResult:
        """Send ``message`` verbatim to ``to_raw``.

        Args:
            to_raw: Destination phone number, normalized before sending
            message: Literal text, must match the approved template

        Returns:
            SendResult; transport errors are reported, never raised
        """
        to = normalize_phone_number(to_raw)
        params = {
            "username": self.username,
            "apikey": self.api_key,
            "senderid": self.sender_id,
            "mobile": to,
            "message": message,
            "templateid": self.template_id,
        }

        try:
            resp = await asyncio.wait_for(self._get(params), timeout=self.timeout)
            resp.raise_for_status()
            parsed = parse_provider_response(resp)
        except asyncio.TimeoutError:
            error = f"timed out after {self.timeout}s"
            logger.error("sms_send_failed", to=to, error=error)
            return SendResult(ok=False, error=error)
        except Exception as e:
            error = str(e) or type(e).__name__
            logger.error("sms_send_failed", to=to, error=error)
            return SendResult(ok=False, error=error)

        logger.info(
            "sms_gateway_response",
            to=to,
            ok=parsed.ok,
            campid=parsed.campid,
            response=parsed.payload,
        )
        return SendResult(
            ok=parsed.ok,
            provider_response=parsed.payload,
            campid=parsed.campid,
        )

    async def _get(self, params: dict[str, str]) -> httpx.Response:
        # httpx timeouts are per phase; send_sms bounds the whole call
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            return await client.get(self.api_url, params=params)


def get_sms_client() -> SmsGatewayClient:
    """Get or create the singleton gateway client (FastAPI dependency)."""
    global _client

    if _client is not None:
        return _client

    with _client_lock:
        if _client is None:
            _client = SmsGatewayClient(
                api_url=settings.sms_api_url,
                username=settings.sms_username,
                api_key=settings.sms_api_key,
                sender_id=settings.sms_sender,
                template_id=settings.sms_template_id,
                timeout=settings.sms_timeout_seconds,
            )
            logger.info("sms_client_initialized", api_url=settings.sms_api_url)

    return _client
