"""Submission API — registration intake and listing."""

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from eventreg.database import get_db
from eventreg.registration.errors import SubmissionValidationError
from eventreg.registration.service import RegistrationService
from eventreg.repositories.submission import SubmissionRepository
from eventreg.schemas.submission import (
    ErrorResponse,
    SubmissionIn,
    SubmissionList,
    SubmitResponse,
)
from eventreg.sms.client import SmsGatewayClient, get_sms_client

logger = structlog.get_logger()

router = APIRouter(tags=["submissions"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_registration_service(
    db: AsyncSession = Depends(get_db),
    sms_client: SmsGatewayClient = Depends(get_sms_client),
) -> RegistrationService:
    return RegistrationService(SubmissionRepository(db), sms_client)


def _server_error(e: Exception) -> JSONResponse:
    return JSONResponse({"error": str(e) or "Server error"}, status_code=500)


@router.post("/submit", response_model=SubmitResponse, responses=_ERROR_RESPONSES)
async def submit(
    payload: SubmissionIn,
    service: RegistrationService = Depends(get_registration_service),
):
    """Register a submission and send the confirmation SMS (once per phone)."""
    try:
        result = await service.register(payload)
    except SubmissionValidationError as e:
        logger.warning("submission_rejected", error=str(e))
        return JSONResponse({"error": str(e)}, status_code=400)
    except Exception as e:
        logger.exception("submit_error", error=str(e))
        return _server_error(e)

    return SubmitResponse(
        id=result.id,
        reg_no=result.reg_no,
        sms_status=result.sms_status,
    )


@router.get("/submit", response_model=SubmissionList, responses={500: {"model": ErrorResponse}})
async def list_submissions(
    service: RegistrationService = Depends(get_registration_service),
):
    """List the most recent submissions, newest first."""
    try:
        rows = await service.list_submissions()
    except Exception as e:
        logger.exception("fetch_error", error=str(e))
        return _server_error(e)

    return SubmissionList(rows=rows)
