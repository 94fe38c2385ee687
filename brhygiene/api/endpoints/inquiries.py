"""Inquiry endpoints for the BR Hygiene website API.

This module contains the FastAPI routes that accept contact form submissions.
Only POST reaches the inquiry pipeline; preflight requests are answered here
and every other method is refused.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, BackgroundTasks, Request, Response, status
from fastapi.responses import JSONResponse

from brhygiene.models.inquiry import InquiryErrorResponse, InquiryResponse
from brhygiene.services.inquiry_service import SubmissionState, inquiry_service

logger = logging.getLogger(__name__)

router = APIRouter()


class MalformedRequest(Exception):
    pass


async def read_submission(request: Request) -> Dict[str, Any]:
    """Decode a JSON or form-encoded body into a flat field mapping.

    Raises:
        MalformedRequest: If the body cannot be decoded into an object
    """
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
            form = await request.form()
            return {key: value for key, value in form.items() if isinstance(value, str)}
        payload = await request.json()
    except Exception as e:
        raise MalformedRequest(f"Could not decode request body: {str(e)}") from e

    if not isinstance(payload, dict):
        raise MalformedRequest("Request body must be a JSON object")
    return payload


def _error(status_code: int, error: str, errors: Optional[Dict[str, str]] = None) -> JSONResponse:
    body = InquiryErrorResponse(error=error, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post(
    "",
    response_model=InquiryResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": InquiryErrorResponse, "description": "Malformed body or invalid fields"},
        500: {"model": InquiryErrorResponse, "description": "Inquiry could not be stored"},
    },
    summary="Submit an inquiry",
    description="Submit the website contact form. No authentication required.",
)
async def submit_inquiry(request: Request, background_tasks: BackgroundTasks):
    """
    Submit a contact form inquiry.

    This endpoint:
    - Validates every field and reports all invalid ones together
    - Stores the inquiry and assigns its reference ID
    - Emails the operator (and optionally the submitter), best-effort
    - Does not require authentication (public endpoint)

    Args:
        request: Incoming request with a JSON or form-encoded body
        background_tasks: Used to send notifications after responding

    Returns:
        Acknowledgement with the inquiry reference ID, or an error body
    """
    try:
        raw = await read_submission(request)
    except MalformedRequest as e:
        logger.warning(str(e))
        return _error(status.HTTP_400_BAD_REQUEST, "Malformed request body. Send JSON or form data.")

    result = await inquiry_service.submit(raw, background_tasks)

    if result.state == SubmissionState.REJECTED:
        return _error(
            status.HTTP_400_BAD_REQUEST,
            "Please correct the highlighted fields.",
            result.errors,
        )

    service_settings = inquiry_service.settings
    if result.state != SubmissionState.RESPONDED:
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to process inquiry. Please try again or contact us directly at "
            f"{service_settings.BUSINESS_EMAIL} or {service_settings.BUSINESS_PHONE}.",
        )

    message = f"Thank you for your inquiry! We will respond within {service_settings.RESPONSE_TIME}."
    if service_settings.SEND_ACKNOWLEDGEMENT:
        message += " Check your email for confirmation."

    return InquiryResponse(
        message=message,
        inquiry_id=result.inquiry.id,
        notification_sent=result.notification.operator_sent if result.notification else None,
    )


@router.options("", include_in_schema=False)
async def inquiry_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.api_route("", methods=["GET", "PUT", "PATCH", "DELETE"], include_in_schema=False)
async def inquiry_method_not_allowed() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        content={"error": "Method not allowed. Use POST."},
        headers={"Allow": "POST, OPTIONS"},
    )
