"""Contact form endpoints for the Cadster API.

This module contains the FastAPI route relaying contact form and demo request
submissions to the email provider.
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, status, Request

from app.models.contact import ContactFormRequest, ContactFormResponse
from app.services.contact_service import (
    contact_service,
    ContactValidationError,
    HONEYPOT_MESSAGE,
)
from app.services.mail_service import mail_service
from app.utils.slack import send_slack_alert

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=ContactFormResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Submit contact form",
    description="Submit a contact form message or demo request. No authentication required.",
)
async def submit_contact_form(
    http_request: Request, request: Optional[ContactFormRequest] = None
) -> ContactFormResponse:
    """
    Relay a contact form submission to the site owner.

    This endpoint:
    - Silently accepts submissions that filled in the honeypot field
    - Validates name, email and message
    - Sends an auto-reply to the client and a lead notification to the owner concurrently
    - Fails only when the client auto-reply could not be sent

    Args:
        http_request: FastAPI request object for extracting client metadata
        request: Contact form data including name, email, message and optional company

    Returns:
        Confirmation response with success status and reference ID

    Raises:
        HTTPException: 400 on invalid input, 502 when the auto-reply fails, 500 otherwise
    """
    try:
        form = request or ContactFormRequest()

        if contact_service.is_honeypot_triggered(form):
            logger.info("[CONTACT] Honeypot triggered - bot detected")
            return ContactFormResponse(success=True, message=HONEYPOT_MESSAGE)

        try:
            contact_service.validate(form)
        except ContactValidationError as e:
            logger.info(f"[CONTACT] Rejected submission: {e.message}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        is_demo_request = contact_service.is_demo_request(form.message)
        request_type = "DEMO" if is_demo_request else "CONTACT"
        reference_id = contact_service.generate_reference_id()
        submission_time = contact_service.format_submission_time()
        client_ip = http_request.client.host if http_request.client else None

        logger.info(
            f"[{request_type}] Processing request from {form.name} ({form.email}) "
            f"- Reference: {reference_id} - IP: {client_ip}"
        )

        auto_reply = contact_service.build_auto_reply(form, is_demo_request)
        owner_notification = contact_service.build_owner_notification(
            form, is_demo_request, reference_id, submission_time
        )

        client_result, owner_result = await asyncio.gather(
            mail_service.send_email(**auto_reply),
            mail_service.send_email(**owner_notification),
            return_exceptions=True,
        )

        if isinstance(client_result, Exception):
            logger.error(f"[{request_type}] Client auto-reply failed for {reference_id}: {client_result}")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Failed to send confirmation email. Please try again.",
            )

        # Owner notification is best-effort
        if isinstance(owner_result, Exception):
            logger.error(f"[{request_type}] Owner notification failed for {reference_id}: {owner_result}")
            await asyncio.to_thread(
                send_slack_alert,
                f"{form.name} ({form.email}) - {reference_id}\n{owner_result}",
                f"Lead notification failed ({request_type})",
            )

        logger.info(f"[{request_type}] Success - emails sent for reference: {reference_id}")

        return ContactFormResponse(
            success=True,
            message=contact_service.success_message(is_demo_request),
            reference_id=reference_id,
        )

    except HTTPException:
        raise

    except Exception as e:
        logger.error(f"[CONTACT] Unexpected error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        )
