"""Services for processing contact form submissions.

This module validates submissions, detects demo requests and composes the
auto-reply and lead notification emails sent for each submission.
"""

import logging
import re
import uuid
from datetime import datetime
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo

from app.core.config import settings
from app.models.contact import ContactFormRequest

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DEMO_REQUEST_MARKER = "[DEMO REQUEST]"

HONEYPOT_MESSAGE = "Thanks! We will contact you soon."
CONTACT_SUCCESS_MESSAGE = "Thanks for reaching out! We will contact you soon."
DEMO_SUCCESS_MESSAGE = (
    "Demo request received! We will contact you shortly to schedule a personalized walkthrough."
)
MISSING_FIELDS_MESSAGE = "Name, email, and message are required."
INVALID_PAYLOAD_MESSAGE = "Invalid payload format."
INVALID_EMAIL_MESSAGE = "Invalid email format."


class ContactValidationError(Exception):
    """Raised when a submission is missing fields, has non-text values or a malformed email."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ContactService:
    """Service for contact form submissions."""

    def is_honeypot_triggered(self, request: ContactFormRequest) -> bool:
        """Whether the hidden website field was filled in, which only bots do."""
        return bool(request.website)

    def validate(self, request: ContactFormRequest) -> None:
        """Check required fields, their types and the email format, in that order.

        Args:
            request: Contact form data

        Raises:
            ContactValidationError: If name, email or message is missing or not text,
                or the email does not look like an address
        """
        if not request.name or not request.email or not request.message:
            raise ContactValidationError(MISSING_FIELDS_MESSAGE)

        if not all(isinstance(v, str) for v in (request.name, request.email, request.message)):
            raise ContactValidationError(INVALID_PAYLOAD_MESSAGE)

        if not EMAIL_PATTERN.match(request.email):
            raise ContactValidationError(INVALID_EMAIL_MESSAGE)

    def is_demo_request(self, message: str) -> bool:
        return DEMO_REQUEST_MARKER in message

    def generate_reference_id(self) -> str:
        return f"REF-{uuid.uuid4().hex[:8].upper()}"

    def format_submission_time(self, now: Optional[datetime] = None) -> str:
        """Format a timestamp in the owner's timezone, e.g. '17/10/2026, 9:30:00 am'."""
        tz = ZoneInfo(settings.OWNER_TIMEZONE)
        moment = now.astimezone(tz) if now else datetime.now(tz)
        hour = moment.hour % 12 or 12
        suffix = "am" if moment.hour < 12 else "pm"
        return f"{moment:%d/%m/%Y}, {hour}:{moment:%M:%S} {suffix}"

    def success_message(self, is_demo_request: bool) -> str:
        return DEMO_SUCCESS_MESSAGE if is_demo_request else CONTACT_SUCCESS_MESSAGE

    def build_auto_reply(
        self, request: ContactFormRequest, is_demo_request: bool
    ) -> Dict[str, Any]:
        """Compose the confirmation email sent back to the submitter.

        Returns:
            Keyword arguments for mail_service.send_email
        """
        if is_demo_request:
            subject = f"Demo Request Received - {settings.COMPANY_NAME}"
            template_name = "demo_auto_reply.html"
        else:
            subject = f"Thanks for contacting {settings.COMPANY_NAME}"
            template_name = "contact_auto_reply.html"

        return {
            "recipient": request.email,
            "subject": subject,
            "template_name": template_name,
            "context": {
                "client_name": request.name,
                "company": request.company,
            },
        }

    def build_owner_notification(
        self,
        request: ContactFormRequest,
        is_demo_request: bool,
        reference_id: str,
        submission_time: str,
    ) -> Dict[str, Any]:
        """Compose the lead notification sent to the site owner.

        Returns:
            Keyword arguments for mail_service.send_email
        """
        if is_demo_request:
            subject = f"🎯 Demo Request — {request.name} ({request.email})"
        else:
            subject = f"📬 New Lead — {request.name} ({request.email})"

        return {
            "recipient": settings.OWNER_EMAIL,
            "subject": subject,
            "template_name": "owner_notification.html",
            "context": {
                "client_name": request.name,
                "client_email": request.email,
                "company": request.company,
                "message": request.message,
                "is_demo_request": is_demo_request,
                "reference_id": reference_id,
                "submission_time": submission_time,
            },
        }


contact_service = ContactService()
