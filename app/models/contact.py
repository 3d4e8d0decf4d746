"""Contact form models for the Cadster API.

This module contains the Pydantic models for contact form functionality.
"""

from typing import Any, Optional
from typing_extensions import Annotated
from pydantic import BaseModel, Field, ConfigDict


class ContactFormRequest(BaseModel):
    """Request model for contact form submissions.

    Fields are untyped at the schema level so the honeypot is checked before
    anything else; required fields, value types and the email format are
    checked by the contact service, each failure with its own message.

    Attributes:
        name: Full name of the person getting in touch
        email: Email address for the auto-reply
        company: Optional company name
        message: The message or inquiry, may carry the demo request marker
        website: Honeypot field, left empty by humans
    """
    name: Annotated[Optional[Any], Field(None, description="Full name of the person getting in touch")]
    email: Annotated[Optional[Any], Field(None, description="Email address for the auto-reply")]
    company: Annotated[Optional[Any], Field(None, description="Optional company name")]
    message: Annotated[Optional[Any], Field(None, description="The message or inquiry from the client")]
    website: Annotated[Optional[Any], Field(None, description="Honeypot field, must stay empty")]

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ContactFormResponse(BaseModel):
    """Response model for contact form submissions.

    Attributes:
        success: Whether the contact form was submitted successfully
        message: Message shown to the user
        reference_id: Reference ID for tracking the inquiry in the logs
    """
    success: bool = Field(..., description="Whether the contact form was submitted successfully")
    message: str = Field(..., description="Message shown to the user")
    reference_id: Optional[str] = Field(None, description="Reference ID for tracking the inquiry")
