"""
MailService Module

This module sends transactional email through Amazon SES, rendering the HTML
bodies from Jinja2 templates.
"""

import asyncio
import os
import datetime
import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Dict, Any, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.core.config import settings

logger = logging.getLogger(__name__)

# Autoescaping covers every user-supplied value rendered into an email
template_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
jinja_env = Environment(
    loader=FileSystemLoader(template_dir),
    autoescape=select_autoescape(['html', 'xml']),
    enable_async=True
)


class MailDeliveryError(Exception):
    """Raised when the email provider does not accept a message."""

    def __init__(self, recipient: str, reason: str):
        self.recipient = recipient
        self.reason = reason
        super().__init__(f"Failed to send email to {recipient}: {reason}")


class MailService:
    """Mail service with template rendering capabilities."""

    def __init__(self):
        self.ses_client = boto3.client(
            "ses",
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            region_name=settings.AWS_REGION,
        )

    async def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a Jinja template with the given context.

        Args:
            template_name: The name of the template file to render
            context: Dictionary of variables to pass to the template

        Returns:
            The rendered template as a string
        """
        try:
            template = jinja_env.get_template(template_name)
            return await template.render_async(**context)
        except Exception as e:
            logger.error(f"Error rendering template {template_name}: {str(e)}")
            raise ValueError(f"Error rendering template: {str(e)}")

    async def send_email(
        self,
        recipient: str,
        subject: str,
        template_name: str,
        context: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Send an email using a Jinja template.

        Args:
            recipient: Email address of the recipient
            subject: Email subject line
            template_name: Name of the HTML template to use
            context: Dictionary of variables to pass to the template

        Returns:
            Dictionary containing the status and response from SES

        Raises:
            MailDeliveryError: If the template cannot be rendered or SES rejects the message
        """
        context_with_defaults = {
            **context,
            "company_name": settings.COMPANY_NAME,
            "sender_name": settings.EMAIL_SENDER_NAME,
            "current_year": datetime.datetime.now().year,
        }

        try:
            html_content = await self.render_template(template_name, context_with_defaults)
        except ValueError as e:
            raise MailDeliveryError(recipient, str(e))

        # boto3 is blocking, keep it off the event loop
        response = await asyncio.to_thread(
            self.send_mail,
            sender=settings.EMAIL_SENDER,
            sender_name=settings.EMAIL_SENDER_NAME,
            recipients=[recipient],
            title=subject,
            body=html_content,
        )

        if not response["status"]:
            logger.error(f"Error sending email to {recipient}: {response['message']}")
            raise MailDeliveryError(recipient, response["message"])

        logger.info(f"Email sent successfully to {recipient}")
        return response

    def create_email_multipart_message(
        self,
        sender: str,
        sender_name: Optional[str],
        recipients: List[str],
        title: str,
        text: str = None,
        body: str = None,
    ) -> MIMEMultipart:
        """
        Creates a MIME multipart email message with optional plain text and HTML content.

        The message is `multipart/alternative` when both `text` and `body` are
        provided, otherwise `multipart/mixed`.

        Args:
            sender (str): The sender's email address.
            sender_name (str): Display name of the sender.
            recipients (list): List of primary recipient email addresses.
            title (str): Subject of the email.
            text (str, optional): Plain text version of the email body.
            body (str, optional): HTML version of the email body.

        Returns:
            MIMEMultipart: The constructed email message ready to be sent.
        """
        content_subtype = "alternative" if text and body else "mixed"

        message = MIMEMultipart(content_subtype)
        message["Subject"] = title

        # 'Sender Name <email@example.com>' when a display name is configured
        if sender_name is None:
            message["From"] = f"{sender}"
        else:
            message["From"] = f"{sender_name} <{sender}>"

        message["To"] = ", ".join(recipients)

        if text:
            message.attach(MIMEText(text, "plain", "utf-8"))

        if body:
            message.attach(MIMEText(body, "html", "utf-8"))

        return message

    def send_mail(
        self,
        sender: str,
        sender_name: Optional[str],
        recipients: List[str],
        title: str,
        text: str = None,
        body: str = None,
    ) -> dict:
        """
        Sends an email using AWS SES with optional plain text and HTML content.

        Args:
            sender (str): The sender's email address.
            sender_name (str): Display name of the sender.
            recipients (list): List of recipient email addresses.
            title (str): Subject line of the email.
            text (str, optional): Plain text version of the email body.
            body (str, optional): HTML version of the email body.

        Returns:
            dict: A dictionary containing the status, message, SES message ID, and raw SES response.
                  If an error occurs, the message ID will be "undefined".
        """
        try:
            msg = self.create_email_multipart_message(
                sender, sender_name, recipients, title, text, body
            )

            logger.info(f"Sending email '{title}' to SES")

            ses_response = self.ses_client.send_raw_email(
                Source=sender,
                Destinations=list(recipients),
                RawMessage={"Data": msg.as_string()},
            )

        except ClientError as e:
            logger.error(f"Failed to send mail with error: {str(e)}")
            return {
                "status": False,
                "message": e.response["Error"]["Message"],
                "message_id": "undefined",
                "response": e.response,
            }
        except BotoCoreError as e:
            logger.error(f"Failed to reach SES: {str(e)}")
            return {
                "status": False,
                "message": str(e),
                "message_id": "undefined",
                "response": None,
            }

        return {
            "status": True,
            "message": "Email Successfully Sent.",
            "message_id": ses_response["MessageId"],
            "response": ses_response,
        }


mail_service = MailService()
