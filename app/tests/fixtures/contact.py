import pytest
from unittest.mock import AsyncMock
from app.services.mail_service import MailDeliveryError
from app.tests.constants.contact import ContactTestConstants


def mail_side_effect(failing_recipient=None):
    """Build a send_email side effect failing only for one recipient."""

    def _send_email(recipient, subject, template_name, context):
        if recipient == failing_recipient:
            raise MailDeliveryError(recipient, ContactTestConstants.MOCK_SES_REJECTION.value)
        return {"status": True, "message": "Email Successfully Sent.", "message_id": "mock-message-id"}

    return _send_email


@pytest.fixture(scope="function")
def mock_mail_send_email(mocker):
    """Fixture to patch and provide a mock for mail_service.send_email."""
    mock = mocker.patch(
        "app.api.endpoints.contact.mail_service.send_email",
        new_callable=AsyncMock,
    )
    mock.side_effect = mail_side_effect()
    return mock


@pytest.fixture(scope="function")
def mock_slack_alert(mocker):
    """Fixture to patch and provide a mock for send_slack_alert."""
    mock = mocker.patch("app.api.endpoints.contact.send_slack_alert")
    mock.return_value = True
    return mock
