import pytest
from botocore.exceptions import ClientError
from app.core.config import settings
from app.services.mail_service import mail_service, MailDeliveryError


@pytest.mark.asyncio
class TestMailTemplates:
    async def test_owner_notification_escapes_user_input(self):
        html = await mail_service.render_template(
            "owner_notification.html",
            {
                "client_name": "<script>alert('x')</script>",
                "client_email": "ada@analytical.engine",
                "company": None,
                "message": "Tom & Jerry <b>bold</b>",
                "is_demo_request": False,
                "reference_id": "REF-12345678",
                "submission_time": "17/10/2026, 9:30:00 am",
            },
        )

        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "Tom &amp; Jerry &lt;b&gt;bold&lt;/b&gt;" in html
        assert ">-</td>" in html
        assert "Action Required" not in html

    async def test_demo_notification_has_action_callout(self):
        html = await mail_service.render_template(
            "owner_notification.html",
            {
                "client_name": "Ada",
                "client_email": "ada@analytical.engine",
                "company": "Engines",
                "message": "[DEMO REQUEST]",
                "is_demo_request": True,
                "reference_id": "REF-12345678",
                "submission_time": "now",
            },
        )

        assert "New Demo Request" in html
        assert "Action Required" in html

    async def test_contact_auto_reply_mentions_company(self):
        html = await mail_service.render_template(
            "contact_auto_reply.html",
            {
                "client_name": "Ada",
                "company": "Engines & Co",
                "company_name": "Cadster Technologies",
                "sender_name": "Cadster",
                "current_year": 2026,
            },
        )

        assert "Hi <strong>Ada</strong>" in html
        assert "Engines &amp; Co" in html
        assert "Team Cadster" in html

    async def test_unknown_template_raises(self):
        with pytest.raises(ValueError):
            await mail_service.render_template("missing.html", {})


@pytest.mark.asyncio
class TestMailDelivery:
    async def test_send_email_success(self, mocker):
        send_mail = mocker.patch.object(
            mail_service,
            "send_mail",
            return_value={"status": True, "message": "Email Successfully Sent.", "message_id": "abc"},
        )

        response = await mail_service.send_email(
            recipient="ada@analytical.engine",
            subject="Hello",
            template_name="contact_auto_reply.html",
            context={"client_name": "Ada", "company": None},
        )

        assert response["message_id"] == "abc"
        kwargs = send_mail.call_args.kwargs
        assert kwargs["recipients"] == ["ada@analytical.engine"]
        assert kwargs["sender"] == settings.EMAIL_SENDER
        assert "Ada" in kwargs["body"]

    async def test_send_email_raises_on_rejection(self, mocker):
        mocker.patch.object(
            mail_service,
            "send_mail",
            return_value={"status": False, "message": "Email address is not verified.", "message_id": "undefined"},
        )

        with pytest.raises(MailDeliveryError) as exc_info:
            await mail_service.send_email(
                recipient="ada@analytical.engine",
                subject="Hello",
                template_name="contact_auto_reply.html",
                context={"client_name": "Ada"},
            )

        assert exc_info.value.recipient == "ada@analytical.engine"
        assert exc_info.value.reason == "Email address is not verified."


class TestSesTransport:

    def test_multipart_message_headers(self):
        message = mail_service.create_email_multipart_message(
            "noreply@cadster.in", "Cadster", ["a@x.com", "b@x.com"], "Subject", body="<p>hi</p>"
        )

        assert message["From"] == "Cadster <noreply@cadster.in>"
        assert message["To"] == "a@x.com, b@x.com"
        assert message["Subject"] == "Subject"
        assert message.get_content_subtype() == "mixed"

    def test_send_mail_client_error(self, mocker):
        mocker.patch.object(
            mail_service.ses_client,
            "send_raw_email",
            side_effect=ClientError(
                {"Error": {"Code": "MessageRejected", "Message": "Email address is not verified."}},
                "SendRawEmail",
            ),
        )

        response = mail_service.send_mail(
            "noreply@cadster.in", "Cadster", ["ada@analytical.engine"], "Hello", body="<p>hi</p>"
        )

        assert response["status"] is False
        assert response["message"] == "Email address is not verified."

    def test_send_mail_success(self, mocker):
        send_raw_email = mocker.patch.object(
            mail_service.ses_client, "send_raw_email", return_value={"MessageId": "ses-123"}
        )

        response = mail_service.send_mail(
            "noreply@cadster.in", "Cadster", ["ada@analytical.engine"], "Hello", body="<p>hi</p>"
        )

        assert response["status"] is True
        assert response["message_id"] == "ses-123"
        assert send_raw_email.call_args.kwargs["Destinations"] == ["ada@analytical.engine"]
