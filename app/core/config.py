"""Configuration settings for the Cadster API.

This module manages environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings.

    Attributes:
        API_PREFIX: Path prefix shared by every API route
        PROJECT_NAME: Name of the project
        DEBUG: Debug mode flag
        LOG_LEVEL: Root log level name
        OWNER_EMAIL: Mailbox that receives lead notifications
        MAX_MODEL_UPLOAD_MB: Largest model file accepted by the viewer import
    """
    def __init__(self):
        self.API_PREFIX = "/api"
        self.PROJECT_NAME = os.getenv("PROJECT_NAME", "Cadster API")
        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        self.ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
        self.PORT = int(os.getenv("PORT", 5000))

        # AWS SETTINGS
        self.AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID")
        self.AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY")
        self.AWS_REGION = os.getenv("AWS_REGION", "ap-south-1")

        # Email Settings
        self.EMAIL_SENDER = os.environ.get("EMAIL_SENDER", "noreply@cadster.in")
        self.EMAIL_SENDER_NAME = os.environ.get("EMAIL_SENDER_NAME", "Cadster")
        self.OWNER_EMAIL = os.environ.get("OWNER_EMAIL", "services@cadster.in")
        self.COMPANY_NAME = os.environ.get("COMPANY_NAME", "Cadster Technologies")
        self.OWNER_TIMEZONE = os.environ.get("OWNER_TIMEZONE", "Asia/Kolkata")

        # Slack Settings
        self.SLACK_BOT_TOKEN = os.getenv("SLACK_BOT_TOKEN")
        self.SLACK_ALERT_CHANNEL = os.getenv("SLACK_ALERT_CHANNEL", "#cadster-leads")

        # Viewer Settings
        self.MAX_MODEL_UPLOAD_MB = int(os.getenv("MAX_MODEL_UPLOAD_MB", 50))

    @property
    def mail_credentials_present(self) -> bool:
        return bool(self.AWS_ACCESS_KEY_ID and self.AWS_SECRET_ACCESS_KEY)


settings = Settings()
