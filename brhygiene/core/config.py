"""Configuration settings for the BR Hygiene website API.

This module manages environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings.

    Attributes:
        API_PREFIX: Path prefix for every API route
        PROJECT_NAME: Name of the project
        DEBUG: Debug mode flag
        LOG_LEVEL: Root log level
        DATABASE_BACKEND: Name of the registered database backend to use
        OPERATOR_EMAIL: Address that receives new inquiry notifications
        SEND_ACKNOWLEDGEMENT: Whether submitters get a confirmation email
        NOTIFY_IN_BACKGROUND: Send notifications after the response is returned
    """
    def __init__(self):
        self.API_PREFIX = os.getenv("API_PREFIX", "/api")
        self.PROJECT_NAME = os.getenv("PROJECT_NAME", "BR Hygiene API")
        self.DEBUG = _env_flag("DEBUG", "False")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        self.ALLOWED_ORIGINS = [
            origin.strip()
            for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Storage Settings
        self.DATABASE_BACKEND = os.getenv("DATABASE_BACKEND", "supabase")
        self.SUPABASE_URL = os.getenv("SUPABASE_URL")
        self.SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
        self.INQUIRIES_TABLE = os.getenv("INQUIRIES_TABLE", "inquiries")
        self.PRODUCTS_TABLE = os.getenv("PRODUCTS_TABLE", "products")
        self.STORE_TIMEOUT_SECONDS = float(os.getenv("STORE_TIMEOUT_SECONDS", 10))

        # AWS SETTINGS
        self.AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID")
        self.AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY")
        self.AWS_REGION = os.getenv("AWS_REGION", "ap-south-1")

        # Email Settings
        self.EMAIL_SENDER = os.environ.get("EMAIL_SENDER", "inquiries@brhygiene.in")
        self.EMAIL_SENDER_NAME = os.environ.get("EMAIL_SENDER_NAME", "BR Hygiene Inquiries")
        self.OPERATOR_EMAIL = os.environ.get("OPERATOR_EMAIL", "brhygiene23@gmail.com")
        self.MAIL_TIMEOUT_SECONDS = float(os.getenv("MAIL_TIMEOUT_SECONDS", 15))
        self.SEND_ACKNOWLEDGEMENT = _env_flag("SEND_ACKNOWLEDGEMENT", "True")
        self.NOTIFY_IN_BACKGROUND = _env_flag("NOTIFY_IN_BACKGROUND", "True")

        # Business profile shown in emails and error messages
        self.BUSINESS_NAME = os.getenv("BUSINESS_NAME", "BR Hygiene")
        self.BUSINESS_PHONE = os.getenv("BUSINESS_PHONE", "+91 60014 60018")
        self.BUSINESS_EMAIL = os.getenv("BUSINESS_EMAIL", "brhygiene23@gmail.com")
        self.BUSINESS_ADDRESS = os.getenv(
            "BUSINESS_ADDRESS",
            "Survey No. 35-36, Madhapar Industrial Area, Jamnagar Road, Rajkot, Gujarat, India",
        )
        self.RESPONSE_TIME = os.getenv("RESPONSE_TIME", "24 hours")


settings = Settings()
