"""
MailService Module

This module sends multipart (plain text + HTML) emails through AWS SES.
"""

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import Any, Dict, List, Optional

from brhygiene.core.config import Settings, settings as default_settings
from brhygiene.core.exceptions import NotificationFailure

import logging

logger = logging.getLogger(__name__)


class MailService:
    """Mail service backed by AWS SES."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self._ses_client = None

    @property
    def ses_client(self):
        if self._ses_client is None:
            if not (self.settings.AWS_ACCESS_KEY_ID and self.settings.AWS_SECRET_ACCESS_KEY):
                raise NotificationFailure("AWS SES credentials are not configured")
            timeout = self.settings.MAIL_TIMEOUT_SECONDS
            self._ses_client = boto3.client(
                "ses",
                aws_access_key_id=self.settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=self.settings.AWS_SECRET_ACCESS_KEY,
                region_name=self.settings.AWS_REGION,
                config=Config(
                    connect_timeout=timeout,
                    read_timeout=timeout,
                    retries={"max_attempts": 1},
                ),
            )
        return self._ses_client

    def create_email_multipart_message(
        self,
        sender: str,
        sender_name: Optional[str],
        recipients: List[str],
        title: str,
        text: Optional[str] = None,
        body: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> MIMEMultipart:
        """
        Creates a MIME multipart email message with optional plain text and HTML content.

        The message is `multipart/alternative` when both `text` and `body` are
        provided (clients pick the richest part they support), otherwise
        `multipart/mixed`.

        Args:
            sender (str): The sender's email address.
            sender_name (str, optional): Display name of the sender.
            recipients (list): List of primary recipient email addresses.
            title (str): Subject of the email.
            text (str, optional): Plain text version of the email body.
            body (str, optional): HTML version of the email body.
            reply_to (str, optional): Address replies should go to.

        Returns:
            MIMEMultipart: The constructed email message ready to be sent.
        """
        if text and body:
            content_subtype = "alternative"
        else:
            content_subtype = "mixed"

        message = MIMEMultipart(content_subtype)
        message["Subject"] = title

        # if sender_name is provided, the format will be 'Sender Name <email@example.com>'
        if sender_name is None:
            message["From"] = sender
        else:
            message["From"] = formataddr((sender_name, sender))

        message["To"] = ", ".join(recipients)
        if reply_to:
            message["Reply-To"] = reply_to

        if text:
            message.attach(MIMEText(text, "plain", "utf-8"))

        if body:
            message.attach(MIMEText(body, "html", "utf-8"))

        return message

    def send_mail(
        self,
        recipients: List[str],
        title: str,
        text: Optional[str] = None,
        body: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Sends an email using AWS SES from the configured sender.

        Args:
            recipients (list): List of recipient email addresses.
            title (str): Subject line of the email.
            text (str, optional): Plain text version of the email body.
            body (str, optional): HTML version of the email body.
            reply_to (str, optional): Address replies should go to.

        Returns:
            dict: The status, message and SES message ID.

        Raises:
            NotificationFailure: If SES is not configured or rejects the message.
        """
        msg = self.create_email_multipart_message(
            self.settings.EMAIL_SENDER,
            self.settings.EMAIL_SENDER_NAME,
            recipients,
            title,
            text,
            body,
            reply_to,
        )

        try:
            logger.info(f"Sending email '{title}' to SES")
            ses_response = self.ses_client.send_raw_email(
                Source=self.settings.EMAIL_SENDER,
                Destinations=list(recipients),
                RawMessage={"Data": msg.as_string()},
            )
        except ClientError as e:
            logger.error(f"Failed to send mail with error: {str(e)}")
            raise NotificationFailure(e.response["Error"]["Message"]) from e
        except BotoCoreError as e:
            logger.error(f"Failed to send mail with error: {str(e)}")
            raise NotificationFailure(str(e)) from e

        return {
            "status": True,
            "message": "Email Successfully Sent.",
            "message_id": ses_response["MessageId"],
        }


mail_service = MailService()
