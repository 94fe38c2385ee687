"""Best-effort email notifications for stored inquiries.

Nothing here raises to the caller: a failed send is logged and recorded in
the returned ``NotificationOutcome``. The inquiry is already stored by the
time these run.
"""

import asyncio
import logging
from typing import Optional

from pydantic import BaseModel

from brhygiene.core.config import Settings, settings as default_settings
from brhygiene.models.inquiry import StoredInquiry
from brhygiene.services.email_renderer import BusinessProfile, InquiryEmailRenderer, RenderedEmail
from brhygiene.services.mail_service import MailService, mail_service as default_mail_service

logger = logging.getLogger(__name__)


class NotificationOutcome(BaseModel):
    operator_sent: bool = False
    acknowledgement_sent: Optional[bool] = None


class InquiryNotifier:
    """Emails the operator about an inquiry and optionally acknowledges the submitter."""

    def __init__(
        self,
        mail_service: Optional[MailService] = None,
        renderer: Optional[InquiryEmailRenderer] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        self.mail_service = mail_service or default_mail_service
        self.renderer = renderer or InquiryEmailRenderer(BusinessProfile.from_settings(self.settings))

    async def _send(self, recipient: str, email: RenderedEmail, inquiry_id: str, reply_to: Optional[str] = None) -> bool:
        try:
            await asyncio.to_thread(
                self.mail_service.send_mail,
                recipients=[recipient],
                title=email.subject,
                text=email.text,
                body=email.html,
                reply_to=reply_to,
            )
        except Exception as e:
            logger.error(f"Failed to email {recipient} for inquiry {inquiry_id}: {str(e)}")
            return False

        logger.info(f"Email sent to {recipient} for inquiry {inquiry_id}")
        return True

    async def notify(self, inquiry: StoredInquiry) -> NotificationOutcome:
        """Send the operator notification, then the acknowledgement if enabled."""
        outcome = NotificationOutcome()

        outcome.operator_sent = await self._send(
            self.settings.OPERATOR_EMAIL,
            self.renderer.operator_notification(inquiry),
            inquiry.id,
            reply_to=inquiry.email,
        )

        if self.settings.SEND_ACKNOWLEDGEMENT:
            outcome.acknowledgement_sent = await self._send(
                inquiry.email,
                self.renderer.acknowledgement(inquiry),
                inquiry.id,
            )

        return outcome

    async def dispatch(self, inquiry: StoredInquiry) -> None:
        """Background entry point; failures end up in the log only."""
        try:
            outcome = await self.notify(inquiry)
        except Exception:
            logger.exception(f"Background notification for inquiry {inquiry.id} failed")
            return
        logger.info(f"Background notification for inquiry {inquiry.id} finished: {outcome.model_dump()}")
