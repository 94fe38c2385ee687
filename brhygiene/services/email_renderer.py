"""
Email rendering for inquiries.

Turns a stored inquiry into the plain-text and HTML bodies of the operator
notification and the submitter acknowledgement using Jinja2 templates.
Rendering does no I/O beyond reading templates, so it can be tested without
any mail transport.
"""

import os
from datetime import timedelta, timezone
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from pydantic import BaseModel

from brhygiene.core.config import Settings, settings as default_settings
from brhygiene.models.inquiry import StoredInquiry

template_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
jinja_env = Environment(
    loader=FileSystemLoader(template_dir),
    autoescape=select_autoescape(['html', 'xml']),
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)

IST = timezone(timedelta(hours=5, minutes=30), "IST")


class BusinessProfile(BaseModel):
    """Public contact details printed in outgoing emails."""
    name: str
    phone: str
    email: str
    address: str
    response_time: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "BusinessProfile":
        return cls(
            name=settings.BUSINESS_NAME,
            phone=settings.BUSINESS_PHONE,
            email=settings.BUSINESS_EMAIL,
            address=settings.BUSINESS_ADDRESS,
            response_time=settings.RESPONSE_TIME,
        )


class RenderedEmail(BaseModel):
    subject: str
    text: str
    html: str


class InquiryEmailRenderer:
    """Renders inquiry emails for a fixed business profile."""

    def __init__(self, business: Optional[BusinessProfile] = None):
        self.business = business or BusinessProfile.from_settings(default_settings)

    def _context(self, inquiry: StoredInquiry) -> Dict[str, Any]:
        local_time = inquiry.created_at.astimezone(IST)
        return {
            "inquiry": inquiry,
            "inquiry_type": inquiry.inquiry_type,
            "business": self.business,
            "received_utc": inquiry.created_at.astimezone(timezone.utc).isoformat(),
            "received_local": local_time.strftime("%A, %d %B %Y at %I:%M %p IST"),
            "current_year": local_time.year,
        }

    def _render(self, template_base: str, subject: str, inquiry: StoredInquiry) -> RenderedEmail:
        context = self._context(inquiry)
        return RenderedEmail(
            subject=subject,
            text=jinja_env.get_template(f"{template_base}.txt").render(**context),
            html=jinja_env.get_template(f"{template_base}.html").render(**context),
        )

    def operator_notification(self, inquiry: StoredInquiry) -> RenderedEmail:
        """Notification for the business with every inquiry field."""
        subject = f"New Inquiry: {inquiry.inquiry_type} - {inquiry.name} ({inquiry.id})"
        return self._render("inquiry_notification", subject, inquiry)

    def acknowledgement(self, inquiry: StoredInquiry) -> RenderedEmail:
        """Receipt for the submitter: reference ID and expected response time only."""
        subject = f"We received your inquiry - {self.business.name}"
        return self._render("inquiry_acknowledgement", subject, inquiry)
