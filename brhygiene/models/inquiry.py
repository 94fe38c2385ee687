"""Inquiry models for the BR Hygiene website API.

This module contains the Pydantic models for contact-form submissions, the
normalized inquiry record and the responses returned to the website.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
from typing_extensions import Annotated
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from brhygiene.utils.helper_functions import parse_datetime
from brhygiene.utils import validators

GENERAL_INQUIRY_LABEL = "General Inquiry"


class InquirySubject(str, Enum):
    """Inquiry types offered by the contact form."""
    OEM_PRIVATE_LABEL = "OEM / Private Label"
    BULK_ORDER = "Bulk Order"
    SAMPLE_REQUEST = "Sample Request"
    CUSTOM_FORMULATION = "Custom Formulation"
    PRICING_INQUIRY = "Pricing Inquiry"
    OTHER = "Other"

    @classmethod
    def canonical(cls, subject: str) -> str:
        """Map a case-insensitive match onto the listed label, keep free text as-is."""
        for member in cls:
            if member.value.lower() == subject.lower():
                return member.value
        return subject


class InquiryForm(BaseModel):
    """Raw contact form submission.

    Every field may be absent or malformed; the validators below turn each
    one into its normalized form or raise the message shown to the submitter.
    """
    name: Annotated[str, Field(None, validate_default=True, description="Full name of the person inquiring")]
    email: Annotated[str, Field(None, validate_default=True, description="Email address for the reply")]
    phone: Annotated[str, Field(None, validate_default=True, description="Indian mobile number, any separators")]
    subject: Annotated[str, Field(None, validate_default=True, description="Inquiry type")]
    message: Annotated[str, Field(None, validate_default=True, description="Inquiry message")]

    model_config = ConfigDict(extra="ignore")

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, value: Any) -> str:
        return validators.check_name(value)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, value: Any) -> str:
        return validators.check_email(value)

    @field_validator("phone", mode="before")
    @classmethod
    def validate_phone(cls, value: Any) -> str:
        return validators.check_phone(value)

    @field_validator("subject", mode="before")
    @classmethod
    def validate_subject(cls, value: Any) -> str:
        return InquirySubject.canonical(validators.check_subject(value))

    @field_validator("message", mode="before")
    @classmethod
    def validate_message(cls, value: Any) -> str:
        return validators.check_message(value)


class Inquiry(BaseModel):
    """Validated, normalized inquiry that has not been stored yet.

    Attributes:
        name: Trimmed submitter name
        email: Trimmed submitter email
        phone: Phone in ``+91 XXXXX XXXXX`` form
        subject: Inquiry type, or None when absent
        message: Trimmed message body
    """
    name: str
    email: str
    phone: str
    subject: Optional[str] = None
    message: str

    model_config = ConfigDict(frozen=True)

    @property
    def inquiry_type(self) -> str:
        return self.subject or GENERAL_INQUIRY_LABEL


class StoredInquiry(Inquiry):
    """Inquiry as persisted, with its assigned identifier and UTC creation time."""
    id: Annotated[str, Field(..., description="Unique inquiry identifier")]
    created_at: Annotated[
        datetime,
        Field(..., description="Server-assigned creation timestamp (UTC)"),
        BeforeValidator(parse_datetime),
    ]

    def to_record(self) -> Dict[str, Any]:
        record = self.model_dump()
        record["created_at"] = self.created_at.isoformat()
        return record


class InquiryResponse(BaseModel):
    """Response model for accepted inquiries.

    Attributes:
        success: Always true for this model
        message: Acknowledgement shown to the submitter
        inquiry_id: Reference ID for tracking the inquiry
        notification_sent: Whether the operator was emailed, when known at response time
    """
    success: bool = Field(True, description="Whether the inquiry was accepted")
    message: str = Field(..., description="Acknowledgement message for the submitter")
    inquiry_id: str = Field(..., description="Reference ID for tracking the inquiry")
    notification_sent: Optional[bool] = Field(
        None, description="Operator notification outcome, only set when sent inline"
    )


class InquiryErrorResponse(BaseModel):
    """Response model for rejected or failed inquiries."""
    success: bool = Field(False, description="Always false for this model")
    error: str = Field(..., description="Summary of what went wrong")
    errors: Optional[Dict[str, str]] = Field(
        None, description="Message per invalid field, keyed by field name"
    )
