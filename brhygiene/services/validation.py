"""Validation of raw contact form submissions.

``InquiryValidator.validate`` never raises for bad input: it returns either a
normalized ``Inquiry`` or a mapping of field name to message, never both.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from brhygiene.models.inquiry import Inquiry, InquiryForm

logger = logging.getLogger(__name__)


class ValidationResult(BaseModel):
    """Outcome of validating one submission."""
    inquiry: Optional[Inquiry] = None
    errors: Dict[str, str] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.inquiry is not None


def _field_errors(exc: ValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for error in exc.errors():
        field_name = str(error["loc"][0]) if error.get("loc") else "__root__"
        cause = error.get("ctx", {}).get("error")
        errors.setdefault(field_name, str(cause) if cause else error["msg"])
    return errors


class InquiryValidator:
    """Checks every form field and reports all failures together."""

    def validate(self, raw: Mapping[str, Any]) -> ValidationResult:
        try:
            form = InquiryForm.model_validate(dict(raw))
        except ValidationError as e:
            errors = _field_errors(e)
            logger.info(f"Inquiry rejected, invalid fields: {sorted(errors)}")
            return ValidationResult(errors=errors)

        return ValidationResult(inquiry=Inquiry(**form.model_dump()))


inquiry_validator = InquiryValidator()
