"""Field rules for contact-form input.

Each rule takes the raw value and either returns the cleaned value or raises
``ValueError`` carrying the message shown next to the form field.
"""

import re
from typing import Any, Optional

NAME_MIN_LENGTH = 2
MESSAGE_MIN_LENGTH = 10
COUNTRY_CODE = "91"

NAME_PATTERN = re.compile(r"^[a-zA-Z\s.'-]+$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@.]{2,}$")
MOBILE_PATTERN = re.compile(r"^[6-9][0-9]{9}$")
PHONE_SEPARATORS = re.compile(r"[\s\-().+]")

NAME_LENGTH_ERROR = "Please enter your full name (min 2 characters)."
NAME_CHARACTERS_ERROR = "Name must contain only letters, spaces, apostrophes, hyphens, or periods."
PHONE_ERROR = "Enter a valid 10-digit Indian mobile number."
EMAIL_ERROR = "Enter a valid email address (e.g. you@company.com)."
SUBJECT_ERROR = "Please select an inquiry type."
MESSAGE_ERROR = "Message must be at least 10 characters."


def clean_text(value: Any) -> str:
    """Coerce a scalar form value to a trimmed string; anything else is empty."""
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, (str, int, float)):
        return str(value).strip()
    return ""


def normalize_phone(value: Any) -> Optional[str]:
    """Return the ``+91 XXXXX XXXXX`` form of a mobile number, or None if invalid."""
    digits = PHONE_SEPARATORS.sub("", clean_text(value))
    if len(digits) == 12 and digits.startswith(COUNTRY_CODE):
        digits = digits[2:]
    if not MOBILE_PATTERN.match(digits):
        return None
    return f"+{COUNTRY_CODE} {digits[:5]} {digits[5:]}"


def check_name(value: Any) -> str:
    name = clean_text(value)
    if len(name) < NAME_MIN_LENGTH:
        raise ValueError(NAME_LENGTH_ERROR)
    if not NAME_PATTERN.match(name):
        raise ValueError(NAME_CHARACTERS_ERROR)
    return name


def check_phone(value: Any) -> str:
    phone = normalize_phone(value)
    if phone is None:
        raise ValueError(PHONE_ERROR)
    return phone


def check_email(value: Any) -> str:
    email = clean_text(value)
    if not EMAIL_PATTERN.match(email):
        raise ValueError(EMAIL_ERROR)
    return email


def check_subject(value: Any) -> str:
    subject = clean_text(value)
    if not subject:
        raise ValueError(SUBJECT_ERROR)
    return subject


def check_message(value: Any) -> str:
    message = clean_text(value)
    if len(message) < MESSAGE_MIN_LENGTH:
        raise ValueError(MESSAGE_ERROR)
    return message
