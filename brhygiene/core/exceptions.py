"""Error conditions raised by the inquiry pipeline."""

from typing import Dict


class InquiryRejected(Exception):
    """One or more submitted fields failed validation."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__(f"Inquiry rejected: {', '.join(sorted(errors))}")


class StorageUnavailable(Exception):
    """The inquiry could not be persisted."""


class NotificationFailure(Exception):
    """An inquiry email could not be delivered."""
