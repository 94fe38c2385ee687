"""Services for handling contact form submissions.

A submission moves through
``RECEIVED -> VALIDATING -> (REJECTED | VALIDATED) -> PERSISTING ->
(PERSIST_FAILED | PERSISTED) -> NOTIFYING -> RESPONDED``.
Rejection and storage failure are terminal. Notification is best-effort and
never changes the outcome once the inquiry is stored.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from fastapi import BackgroundTasks
from pydantic import BaseModel, Field

from brhygiene.core.config import Settings, settings as default_settings
from brhygiene.core.exceptions import StorageUnavailable
from brhygiene.models.inquiry import StoredInquiry
from brhygiene.services.inquiry_store import InquiryStore
from brhygiene.services.notifier import InquiryNotifier, NotificationOutcome
from brhygiene.services.validation import InquiryValidator, inquiry_validator

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    RECEIVED = "received"
    VALIDATING = "validating"
    REJECTED = "rejected"
    VALIDATED = "validated"
    PERSISTING = "persisting"
    PERSIST_FAILED = "persist_failed"
    PERSISTED = "persisted"
    NOTIFYING = "notifying"
    RESPONDED = "responded"


class SubmissionResult(BaseModel):
    """Terminal state of one submission and what the response needs."""
    state: SubmissionState
    inquiry: Optional[StoredInquiry] = None
    errors: Dict[str, str] = Field(default_factory=dict)
    notification: Optional[NotificationOutcome] = None

    @property
    def success(self) -> bool:
        return self.state == SubmissionState.RESPONDED


class InquiryService:
    """Orchestrates validation, storage and notification of an inquiry."""

    def __init__(
        self,
        validator: Optional[InquiryValidator] = None,
        store: Optional[InquiryStore] = None,
        notifier: Optional[InquiryNotifier] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        self.validator = validator or inquiry_validator
        self.store = store or InquiryStore(settings=self.settings)
        self.notifier = notifier or InquiryNotifier(settings=self.settings)

    async def _persist(self, inquiry) -> StoredInquiry:
        # no outer timeout: the backend client enforces STORE_TIMEOUT_SECONDS
        return await asyncio.to_thread(self.store.save, inquiry)

    async def _notify_inline(self, inquiry: StoredInquiry) -> NotificationOutcome:
        try:
            return await asyncio.wait_for(
                self.notifier.notify(inquiry),
                timeout=self.settings.MAIL_TIMEOUT_SECONDS,
            )
        except asyncio.TimeoutError:
            logger.error(f"Notification for inquiry {inquiry.id} timed out")
        except Exception as e:
            logger.error(f"Notification for inquiry {inquiry.id} failed: {str(e)}")
        return NotificationOutcome()

    async def submit(
        self,
        raw: Mapping[str, Any],
        background_tasks: Optional[BackgroundTasks] = None,
    ) -> SubmissionResult:
        """Run one submission through the pipeline.

        Args:
            raw: Form fields as received from the client
            background_tasks: When given and background notification is
                enabled, emails are sent after the response is returned

        Returns:
            The terminal ``SubmissionResult``; only ``RESPONDED`` is a success
        """
        logger.info(f"Inquiry submission {SubmissionState.RECEIVED.value}")

        logger.debug(f"Inquiry submission {SubmissionState.VALIDATING.value}")
        validation = self.validator.validate(raw)
        if not validation.is_valid:
            return SubmissionResult(state=SubmissionState.REJECTED, errors=validation.errors)

        logger.debug(f"Inquiry submission {SubmissionState.PERSISTING.value}")
        try:
            stored = await self._persist(validation.inquiry)
        except StorageUnavailable as e:
            logger.error(f"Inquiry submission {SubmissionState.PERSIST_FAILED.value}: {str(e)}")
            return SubmissionResult(state=SubmissionState.PERSIST_FAILED)

        logger.info(f"Inquiry {stored.id} {SubmissionState.PERSISTED.value}, {SubmissionState.NOTIFYING.value}")
        notification = None
        if self.settings.NOTIFY_IN_BACKGROUND and background_tasks is not None:
            background_tasks.add_task(self.notifier.dispatch, stored)
        else:
            notification = await self._notify_inline(stored)

        logger.info(f"Inquiry {stored.id} {SubmissionState.RESPONDED.value}")
        return SubmissionResult(
            state=SubmissionState.RESPONDED,
            inquiry=stored,
            notification=notification,
        )


inquiry_service = InquiryService()
