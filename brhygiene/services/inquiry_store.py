"""Persistence of accepted inquiries.

The store is insert-only: it assigns the identifier and creation time and
appends one row to the inquiries table. There is no read, update or delete.
"""

import logging
import uuid
from datetime import datetime
from typing import Optional

from brhygiene.core.config import Settings, settings as default_settings
from brhygiene.core.exceptions import StorageUnavailable
from brhygiene.models.inquiry import Inquiry, StoredInquiry
from brhygiene.services.base_database_service import BaseDatabaseService, get_database_service
from brhygiene.utils.helper_functions import utc_now

logger = logging.getLogger(__name__)


def generate_inquiry_id(created_at: datetime) -> str:
    """Timestamp-ordered reference with a random suffix, e.g. ``INQ-20250301093015-3F9A1C2B``."""
    return f"INQ-{created_at:%Y%m%d%H%M%S}-{uuid.uuid4().hex[:8].upper()}"


class InquiryStore:
    """Assigns identity to an inquiry and appends it to storage."""

    def __init__(
        self,
        database: Optional[BaseDatabaseService] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        self.table_name = self.settings.INQUIRIES_TABLE
        self._database = database

    @property
    def database(self) -> BaseDatabaseService:
        if self._database is None:
            self._database = get_database_service(self.settings)
        return self._database

    def save(self, inquiry: Inquiry) -> StoredInquiry:
        """Persist a validated inquiry.

        Args:
            inquiry: Normalized inquiry without identifier or timestamp

        Returns:
            The stored inquiry with its assigned ``id`` and ``created_at``

        Raises:
            StorageUnavailable: If the backend is missing, misconfigured or fails
        """
        created_at = utc_now()
        stored = StoredInquiry(
            **inquiry.model_dump(),
            id=generate_inquiry_id(created_at),
            created_at=created_at,
        )

        try:
            self.database.insert_data(self.table_name, stored.to_record())
        except Exception as e:
            logger.error(f"Failed to store inquiry {stored.id}: {str(e)}")
            raise StorageUnavailable(f"Inquiry storage unavailable: {str(e)}") from e

        logger.info(f"Inquiry stored: {stored.id}")
        return stored
