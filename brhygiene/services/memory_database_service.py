"""
In-process implementation of BaseDatabaseService.

Used for local development without a Supabase project and in tests. Rows
live in a dict of lists guarded by a lock, so each insert is atomic.
"""

import logging
import threading
from copy import deepcopy
from typing import Any, Dict, List, Union

from brhygiene.services.base_database_service import BaseDatabaseService

logger = logging.getLogger(__name__)


class MemoryDatabaseService(BaseDatabaseService):
    backend_name = "memory"

    def __init__(self, settings=None):
        self._tables: Dict[str, List[Dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def insert_data(self, table_name: str, data: Union[Dict, List[Dict]], **kwargs) -> Dict[str, Any]:
        rows = data if isinstance(data, list) else [data]
        with self._lock:
            table = self._tables.setdefault(table_name, [])
            # unique "id" column, like a primary key
            existing = {row.get("id") for row in table if "id" in row}
            for row in rows:
                if "id" in row and row["id"] in existing:
                    raise ValueError(f"duplicate key value for id {row['id']!r} in {table_name}")
                existing.add(row.get("id"))
            table.extend(deepcopy(rows))
        logger.info(f"Inserted {len(rows)} row(s) into in-memory table {table_name}")
        return {"data": deepcopy(rows), "count": None}

    def select_data(self, table_name: str, **kwargs) -> List[Any]:
        cols = kwargs.get("cols") or {}
        order_by = kwargs.get("order_by")
        with self._lock:
            rows = [
                deepcopy(row)
                for row in self._tables.get(table_name, [])
                if all(row.get(key) == value for key, value in cols.items())
            ]
        if order_by:
            rows.sort(key=lambda row: row.get(order_by))
        return rows
