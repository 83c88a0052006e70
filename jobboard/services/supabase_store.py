"""
Staff store backed by the Supabase staff table.
"""

import logging
from typing import Any, Dict, List, Optional

from jobboard.core.config import Settings
from jobboard.core.exceptions import ConflictError, StoreError
from jobboard.core.supabase import SupabaseClient
from jobboard.schemas.staff import StaffCreate, StaffRecord
from jobboard.services.staff_store_base import StaffId, StaffStore

logger = logging.getLogger(__name__)


class SupabaseStaffStore(StaffStore):
    """StaffStore implementation over the Supabase REST API."""

    def __init__(self, client: SupabaseClient, table: str = "staff"):
        self.client = client
        self.table = table

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseStaffStore":
        return cls(SupabaseClient.from_settings(settings), table=settings.STAFF_TABLE)

    def list_all(self) -> List[StaffRecord]:
        rows = self.client.select(self.table, order="created_at.desc")
        return [StaffRecord(**row) for row in rows]

    def get_by_username(self, username: str) -> Optional[StaffRecord]:
        row = self.client.select_one(self.table, {"username": username})
        return StaffRecord(**row) if row else None

    def insert(self, staff: StaffCreate) -> StaffRecord:
        try:
            row = self.client.insert(self.table, staff.model_dump())
        except StoreError as e:
            if e.is_unique_violation:
                raise ConflictError(staff.username) from e
            raise
        logger.info(f"Inserted staff row {row.get('id')} for {staff.username}")
        return StaffRecord(**row)

    def update(self, staff_id: StaffId, values: Dict[str, Any]) -> Optional[StaffRecord]:
        rows = self.client.update(self.table, values, {"id": staff_id})
        return StaffRecord(**rows[0]) if rows else None

    def delete(self, staff_id: StaffId) -> bool:
        rows = self.client.delete(self.table, {"id": staff_id})
        return bool(rows)

    def close(self) -> None:
        self.client.close()
