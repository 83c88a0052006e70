"""
Abstract interface for staff account storage.

The staff operations only ever need five calls against the store, so the
interface is limited to those. The Supabase implementation lives in
supabase_store.py; tests use an in-memory implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union
from jobboard.schemas.staff import StaffCreate, StaffRecord

StaffId = Union[int, str]


class StaffStore(ABC):
    """
    Storage backend for staff records.

    Implementations raise StoreError for backend failures, ConflictError when
    an insert violates username uniqueness.
    """

    @abstractmethod
    def list_all(self) -> List[StaffRecord]:
        """
        Fetch every staff record.

        Returns:
            Records ordered by created_at, newest first
        """
        pass

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[StaffRecord]:
        """
        Look up a staff record by exact (case-sensitive) username.

        Returns:
            The record, or None if no staff member has this username
        """
        pass

    @abstractmethod
    def insert(self, staff: StaffCreate) -> StaffRecord:
        """
        Insert a new staff record.

        Returns:
            The created record including store-assigned id and created_at

        Raises:
            ConflictError: If the username is already taken
        """
        pass

    @abstractmethod
    def update(self, staff_id: StaffId, values: Dict[str, Any]) -> Optional[StaffRecord]:
        """
        Update columns of the record with this id.

        Returns:
            The updated record, or None if no record has this id
        """
        pass

    @abstractmethod
    def delete(self, staff_id: StaffId) -> bool:
        """
        Permanently remove the record with this id.

        Returns:
            True if a record was removed, False if no record has this id
        """
        pass

    def close(self) -> None:
        """Release any connection held by the store."""
        pass
