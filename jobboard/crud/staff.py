"""
Operations for staff accounts.

Every operation resolves the staff member by username first and then acts on
the matched record's id. Lookups and writes are separate round-trips; the store
reports a vanished row (None / False) and that is surfaced as NotFoundError.
"""

import logging
from typing import List, Optional

from jobboard.core.exceptions import ConflictError, NotFoundError, UsageError
from jobboard.core.security import get_password_hash
from jobboard.schemas.staff import StaffCreate, StaffRecord
from jobboard.services.staff_store_base import StaffStore

logger = logging.getLogger(__name__)


def list_staff(store: StaffStore) -> List[StaffRecord]:
    """
    Retrieve all staff members, newest first.

    Args:
        store: Staff store

    Returns:
        List of StaffRecord instances
    """
    return store.list_all()


def get_by_username(store: StaffStore, username: str) -> StaffRecord:
    """
    Retrieve a staff member by username.

    Raises:
        NotFoundError: If no staff member has this username
    """
    staff = store.get_by_username(username)
    if staff is None:
        raise NotFoundError(username)
    return staff


def add_staff(store: StaffStore, username: str, password: str, full_name: Optional[str] = None) -> StaffRecord:
    """
    Create a new active staff member with role "staff".

    Args:
        store: Staff store
        username: Unique login name
        password: Plaintext password, stored only as a bcrypt hash
        full_name: Optional display name (empty string is stored as NULL)

    Returns:
        Created StaffRecord

    Raises:
        UsageError: If username or password is empty
        ConflictError: If the username already exists
    """
    if not username or not password:
        raise UsageError("Username and password must not be empty")

    if store.get_by_username(username) is not None:
        raise ConflictError(username)

    staff = store.insert(StaffCreate(
        username=username,
        password_hash=get_password_hash(password),
        full_name=full_name,
        role="staff",
        is_active=True,
    ))

    logger.info(f"Staff member {username} added (id={staff.id})")
    return staff


def update_password(store: StaffStore, username: str, new_password: str) -> StaffRecord:
    """
    Replace a staff member's password hash. No strength rules are applied.

    Raises:
        UsageError: If username or new password is empty
        NotFoundError: If the staff member does not exist
    """
    if not username or not new_password:
        raise UsageError("Username and new password must not be empty")

    staff = get_by_username(store, username)
    updated = store.update(staff.id, {"password_hash": get_password_hash(new_password)})
    if updated is None:
        raise NotFoundError(username)

    logger.info(f"Password updated for staff member {username}")
    return updated


def delete_staff(store: StaffStore, username: str) -> StaffRecord:
    """
    Permanently delete a staff member. Use deactivate_staff for a reversible block.

    Returns:
        The record as it was before deletion

    Raises:
        NotFoundError: If the staff member does not exist
    """
    staff = get_by_username(store, username)
    if not store.delete(staff.id):
        raise NotFoundError(username)

    logger.info(f"Staff member {username} deleted (id={staff.id})")
    return staff


def set_active(store: StaffStore, username: str, is_active: bool) -> StaffRecord:
    """
    Set a staff member's active flag. Setting the current value again is not an error.

    Raises:
        NotFoundError: If the staff member does not exist
    """
    staff = get_by_username(store, username)
    updated = store.update(staff.id, {"is_active": is_active})
    if updated is None:
        raise NotFoundError(username)

    logger.info(f"Staff member {username} {'activated' if is_active else 'deactivated'}")
    return updated


def deactivate_staff(store: StaffStore, username: str) -> StaffRecord:
    return set_active(store, username, False)


def activate_staff(store: StaffStore, username: str) -> StaffRecord:
    return set_active(store, username, True)
