"""
Pydantic schemas for staff accounts stored in the Supabase staff table.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, Union
from datetime import datetime


class StaffCreate(BaseModel):
    """Row written when a staff member is added."""
    username: str = Field(..., min_length=1)
    password_hash: str
    full_name: Optional[str] = None
    role: str = "staff"
    is_active: bool = True

    @field_validator('full_name')
    @classmethod
    def empty_full_name_is_unset(cls, v: Optional[str]) -> Optional[str]:
        """An empty full name is stored as NULL, same as an omitted one."""
        return v or None


class StaffRecord(BaseModel):
    """Staff row as returned by the store."""
    id: Union[int, str]
    username: str
    password_hash: str
    full_name: Optional[str] = None
    role: Optional[str] = "staff"
    # Column is nullable; NULL is shown as Inactive
    is_active: Optional[bool] = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def status(self) -> str:
        return "Active" if self.is_active else "Inactive"

    def __repr__(self):
        return f"<StaffRecord(id={self.id}, username='{self.username}', is_active={self.is_active})>"
