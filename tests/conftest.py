"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- An in-memory staff store standing in for the Supabase staff table
- Supabase settings and an httpx mock transport
- Running the staff CLI against the in-memory store
- Restoring the root logger and time locale changed by a run
"""

import json
import locale
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from jobboard.cli import main
from jobboard.core.config import Settings
from jobboard.core.exceptions import ConflictError
from jobboard.core.supabase import SupabaseClient
from jobboard.schemas.staff import StaffCreate, StaffRecord
from jobboard.services.staff_store_base import StaffId, StaffStore

BASE_TIME = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


class InMemoryStaffStore(StaffStore):
    """
    StaffStore keeping rows in a dict, with the same id/created_at/uniqueness
    behaviour as the staff table.
    """

    def __init__(self):
        self.rows: Dict[int, StaffRecord] = {}
        self.next_id = 1
        self.closed = False

    def list_all(self) -> List[StaffRecord]:
        return sorted(self.rows.values(), key=lambda r: r.created_at, reverse=True)

    def get_by_username(self, username: str) -> Optional[StaffRecord]:
        return next((r for r in self.rows.values() if r.username == username), None)

    def insert(self, staff: StaffCreate) -> StaffRecord:
        if self.get_by_username(staff.username) is not None:
            raise ConflictError(staff.username)
        record = StaffRecord(
            id=self.next_id,
            created_at=BASE_TIME + timedelta(minutes=self.next_id),
            **staff.model_dump(),
        )
        self.rows[record.id] = record
        self.next_id += 1
        return record

    def update(self, staff_id: StaffId, values: Dict[str, Any]) -> Optional[StaffRecord]:
        if staff_id not in self.rows:
            return None
        self.rows[staff_id] = self.rows[staff_id].model_copy(update=values)
        return self.rows[staff_id]

    def delete(self, staff_id: StaffId) -> bool:
        return self.rows.pop(staff_id, None) is not None

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def store():
    """Fresh, empty in-memory staff store."""
    return InMemoryStaffStore()


@pytest.fixture
def run_cli(store, capsys, restore_time_locale):
    """
    Run the staff CLI against the in-memory store.

    Returns a function taking the command-line arguments and returning
    (exit_code, stdout, stderr).
    """
    def _run(*args: str):
        exit_code = main(list(args), store=store)
        captured = capsys.readouterr()
        return exit_code, captured.out, captured.err

    return _run


@pytest.fixture
def settings():
    """Settings with explicit Supabase values, independent of the environment."""
    return Settings(
        SUPABASE_URL="https://example.supabase.co",
        SUPABASE_SERVICE_ROLE_KEY="service-role-key",
        _env_file=None,
    )


@pytest.fixture
def no_supabase_env(monkeypatch, tmp_path):
    """Remove Supabase configuration from the environment and any .env file."""
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_SERVICE_ROLE_KEY", raising=False)
    monkeypatch.chdir(tmp_path)


class RecordingTransport:
    """
    Collects requests sent through an httpx.MockTransport.

    The handler receives each request and returns the response to send back.
    """

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def json_bodies(self) -> List[Any]:
        return [json.loads(r.content) for r in self.requests if r.content]


@pytest.fixture
def make_client(settings):
    """Build a SupabaseClient whose requests go to a handler function."""
    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        recorder = RecordingTransport(handler)
        client = SupabaseClient.from_settings(settings, transport=recorder.transport)
        return client, recorder

    return _make


@pytest.fixture
def make_staff_row():
    """Build a staff row as PostgREST returns it."""
    def _make(**overrides) -> Dict[str, Any]:
        row = {
            "id": 1,
            "username": "alice",
            "password_hash": "$2b$10$abcdefghijklmnopqrstuuVqC1eN5bCKM2sZ0Xwq2y1dXkR9gZ5Wu",
            "full_name": "Alice A",
            "role": "staff",
            "is_active": True,
            "created_at": "2025-01-15T12:00:00+00:00",
            "updated_at": "2025-01-15T12:00:00+00:00",
        }
        row.update(overrides)
        return row

    return _make


@pytest.fixture
def restore_root_logger():
    """Put back the root logger handlers and level after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def restore_time_locale():
    """Put back the LC_TIME locale after the test."""
    saved = locale.setlocale(locale.LC_TIME)
    yield
    locale.setlocale(locale.LC_TIME, saved)
