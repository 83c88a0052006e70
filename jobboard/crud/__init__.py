"""
Operations on job board data.

Each module takes its store or client as the first argument so the same code
runs against Supabase and against the in-memory store used in tests.
"""

from jobboard.crud import job, staff

__all__ = ["job", "staff"]
