"""
Insert operation for the jobs table, used by the seed script.
"""

import json
from typing import Any, Dict

from jobboard.core.supabase import SupabaseClient
from jobboard.schemas.job import JobPostingCreate


def create(client: SupabaseClient, job_data: JobPostingCreate, table: str = "jobs") -> Dict[str, Any]:
    """
    Create a new job posting.

    Args:
        client: Supabase client
        job_data: Validated job posting
        table: Jobs table name

    Returns:
        Created row as returned by Supabase
    """
    values = job_data.model_dump()
    # The web app reads job_functions as a JSON-encoded string column
    values["job_functions"] = json.dumps(job_data.job_functions)

    return client.insert(table, values)
