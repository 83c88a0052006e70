"""
Seed the jobs table with sample job postings.

Run this script from the project root:
    python seed_jobs.py

Requires SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY in the environment (or .env).
Every run inserts the full list again; it does not check for existing rows.
"""

import logging
import sys
from typing import Optional

from jobboard.core.config import Settings, get_settings
from jobboard.core.exceptions import StaffAdminError
from jobboard.core.logging_config import setup_logging
from jobboard.core.supabase import SupabaseClient
from jobboard.crud import job as job_crud
from jobboard.schemas.job import JobPostingCreate

logger = logging.getLogger(__name__)

SAMPLE_JOBS = [
    {
        "title": "IB PYP Curriculum Coordinator",
        "company": "China Global Connections",
        "location": "Nanjing",
        "location_chinese": "南京",
        "salary": "30000 - 35000",
        "experience": "3 Years",
        "chinese_required": "No",
        "qualification": "Bachelor Degree",
        "contract_type": "Full Time",
        "job_functions": ["Education", "Management", "Teaching"],
        "description": "We are looking for an IB PYP Curriculum Coordinator for an international kindergarten based in Nanjing starting from the upcoming 2025-2026 academic year.",
        "requirements": "Bachelor's degree in Education or related field, 3+ years teaching experience, IB certification preferred",
        "benefits": "Competitive salary, housing allowance, health insurance, professional development opportunities",
        "is_active": True,
        "is_new": True,
    },
    {
        "title": "IB Art Teacher",
        "company": "International Education Group",
        "location": "Qingdao",
        "location_chinese": "青岛",
        "salary": "25000 - 30000",
        "experience": "2+ Years",
        "chinese_required": "No",
        "qualification": "Bachelor Degree",
        "contract_type": "Full Time",
        "job_functions": ["Education", "Teaching", "Art"],
        "description": "International school in Qingdao seeking an experienced Art Teacher for IB Primary Years Programme. Must have experience with international curriculum.",
        "requirements": "Bachelor's degree in Art/Fine Arts, teaching qualification, experience with IB curriculum",
        "benefits": "Housing assistance, annual flight allowance, medical coverage",
        "is_active": True,
        "is_new": False,
    },
    {
        "title": "IB MYP Mathematics Teacher",
        "company": "China Global Connections",
        "location": "Ningbo",
        "location_chinese": "宁波",
        "salary": "28000 - 32000",
        "experience": "3+ Years",
        "chinese_required": "Preferred",
        "qualification": "Bachelor Degree",
        "contract_type": "Full Time",
        "job_functions": ["Education", "Mathematics", "Teaching"],
        "description": "Seeking a qualified Mathematics teacher for MYP program. Candidates with Chinese language skills preferred but not essential.",
        "requirements": "Mathematics degree, teaching qualification, IB MYP experience preferred",
        "benefits": "Competitive salary, professional development, relocation support",
        "is_active": True,
        "is_new": False,
    },
    {
        "title": "IBDP Coordinator",
        "company": "China Global Connections",
        "location": "Ningbo",
        "location_chinese": "宁波",
        "salary": "32000 - 38000",
        "experience": "5+ Years",
        "chinese_required": "No",
        "qualification": "Master's Degree Preferred",
        "contract_type": "Full Time",
        "job_functions": ["Education", "Management", "Teaching"],
        "description": "Leading international school seeks experienced IBDP Coordinator to oversee diploma programme implementation and student guidance.",
        "requirements": "Master's degree, 5+ years educational experience, IBDP coordinator certification",
        "benefits": "Leadership package, housing allowance, annual leave, professional development budget",
        "is_active": True,
        "is_new": False,
    },
    {
        "title": "High School English Teacher",
        "company": "Shanghai American School",
        "location": "Shanghai",
        "location_chinese": "上海",
        "salary": "25000 - 35000",
        "experience": "2+ Years",
        "chinese_required": "No",
        "qualification": "Bachelor's Degree Required",
        "contract_type": "Full Time",
        "job_functions": ["Education", "English", "Literature"],
        "description": "Join our vibrant English department teaching high school students. We offer excellent support for professional growth and development.",
        "requirements": "English/Literature degree, teaching qualification, experience with international curricula preferred",
        "benefits": "Housing allowance, medical insurance, annual flights, professional development budget",
        "is_active": True,
        "is_new": True,
    },
    {
        "title": "Primary English Teacher",
        "company": "Concordia International School",
        "location": "Shanghai",
        "location_chinese": "上海",
        "salary": "25000 - 33000",
        "experience": "1+ Years",
        "chinese_required": "No",
        "qualification": "Bachelor's Degree Required",
        "contract_type": "Full Time",
        "job_functions": ["Education", "English", "Primary"],
        "description": "Nurture young learners' love for English language and literature in our caring primary school environment.",
        "requirements": "Elementary education degree, ESL certification preferred, experience with young learners",
        "benefits": "Professional development, housing assistance, medical coverage, supportive community",
        "is_active": True,
        "is_new": True,
    },
    {
        "title": "Physical Education Teacher",
        "company": "Guangzhou International Academy",
        "location": "Guangzhou",
        "location_chinese": "广州",
        "salary": "24000 - 29000",
        "experience": "2+ Years",
        "chinese_required": "No",
        "qualification": "Bachelor Degree",
        "contract_type": "Full Time",
        "job_functions": ["Education", "Physical Education", "Teaching"],
        "description": "Dynamic PE teacher needed for primary and secondary students. Excellent sports facilities and enthusiastic student body.",
        "requirements": "Sports Science or Physical Education degree, teaching qualification, sports coaching experience preferred",
        "benefits": "Sports facilities access, health insurance, housing assistance, professional development",
        "is_active": True,
        "is_new": False,
    },
]


def seed_jobs(settings: Optional[Settings] = None, client: Optional[SupabaseClient] = None) -> int:
    """
    Insert every sample job, one request per job.

    Args:
        settings: Settings to build the client from (loaded from the environment if omitted)
        client: Client to use instead of building one; it is closed when seeding ends

    Returns:
        Number of jobs inserted
    """
    if settings is None:
        settings = get_settings()
    if client is None:
        client = SupabaseClient.from_settings(settings)

    logger.info("Seeding job data...")
    inserted = 0

    try:
        for job in SAMPLE_JOBS:
            job_crud.create(client, JobPostingCreate(**job), table=settings.JOBS_TABLE)
            inserted += 1
            logger.info(f"Added job: {job['title']} at {job['company']}")

        logger.info(f"Job seeding completed successfully! ({inserted} jobs)")
        return inserted

    except StaffAdminError as e:
        logger.error(f"Error seeding jobs after {inserted} inserts: {e}")
        raise
    finally:
        client.close()


def main() -> int:
    try:
        settings = get_settings()
    except StaffAdminError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    # Each inserted job is reported at INFO
    setup_logging("INFO", settings.JSON_LOGS)

    try:
        seed_jobs(settings)
    except StaffAdminError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
