from pydantic import BaseModel, Field
from typing import List, Optional


class JobPostingCreate(BaseModel):
    """Schema for a job posting inserted into the jobs table"""
    title: str = Field(..., min_length=1, max_length=200)
    company: str
    location: str
    location_chinese: Optional[str] = None
    salary: Optional[str] = None
    experience: Optional[str] = None
    chinese_required: Optional[str] = None
    qualification: Optional[str] = None
    contract_type: Optional[str] = None
    job_functions: List[str] = []
    description: str
    requirements: Optional[str] = None
    benefits: Optional[str] = None
    is_active: bool = True
    is_new: bool = False
