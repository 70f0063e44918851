from typing import Optional, List, Literal
from pydantic import BaseModel, Field

# Normalized employment types the catalog uses
EmploymentType = Literal["full-time", "part-time", "contract", "internship", "temporary"]

class JobPosting(BaseModel):
    """Read-only catalog entry handed to the matcher."""
    id: int
    title: str
    company: str
    location: str = ""
    salary_range: Optional[str] = None
    job_type: str = "full-time"                      # normalized when recognized, raw otherwise
    description: str = ""
    required_skills: List[str] = Field(default_factory=list)   # ordered

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }

class MatchResult(BaseModel):
    """A posting paired with the required skills the user has. Derived, never stored."""
    posting: JobPosting
    matched_skills: List[str]
    match_percentage: int = Field(..., ge=0, le=100)

    model_config = {"frozen": True}

    @property
    def match_count(self) -> int:
        return len(self.matched_skills)

class JobListResponse(BaseModel):
    total: int = Field(..., ge=0)
    items: List[JobPosting]

class MatchResponse(BaseModel):
    status: Literal["ok", "error"] = "ok"
    message: Optional[str] = None                    # set when inputs could not be loaded
    skills: List[str] = Field(default_factory=list)
    basis: Optional[int] = None                      # None -> each posting's own skill count
    total: int = Field(0, ge=0)
    items: List[MatchResult] = Field(default_factory=list)
