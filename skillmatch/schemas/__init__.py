# skillmatch/schemas/__init__.py
from skillmatch.schemas.jobs import JobPosting, MatchResult, JobListResponse, MatchResponse
from skillmatch.schemas.skills import SkillIn, SkillOut, SkillListResponse, SkillEditResponse

__all__ = [
    "JobPosting", "MatchResult", "JobListResponse", "MatchResponse",
    "SkillIn", "SkillOut", "SkillListResponse", "SkillEditResponse",
]
