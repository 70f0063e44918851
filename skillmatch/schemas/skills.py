from typing import Optional, List
from pydantic import BaseModel, Field

class SkillIn(BaseModel):
    name: str = Field(..., max_length=100)
    category: Optional[str] = Field(None, max_length=50)

    model_config = {"str_strip_whitespace": True}

class SkillOut(BaseModel):
    id: int
    name: str
    category: str

    model_config = {"from_attributes": True}

class SkillListResponse(BaseModel):
    total: int = Field(..., ge=0)
    items: List[SkillOut]

class SkillEditResponse(BaseModel):
    changed: bool
    skill: Optional[SkillOut] = None
    skills: List[SkillOut]
