# skillmatch/utils/text_normalize.py
import re
from typing import Optional

from skillmatch.constants import CATEGORY_KEYWORDS, DEFAULT_CATEGORY, EMPLOYMENT_TYPES

_SPACE_RE = re.compile(r"\s+")

def clean_skill_name(s: Optional[str]) -> str:
    """Trims and collapses inner whitespace; keeps the user's casing."""
    return _SPACE_RE.sub(" ", s or "").strip()

def skill_key(s: Optional[str]) -> str:
    """Comparison key for skill names: 'Java', ' java ' and 'JAVA' share one key."""
    return clean_skill_name(s).lower()

def infer_category(name: str) -> str:
    key = skill_key(name)
    for category, needles in CATEGORY_KEYWORDS.items():
        if any(n in key for n in needles):
            return category
    return DEFAULT_CATEGORY

def norm_employment_type(raw: Optional[str]) -> Optional[str]:
    """Normalize employment type string; unknown values come back trimmed as-is."""
    if not raw:
        return None
    s = raw.strip().lower()
    s = re.split(r"[·|,/]", s)[0].strip()  # first token
    for k, v in EMPLOYMENT_TYPES.items():
        if k in s:
            return v
    return raw.strip()
