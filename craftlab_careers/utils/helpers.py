"""Helper utilities for the Craftlab Careers matching core."""

from typing import Iterable, List

from craftlab_careers.schemas.profile import SKILL_CATEGORIES, SkillEntry, SkillItem, Skills


def extract_skill_names(items: Iterable[SkillItem]) -> List[str]:
    """Skill names from a category list; entries may be plain strings or SkillEntry. Kept as entered, blanks included."""
    return [item.name if isinstance(item, SkillEntry) else item for item in items or []]


def all_skill_names(skills: Skills) -> List[str]:
    """Every skill name across all categories, category order preserved."""
    names: List[str] = []
    for category in SKILL_CATEGORIES:
        names.extend(extract_skill_names(getattr(skills, category)))
    return names


def contains_ignore_case(names: Iterable[str], fragment: str) -> bool:
    """True if any name contains fragment, case-insensitively."""
    needle = fragment.lower()
    return any(needle in n.lower() for n in names)
