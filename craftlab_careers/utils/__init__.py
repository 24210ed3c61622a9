"""Utility exports."""

from .helpers import all_skill_names, contains_ignore_case, extract_skill_names
from .logger import get_logger

__all__ = [
    "get_logger",
    "extract_skill_names",
    "all_skill_names",
    "contains_ignore_case",
]
