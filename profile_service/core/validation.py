"""
Declarative "must be non-empty" checks run before any store access.
"""

from typing import Any, Dict, List, Mapping, NamedTuple, Sequence


class Rule(NamedTuple):
    field: str
    message: str


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_fields(rules: Sequence[Rule], data: Mapping[str, Any]) -> List[Dict[str, str]]:
    """Return ``{field, message}`` violations in rule-declaration order."""
    return [
        {"field": rule.field, "message": rule.message}
        for rule in rules
        if is_empty(data.get(rule.field))
    ]


PROFILE_RULES = (
    Rule("status", "Status is required"),
    Rule("skills", "Skills are required"),
)

EXPERIENCE_RULES = (
    Rule("title", "Title is required"),
    Rule("company", "Company is required"),
    Rule("from", "From date is required"),
)

EDUCATION_RULES = (
    Rule("school", "School is required"),
    Rule("degree", "Degree is required"),
    Rule("fieldofstudy", "Field of study is required"),
)
