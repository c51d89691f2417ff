from profile_service.core.validation import (
    Rule, validate_fields, PROFILE_RULES, EXPERIENCE_RULES
)
from profile_service.modules.profiles.schemas import ProfileCreate
from profile_service.modules.profiles.service import build_profile_fields, parse_skills


def test_no_violations_when_fields_present():
    assert validate_fields(PROFILE_RULES, {"status": "Developer", "skills": "python"}) == []


def test_violations_follow_rule_order():
    rules = [Rule("b", "B is required"), Rule("a", "A is required")]
    assert validate_fields(rules, {}) == [
        {"field": "b", "message": "B is required"},
        {"field": "a", "message": "A is required"},
    ]


def test_whitespace_only_counts_as_empty():
    errors = validate_fields(EXPERIENCE_RULES, {"title": "  ", "company": "Acme", "from": "2020-01-01"})
    assert errors == [{"field": "title", "message": "Title is required"}]


def test_non_string_values_are_not_empty():
    assert validate_fields([Rule("current", "required")], {"current": False}) == []


def test_parse_skills_trims_each_entry():
    assert parse_skills("node, react, css") == ["node", "react", "css"]
    assert parse_skills(" python ,, go ") == ["python", "go"]


def test_build_profile_fields_only_includes_supplied_keys():
    fields = build_profile_fields(ProfileCreate(status="Developer", skills="python", bio=""))
    assert fields == {"status": "Developer", "skills": ["python"]}


def test_build_profile_fields_groups_social_links():
    fields = build_profile_fields(
        ProfileCreate(status="Developer", skills="go", youtube="https://youtube.com/c/jane")
    )
    assert fields["social"] == {"youtube": "https://youtube.com/c/jane"}
