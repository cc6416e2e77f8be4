"""Tests for the extraction prompt."""

from datetime import date

from hrms_api.services.intake_prompts import build_extraction_prompt


def test_prompt_ends_with_request_text() -> None:
    prompt = build_extraction_prompt("Add Alice Brown, QA lead, alice@company.com", date(2026, 3, 14))

    assert prompt.endswith("Text to process:\nAdd Alice Brown, QA lead, alice@company.com")


def test_prompt_substitutes_today_for_missing_start_date() -> None:
    prompt = build_extraction_prompt("anything", date(2026, 3, 14))

    assert "use today's date: 2026-03-14" in prompt


def test_prompt_lists_required_fields() -> None:
    prompt = build_extraction_prompt("anything", date(2026, 3, 14))

    for field in ("first_name", "last_name", "email", "job_title", "department", "start_date"):
        assert f"- {field}" in prompt
    assert "Return ONLY a valid JSON array" in prompt


def test_example_output_is_literal_json() -> None:
    """Template braces in the worked example survive formatting."""
    prompt = build_extraction_prompt("anything", date(2026, 3, 14))

    assert '  {\n    "first_name": "John"' in prompt
    assert "{{" not in prompt


def test_braces_in_request_text_are_kept() -> None:
    prompt = build_extraction_prompt("Team {Platform} hire: {name}", date(2026, 3, 14))

    assert prompt.endswith("Team {Platform} hire: {name}")
