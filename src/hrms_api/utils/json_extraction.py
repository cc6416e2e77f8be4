"""Helpers for pulling JSON out of free-form model replies."""

import json
import re
from typing import Any

from hrms_api.exceptions import ExtractionError

# First fenced block, optionally tagged ``json``; non-greedy so later blocks are ignored
FENCED_BLOCK_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")


def extract_json_from_response(text: str) -> str:
    """Return the JSON-bearing part of a model reply.

    Example:
        >>> extract_json_from_response('```json\\n[1, 2]\\n```')
        '[1, 2]'
        >>> extract_json_from_response('  [1, 2]  ')
        '[1, 2]'
    """
    match = FENCED_BLOCK_PATTERN.search(text)
    if match:
        return match.group(1).strip()
    return text.strip()


def parse_employee_array(text: str) -> list[Any]:
    """Parse a model reply into the raw list of extracted employees.

    Elements are returned unvalidated; each is checked when provisioned.

    Raises:
        ExtractionError: If the reply is not JSON or not a JSON array
    """
    cleaned = extract_json_from_response(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ExtractionError(f"AI response is not valid JSON: {e.msg}") from e

    if not isinstance(data, list):
        raise ExtractionError("AI response is not a JSON array")

    return data
