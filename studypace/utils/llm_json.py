"""
JSON extraction from LLM responses.

Models often wrap JSON in markdown code fences or add chatter around it.
"""

import json
import re
from typing import Any

CODE_BLOCK_PATTERN = re.compile(r'```(?:json)?\s*([\s\S]*?)```')

_CLOSERS = {'{': '}', '[': ']'}


def _balanced_prefix(text: str) -> str | None:
    """Leading balanced {...} or [...] span, ignoring brackets inside strings."""
    opener = text[0]
    closer = _CLOSERS[opener]
    depth = 0
    in_string = False
    escaped = False
    for i, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return text[:i + 1]
    return None


def extract_json_from_response(text: str) -> Any:
    """
    Extract a JSON object or array from an LLM response.

    Raises:
        ValueError: If no JSON can be parsed
    """
    if not text:
        raise ValueError("Empty response")

    for match in CODE_BLOCK_PATTERN.findall(text):
        try:
            return json.loads(match.strip())
        except json.JSONDecodeError:
            continue

    text = text.strip()
    starts = [pos for pos in (text.find('{'), text.find('[')) if pos >= 0]
    if starts:
        candidate = _balanced_prefix(text[min(starts):])
        if candidate:
            try:
                return json.loads(candidate)
            except json.JSONDecodeError:
                pass

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Could not extract JSON from response: {e}\n\nResponse:\n{text[:500]}...")
