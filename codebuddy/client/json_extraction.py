# codebuddy/client/json_extraction.py
import json


def _find_matching_brace(text: str, start: int) -> int | None:
    """Returns the index of the '}' closing the '{' at `start`, skipping braces inside JSON strings."""
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return None


def extract_json_object(text: str | None) -> dict | None:
    """
    Finds the first balanced {...} span in free-form model output that parses
    as a JSON object. Spans that fail to parse are skipped and the scan resumes
    at the next '{'. Returns None if nothing usable is found; never raises.
    """
    if not text:
        return None

    start = text.find("{")
    while start != -1:
        end = _find_matching_brace(text, start)
        if end is not None:
            try:
                parsed = json.loads(text[start:end + 1])
            except json.JSONDecodeError:
                parsed = None
            if isinstance(parsed, dict):
                return parsed
        start = text.find("{", start + 1)
    return None
