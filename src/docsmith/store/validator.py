"""Template structure validation.

Checks run before a template is accepted into the store. Validation is
permissive about section kinds: an unrecognized ``type`` passes and is later
skipped by the renderer, so templates written for newer versions still load.

Violations are reported as path-prefixed strings (``sections[2].level ...``)
so a failing file can be fixed without guessing.
"""

from typing import Any

HEADING_LEVELS = range(1, 7)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_section(section: Any, path: str, errors: list[str]) -> None:
    if not isinstance(section, dict):
        errors.append(f"{path} must be an object")
        return

    kind = section.get("type")
    if not isinstance(kind, str) or not kind:
        errors.append(f"{path}.type must be a non-empty string")
        return

    if kind == "heading":
        level = section.get("level")
        if level is not None and (not _is_int(level) or level not in HEADING_LEVELS):
            errors.append(f"{path}.level must be an integer between 1 and 6 (got {level!r})")
    elif kind in {"paragraph", "quote"}:
        text = section.get("text")
        if text is not None and not isinstance(text, str):
            errors.append(f"{path}.text must be a string")
    elif kind == "list":
        items = section.get("items")
        if items is not None and not isinstance(items, list):
            errors.append(f"{path}.items must be an array")
        ordered = section.get("ordered")
        if ordered is not None and not isinstance(ordered, bool):
            errors.append(f"{path}.ordered must be a boolean")
    elif kind == "table":
        headers = section.get("headers")
        if headers is not None and not isinstance(headers, list):
            errors.append(f"{path}.headers must be an array")
        rows = section.get("rows")
        if rows is not None:
            if not isinstance(rows, list):
                errors.append(f"{path}.rows must be an array")
            else:
                for idx, row in enumerate(rows):
                    if not isinstance(row, list):
                        errors.append(f"{path}.rows[{idx}] must be an array")
    elif kind == "code":
        code = section.get("code")
        if code is not None and not isinstance(code, str):
            errors.append(f"{path}.code must be a string")


def validate_template(candidate: Any) -> list[str]:
    """Check a template mapping against the structural rules.

    Args:
        candidate: Parsed JSON value claimed to be a template

    Returns:
        List of violations; empty if the template is valid
    """
    if not isinstance(candidate, dict):
        return ["template must be an object"]

    errors: list[str] = []

    name = candidate.get("name")
    if not isinstance(name, str) or not name:
        errors.append("name must be a non-empty string")

    title = candidate.get("title")
    if title is not None and not isinstance(title, str):
        errors.append("title must be a string")

    sections = candidate.get("sections")
    if not isinstance(sections, list):
        errors.append("sections must be an array")
        return errors

    for idx, section in enumerate(sections):
        _validate_section(section, f"sections[{idx}]", errors)

    return errors


def is_valid_template(candidate: Any) -> bool:
    """Return True if ``candidate`` passes every validation rule."""
    return not validate_template(candidate)
