"""Pre-flight validation of tool arguments."""

from typing import Any, Iterable, List, Mapping


class ValidationError(Exception):
    """Raised when tool arguments fail validation."""

    pass


def missing_fields(arguments: Mapping[str, Any], required: Iterable[str]) -> List[str]:
    """
    List required fields that are absent or empty.

    Emptiness is truthiness: None, "", 0 and empty lists all count as missing.

    Args:
        arguments: Argument bag supplied by the caller
        required: Field names that must be present

    Returns:
        Missing field names, in the order they were required
    """
    return [name for name in required if not arguments.get(name)]


def require_fields(tool_name: str, arguments: Mapping[str, Any], required: Iterable[str]) -> None:
    """
    Ensure every required field is present before a request is made.

    Raises:
        ValidationError naming each missing field
    """
    missing = missing_fields(arguments, required)
    if missing:
        raise ValidationError(
            f"Missing required field(s) for {tool_name}: {', '.join(missing)}"
        )
