"""Helpers shared by the pydantic boundary models."""

import tomllib

from pydantic import ValidationError

from blazinit.core.errors import MalformedError


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a single readable line.

    Example:
        "dependencies: Input should be a valid list; detect: Input should be a valid string"
    """
    parts = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"])
        if location:
            parts.append(f"{location}: {err['msg']}")
        else:
            parts.append(err["msg"])
    return "; ".join(parts)


def parse_toml(content: bytes, source: str) -> dict[str, object]:
    """Decode and parse TOML bytes, raising MalformedError on any failure.

    Args:
        content: Raw file bytes
        source: Human-readable origin used in error messages (usually a path)
    """
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedError(f"Invalid UTF-8 in {source}: {e}") from e

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise MalformedError(f"Failed to parse TOML in {source}: {e}") from e
