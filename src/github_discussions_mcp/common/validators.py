"""Common validation utilities.

Tool arguments arrive from an untyped request. FastMCP already checks
presence and primitive types against the declared schema; the helpers here
add the rules the schema cannot express, chiefly that a present but empty
value still counts as missing.
"""

from typing import Any

from ..exceptions import ValidationError
from ..models import DEFAULT_PAGE, DEFAULT_PER_PAGE, ListOptions


def require_string(value: Any, name: str) -> str:
    """Validate a required string parameter.

    Args:
        value: Raw parameter value
        name: Parameter name, used in error messages

    Returns:
        The validated string

    Raises:
        ValidationError: If the value is absent, empty or not a string
    """
    if value is None:
        raise ValidationError(
            f"missing required parameter: {name}", field_errors={name: "missing"}
        )
    if not isinstance(value, str):
        raise ValidationError(
            f"parameter {name} is not of type string", field_errors={name: "type"}
        )
    if value == "":
        raise ValidationError(
            f"missing required parameter: {name}", field_errors={name: "missing"}
        )
    return value


def require_int(value: Any, name: str) -> int:
    """Validate a required positive integer parameter.

    Integral floats are accepted since JSON numbers may arrive as floats.
    """
    if value is None:
        raise ValidationError(
            f"missing required parameter: {name}", field_errors={name: "missing"}
        )
    if isinstance(value, bool):
        raise ValidationError(
            f"parameter {name} is not of type number", field_errors={name: "type"}
        )
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(
                f"parameter {name} is not an integer", field_errors={name: "type"}
            )
        value = int(value)
    if not isinstance(value, int):
        raise ValidationError(
            f"parameter {name} is not of type number", field_errors={name: "type"}
        )
    if value == 0:
        raise ValidationError(
            f"missing required parameter: {name}", field_errors={name: "missing"}
        )
    if value < 0:
        raise ValidationError(
            f"parameter {name} must be a positive integer", field_errors={name: "range"}
        )
    return value


def validate_owner(owner: str) -> str:
    """Validate a GitHub repository owner (user or organization login).

    Beyond presence and type, only a ``/`` is rejected; GitHub decides what a
    valid login is.

    Raises:
        ValidationError: If owner is missing or would break the request path
    """
    owner = require_string(owner, "owner")

    if '/' in owner:
        raise ValidationError(
            "Owner cannot contain '/'", field_errors={"owner": "format"}
        )

    return owner


def validate_repo_name(repo_name: str) -> str:
    """Validate a GitHub repository name.

    Names such as ``.github`` are accepted; only a ``/`` is rejected, since
    the name is a single path segment.

    Raises:
        ValidationError: If repository name is missing or contains '/'
    """
    repo_name = require_string(repo_name, "repo")

    if '/' in repo_name:
        raise ValidationError(
            "Repository name cannot contain '/'", field_errors={"repo": "format"}
        )

    return repo_name


def optional_pagination(page: int | None = None, per_page: int | None = None) -> ListOptions:
    """Build pagination options, falling back to page 1 with 30 results."""
    try:
        return ListOptions(
            page=DEFAULT_PAGE if page is None else page,
            per_page=DEFAULT_PER_PAGE if per_page is None else per_page,
        )
    except ValueError as e:
        raise ValidationError(
            f"invalid pagination parameters: {e}",
            field_errors={"pagination": "range"},
        ) from e


def optional_choice(value: Any, name: str, choices: tuple[str, ...]) -> str | None:
    """Validate an optional string restricted to ``choices``.

    An absent or empty value yields None.
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValidationError(
            f"parameter {name} is not of type string", field_errors={name: "type"}
        )
    if value not in choices:
        raise ValidationError(
            f"parameter {name} must be one of {', '.join(choices)}",
            field_errors={name: "enum"},
        )
    return value


def parse_pinned(value: Any) -> bool | None:
    """Turn the ``"true"``/``"false"`` pinned filter into a bool."""
    choice = optional_choice(value, "pinned", ("true", "false"))
    if choice is None:
        return None
    return choice == "true"
