"""Literal quoting for SOQL statements and record-create value strings."""

from __future__ import annotations

__all__ = ["quote", "format_values"]


def quote(value: str) -> str:
    """Return ``value`` as a single-quoted SOQL string literal.

    Backslash escaping is SOQL syntax only; do not use this for
    record-create values.
    """
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def format_values(fields: dict[str, str]) -> str:
    """Render ``fields`` as the ``Name='value' ...`` string taken by record create.

    The value parser only strips the surrounding quotes, so a value holding a
    single quote is wrapped in double quotes instead.

    Raises:
        ValueError: If a value holds both quote characters.

    Example:
        >>> format_values({"DeveloperName": "MyGateway", "Language": "en_US"})
        "DeveloperName='MyGateway' Language='en_US'"
    """
    return " ".join(f"{name}={_quote_value(name, value)}" for name, value in fields.items())


def _quote_value(name: str, value: str) -> str:
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    raise ValueError(f"Value for {name} cannot contain both single and double quotes: {value!r}")
