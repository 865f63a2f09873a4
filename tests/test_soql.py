"""Tests for SOQL literal helpers."""

from __future__ import annotations

import pytest

from commerce_ext.soql import format_values, quote


def test_quote_plain() -> None:
    assert quote("MyHandler") == "'MyHandler'"


def test_quote_escapes_quotes_and_backslashes() -> None:
    assert quote("O'Brien\\x") == "'O\\'Brien\\\\x'"


def test_format_values_keeps_field_order() -> None:
    rendered = format_values({"DeveloperName": "My Gateway", "ExternalServiceProviderType": "Extension"})
    assert rendered == "DeveloperName='My Gateway' ExternalServiceProviderType='Extension'"


def test_format_values_does_not_backslash_escape() -> None:
    """Values keep their characters; a single quote switches to double quoting."""
    assert format_values({"MasterLabel": "O'Brien\\x"}) == 'MasterLabel="O\'Brien\\x"'


def test_format_values_rejects_both_quote_kinds() -> None:
    with pytest.raises(ValueError, match="MasterLabel"):
        format_values({"MasterLabel": "it's \"quoted\""})
