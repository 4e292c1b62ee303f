"""Tests for configuration helpers."""

import pytest

from food_api.config import (
    Settings,
    normalize_api_version,
    parse_allowed_origins,
    parse_api_versions,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", "1.0"),
        ("3.0", "3.0"),
        ("v2", "2.0"),
        ("02.1", "2.1"),
        ("", None),
        ("latest", None),
        ("1.x", None),
    ],
)
def test_normalize_api_version(raw: str, expected: str | None) -> None:
    assert normalize_api_version(raw) == expected


def test_parse_api_versions_dedupes_and_skips_blanks() -> None:
    assert parse_api_versions("1, 1.0,,3,bogus") == ("1.0", "3.0")


def test_parse_api_versions_requires_one_version() -> None:
    with pytest.raises(ValueError):
        parse_api_versions(" , ")


def test_parse_allowed_origins() -> None:
    assert parse_allowed_origins(None) == []
    assert parse_allowed_origins(" * ") == ["*"]
    assert parse_allowed_origins("https://a.test, ,https://b.test") == [
        "https://a.test",
        "https://b.test",
    ]


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAX_PAGE_COUNT", "25")

    settings = Settings()

    assert settings.food_backend == "memory"
    assert settings.max_page_count == 25
    assert parse_api_versions(settings.api_versions) == ("1.0", "2.0", "3.0")
