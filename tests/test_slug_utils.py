"""Tests for the default slug normalizer and builder."""

import pytest

from autoslug.core.config import settings
from autoslug.core.sources import FieldRef
from autoslug.utils.slug import build_slug, generate_slug


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello World!", "hello-world"),
        ("New Title", "new-title"),
        ("  --Already__sluggy--  ", "already-sluggy"),
        ("Crème Brûlée", "creme-brulee"),
        ("Test & Company, Inc.", "test-company-inc"),
        ("Жизнь", "zhizn"),
        ("2024 Recap", "2024-recap"),
        ("!!!", ""),
    ],
)
def test_generate_slug(text, expected):
    assert generate_slug(text) == expected


def test_generate_slug_custom_separator():
    assert generate_slug("Hello World", separator="_") == "hello_world"


def test_generate_slug_truncates_without_trailing_separator():
    assert generate_slug("hello wonderful world", max_length=6) == "hello"


def test_build_slug_joins_values():
    assert build_slug(["Jane", "Doe", 42]) == "jane-doe-42"


def test_build_slug_resolves_field_refs(changeset_factory):
    changeset = changeset_factory({"name": "Stored"}, name="Jane", surname="Doe")

    assert build_slug([FieldRef("name"), FieldRef("surname"), "Writer"], changeset) == "jane-doe-writer"


def test_build_slug_field_ref_without_changeset():
    with pytest.raises(TypeError):
        build_slug([FieldRef("name")])


def test_build_slug_respects_max_length(monkeypatch):
    monkeypatch.setattr(settings, "SLUG_MAX_LENGTH", 10)

    assert build_slug(["A fairly long title"]) == "a-fairly-l"
