import pytest
from django.core.exceptions import ValidationError

from playgrounds.models.playground import MAX_CONTENTS_SIZE
from playgrounds.services.validation_service import (
    parse_version,
    validate_contents,
    validate_legacy_fields,
    validate_slug,
)


def test_contents_at_maximum_size_is_accepted():
    validate_contents("a" * 16777214)


def test_contents_above_maximum_size_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        validate_contents("a" * (MAX_CONTENTS_SIZE + 1))

    assert "maximum size" in excinfo.value.messages[0]


def test_contents_size_counts_utf8_bytes():
    # each "é" is two bytes
    with pytest.raises(ValidationError):
        validate_contents("é" * (MAX_CONTENTS_SIZE // 2 + 1))


@pytest.mark.parametrize("contents", ["", None])
def test_empty_contents_is_rejected(contents):
    with pytest.raises(ValidationError) as excinfo:
        validate_contents(contents)

    assert excinfo.value.messages == ["Invalid params, 'contents' is empty."]


def test_slug_must_be_exactly_21_characters():
    validate_slug("a" * 21)

    for slug in ("", None, "a" * 20, "a" * 22):
        with pytest.raises(ValidationError):
            validate_slug(slug)


def test_legacy_fields_are_required():
    validate_legacy_fields("demo", "a", "x")

    with pytest.raises(ValidationError):
        validate_legacy_fields("", "a", "x")
    with pytest.raises(ValidationError):
        validate_legacy_fields("demo", None, "x")
    with pytest.raises(ValidationError):
        validate_legacy_fields("demo", "a", "")


def test_parse_version():
    assert parse_version("3") == 3
    assert parse_version(" 12 ") == 12
    assert parse_version(0) == 0

    with pytest.raises(ValidationError) as excinfo:
        parse_version("latest")
    assert excinfo.value.messages == ["Invalid version, latest is not a number."]
