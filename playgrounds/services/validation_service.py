'''
Request validation for playground writes. Runs before any persistence call.
'''


from django.core.exceptions import ValidationError

from playgrounds.models.playground import MAX_CONTENTS_SIZE
from playgrounds.utils.slugs import SLUG_LENGTH

# Messages raised with this code are complete sentences and shown to clients as-is.
INVALID_INPUT = "invalid_input"


def contents_size(contents: str) -> int:
    return len(contents.encode("utf-8"))


def validate_contents(contents):
    """Contents must be present and fit the storage column."""
    if not contents:
        raise ValidationError("Invalid params, 'contents' is empty.", code=INVALID_INPUT)
    if contents_size(contents) > MAX_CONTENTS_SIZE:
        raise ValidationError(
            f"Invalid params, 'contents' exceeds the maximum size of {MAX_CONTENTS_SIZE} bytes.",
            code=INVALID_INPUT,
        )


def validate_slug(slug):
    if not slug or len(slug) != SLUG_LENGTH:
        raise ValidationError(
            f"Invalid params, 'slug' must be exactly {SLUG_LENGTH} characters.",
            code=INVALID_INPUT,
        )


def validate_legacy_fields(name, author, contents):
    if not name or not author or not contents:
        raise ValidationError(
            "Invalid params, either name, author, or contents is empty.",
            code=INVALID_INPUT,
        )
    validate_contents(contents)


def parse_version(value) -> int:
    try:
        return int(str(value).strip(), 10)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid version, {value} is not a number.", code=INVALID_INPUT)
