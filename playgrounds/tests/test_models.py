import pytest

from playgrounds.models import LegacyPlayground, LegacyPlaygroundVersion, Playground
from playgrounds.utils.slugs import SLUG_ALPHABET, SLUG_LENGTH, generate_slug


def test_generate_slug_has_fixed_length_and_url_safe_alphabet():
    slug = generate_slug()

    assert len(slug) == SLUG_LENGTH == 21
    assert set(slug) <= set(SLUG_ALPHABET)


def test_generate_slug_is_random():
    assert len({generate_slug() for _ in range(50)}) == 50


@pytest.mark.django_db
def test_playground_defaults():
    playground = Playground.objects.create(contents="x")

    assert len(playground.slug) == SLUG_LENGTH
    assert playground.versions_count == 0
    assert playground.external_js == []
    assert playground.is_public is True
    assert playground.is_featured is False


@pytest.mark.django_db
def test_legacy_version_rows_are_immutable():
    legacy = LegacyPlayground.objects.create()
    item = LegacyPlaygroundVersion.objects.create(
        playground=legacy,
        version=0,
        name="demo",
        author="a",
        contents="x",
    )

    item.contents = "changed"
    with pytest.raises(ValueError):
        item.save()

    assert LegacyPlaygroundVersion.objects.get(pk=item.pk).contents == "x"
