import logging

import pytest

from playgrounds.services.tag_service import TagAssociationService


@pytest.mark.django_db
def test_malformed_entries_are_dropped(playground, tags, caplog):
    service = TagAssociationService()
    tags_data = [{"id": tags[0].id}, {"label": "no id"}, {"id": tags[1].id}]

    with caplog.at_level(logging.WARNING, logger="playgrounds"):
        attached = service.replace(playground, tags_data)

    assert len(attached) == 2
    assert set(playground.tags.values_list("id", flat=True)) == {tags[0].id, tags[1].id}
    assert "Invalid tag listed in request" in caplog.text


@pytest.mark.django_db
@pytest.mark.parametrize("entry", [None, "3", {"id": "3"}, {"id": True}, {"id": None}, 3])
def test_non_numeric_ids_are_not_tag_references(tags, entry):
    assert TagAssociationService().prepare_tags([entry]) == []


@pytest.mark.django_db
def test_unknown_tag_ids_are_dropped(tags):
    prepared = TagAssociationService().prepare_tags([{"id": tags[2].id}, {"id": 999999}])

    assert prepared == [tags[2]]


@pytest.mark.django_db
def test_replace_is_full_replacement(playground, tags):
    service = TagAssociationService()

    service.replace(playground, [{"id": tags[1].id}, {"id": tags[2].id}])

    assert set(playground.tags.all()) == {tags[1], tags[2]}


@pytest.mark.django_db
def test_replace_is_idempotent(playground, tags):
    service = TagAssociationService()
    tags_data = [{"id": tags[1].id}, {"id": tags[1].id}, {"id": tags[2].id}]

    service.replace(playground, tags_data)
    service.replace(playground, tags_data)

    assert playground.tags.count() == 2
    assert playground.tags.through.objects.filter(playground=playground).count() == 2


@pytest.mark.django_db
@pytest.mark.parametrize("tags_data", [{"id": 1}, "filters", 3])
def test_non_list_tags_are_skipped(tags, tags_data, caplog):
    with caplog.at_level(logging.WARNING, logger="playgrounds"):
        assert TagAssociationService().prepare_tags(tags_data) == []

    assert "Tags must be a list" in caplog.text
