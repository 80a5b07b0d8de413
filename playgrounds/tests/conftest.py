import pytest
from rest_framework.test import APIClient

from playgrounds.models import Playground, Tag
from playgrounds.services.payloads import PlaygroundPayload


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def tags(db):
    return [
        Tag.objects.create(name="filters"),
        Tag.objects.create(name="sprites"),
        Tag.objects.create(name="text"),
    ]


@pytest.fixture
def playground(db, tags):
    playground = Playground.objects.create(
        name="Bunny",
        description="A rotating bunny",
        contents="const app = new PIXI.Application();",
        author="pixi",
        pixi_version="v8.0.0",
        is_public=True,
        external_js=["https://cdn.example.com/gsap.js"],
    )
    playground.tags.set(tags[:1])
    return playground


@pytest.fixture
def make_payload():
    def _make(**overrides):
        fields = {
            "name": "demo",
            "contents": "console.log(1)",
            "author": "a",
            "is_public": True,
        }
        fields.update(overrides)
        return PlaygroundPayload(**fields)

    return _make
