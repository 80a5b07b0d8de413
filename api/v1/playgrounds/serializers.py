import logging

from rest_framework import serializers  # type: ignore

from playgrounds.models import Playground, Tag
from playgrounds.services.payloads import PlaygroundPayload
from playgrounds.services.validation_service import validate_contents

logger = logging.getLogger(__name__)


# -----------------------
# Tag Serializer
# -----------------------
class TagSerializer(serializers.ModelSerializer):
    class Meta:
        model = Tag
        fields = ["id", "name"]


# -----------------------
# Playground Serializers (responses)
# -----------------------
class PlaygroundSummarySerializer(serializers.ModelSerializer):
    pixiVersion = serializers.CharField(source="pixi_version", read_only=True)
    isPublic = serializers.BooleanField(source="is_public", read_only=True)
    isFeatured = serializers.BooleanField(source="is_featured", read_only=True)
    isOfficial = serializers.BooleanField(source="is_official", read_only=True)
    versionsCount = serializers.IntegerField(source="versions_count", read_only=True)
    externalJs = serializers.JSONField(source="external_js", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    tags = TagSerializer(many=True, read_only=True)

    class Meta:
        model = Playground
        fields = [
            "id",
            "slug",
            "name",
            "description",
            "author",
            "pixiVersion",
            "isPublic",
            "isFeatured",
            "isOfficial",
            "versionsCount",
            "externalJs",
            "tags",
            "createdAt",
            "updatedAt",
        ]


class PlaygroundSerializer(PlaygroundSummarySerializer):
    class Meta(PlaygroundSummarySerializer.Meta):
        fields = PlaygroundSummarySerializer.Meta.fields + ["contents"]


# -----------------------
# Playground Serializers (requests)
# -----------------------
class PlaygroundWriteSerializer(serializers.Serializer):
    """
    Request body of a create or update. Fields left out of the body are left
    out of the payload, so an update keeps their stored values.
    """

    name = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    description = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    contents = serializers.CharField(
        default="", allow_blank=True, allow_null=True, trim_whitespace=False
    )
    author = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    pixiVersion = serializers.CharField(
        source="pixi_version",
        max_length=1023,
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
    )
    isPublic = serializers.BooleanField(source="is_public", required=False)
    tags = serializers.JSONField(required=False, allow_null=True)
    externalJs = serializers.ListField(
        source="external_js",
        child=serializers.CharField(max_length=2048),
        required=False,
        allow_null=True,
    )

    def validate_contents(self, value):
        validate_contents(value)
        return value

    def validate_tags(self, value):
        if value is not None and not isinstance(value, list):
            logger.warning("Ignoring 'tags', expected a list but got: %s", value)
            return None
        return value

    def to_payload(self) -> PlaygroundPayload:
        data = self.validated_data
        fields = {}
        # null clears a text field
        for name in ("name", "description", "author", "pixi_version"):
            if name in data:
                fields[name] = data[name] or ""
        if "is_public" in data:
            fields["is_public"] = data["is_public"]
        if "external_js" in data:
            fields["external_js"] = data["external_js"] or []
        return PlaygroundPayload(contents=data["contents"], tags=data.get("tags"), **fields)


class PlaygroundUpdateSerializer(PlaygroundWriteSerializer):
    id = serializers.IntegerField(required=False, allow_null=True)
