from rest_framework import serializers  # type: ignore

from playgrounds.models import LegacyPlaygroundVersion
from playgrounds.services.validation_service import validate_legacy_fields


class LegacyPlaygroundItemSerializer(serializers.ModelSerializer):
    id = serializers.CharField(source="playground_id", read_only=True)
    isPublic = serializers.BooleanField(source="is_public", read_only=True)
    isFeatured = serializers.BooleanField(source="is_featured", read_only=True)
    isOfficial = serializers.BooleanField(source="is_official", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = LegacyPlaygroundVersion
        fields = ["id", "version", "name", "author", "isPublic", "isFeatured", "isOfficial", "createdAt"]


def legacy_response(item: LegacyPlaygroundVersion) -> dict:
    return {
        "item": LegacyPlaygroundItemSerializer(item).data,
        "contents": item.contents,
    }


class LegacyPlaygroundWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, default="", allow_blank=True, allow_null=True, trim_whitespace=False)
    author = serializers.CharField(max_length=255, default="", allow_blank=True, allow_null=True, trim_whitespace=False)
    contents = serializers.CharField(default="", allow_blank=True, allow_null=True, trim_whitespace=False)
    isPublic = serializers.BooleanField(source="is_public", default=True)

    def validate(self, attrs):
        validate_legacy_fields(attrs.get("name"), attrs.get("author"), attrs.get("contents"))
        return attrs
