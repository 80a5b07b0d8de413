from django.contrib import admin

from .models import (
    LegacyPlayground,
    LegacyPlaygroundVersion,
    Playground,
    Tag,
)


# -----------------------
# Tag Admin
# -----------------------
@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "created_at")
    search_fields = ("name",)


# -----------------------
# Playground Admin
# -----------------------
@admin.register(Playground)
class PlaygroundAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "slug",
        "author",
        "is_public",
        "is_featured",
        "is_official",
        "versions_count",
        "updated_at",
    )
    list_filter = ("is_public", "is_featured", "is_official", "tags")
    search_fields = ("name", "slug", "author")
    filter_horizontal = ("tags",)
    readonly_fields = ("slug", "versions_count", "created_at", "updated_at")


# -----------------------
# Legacy Playground Admin
# -----------------------
class LegacyPlaygroundVersionInline(admin.TabularInline):
    model = LegacyPlaygroundVersion
    fields = ("version", "name", "author", "is_public", "created_at")
    readonly_fields = fields
    extra = 0
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(LegacyPlayground)
class LegacyPlaygroundAdmin(admin.ModelAdmin):
    list_display = ("id", "created_at")
    search_fields = ("id",)
    inlines = [LegacyPlaygroundVersionInline]
