from django.db import models
from django.utils.translation import gettext_lazy as _

from playgrounds.models.tag import Tag
from playgrounds.utils.slugs import SLUG_LENGTH, generate_slug

# One less than the 24-bit boundary of the storage column.
MAX_CONTENTS_SIZE = 16777214


class Playground(models.Model):
    """
    A named demo snippet. Updated in place; every update bumps ``versions_count``.
    """

    slug = models.CharField(
        max_length=SLUG_LENGTH,
        unique=True,
        default=generate_slug,
        editable=False,
    )
    name = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    contents = models.TextField()
    author = models.CharField(max_length=255, blank=True)
    pixi_version = models.CharField(max_length=1023, blank=True)
    is_public = models.BooleanField(default=True)
    is_featured = models.BooleanField(default=False)
    is_official = models.BooleanField(default=False)
    versions_count = models.PositiveIntegerField(default=0)
    external_js = models.JSONField(default=list, blank=True)
    tags = models.ManyToManyField(Tag, related_name="playgrounds", blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-updated_at",)
        verbose_name = _("Playground")
        verbose_name_plural = _("Playgrounds")

    def __str__(self):
        return f"{self.name or 'Untitled'} ({self.slug})"
