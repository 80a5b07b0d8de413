from django.db import models

from playgrounds.utils.slugs import LEGACY_ID_LENGTH, generate_legacy_id


class LegacyPlayground(models.Model):
    id = models.CharField(
        primary_key=True,
        max_length=LEGACY_ID_LENGTH,
        default=generate_legacy_id,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.id


class LegacyPlaygroundVersion(models.Model):
    """
    Immutable snapshot of a legacy playground at one version number.
    """

    playground = models.ForeignKey(
        LegacyPlayground,
        on_delete=models.CASCADE,
        related_name="versions",
    )
    version = models.PositiveIntegerField()
    name = models.CharField(max_length=255)
    author = models.CharField(max_length=255)
    is_public = models.BooleanField(default=True)
    is_featured = models.BooleanField(default=False)
    is_official = models.BooleanField(default=False)
    contents = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("playground", "version")
        constraints = [
            models.UniqueConstraint(
                fields=["playground", "version"],
                name="unique_legacy_playground_version",
            ),
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError(
                f"Playground {self.playground_id}@{self.version} is a snapshot and cannot be changed."
            )
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.playground_id}@{self.version}"
