from django.db import migrations, models
import django.db.models.deletion

import playgrounds.utils.slugs


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Tag",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=50, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Playground",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.CharField(default=playgrounds.utils.slugs.generate_slug, editable=False, max_length=21, unique=True)),
                ("name", models.CharField(blank=True, max_length=255)),
                ("description", models.TextField(blank=True)),
                ("contents", models.TextField()),
                ("author", models.CharField(blank=True, max_length=255)),
                ("pixi_version", models.CharField(blank=True, max_length=1023)),
                ("is_public", models.BooleanField(default=True)),
                ("is_featured", models.BooleanField(default=False)),
                ("is_official", models.BooleanField(default=False)),
                ("versions_count", models.PositiveIntegerField(default=0)),
                ("external_js", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("tags", models.ManyToManyField(blank=True, related_name="playgrounds", to="playgrounds.tag")),
            ],
            options={
                "verbose_name": "Playground",
                "verbose_name_plural": "Playgrounds",
                "ordering": ("-updated_at",),
            },
        ),
        migrations.CreateModel(
            name="LegacyPlayground",
            fields=[
                ("id", models.CharField(default=playgrounds.utils.slugs.generate_legacy_id, editable=False, max_length=12, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
        ),
        migrations.CreateModel(
            name="LegacyPlaygroundVersion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("version", models.PositiveIntegerField()),
                ("name", models.CharField(max_length=255)),
                ("author", models.CharField(max_length=255)),
                ("is_public", models.BooleanField(default=True)),
                ("is_featured", models.BooleanField(default=False)),
                ("is_official", models.BooleanField(default=False)),
                ("contents", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("playground", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="versions", to="playgrounds.legacyplayground")),
            ],
            options={
                "ordering": ("playground", "version"),
                "constraints": [
                    models.UniqueConstraint(fields=("playground", "version"), name="unique_legacy_playground_version"),
                ],
            },
        ),
    ]
