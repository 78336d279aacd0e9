from django.db import migrations, models


def _entity_fields():
    return [
        (
            "id",
            models.BigAutoField(
                auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
            ),
        ),
        ("name", models.CharField(max_length=200)),
        ("slug", models.SlugField(max_length=200)),
        ("content", models.JSONField(blank=True, default=list)),
        (
            "status",
            models.CharField(
                choices=[("publish", "Published"), ("trash", "Trash")],
                default="publish",
                max_length=20,
            ),
        ),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Template",
            fields=_entity_fields(),
            options={
                "verbose_name": "Template",
                "verbose_name_plural": "Templates",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="TemplatePart",
            fields=_entity_fields() + [("theme", models.SlugField(max_length=100))],
            options={
                "verbose_name": "Template Part",
                "verbose_name_plural": "Template Parts",
                "ordering": ["theme", "name"],
            },
        ),
        migrations.AddConstraint(
            model_name="template",
            constraint=models.UniqueConstraint(
                condition=models.Q(("status", "publish")),
                fields=("slug",),
                name="unique_published_template_slug",
            ),
        ),
        migrations.AddConstraint(
            model_name="templatepart",
            constraint=models.UniqueConstraint(
                condition=models.Q(("status", "publish")),
                fields=("theme", "slug"),
                name="unique_published_template_part",
            ),
        ),
    ]
