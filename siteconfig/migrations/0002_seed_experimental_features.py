from django.db import migrations

from siteconfig.utils import DEFAULT_FEATURES, seed_default_features


def seed_features(apps, schema_editor):
    seed_default_features(apps.get_model("siteconfig", "ExperimentalFeature"))


def unseed_features(apps, schema_editor):
    ExperimentalFeature = apps.get_model("siteconfig", "ExperimentalFeature")
    ExperimentalFeature.objects.filter(
        slug__in=[feature["slug"] for feature in DEFAULT_FEATURES]
    ).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("siteconfig", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_features, unseed_features),
    ]
