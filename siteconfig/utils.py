from django.utils import timezone

FULL_SITE_EDITING = "full-site-editing"
FULL_SITE_EDITING_DEMO = "full-site-editing-demo"

DEFAULT_FEATURES = [
    {
        "slug": FULL_SITE_EDITING,
        "label": "Full Site Editing",
        "description": "Enables the site editor for templates and template parts.",
        "sort_order": 10,
    },
    {
        "slug": FULL_SITE_EDITING_DEMO,
        "label": "Full Site Editing Demo Templates",
        "description": "Seeds the site editor with a demo Index template and Header part.",
        "sort_order": 20,
    },
]


def _feature_model(model):
    if model is not None:
        return model
    from siteconfig.models import ExperimentalFeature

    return ExperimentalFeature


def seed_default_features(model=None):
    """Create any missing default feature rows, switched off. Existing rows are untouched.

    ``model`` lets data migrations pass their historical model.
    """
    model = _feature_model(model)
    created = []
    for feature in DEFAULT_FEATURES:
        _, was_created = model.objects.get_or_create(
            slug=feature["slug"],
            defaults={
                "label": feature["label"],
                "description": feature["description"],
                "sort_order": feature["sort_order"],
                "enabled": False,
            },
        )
        if was_created:
            created.append(feature["slug"])
    return created


def is_feature_enabled(slug):
    """Return True when the experimental feature ``slug`` exists and is on.

    Unknown slugs are treated as disabled.
    """
    return _feature_model(None).objects.filter(slug=slug, enabled=True).exists()


def set_features_enabled(slugs, enabled=True):
    """Switch every feature in ``slugs`` on (or off). Returns the update count."""
    return _feature_model(None).objects.filter(slug__in=list(slugs)).update(
        enabled=enabled, updated_at=timezone.now()
    )
