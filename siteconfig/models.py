from django.db import models


class ExperimentalFeature(models.Model):
    """
    A named on/off switch for functionality that is still being trialled.

    Features gate whole editing surfaces: the site editor only renders when
    ``full-site-editing`` is enabled, and ``full-site-editing-demo`` seeds the
    editor with demo content. The slug doubles as the checkbox id on the
    experiments settings page.

    Attributes:
        slug: Stable identifier, e.g. 'full-site-editing'
        label: Human-readable name shown next to the checkbox
        description: Optional longer explanation for administrators
        enabled: Whether the feature is currently switched on
        sort_order: Display order on the experiments page
    """

    slug = models.SlugField(max_length=100, unique=True)
    label = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    enabled = models.BooleanField(default=False)
    sort_order = models.PositiveIntegerField(default=100)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["sort_order", "slug"]
        verbose_name = "Experimental Feature"
        verbose_name_plural = "Experimental Features"

    def __str__(self):
        state = "on" if self.enabled else "off"
        return f"{self.label} ({state})"
