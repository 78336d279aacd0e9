from django.contrib import admin

from .models import ExperimentalFeature


@admin.register(ExperimentalFeature)
class ExperimentalFeatureAdmin(admin.ModelAdmin):
    list_display = ("label", "slug", "enabled", "sort_order", "updated_at")
    list_editable = ("enabled",)
    search_fields = ("label", "slug")
    list_filter = ("enabled",)
    readonly_fields = ("updated_at",)
