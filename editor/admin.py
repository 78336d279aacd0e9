from django.contrib import admin
from reversion.admin import VersionAdmin

from .models import Template, TemplatePart


@admin.register(Template)
class TemplateAdmin(VersionAdmin):
    list_display = ("name", "slug", "status", "updated_at")
    search_fields = ("name", "slug")
    list_filter = ("status",)
    prepopulated_fields = {"slug": ("name",)}


@admin.register(TemplatePart)
class TemplatePartAdmin(VersionAdmin):
    list_display = ("name", "theme", "slug", "status", "updated_at")
    search_fields = ("name", "slug", "theme")
    list_filter = ("status", "theme")
    prepopulated_fields = {"slug": ("name",)}
