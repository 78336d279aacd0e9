import json
import logging

import reversion
from django.conf import settings
from django.contrib.admin.views.decorators import staff_member_required
from django.db import transaction
from django.http import Http404, JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from siteconfig.utils import (
    FULL_SITE_EDITING,
    FULL_SITE_EDITING_DEMO,
    is_feature_enabled,
)
from siteconfig.views import experiments_page
from utils.url_helpers import admin_url

from .decorators import staff_required_json
from .forms import RECORD_FORMS, NewTemplateForm
from .models import ENTITY_MODELS, PARAGRAPH_BLOCK, TEMPLATE_PART_BLOCK, Template, TemplatePart

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_SLUG = "index"

# Admin list pages and the entity type they show
ENTITY_LIST_PAGES = {
    "templates": "template",
    "template-parts": "template_part",
}


def demo_records(theme):
    """
    Auto-draft records seeded when the demo experiment is on.

    They live only in the editor until saved, so a fresh editor shows them
    as dirty.
    """
    header = {
        "kind": "template_part",
        "name": "Header",
        "slug": "header",
        "theme": theme,
        "content": [{"type": PARAGRAPH_BLOCK, "content": "Site title"}],
    }
    index = {
        "kind": "template",
        "name": "Index",
        "slug": DEFAULT_TEMPLATE_SLUG,
        "content": [
            {"type": TEMPLATE_PART_BLOCK, "slug": "header", "theme": theme},
            {"type": PARAGRAPH_BLOCK, "content": "Latest posts appear here."},
        ],
    }
    return [index], [header]


def build_editor_payload(template_slug=None):
    """
    Everything the site editor needs to boot: published records, unsaved
    demo auto-drafts, and the slug of the template to open.
    """
    published_templates = list(Template.objects.published())
    templates = [t.to_record() for t in published_templates]
    parts = [p.to_record() for p in TemplatePart.objects.published()]
    for record in templates + parts:
        record["autoDraft"] = False

    saved_parts = {(p["theme"], p["slug"]) for p in parts}
    for template in published_templates:
        for theme, slug in template.template_part_refs():
            if (theme, slug) not in saved_parts:
                logger.warning(
                    "Template '%s' embeds missing template part %s/%s",
                    template.slug,
                    theme,
                    slug,
                )

    has_index = any(t["slug"] == DEFAULT_TEMPLATE_SLUG for t in templates)
    if is_feature_enabled(FULL_SITE_EDITING_DEMO) and not has_index:
        demo_templates, demo_parts = demo_records(settings.SITE_EDITOR_DEMO_THEME)
        for record in demo_templates:
            record["autoDraft"] = True
            templates.append(record)
        for record in demo_parts:
            if (record["theme"], record["slug"]) not in saved_parts:
                record["autoDraft"] = True
                parts.append(record)

    slugs = [t["slug"] for t in templates]
    if template_slug not in slugs:
        if template_slug:
            logger.info("Unknown template %r requested, opening default", template_slug)
        template_slug = DEFAULT_TEMPLATE_SLUG if DEFAULT_TEMPLATE_SLUG in slugs else None
        if template_slug is None and slugs:
            template_slug = slugs[0]

    return {
        "templates": templates,
        "templateParts": parts,
        "currentTemplate": template_slug,
        "urls": {
            "save": "/editor/api/entities/save/",
            "createTemplate": "/editor/api/templates/",
            "editor": admin_url("admin.php", {"page": "site-editor"}),
        },
    }


def site_editor(request):
    if not is_feature_enabled(FULL_SITE_EDITING):
        return render(request, "editor/site_editor_disabled.html", status=200)
    payload = build_editor_payload(request.GET.get("template"))
    return render(request, "editor/site_editor.html", {"editor_payload": payload})


def entity_list(request, page_key):
    entity_type = ENTITY_LIST_PAGES[page_key]
    model = ENTITY_MODELS[entity_type]
    return render(
        request,
        "editor/entity_list.html",
        {
            "entities": model.objects.published(),
            "entity_type": entity_type,
            "page_key": page_key,
            "verbose_name_plural": model._meta.verbose_name_plural,
            "trashed": request.GET.get("trashed"),
        },
    )


def _entity_list_view(page_key):
    def view(request):
        return entity_list(request, page_key)

    return view


# Logical page key -> view, reached through admin.php?page=<key>
ADMIN_PAGES = {
    "site-editor": site_editor,
    "experiments": experiments_page,
    **{key: _entity_list_view(key) for key in ENTITY_LIST_PAGES},
}


@staff_member_required(login_url=settings.LOGIN_URL)
def admin_page(request):
    page_key = request.GET.get("page", "")
    view = ADMIN_PAGES.get(page_key)
    if view is None:
        raise Http404(f"No admin page registered for '{page_key}'")
    return view(request)


def _load_json(request):
    try:
        return json.loads(request.body.decode() or "{}")
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None


@require_POST
@staff_required_json
def save_entities(request):
    """
    Persist every entity listed in the save panel in one transaction.

    Request body:
    {
        "entities": [
            {"kind": "template", "name": ..., "slug": ..., "content": [...]},
            {"kind": "template_part", "name": ..., "slug": ..., "theme": ..., "content": [...]}
        ]
    }

    Either every record is saved or none is. Invalid records are reported
    by their position in the list:
    {"success": false, "errors": {"1": {"theme": ["This field is required."]}}}
    """
    data = _load_json(request)
    if not isinstance(data, dict):
        return JsonResponse({"success": False, "error": "Invalid JSON body."}, status=400)
    records = data.get("entities")
    if not isinstance(records, list) or not records:
        return JsonResponse(
            {"success": False, "error": "No entities provided."}, status=400
        )

    forms = []
    errors = {}
    for index, record in enumerate(records):
        form_class = RECORD_FORMS.get(record.get("kind")) if isinstance(record, dict) else None
        if form_class is None:
            errors[str(index)] = {"kind": ["Unknown entity kind."]}
            continue
        form = form_class(record)
        if form.is_valid():
            forms.append(form)
        else:
            errors[str(index)] = form.errors.get_json_data()
    if errors:
        logger.warning("Rejected entity save from %s: %s", request.user, errors)
        return JsonResponse({"success": False, "errors": errors}, status=400)

    saved = []
    with transaction.atomic(), reversion.create_revision():
        reversion.set_user(request.user)
        reversion.set_comment("Saved from the site editor")
        for form in forms:
            instance, created = form.save()
            saved.append(instance.to_record())
            logger.info(
                "%s %s '%s'",
                "Created" if created else "Updated",
                instance._meta.verbose_name,
                instance.slug,
            )
    return JsonResponse({"success": True, "entities": saved})


@require_POST
@staff_required_json
def create_template(request):
    data = _load_json(request)
    if not isinstance(data, dict):
        return JsonResponse({"success": False, "error": "Invalid JSON body."}, status=400)
    form = NewTemplateForm(data)
    if not form.is_valid():
        return JsonResponse(
            {"success": False, "errors": form.errors.get_json_data()}, status=400
        )
    with reversion.create_revision():
        reversion.set_user(request.user)
        template = form.save()
    logger.info("Created template '%s' from the site editor", template.slug)
    record = template.to_record()
    record["autoDraft"] = False
    return JsonResponse({"success": True, "entity": record}, status=201)


@require_POST
@staff_member_required(login_url=settings.LOGIN_URL)
def trash_entities(request, entity_type):
    """Bulk-move every published entity of one type to the trash."""
    model = ENTITY_MODELS.get(entity_type)
    if model is None:
        raise Http404(f"Unknown entity type '{entity_type}'")
    count = model.objects.move_to_trash()
    logger.info("Moved %d %s to trash", count, model._meta.verbose_name_plural)
    page_key = next(key for key, value in ENTITY_LIST_PAGES.items() if value == entity_type)
    return redirect(admin_url("admin.php", {"page": page_key, "trashed": count}))
