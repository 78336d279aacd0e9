from django import forms
from django.core.exceptions import ValidationError
from django.utils.text import slugify

from .models import Template, TemplatePart, validate_blocks


class EntityRecordForm(forms.Form):
    """
    Validates one entity record posted by the site editor's save panel.

    Records are plain dicts decoded from JSON, so the content list arrives
    already parsed. Subclasses set ``model`` and add identity fields.
    """

    model = None

    name = forms.CharField(max_length=200)
    slug = forms.SlugField(max_length=200, required=False)
    content = forms.JSONField(required=False)

    def clean_content(self):
        content = self.cleaned_data.get("content")
        if content is None:
            content = []
        validate_blocks(content, self.model.allowed_block_types)
        return content

    def clean(self):
        cleaned_data = super().clean()
        if not cleaned_data.get("slug") and cleaned_data.get("name"):
            cleaned_data["slug"] = slugify(cleaned_data["name"])
        if "name" in cleaned_data and not cleaned_data.get("slug"):
            raise ValidationError("A slug could not be derived from the name.")
        return cleaned_data

    def lookup(self):
        return {"slug": self.cleaned_data["slug"]}

    def save(self):
        """Create or update the published entity. Returns (instance, created)."""
        return self.model.objects.published().update_or_create(
            **self.lookup(),
            defaults={
                "name": self.cleaned_data["name"],
                "content": self.cleaned_data["content"],
            },
        )


class TemplateRecordForm(EntityRecordForm):
    model = Template


class TemplatePartRecordForm(EntityRecordForm):
    model = TemplatePart

    theme = forms.SlugField(max_length=100)

    def lookup(self):
        return {"theme": self.cleaned_data["theme"], "slug": self.cleaned_data["slug"]}


RECORD_FORMS = {
    "template": TemplateRecordForm,
    "template_part": TemplatePartRecordForm,
}


class NewTemplateForm(forms.Form):
    """Name entered in the site editor's "Add New Template" modal."""

    name = forms.CharField(max_length=200, strip=True)

    def clean_name(self):
        name = self.cleaned_data["name"]
        slug = slugify(name)
        if not slug:
            raise ValidationError("Template names need at least one letter or digit.")
        if Template.objects.published().filter(slug=slug).exists():
            raise ValidationError(f"A template with the slug '{slug}' already exists.")
        return name

    def save(self):
        name = self.cleaned_data["name"]
        return Template.objects.create(name=name, slug=slugify(name), content=[])
