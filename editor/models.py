import reversion
from django.core.exceptions import ValidationError
from django.db import models
from django.utils.text import slugify

# --- Site Editor Entities ---

PARAGRAPH_BLOCK = "paragraph"
TEMPLATE_PART_BLOCK = "template-part"


def validate_blocks(blocks, allowed_types):
    """
    Validate a block list as stored in ``content``.

    Each block is a dict with a ``type`` key. Paragraph blocks carry a string
    ``content``; template-part blocks carry ``slug`` and ``theme`` strings.

    Raises:
        ValidationError: If the list or any block is malformed, or a block
            type is not in ``allowed_types``
    """
    if not isinstance(blocks, list):
        raise ValidationError("Content must be a list of blocks.")
    for index, block in enumerate(blocks):
        if not isinstance(block, dict):
            raise ValidationError(f"Block {index} must be an object.")
        block_type = block.get("type")
        if block_type not in allowed_types:
            raise ValidationError(f"Block {index} has unsupported type {block_type!r}.")
        if block_type == PARAGRAPH_BLOCK and not isinstance(block.get("content", ""), str):
            raise ValidationError(f"Paragraph block {index} content must be text.")
        if block_type == TEMPLATE_PART_BLOCK:
            for key in ("slug", "theme"):
                if not isinstance(block.get(key), str) or not block.get(key):
                    raise ValidationError(
                        f"Template part block {index} needs a {key}."
                    )


class EntityQuerySet(models.QuerySet):
    def published(self):
        return self.filter(status=EditableEntity.STATUS_PUBLISH)

    def trashed(self):
        return self.filter(status=EditableEntity.STATUS_TRASH)

    def move_to_trash(self):
        """Trash every published row in the queryset. Returns the row count."""
        return self.published().update(status=EditableEntity.STATUS_TRASH)


class EditableEntity(models.Model):
    """
    Fields shared by every independently saveable unit of site content.

    Entities are either published (visible in the site editor) or trashed.
    Unsaved auto-drafts only exist inside the editor and are never stored.
    """

    STATUS_PUBLISH = "publish"
    STATUS_TRASH = "trash"
    STATUS_CHOICES = [
        (STATUS_PUBLISH, "Published"),
        (STATUS_TRASH, "Trash"),
    ]

    name = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200)
    content = models.JSONField(default=list, blank=True)
    status = models.CharField(
        max_length=20, choices=STATUS_CHOICES, default=STATUS_PUBLISH
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = EntityQuerySet.as_manager()

    allowed_block_types = (PARAGRAPH_BLOCK,)

    class Meta:
        abstract = True

    def __str__(self):
        return self.name

    def clean(self):
        validate_blocks(self.content, self.allowed_block_types)

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)


@reversion.register()
class Template(EditableEntity):
    """
    Top-level document edited in the site editor.

    Content is a list of paragraph blocks and template-part references. Only
    the list itself belongs to the template; the paragraphs inside a
    referenced part belong to that part.
    """

    allowed_block_types = (PARAGRAPH_BLOCK, TEMPLATE_PART_BLOCK)

    class Meta:
        ordering = ["name"]
        verbose_name = "Template"
        verbose_name_plural = "Templates"
        constraints = [
            models.UniqueConstraint(
                fields=["slug"],
                condition=models.Q(status="publish"),
                name="unique_published_template_slug",
            ),
        ]

    def template_part_refs(self):
        """Return (theme, slug) pairs for every template part the template embeds."""
        return [
            (block["theme"], block["slug"])
            for block in self.content
            if block.get("type") == TEMPLATE_PART_BLOCK
        ]

    def to_record(self):
        return {
            "kind": "template",
            "name": self.name,
            "slug": self.slug,
            "content": self.content,
        }


@reversion.register()
class TemplatePart(EditableEntity):
    """
    Nested, independently saveable document embedded in templates.

    Identified by (theme, slug) so two themes can ship a part with the same
    slug.
    """

    theme = models.SlugField(max_length=100)

    class Meta:
        ordering = ["theme", "name"]
        verbose_name = "Template Part"
        verbose_name_plural = "Template Parts"
        constraints = [
            models.UniqueConstraint(
                fields=["theme", "slug"],
                condition=models.Q(status="publish"),
                name="unique_published_template_part",
            ),
        ]

    def to_record(self):
        return {
            "kind": "template_part",
            "name": self.name,
            "slug": self.slug,
            "theme": self.theme,
            "content": self.content,
        }


ENTITY_MODELS = {
    "template": Template,
    "template_part": TemplatePart,
}
