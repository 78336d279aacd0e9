"""
Django management command to move every published template or template part to the trash.

Used to purge entities left behind by earlier browser-suite runs so the site
editor starts from a clean slate.

Usage:
    python manage.py trash_entities --type template
    python manage.py trash_entities --type template_part --dry-run
    python manage.py trash_entities --type template --noinput
"""

import logging

from django.core.management.base import BaseCommand

from editor.models import ENTITY_MODELS

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Move all published entities of one type (template, template_part) to the trash"

    def add_arguments(self, parser):
        parser.add_argument(
            "--type",
            dest="entity_type",
            choices=sorted(ENTITY_MODELS),
            required=True,
            help="Entity type to trash",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would be trashed without changing anything",
        )
        parser.add_argument(
            "--noinput",
            "--no-input",
            action="store_false",
            dest="interactive",
            help="Do not prompt for confirmation",
        )

    def handle(self, *args, **options):
        entity_type = options["entity_type"]
        model = ENTITY_MODELS[entity_type]
        label = model._meta.verbose_name_plural.lower()

        published = model.objects.published()
        count = published.count()

        if count == 0:
            self.stdout.write(self.style.SUCCESS(f"No published {label} to trash."))
            return

        self.stdout.write(f"Found {count} published {label}:")
        for entity in published:
            self.stdout.write(f"  - {entity.name} ({entity.slug})")

        if options["dry_run"]:
            self.stdout.write(
                self.style.WARNING("DRY RUN: Nothing was moved to the trash.")
            )
            return

        if options["interactive"] and options.get("verbosity", 1) != 0:
            confirm = input(f"\nMove {count} {label} to the trash? [y/N]: ")
            if confirm.lower() != "y":
                self.stdout.write("Cancelled.")
                return

        trashed = published.move_to_trash()
        logger.info("Trashed %d %s from the command line", trashed, label)
        self.stdout.write(self.style.SUCCESS(f"Moved {trashed} {label} to the trash."))
