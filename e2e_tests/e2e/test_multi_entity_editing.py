"""
Multi-entity editor states in the site editor.

A template (parent entity) embeds a template part (child entity). Each is
saved independently, so editing one must only mark that one as dirty in the
entity save panel:
- A freshly loaded editor with nothing unsaved reports no dirty entities
- Editing the template's own blocks dirties only the template
- Editing blocks inside the template part dirties only the part
- Saving everything leaves nothing dirty
- Reloading drops entities that were never saved
"""

from siteconfig.utils import FULL_SITE_EDITING, FULL_SITE_EDITING_DEMO

from .conftest import DjangoPlaywrightTestCase
from .entity_states import EntitySavePanel
from .experimental_features import (
    disable_experimental_features,
    enable_experimental_features,
)
from .site_editor import (
    create_template,
    create_template_part,
    edit_nested_paragraph,
    edit_template_part,
    insert_paragraph,
    trash_existing_entities,
    visit_site_editor,
)

REQUIRED_EXPERIMENTS = [f"#{FULL_SITE_EDITING}", f"#{FULL_SITE_EDITING_DEMO}"]
TEMPLATE_PART_NAME = "Test Template Part Name Edit"
TEMPLATE_NAME = "Test Template Name Edit"


class SiteEditorTestCase(DjangoPlaywrightTestCase):
    """Logs in, enables the site editor experiments and trashes leftover entities."""

    def setUp(self):
        super().setUp()
        self.create_staff_user(username="site_editor_admin")
        self.login(username="site_editor_admin")
        enable_experimental_features(self.page, self.live_server_url, REQUIRED_EXPERIMENTS)
        trash_existing_entities(self.page, self.live_server_url, "template")
        trash_existing_entities(self.page, self.live_server_url, "template_part")
        self.panel = EntitySavePanel(self.page)

    def tearDown(self):
        disable_experimental_features(self.page, self.live_server_url, REQUIRED_EXPERIMENTS)
        super().tearDown()


class TestMultiEntityEditorStates(SiteEditorTestCase):
    def test_no_dirty_entities_after_saving_and_reloading(self):
        """Demo auto-drafts are dirty on first load; after saving, a reload shows nothing dirty."""
        visit_site_editor(self.page, self.live_server_url)
        assert self.panel.check_panel_open() is True

        self.panel.save_all()
        visit_site_editor(self.page, self.live_server_url)

        # Unable to open the save panel implies that no entities are dirty.
        assert self.panel.check_panel_open() is False

    def test_demo_entities_listed_until_saved(self):
        """Both demo auto-drafts appear in the save panel, and neither does after saving."""
        visit_site_editor(self.page, self.live_server_url)

        assert self.panel.is_entity_dirty("Index") is True
        assert self.panel.is_entity_dirty("Header") is True
        assert sorted(self.panel.dirty_entity_names()) == ["Header", "Index"]

        assert self.panel.save_all() is True
        assert self.panel.is_entity_dirty("Index") is False
        assert self.panel.is_entity_dirty("Header") is False
        assert self.panel.save_all() is False


class TestMultiEntityEdit(SiteEditorTestCase):
    """Each test starts from a saved template containing a saved template part."""

    def setUp(self):
        super().setUp()
        visit_site_editor(self.page, self.live_server_url)
        create_template(self.page, TEMPLATE_NAME)
        create_template_part(self.page, TEMPLATE_PART_NAME)
        edit_template_part(
            self.page,
            ["Default template part test text.", "Second paragraph test."],
        )
        self.panel.save_all()
        # Console output from building the fixture is not part of any scenario
        self.console.clear()

    def tearDown(self):
        self.panel.save_all()
        self.console.clear()
        super().tearDown()

    def test_editing_parent_only_dirties_parent(self):
        # Add changes to the main parent entity.
        insert_paragraph(self.page, "Test.")

        is_parent_entity_dirty = self.panel.is_entity_dirty(TEMPLATE_NAME)
        is_child_entity_dirty = self.panel.is_entity_dirty(TEMPLATE_PART_NAME)

        assert is_parent_entity_dirty is True
        assert is_child_entity_dirty is False

    def test_editing_child_only_dirties_child(self):
        edit_nested_paragraph(self.page, "Some more test words!")

        is_parent_entity_dirty = self.panel.is_entity_dirty(TEMPLATE_NAME)
        is_child_entity_dirty = self.panel.is_entity_dirty(TEMPLATE_PART_NAME)

        assert is_parent_entity_dirty is False
        assert is_child_entity_dirty is True

    def test_dirty_check_is_repeatable(self):
        """Asking twice without an edit in between gives the same answers."""
        edit_nested_paragraph(self.page, "Repeat.")

        first = (
            self.panel.is_entity_dirty(TEMPLATE_NAME),
            self.panel.is_entity_dirty(TEMPLATE_PART_NAME),
        )
        second = (
            self.panel.is_entity_dirty(TEMPLATE_NAME),
            self.panel.is_entity_dirty(TEMPLATE_PART_NAME),
        )
        assert first == second == (False, True)

    def test_save_all_clears_every_listed_entity(self):
        insert_paragraph(self.page, "Parent edit.")
        edit_nested_paragraph(self.page, "Child edit. ")
        listed = self.panel.dirty_entity_names()
        assert TEMPLATE_NAME in listed
        assert TEMPLATE_PART_NAME in listed

        assert self.panel.save_all() is True

        for name in listed:
            assert self.panel.is_entity_dirty(name) is False
        assert self.panel.check_panel_open() is False

    def test_saved_entities_survive_reload(self):
        """The template and its part were persisted by the fixture's save."""
        visit_site_editor(self.page, self.live_server_url, template="test-template-name-edit")

        toggle = self.page.locator("button.template-switcher__toggle")
        assert toggle.text_content().strip() == "test-template-name-edit"
        nested = self.page.locator(
            '.wp-block[data-type="core/template-part"] .wp-block[data-type="core/paragraph"]'
        ).all_text_contents()
        assert "Default template part test text." in nested
        assert "Second paragraph test." in nested
        assert self.panel.check_panel_open() is False
        assert self.console.errors == []

    def test_reload_discards_unsaved_template_part(self):
        """A part that was never saved only lives in the editor, so a reload drops it."""
        create_template_part(self.page, "Unsaved Part")
        assert self.panel.is_entity_dirty("Unsaved Part") is True

        visit_site_editor(self.page, self.live_server_url, template="test-template-name-edit")

        unsaved = self.page.locator(
            '.wp-block[data-type="core/template-part"][data-slug="unsaved-part"]'
        )
        assert unsaved.count() == 0
        assert self.panel.check_panel_open() is False
        assert self.panel.is_entity_dirty("Unsaved Part") is False
