"""
Browser helpers that drive the admin UI: navigation, the site editor's
creation flows, and the bulk-trash list pages.

All helpers take a Playwright ``page`` and, where they navigate, the live
server's base URL.
"""

import logging

from django.utils.text import slugify

from utils.url_helpers import add_query_args, admin_url, build_absolute_url

from .polling import polling_setting

logger = logging.getLogger(__name__)

SITE_EDITOR_PAGE = "site-editor"
TEMPLATE_PART_INNER_BLOCKS = (
    '.wp-block[data-type="core/template-part"] .block-inner-blocks'
)
TEMPLATE_SWITCHER_TOGGLE = (
    'button.template-switcher__toggle[aria-label="Switch Template"]'
)

# Admin list page for each trashable entity type
ENTITY_LIST_PAGES = {
    "template": "templates",
    "template_part": "template-parts",
}


def admin_page_url(base_url, path, query=""):
    """Absolute URL of an admin page, e.g. ('admin.php', 'page=site-editor')."""
    return build_absolute_url(admin_url(path, query), base_url)


def visit_admin_page(page, base_url, path, query=""):
    url = admin_page_url(base_url, path, query)
    logger.debug("Visiting %s", url)
    page.goto(url)
    return url


def visit_site_editor(page, base_url, template=None):
    """Open the site editor and wait until a template part has rendered its blocks."""
    query = add_query_args("", {"page": SITE_EDITOR_PAGE, "template": template})[1:]
    visit_admin_page(page, base_url, "admin.php", query)
    page.wait_for_selector(TEMPLATE_PART_INNER_BLOCKS)


def create_template(page, template_name="test-template"):
    """
    Create a template through the switcher's "New" modal.

    Waits (navigation timeout) until the switcher shows the new template's
    slug, i.e. the editor has switched to it.
    """
    page.click(TEMPLATE_SWITCHER_TOGGLE)
    page.wait_for_selector(".template-switcher__popover")
    page.click(".template-switcher__popover .template-switcher__new")
    page.wait_for_selector(".modal__frame")

    page.fill(".modal__frame input.new-template-modal__name", template_name)
    page.click(".modal__frame .new-template-modal__add")

    page.locator(TEMPLATE_SWITCHER_TOGGLE, has_text=slugify(template_name)).wait_for(
        timeout=polling_setting("navigation_timeout_ms")
    )


def open_inserter(page):
    page.click(".block-appender")
    page.wait_for_selector(".inserter__menu")


def create_template_part(page, template_part_name="test-template-part", theme_name="test-theme"):
    """
    Insert a new template part into the current template.

    Uses the keyboard the way a user fills the placeholder: type the name,
    Tab to the theme, type it, Tab to "Create" and press Enter.
    """
    open_inserter(page)
    page.click("button.inserter-item-template-part")
    page.wait_for_selector(".template-part-placeholder__name")
    page.keyboard.type(template_part_name)
    page.keyboard.press("Tab")
    page.keyboard.type(theme_name)
    page.keyboard.press("Tab")
    page.keyboard.press("Enter")
    page.wait_for_selector(
        'div[data-type="core/template-part"] .block-inner-blocks'
    )


def edit_template_part(page, text_to_add):
    """Click into the (first) template part and type each line followed by Enter."""
    page.click('div[data-type="core/template-part"]')
    for text in text_to_add:
        page.keyboard.type(text)
        page.keyboard.press("Enter")


def insert_paragraph(page, text):
    """Append a paragraph to the template itself (outside any template part) and type into it."""
    open_inserter(page)
    page.click("button.inserter-item-paragraph")
    page.keyboard.type(text)


def edit_nested_paragraph(page, text):
    """Type into the first paragraph that belongs to a template part."""
    page.click(
        '.wp-block[data-type="core/template-part"] .wp-block[data-type="core/paragraph"]'
    )
    page.keyboard.type(text)


def trash_existing_entities(page, base_url, entity_type):
    """
    Move every published entity of ``entity_type`` to the trash via its list page.

    Returns:
        int: number of rows that were listed before trashing
    """
    visit_admin_page(page, base_url, "admin.php", f"page={ENTITY_LIST_PAGES[entity_type]}")
    rows = page.locator(".entity-list__row").count()
    if rows == 0:
        return 0
    page.click("button.bulk-trash")
    page.wait_for_selector(".entity-list__empty")
    logger.debug("Trashed %d %s entities", rows, entity_type)
    return rows
