"""
Toggle experimental features through the Experiments settings page.

Selectors are the checkbox ids on that page, which are the feature slugs,
e.g. ``"#full-site-editing"``.
"""

import logging

from .site_editor import visit_admin_page

logger = logging.getLogger(__name__)

EXPERIMENTS_QUERY = "page=experiments"


def _set_experimental_features(page, base_url, features, enable):
    visit_admin_page(page, base_url, "admin.php", EXPERIMENTS_QUERY)
    for feature in features:
        checkbox = page.locator(feature)
        checkbox.wait_for()
        if checkbox.is_checked() != enable:
            checkbox.click()
    page.click("#submit")
    page.wait_for_selector(".experiments-settings .notice-success")
    logger.debug("%s experimental features: %s", "Enabled" if enable else "Disabled", features)


def enable_experimental_features(page, base_url, features):
    """Tick each feature's checkbox (if not ticked already) and save."""
    _set_experimental_features(page, base_url, features, True)


def disable_experimental_features(page, base_url, features):
    """Untick each feature's checkbox (if ticked) and save."""
    _set_experimental_features(page, base_url, features, False)
