"""
Observer for the site editor's entity save panel.

The save panel lists every entity (template, template part) with unsaved
changes. Whether an entity is dirty is answered by opening the panel and
looking for its name, so every query here is a read-only UI probe.

Absence within a bounded wait is a negative answer, never an error. Faults
that would otherwise masquerade as "clean" (the editor never rendered its
save button, or the panel refused to open after an enabled click) raise
:class:`EntityPanelError` instead.
"""

import logging
import re

from .polling import PollingPolicy, WaitStatus, poll

logger = logging.getLogger(__name__)

PANEL_SELECTOR = ".entities-saved-states__panel"
PANEL_LABEL_SELECTOR = "label.entities-saved-states__label strong"
PANEL_SAVE_BUTTON_SELECTOR = "button.entities-saved-states__save-button"
SAVE_BUTTON_SELECTOR = ".site-editor-save-button"
ENABLED_SAVE_BUTTON_SELECTOR = '.site-editor-save-button[aria-disabled="false"]'
DISABLED_SAVE_BUTTON_SELECTOR = '.site-editor-save-button[aria-disabled="true"]'


class EntityPanelError(Exception):
    """The save panel could not be observed because the page misbehaved."""


class EntitySavePanel:
    """
    Answers "which entities are dirty?" for one Playwright page.

    Timeouts come from ``settings.E2E_POLLING`` unless policies are passed:
    ``panel_policy`` for the quick "is the panel already open / is the
    button enabled" checks (100 ms), ``entity_policy`` for finding a name in
    the panel (500 ms) and ``settle_policy`` for waiting on the panel to
    open or close after a click (3000 ms).
    """

    def __init__(self, page, panel_policy=None, entity_policy=None, settle_policy=None):
        self.page = page
        self.panel_policy = panel_policy or PollingPolicy.from_settings("panel_timeout_ms")
        self.entity_policy = entity_policy or PollingPolicy.from_settings("entity_timeout_ms")
        self.settle_policy = settle_policy or PollingPolicy.from_settings(
            "navigation_timeout_ms"
        )

    def _poll_locator(self, locator, policy, description, visible=True):
        result = poll(
            lambda: locator.first.is_visible() is visible,
            policy,
            sleep=self.page.wait_for_timeout,
        )
        if result.status is WaitStatus.ERROR:
            raise EntityPanelError(
                f"Could not check {description}: {result.error}"
            ) from result.error
        return result.found

    def _wait_for_visible(self, selector, policy, description):
        return self._poll_locator(self.page.locator(selector), policy, description)

    def _wait_for_hidden(self, selector, policy, description):
        return self._poll_locator(
            self.page.locator(selector), policy, description, visible=False
        )

    def is_panel_visible(self):
        """Return True if the panel is open right now (within the quick wait)."""
        return self._wait_for_visible(PANEL_SELECTOR, self.panel_policy, "the save panel")

    def check_panel_open(self):
        """
        Make sure the save panel is open.

        Returns:
            bool: True if the panel is (now) open, False if nothing is dirty,
                  i.e. the header save button is disabled

        Raises:
            EntityPanelError: If the editor has no save button at all, or the
                button was enabled but the panel never appeared
        """
        if self.is_panel_visible():
            return True

        if not self._wait_for_visible(
            ENABLED_SAVE_BUTTON_SELECTOR, self.panel_policy, "the save button"
        ):
            if self.page.locator(SAVE_BUTTON_SELECTOR).count() == 0:
                raise EntityPanelError(
                    "The site editor save button is missing; the editor did not render."
                )
            logger.debug("Save button is disabled; no entities are dirty")
            return False

        self.page.locator(ENABLED_SAVE_BUTTON_SELECTOR).first.click()
        if not self._wait_for_visible(PANEL_SELECTOR, self.settle_policy, "the save panel"):
            raise EntityPanelError(
                "The save button was enabled but the save panel did not open "
                f"within {self.settle_policy.timeout_ms} ms."
            )
        return True

    def dirty_entity_names(self):
        """Names listed in the save panel, or an empty list when nothing is dirty."""
        if not self.check_panel_open():
            return []
        return [
            text.strip()
            for text in self.page.locator(PANEL_LABEL_SELECTOR).all_text_contents()
        ]

    def is_entity_dirty(self, name):
        """
        Return True if the save panel lists an entity whose label contains ``name``.

        Opening the panel is the only side effect; no entity is saved or
        edited, so asking twice without edits in between gives the same answer.
        """
        if not self.check_panel_open():
            return False
        label = self.page.locator(PANEL_LABEL_SELECTOR).filter(
            has_text=re.compile(re.escape(name))
        )
        dirty = self._poll_locator(label, self.entity_policy, f"{name!r} in the save panel")
        logger.debug("Entity %r is %s", name, "dirty" if dirty else "clean")
        return dirty

    def save_all(self):
        """
        Save every entity listed in the panel.

        Returns once the panel has closed and the header save button is
        disabled again, so callers never observe a half-saved editor.

        Returns:
            bool: True if something was saved, False if nothing was dirty

        Raises:
            EntityPanelError: If the save did not settle within the settle wait
        """
        if not self.check_panel_open():
            return False

        self.page.locator(PANEL_SAVE_BUTTON_SELECTOR).first.click()
        closed = self._wait_for_hidden(PANEL_SELECTOR, self.settle_policy, "the save panel")
        settled = closed and self._wait_for_visible(
            DISABLED_SAVE_BUTTON_SELECTOR, self.settle_policy, "the save button"
        )
        if not settled:
            error = self.page.locator(".entities-saved-states__error")
            detail = error.first.text_content() if error.count() else ""
            raise EntityPanelError(
                f"Saving entities did not complete within {self.settle_policy.timeout_ms} ms. {detail}".strip()
            )
        logger.debug("Saved all dirty entities")
        return True
