"""
Pytest fixtures for end-to-end browser testing with Playwright and Django.

This module provides a test case base class that integrates Playwright with
Django's StaticLiveServerTestCase, so the site editor's JavaScript runs
against a live server with its static files. Browser tests are skipped when
Chromium has not been installed for Playwright.
"""

import os
import unittest
from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.staticfiles.testing import StaticLiveServerTestCase
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from siteconfig.utils import seed_default_features

from .console_capture import ConsoleCapture

# Test password used across all E2E tests
TEST_PASSWORD = "testpass123"


class DjangoPlaywrightTestCase(StaticLiveServerTestCase):
    """
    Base test case that combines Django's live server with Playwright.

    Each test gets its own browser context and page, and a ConsoleCapture
    attached to that page (``self.console``).

    IMPORTANT: Sets DJANGO_ALLOW_ASYNC_UNSAFE in setUpClass to allow Django ORM
    operations in Playwright's async context. While cleaned up in tearDownClass,
    this affects the entire Python process during test execution. E2E tests using
    this base class MUST NOT be run in parallel to avoid race conditions and
    unintended side effects.

    The live server database is flushed between tests, so setUp re-creates
    the experimental feature rows that a data migration normally provides.

    When running E2E tests, use: pytest e2e_tests/ -n 0 (or omit -n flag)
    """

    @classmethod
    def setUpClass(cls):
        # CRITICAL: Allow Django ORM operations in Playwright's async context
        # This affects the entire Python process, not just this test class.
        os.environ["DJANGO_ALLOW_ASYNC_UNSAFE"] = "true"

        super().setUpClass()
        # Start Playwright once for the test class
        cls.playwright = sync_playwright().start()
        try:
            cls.browser = cls.playwright.chromium.launch(headless=settings.E2E_HEADLESS)
        except PlaywrightError as e:
            cls.playwright.stop()
            os.environ.pop("DJANGO_ALLOW_ASYNC_UNSAFE", None)
            super().tearDownClass()
            raise unittest.SkipTest(
                f"Chromium is not available for Playwright (run 'playwright install chromium'): {e}"
            )

    @classmethod
    def tearDownClass(cls):
        cls.browser.close()
        cls.playwright.stop()

        # Clean up the environment variable
        os.environ.pop("DJANGO_ALLOW_ASYNC_UNSAFE", None)

        super().tearDownClass()

    def setUp(self):
        super().setUp()
        seed_default_features()
        # Create a new browser context for each test (isolated cookies, etc.)
        self.context = self.browser.new_context(viewport={"width": 1280, "height": 720})
        self.page = self.context.new_page()
        self.console = ConsoleCapture(self.page).attach()
        self.assert_server_healthy()

    def tearDown(self):
        self.console.detach()
        self.console.clear()
        self.page.close()
        self.context.close()
        super().tearDown()

    def create_staff_user(self, username="editor", is_superuser=True, **kwargs):
        """Create a staff user who may use the admin UI."""
        defaults = {
            "email": f"{username}@example.com",
            "is_staff": True,
            "is_superuser": is_superuser,
        }
        defaults.update(kwargs)
        return get_user_model().objects.create_user(
            username=username,
            password=TEST_PASSWORD,
            **defaults,
        )

    def assert_server_healthy(self, editor_state=None):
        """Check the live server answers /health/ before the browser drives it.

        Returns:
            str: the site editor state reported by the server, "enabled" or "disabled"
        """
        response = self.page.request.get(f"{self.live_server_url}/health/")
        body = response.text()
        assert response.ok and body.startswith("OK "), f"Live server is not healthy: {body!r}"
        state = body.rsplit("=", 1)[-1]
        if editor_state is not None:
            assert state == editor_state, f"Expected site editor {editor_state}, got {state}"
        return state

    def login(self, username="editor", password=TEST_PASSWORD):
        """Log in the user via the browser.

        Raises:
            AssertionError: If login fails or redirect doesn't occur.
        """
        self.page.goto(f"{self.live_server_url}/login/")
        self.page.fill('input[name="username"]', username)
        self.page.fill('input[name="password"]', password)
        self.page.click('button[type="submit"]')
        # Wait for the redirect away from the login page
        self.page.wait_for_url(lambda url: "/login/" not in url)

        # Verify login was successful - check we're not still on login page
        current_url = self.page.url
        assert (
            "/login/" not in current_url
        ), f"Login failed - still on login page: {current_url}"
