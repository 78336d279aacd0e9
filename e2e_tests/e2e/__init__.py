"""
End-to-end tests using Playwright against the site editor.

This package holds the helpers that drive the admin UI (site editor,
experiments page, entity list pages), the entity save panel observer, and
the scenarios that check which entities the editor reports as dirty.

IMPORTANT: E2E tests MUST NOT be run in parallel due to DJANGO_ALLOW_ASYNC_UNSAFE
environment variable affecting the entire Python process. Use:
    pytest e2e_tests/ -n 0    # Explicitly disable parallel execution
    pytest e2e_tests/         # Or omit -n flag (defaults to sequential)
"""
