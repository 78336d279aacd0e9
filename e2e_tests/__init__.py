"""
End-to-end and integration tests package for the site editor.

This package contains:
- Unit tests for the browser-suite helpers (test_*.py in root), runnable
  without a browser
- Browser-based E2E tests using Playwright (e2e/ subdirectory)

Note: Named 'e2e_tests' rather than 'tests' to avoid conflicts with Django
app test packages during pytest collection.
"""
