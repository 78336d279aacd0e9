"""
Unit tests for utils.url_helpers module.

- add_query_args(): merging, replacement and dropping of None values
- admin_url(): admin entry point paths with string or mapping queries
- build_absolute_url(): joining a server base URL and a path
"""

import pytest

from utils.url_helpers import ADMIN_ROOT, add_query_args, admin_url, build_absolute_url


class TestAddQueryArgs:
    def test_empty_url(self):
        assert add_query_args("", {"page": "site-editor"}) == "?page=site-editor"

    def test_replaces_existing_argument(self):
        url = add_query_args("/site-admin/admin.php?page=templates", {"page": "experiments"})
        assert url == "/site-admin/admin.php?page=experiments"

    def test_keeps_other_arguments(self):
        url = add_query_args("/a?x=1", {"y": 2})
        assert url == "/a?x=1&y=2"

    def test_drops_none_values(self):
        url = add_query_args("/a", {"page": "site-editor", "template": None})
        assert url == "/a?page=site-editor"

    def test_accepts_pairs(self):
        assert add_query_args("/a", [("b", "c")]) == "/a?b=c"

    def test_keeps_absolute_parts(self):
        url = add_query_args("http://localhost:8081/a#top", {"b": "c"})
        assert url == "http://localhost:8081/a?b=c#top"


class TestAdminUrl:
    def test_without_query(self):
        assert admin_url("admin.php") == f"{ADMIN_ROOT}admin.php"

    def test_leading_slash_is_ignored(self):
        assert admin_url("/admin.php") == "/site-admin/admin.php"

    @pytest.mark.parametrize("query", ["page=site-editor", "?page=site-editor"])
    def test_string_query(self, query):
        assert admin_url("admin.php", query) == "/site-admin/admin.php?page=site-editor"

    def test_mapping_query(self):
        url = admin_url("admin.php", {"page": "experiments", "updated": "1"})
        assert url == "/site-admin/admin.php?page=experiments&updated=1"


class TestBuildAbsoluteURL:
    @pytest.mark.parametrize(
        "base",
        ["http://localhost:8081", "http://localhost:8081/"],
    )
    def test_joins_with_single_slash(self, base):
        assert (
            build_absolute_url("/site-admin/admin.php", base)
            == "http://localhost:8081/site-admin/admin.php"
        )

    def test_path_without_leading_slash(self):
        assert build_absolute_url("health/", "http://testserver") == "http://testserver/health/"
