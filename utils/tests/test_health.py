import pytest

from siteconfig.utils import FULL_SITE_EDITING, seed_default_features, set_features_enabled


@pytest.mark.django_db
def test_health_check_reports_editor_disabled(client):
    seed_default_features()
    response = client.get("/health/")
    assert response.status_code == 200
    assert response.content == b"OK site-editor=disabled"


@pytest.mark.django_db
def test_health_check_reports_editor_enabled(client):
    seed_default_features()
    set_features_enabled([FULL_SITE_EDITING])
    response = client.get("/health/")
    assert response.content == b"OK site-editor=enabled"
    assert "no-cache" in response["Cache-Control"]
