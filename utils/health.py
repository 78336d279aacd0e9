"""
Health check view used by the browser suite before driving the live server
"""

from django.http import HttpResponse
from django.views.decorators.cache import never_cache
from django.views.decorators.csrf import csrf_exempt


@csrf_exempt
@never_cache
def health_check(request):
    """Return OK with the state of the editor's feature switches."""
    from siteconfig.utils import FULL_SITE_EDITING, is_feature_enabled

    state = "enabled" if is_feature_enabled(FULL_SITE_EDITING) else "disabled"
    return HttpResponse(f"OK site-editor={state}", content_type="text/plain", status=200)
