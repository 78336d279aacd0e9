import logging

from django.shortcuts import redirect, render

from utils.url_helpers import admin_url

from .forms import ExperimentalFeaturesForm

logger = logging.getLogger(__name__)


def experiments_page(request):
    """Settings page listing every experimental feature as a checkbox.

    Reached through ``admin.php?page=experiments``; access control is applied
    by the admin dispatcher.
    """
    if request.method == "POST":
        form = ExperimentalFeaturesForm(request.POST)
        if form.is_valid():
            changed = form.save()
            for feature in changed:
                logger.info(
                    "Experimental feature %s %s by %s",
                    feature.slug,
                    "enabled" if feature.enabled else "disabled",
                    request.user.get_username(),
                )
            return redirect(admin_url("admin.php", {"page": "experiments", "updated": "1"}))
    else:
        form = ExperimentalFeaturesForm()

    return render(
        request,
        "siteconfig/experiments.html",
        {"form": form, "updated": request.GET.get("updated") == "1"},
    )
