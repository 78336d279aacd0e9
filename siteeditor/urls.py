###################################################################################
# URL configuration for the siteeditor project.
#
# The admin UI is a single entry point, /site-admin/admin.php, that dispatches on
# the ?page=<key> query argument (see editor.views.ADMIN_PAGES). JSON endpoints
# used by the site editor live under /editor/.
###################################################################################


from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.shortcuts import redirect
from django.urls import include, path

from editor import views as editor_views
from utils.url_helpers import admin_url
from utils.health import health_check


def home(request):
    return redirect(admin_url("admin.php", {"page": "site-editor"}))


urlpatterns = [
    path("django-admin/", admin.site.urls),
    path("site-admin/admin.php", editor_views.admin_page, name="admin_page"),
    path("editor/", include("editor.urls")),
    path("login/", auth_views.LoginView.as_view(), name="login"),
    path("logout/", auth_views.LogoutView.as_view(), name="logout"),
    path("health/", health_check, name="health"),
    path("", home, name="home"),
]
