from django.urls import path

from . import views

app_name = "editor"

urlpatterns = [
    path("api/entities/save/", views.save_entities, name="save_entities"),
    path("api/templates/", views.create_template, name="create_template"),
    path("trash/<str:entity_type>/", views.trash_entities, name="trash_entities"),
]
