from django.urls import include, path

from .views import initialize_data, root

urlpatterns = [
    path("", root, name="root"),
    path("api/init", initialize_data, name="init-data"),
    path("api/", include("scheduler.api.urls")),
]
