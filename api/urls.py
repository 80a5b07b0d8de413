from django.urls import path, include

from api.legacy.views import LegacyPlaygroundCreateView

urlpatterns = [
    path("api/", include("api.v1.urls")),
    # Legacy API: /api, /api/<id>, /api/<id>/<version>
    path("api", LegacyPlaygroundCreateView.as_view(), name="legacy-playground-create"),
    path("api/", include("api.legacy.urls")),
]
