from django.urls import path

from .views import LegacyPlaygroundVersionView, LegacyPlaygroundView

urlpatterns = [
    path("<str:playground_id>", LegacyPlaygroundView.as_view(), name="legacy-playground"),
    path(
        "<str:playground_id>/<str:version>",
        LegacyPlaygroundVersionView.as_view(),
        name="legacy-playground-version",
    ),
]
