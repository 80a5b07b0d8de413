from django.urls import path

from .views import (
    PlaygroundCreateView,
    PlaygroundDetailView,
    PlaygroundSearchView,
    TagListView,
)

urlpatterns = [
    path("playgrounds", PlaygroundSearchView.as_view(), name="playground-search"),
    path("playground", PlaygroundCreateView.as_view(), name="playground-create"),
    path("playground/<str:slug>", PlaygroundDetailView.as_view(), name="playground-detail"),
    path("tags", TagListView.as_view(), name="tag-list"),
]
