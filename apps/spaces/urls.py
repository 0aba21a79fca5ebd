"""URL routing for the spaces domain."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import SpaceViewSet

router = DefaultRouter()
router.register(r"", SpaceViewSet, basename="space")

urlpatterns = [
    path("", include(router.urls)),
]
