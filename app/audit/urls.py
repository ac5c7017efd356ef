"""
URL mappings for the audit app.
"""

from django.urls import path, include

from rest_framework.routers import DefaultRouter

from audit import views

router = DefaultRouter()
router.register("activity", views.ActivityLogViewSet)

app_name = "audit"

urlpatterns = [
    path("", include(router.urls)),
]
