"""
URL mappings for the projects app.
"""

from django.urls import path, include

from rest_framework.routers import DefaultRouter

from projects import views

router = DefaultRouter()
router.register("projects", views.ProjectViewSet)

app_name = "projects"

urlpatterns = [
    path("", include(router.urls)),
]
