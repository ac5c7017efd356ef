"""
URL mappings for the users app.
"""

from django.urls import path, include

from rest_framework.routers import DefaultRouter

from users import views

router = DefaultRouter()
router.register("members", views.TeamMemberViewSet)

app_name = "users"

urlpatterns = [
    path("login/", views.LoginView.as_view(), name="login"),
    path("me/", views.MeView.as_view(), name="me"),
    path("", include(router.urls)),
]
