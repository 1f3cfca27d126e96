"""
Root URL configuration.

The registration page is served at the site root; see student_registration.urls.
"""
from django.http import HttpResponse
from django.urls import include, path


def healthz(request):
    return HttpResponse("ok", content_type="text/plain")


urlpatterns = [
    path("healthz", healthz, name="healthz"),
    path("", include("student_registration.urls")),
]
