"""
URL configuration for student_registration app.
"""
from django.urls import path

from student_registration import views

app_name = "student_registration"

urlpatterns = [
    path("", views.register, name="register"),
]
