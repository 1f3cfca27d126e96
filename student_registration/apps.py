from django.apps import AppConfig


class StudentRegistrationConfig(AppConfig):
    name = "student_registration"
    verbose_name = "Student Registration"
