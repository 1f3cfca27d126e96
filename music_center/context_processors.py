from django.conf import settings


def app_name(request):
    """
    Makes the application name available as {{ app_name }} in all templates.
    """
    return {"app_name": getattr(settings, "APP_NAME", "Student Registration")}


def school_name(request):
    """
    Makes the school's display name available as {{ school_name }} in all templates.
    """
    return {"school_name": getattr(settings, "SCHOOL_NAME", "Music Center")}
