from django import template

register = template.Library()


@register.filter
def alert_kind(message):
    """
    Map a django.contrib.messages message onto the banner styles, e.g.
    {{ message|alert_kind }} gives "error" for messages.error() and "success" otherwise.
    """
    tags = getattr(message, "tags", "") or ""
    return "error" if "error" in tags.split() else "success"
