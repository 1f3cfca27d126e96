"""
Context processors for core app.

Provides template context variables that every page needs.
"""
from typing import Any

from django.http import HttpRequest

from core.decorators import is_admin_mode


def admin_mode(request: HttpRequest) -> dict[str, Any]:
    """
    Adds admin_mode for showing the registered students section.

    Views decorated with @with_admin_mode have already computed it; other
    views fall back to reading the query parameter.
    """
    flag = getattr(request, "admin_mode", None)
    if flag is None:
        flag = is_admin_mode(request)
    return {"admin_mode": flag}
