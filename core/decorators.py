"""
View decorators for the registration site.

@with_admin_mode
    Reads the demo ``?admin=1`` query parameter into ``request.admin_mode``.

    The flag only switches on the read-only registered students list. It is
    NOT an access control: anyone can add the parameter, and any real
    restriction has to live in the students backend.

Usage:
    from core.decorators import with_admin_mode

    @with_admin_mode
    def register(request):
        if request.admin_mode:
            ...
"""
from functools import wraps

ADMIN_QUERY_PARAM = "admin"


def is_admin_mode(request):
    return request.GET.get(ADMIN_QUERY_PARAM) == "1"


def with_admin_mode(view_func):
    """
    Decorator that sets ``request.admin_mode`` before calling the view.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        request.admin_mode = is_admin_mode(request)
        return view_func(request, *args, **kwargs)
    return wrapper
