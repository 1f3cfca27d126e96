"""
Views for the student registration page.

A single page:
- Anyone: fill in and submit the registration form
- With ?admin=1: also see the registered students list (read-only, demo gate)
"""

from django.contrib import messages
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from core.decorators import with_admin_mode
from integrations.students_client import StudentsApiClient
from student_registration.flow import RegistrationFlow
from student_registration.forms import StudentRegistrationForm
from student_registration.roster import TABLE_HEADERS, StudentRoster


def get_students_client(request):
    """Client for the students API; an empty BACKEND_URL means this site's origin."""
    return StudentsApiClient.for_request(request)


@with_admin_mode
@require_http_methods(["GET", "POST"])
def register(request):
    """
    Show the registration form, and handle its submission.

    - Validation or backend failure: re-render with the entered values and an error banner
    - Success: redirect back (same query string) so the form starts empty again
    """
    client = get_students_client(request)
    flow = RegistrationFlow(client)

    if request.method == "POST":
        form = StudentRegistrationForm(request.POST)
        flow.update_fields(form.registration_data())
        outcome = flow.submit()

        if outcome.is_success:
            messages.success(request, outcome.message)
            return redirect(request.get_full_path())

        messages.error(request, outcome.message)
    else:
        form = StudentRegistrationForm()

    roster = None
    if request.admin_mode:
        roster = StudentRoster(client)
        roster.refresh()
        if roster.error:
            messages.error(request, roster.error)

    return render(
        request,
        "student_registration/register.html",
        {
            "form": form,
            "roster": roster,
            "table_headers": TABLE_HEADERS,
        },
    )
