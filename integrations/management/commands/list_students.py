from django.core.management.base import BaseCommand, CommandError

from core.exceptions import FetchError
from integrations.config import ApiConfig
from integrations.students_client import StudentsApiClient
from student_registration.roster import TABLE_HEADERS, StudentRecord


class Command(BaseCommand):
    help = "Fetch /api/students from the students backend and print the registrations"

    def add_arguments(self, parser):
        parser.add_argument(
            "--base-url",
            default=None,
            help="Backend root URL (defaults to BACKEND_URL from the environment)",
        )

    def handle(self, *args, **options):
        overrides = {}
        if options.get("base_url"):
            overrides["api_base"] = options["base_url"]
        config = ApiConfig.from_settings(**overrides)
        if config.is_same_origin:
            raise CommandError(
                "No backend URL configured: set BACKEND_URL or pass --base-url."
            )

        client = StudentsApiClient(config=config)
        try:
            items = client.list_students()
        except FetchError as exc:
            raise CommandError(f"Could not load students: {exc.message}") from exc

        records = [StudentRecord.from_api(item) for item in items]
        if not records:
            self.stdout.write("No students registered yet.")
            return

        self.stdout.write(" | ".join(TABLE_HEADERS))
        for rec in records:
            self.stdout.write(
                " | ".join(
                    [
                        rec.student_name,
                        rec.parent_name,
                        rec.email,
                        rec.phone,
                        rec.course,
                        rec.grade,
                    ]
                )
            )

        self.stdout.write(self.style.SUCCESS(f"{len(records)} student(s)"))
