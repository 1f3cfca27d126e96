from core.exceptions import FetchError
from integrations.tests.helpers import DummySession, make_client, make_response
from student_registration.roster import RosterState, StudentRecord, StudentRoster


class DummyListClient:
    def __init__(self, results):
        self.results = list(results)
        self.calls = 0
        self.roster = None
        self.seen_states = []

    def list_students(self):
        self.calls += 1
        if self.roster is not None:
            self.seen_states.append(self.roster.state)
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def test_wrapped_students_body_gives_one_record():
    session = DummySession(
        [make_response(200, {"students": [{"student_name": "A", "email": "a@x.com"}]})]
    )
    roster = StudentRoster(make_client(session))

    records = roster.refresh()

    assert records == [StudentRecord(student_name="A", email="a@x.com")]
    assert roster.state is RosterState.POPULATED


def test_empty_list_is_empty_state():
    roster = StudentRoster(make_client(DummySession([make_response(200, [])])))

    assert roster.refresh() == []
    assert roster.state is RosterState.EMPTY
    assert roster.error is None


def test_state_is_loading_while_fetching():
    client = DummyListClient([[{"email": "a@x.com"}]])
    roster = StudentRoster(client)
    client.roster = roster

    roster.refresh()

    assert client.seen_states == [RosterState.LOADING]
    assert roster.loading is False


def test_refresh_replaces_snapshot():
    client = DummyListClient(
        [
            [{"student_name": "A"}, {"student_name": "B"}],
            [{"student_name": "C"}],
        ]
    )
    roster = StudentRoster(client)

    roster.refresh()
    roster.refresh()

    assert [r.student_name for r in roster.records] == ["C"]


def test_failed_refresh_keeps_previous_snapshot():
    client = DummyListClient(
        [[{"student_name": "A"}], FetchError("maintenance", status=503)]
    )
    roster = StudentRoster(client)
    roster.refresh()

    records = roster.refresh()

    assert [r.student_name for r in records] == ["A"]
    assert roster.error == "Could not load students: maintenance"
    assert roster.loading is False
    assert roster.state is RosterState.POPULATED


def test_error_is_cleared_by_next_successful_refresh():
    client = DummyListClient([FetchError(), []])
    roster = StudentRoster(client)

    roster.refresh()
    assert roster.error == "Could not load students: Failed to fetch students"

    roster.refresh()
    assert roster.error is None


def test_record_from_api_reads_display_fields():
    record = StudentRecord.from_api(
        {
            "id": 12,
            "student_name": "Alex Rivera",
            "parent_name": "Jane Rivera",
            "email": "alex@example.com",
            "phone": "555-0100",
            "course": "Adult Piano",
            "grade": 4,
        }
    )

    assert record.grade == "4"
    assert record.id == 12
    assert record.row_key == "12"


def test_record_from_api_falls_back_to_request_schema():
    record = StudentRecord.from_api(
        {
            "full_name": "Alex Rivera",
            "email": "alex@example.com",
            "phone": None,
            "instrument": "Children Piano",
            "experience_level": "Beginner",
        }
    )

    assert record == StudentRecord(
        student_name="Alex Rivera",
        email="alex@example.com",
        course="Children Piano",
        grade="Beginner",
    )
    assert record.row_key == "alex@example.com"
