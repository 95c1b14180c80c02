from app.schemas import FeedbackCreate, FeedbackUpdate
from app.services import FailureKind, FeedbackService
from tests.stubs import StubRepository, make_record


def test_create_returns_new_id():
    repository = StubRepository()
    service = FeedbackService(repository)

    result = service.create_feedback(
        FeedbackCreate(busNumber="XYZ-123", busLine="101", overallRating=4, safetyRating=5)
    )

    assert result.ok
    assert result.value.id == 42
    name, fields = repository.calls[0]
    assert name == "create"
    assert fields["bus_number"] == "XYZ-123"
    assert fields["comment"] is None


def test_get_missing_record_is_not_found_failure():
    service = FeedbackService(StubRepository())

    result = service.get_feedback(7)

    assert not result.ok
    assert result.failure.kind is FailureKind.NOT_FOUND
    assert result.failure.message == "Feedback com ID 7 não encontrado."


def test_update_without_fields_never_reaches_repository():
    repository = StubRepository(rows={1: make_record(1)})
    service = FeedbackService(repository)

    result = service.update_feedback(1, FeedbackUpdate())

    assert result.failure.kind is FailureKind.VALIDATION
    assert repository.calls == []


def test_update_zero_rows_on_existing_record_is_no_change():
    repository = StubRepository(rows={3: make_record(3)}, update_result=0)
    service = FeedbackService(repository)

    result = service.update_feedback(3, FeedbackUpdate(comment="x"))

    assert result.ok
    assert result.value.message.startswith("Nenhuma alteração")
    assert ("get_by_id", 3) in repository.calls


def test_update_zero_rows_on_missing_record_is_not_found():
    service = FeedbackService(StubRepository(update_result=0))

    result = service.update_feedback(3, FeedbackUpdate(comment="x"))

    assert result.failure.kind is FailureKind.NOT_FOUND


def test_update_sends_only_supplied_fields():
    repository = StubRepository(rows={3: make_record(3)}, update_result=1)
    service = FeedbackService(repository)

    service.update_feedback(3, FeedbackUpdate(comment="x", routeChange=None))

    assert ("update", 3, {"comment": "x", "route_change": None}) in repository.calls


def test_delete_missing_record_is_not_found():
    service = FeedbackService(StubRepository())

    result = service.delete_feedback(9)

    assert result.failure.kind is FailureKind.NOT_FOUND


def test_repository_errors_become_storage_failures():
    service = FeedbackService(StubRepository(error="Erro ao buscar feedbacks no banco de dados."))

    result = service.list_feedback()

    assert result.failure.kind is FailureKind.STORAGE
    assert result.failure.message == "Erro ao buscar feedbacks no banco de dados."
