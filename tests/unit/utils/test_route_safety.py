import pytest

from portfolio.errors import NotFoundError, SystemError
from portfolio.utils import route_safety
from portfolio.utils.route_safety import safe_route_call


@pytest.fixture
def logged(monkeypatch) -> list[tuple]:
    events: list[tuple] = []

    def _record(level, event, **kwargs):
        events.append((level, event, kwargs))

    monkeypatch.setattr(route_safety, "log_with_context", _record)
    return events


@pytest.mark.unit
def test_returns_result_without_logging(logged) -> None:
    assert safe_route_call(lambda a, b: a + b, module="m", action="add", public_error="x", func_args=(1, 2)) == 3
    assert logged == []


@pytest.mark.unit
def test_app_errors_are_logged_as_warning_and_reraised(logged) -> None:
    def _fail() -> None:
        raise NotFoundError("gone")

    with pytest.raises(NotFoundError):
        safe_route_call(_fail, module="admin", action="project_list", public_error="x", context={"entity": "project"})

    level, event, payload = logged[0]
    assert level == "warning"
    assert event == "project_list_failed"
    assert payload["context"] == {"entity": "project"}
    assert payload["extra"]["error_type"] == "NotFoundError"


@pytest.mark.unit
def test_unexpected_errors_are_wrapped(logged) -> None:
    def _fail() -> None:
        raise KeyError("id")

    with pytest.raises(SystemError) as exc_info:
        safe_route_call(_fail, module="admin", action="project_list", public_error="Could not load data")

    assert exc_info.value.message == "Could not load data"
    assert isinstance(exc_info.value.__cause__, KeyError)
    assert logged[0][0] == "error"
