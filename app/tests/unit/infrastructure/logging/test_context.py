"""Unit tests for infrastructure.logging.context module."""

import uuid

import pytest
import structlog

from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)


def bound():
    return structlog.contextvars.get_contextvars()


@pytest.mark.unit
class TestBindRequestContext:
    """Tests for bind_request_context()."""

    def test_generates_correlation_id(self):
        with bind_request_context(locale="en-US"):
            uuid.UUID(get_correlation_id())

    def test_uses_given_correlation_id(self):
        with bind_request_context(correlation_id="req-42"):
            assert get_correlation_id() == "req-42"

    def test_binds_request_fields(self):
        # Arrange / Act
        with bind_request_context(
            request_path="/translate",
            request_method="POST",
            locale="de-DE",
            identifier="greeting",
        ):
            ctx = bound()

        # Assert
        assert ctx["request_path"] == "/translate"
        assert ctx["request_method"] == "POST"
        assert ctx["locale"] == "de-DE"
        assert ctx["identifier"] == "greeting"

    def test_none_fields_are_not_bound(self):
        with bind_request_context(correlation_id="req-1", locale=None, source=None):
            ctx = bound()

        assert ctx == {"correlation_id": "req-1"}

    def test_context_removed_on_exit(self):
        with bind_request_context(correlation_id="req-1", locale="pt-BR"):
            pass

        assert bound() == {}

    def test_context_removed_after_exception(self):
        with pytest.raises(ValueError):
            with bind_request_context(correlation_id="req-1"):
                raise ValueError("boom")

        assert get_correlation_id() is None

    def test_nested_blocks_restore_outer_values(self):
        with bind_request_context(correlation_id="outer", locale="en-US"):
            with bind_request_context(correlation_id="inner", locale="de-DE"):
                assert bound()["locale"] == "de-DE"

            assert get_correlation_id() == "outer"
            assert bound()["locale"] == "en-US"


@pytest.mark.unit
class TestCorrelationId:
    """Tests for get_correlation_id()."""

    def test_unset(self):
        assert get_correlation_id() is None

    def test_reads_bound_value(self):
        structlog.contextvars.bind_contextvars(correlation_id="first")
        structlog.contextvars.bind_contextvars(correlation_id="second")

        assert get_correlation_id() == "second"


@pytest.mark.unit
def test_clear_request_context_removes_everything():
    structlog.contextvars.bind_contextvars(correlation_id="req-1", locale="de-DE")

    clear_request_context()
    clear_request_context()

    assert bound() == {}
