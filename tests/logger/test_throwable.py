"""Tests for the Throwable adapter."""

from logfacade.api_error import AppError
from logfacade.logger.backtrace import render_backtrace_plain, render_frame
from logfacade.logger.throwable import (
    ExceptionAdapter,
    StackFrame,
    as_throwable,
    package_key_from,
)


def _inner():
    raise ValueError("inner failure")


def _outer():
    _inner()


class Gateway:
    def charge(self):
        raise ConnectionError("gateway down")


def capture(func):
    try:
        func()
    except Exception as exc:
        return exc
    raise AssertionError("expected an exception")


class TestExceptionAdapter:
    """Test ExceptionAdapter."""

    def test_trace_is_innermost_first(self):
        adapter = ExceptionAdapter(capture(_outer))

        functions = [frame.function for frame in adapter.trace]
        assert functions[:2] == ["_inner", "_outer"]
        assert adapter.trace[0].file == __file__
        assert adapter.trace[0].class_name == __name__

    def test_method_frame_has_class_name(self):
        adapter = ExceptionAdapter(capture(Gateway().charge))

        assert adapter.trace[0].class_name == f"{__name__}.Gateway"
        assert adapter.trace[0].function == "charge"

    def test_unraised_exception_has_empty_trace(self):
        assert ExceptionAdapter(ValueError("never raised")).trace == []

    def test_message_prefers_message_attribute(self):
        assert ExceptionAdapter(AppError("readable")).message == "readable"
        assert ExceptionAdapter(KeyError("sku")).message == "'sku'"

    def test_code(self):
        assert ExceptionAdapter(AppError("x", code=42)).code == 42
        assert ExceptionAdapter(ValueError("x")).code == 0

        flagged = ValueError("x")
        flagged.code = True
        assert ExceptionAdapter(flagged).code == 0

        named = ValueError("x")
        named.code = "E42"
        assert ExceptionAdapter(named).code == 0

    def test_previous_prefers_cause(self):
        def wrap():
            try:
                _inner()
            except ValueError as exc:
                raise RuntimeError("wrapped") from exc

        previous = ExceptionAdapter(capture(wrap)).previous

        assert previous is not None
        assert previous.message == "inner failure"

    def test_previous_falls_back_to_context(self):
        def handle():
            try:
                _inner()
            except ValueError:
                raise RuntimeError("while handling")

        previous = ExceptionAdapter(capture(handle)).previous

        assert previous is not None
        assert previous.message == "inner failure"

    def test_suppressed_context_has_no_previous(self):
        def hide():
            try:
                _inner()
            except ValueError:
                raise RuntimeError("clean") from None

        assert ExceptionAdapter(capture(hide)).previous is None

    def test_reference_code(self):
        assert ExceptionAdapter(AppError("x")).reference_code is not None
        assert ExceptionAdapter(ValueError("x")).reference_code is None


class TestAsThrowable:
    """Test as_throwable."""

    def test_wraps_exceptions(self):
        assert isinstance(as_throwable(ValueError("x")), ExceptionAdapter)

    def test_passes_other_objects_through(self):
        sentinel = object()

        assert as_throwable(sentinel) is sentinel


class TestPackageKey:
    """Test package_key_from."""

    def test_second_segment(self):
        assert package_key_from("shop.billing.Invoice") == "billing"

    def test_missing(self):
        assert package_key_from("Invoice") is None
        assert package_key_from("") is None
        assert package_key_from(None) is None


class TestPlainBacktrace:
    """Test the default backtrace rendering."""

    def test_render_frame(self):
        frame = StackFrame(file="shop/billing.py", line=42, function="pay", class_name="shop.billing.Invoice")

        assert render_frame(0, frame) == "#0 shop.billing.Invoice.pay() at shop/billing.py:42"

    def test_render_frame_with_unknowns(self):
        assert render_frame(3, StackFrame()) == "#3 {unknown}()"

    def test_render_backtrace_numbers_frames(self):
        frames = [StackFrame(function="a"), StackFrame(function="b")]

        assert render_backtrace_plain(frames) == "#0 a()\n#1 b()\n"

    def test_empty_backtrace(self):
        assert render_backtrace_plain([]) == ""
