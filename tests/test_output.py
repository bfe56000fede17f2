"""Tests for embedlog.output — user-facing message helpers."""

from embedlog.lib.log_lib import BufferSink, init_log
from embedlog.lib.log_lib.levels import ERROR, FATAL
from embedlog.output import get_log, print_error, print_ok


def test_print_ok_format(capsys):
    """print_ok should output '[OK] message' format."""
    print_ok("it works")
    assert "[OK] it works" in capsys.readouterr().out


def test_print_error_without_logger_goes_to_stderr(capsys):
    """With the silent default logger, errors fall back to stderr."""
    print_error("broken")
    captured = capsys.readouterr()
    assert captured.err == "ERROR: broken\n"
    assert captured.out == ""


def test_print_error_routes_through_logger():
    """A configured logger that passes ERROR receives the message."""
    sink = BufferSink()
    init_log(ERROR, sink, disabled=False)
    print_error("disk full")
    assert sink.text == "E: disk full\n"


def test_print_error_falls_back_when_gated(capsys):
    """A logger below ERROR does not swallow errors."""
    sink = BufferSink()
    init_log(FATAL, sink, disabled=False)
    print_error("still visible")
    assert sink.getvalue() == b""
    assert "still visible" in capsys.readouterr().err


def test_reexports():
    assert get_log() is get_log()
