import io
import logging

from iacver.display import Displayer, display_detection_info


def test_display_writes_line():
    stream = io.StringIO()
    Displayer(stream).display("hello there")
    assert stream.getvalue() == "hello there\n"


def test_quiet_displays_nothing():
    stream = io.StringIO()
    displayer = Displayer(stream, quiet=True)
    displayer.display("hidden")
    displayer.log(logging.ERROR, "hidden too")
    assert stream.getvalue() == ""


def test_buffered_messages_written_on_normal_flush():
    stream = io.StringIO()
    displayer = Displayer(stream, buffered=True)
    displayer.display("first")
    assert stream.getvalue() == ""
    displayer.flush(False)
    assert stream.getvalue() == "first\n"
    displayer.display("second")
    assert stream.getvalue() == "first\nsecond\n"


def test_buffered_messages_dropped_on_proxy_flush():
    stream = io.StringIO()
    displayer = Displayer(stream, buffered=True)
    displayer.display("dropped")
    displayer.flush(True)
    displayer.flush(False)
    assert "dropped" not in stream.getvalue()


def test_log_respects_level():
    stream = io.StringIO()
    displayer = Displayer(stream, level=logging.WARNING)
    displayer.log(logging.DEBUG, "invisible")
    displayer.log(logging.WARNING, "visible", error="boom")
    output = stream.getvalue()
    assert "invisible" not in output
    assert "visible" in output
    assert "boom" in output


def test_is_debug():
    assert Displayer(level=logging.DEBUG).is_debug()
    assert not Displayer(level=logging.INFO).is_debug()


def test_display_detection_info_returns_version_and_reports_source():
    stream = io.StringIO()
    result = display_detection_info(Displayer(stream), "1.6.0", "/tmp/.terraform-version")
    assert result == "1.6.0"
    assert stream.getvalue() == "Resolved version from /tmp/.terraform-version : 1.6.0\n"