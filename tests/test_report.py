import io

from qr_url_generator.report import Level, format_message, report, use_color


def test_format_message_prefixes():
    assert format_message(Level.INFO, "hello") == "hello"
    assert format_message(Level.SUCCESS, "done") == "✓ done"
    assert format_message(Level.WARNING, "careful") == "Note: careful"
    assert format_message(Level.ERROR, "broken") == "Error: broken"


def test_format_message_color_wraps_in_ansi_codes():
    text = format_message(Level.ERROR, "broken", color=True)
    assert text.startswith("\033[31m")
    assert text.endswith("\033[0m")
    assert "Error: broken" in text


def test_format_message_info_is_never_colored():
    assert format_message(Level.INFO, "plain", color=True) == "plain"


def test_report_routes_by_level(capsys):
    report(Level.INFO, "to stdout")
    report(Level.SUCCESS, "also stdout")
    report(Level.WARNING, "to stderr")
    report(Level.ERROR, "also stderr")

    captured = capsys.readouterr()
    assert "to stdout" in captured.out
    assert "also stdout" in captured.out
    assert "to stderr" in captured.err
    assert "Error: also stderr" in captured.err
    assert "\033[" not in captured.out + captured.err


def test_report_explicit_stream():
    stream = io.StringIO()
    report(Level.ERROR, "boom", stream=stream, color=False)
    assert stream.getvalue() == "Error: boom\n"


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def test_use_color_only_for_tty(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert use_color(FakeTTY())
    assert not use_color(io.StringIO())


def test_use_color_respects_no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert not use_color(FakeTTY())


def test_report_escapes_unencodable_characters():
    raw = io.BytesIO()
    stream = io.TextIOWrapper(raw, encoding="utf-8", newline="\n")

    report(Level.INFO, "URL set to: https://ex\udcffample.com", stream=stream, color=False)
    stream.flush()

    assert raw.getvalue() == b"URL set to: https://ex\\udcffample.com\n"


def test_report_escapes_for_narrow_encodings():
    raw = io.BytesIO()
    stream = io.TextIOWrapper(raw, encoding="ascii", newline="\n")

    report(Level.SUCCESS, "saved", stream=stream, color=False)
    stream.flush()

    assert raw.getvalue() == b"\\u2713 saved\n"
