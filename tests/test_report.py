import io

from primval.internals import errors as er
from primval.internals.errors import ERR, DecodeError, report_decode_error
from primval.internals.report import Reporter, json_path


def test_json_path():
    assert json_path("$", 0) == "$[0]"
    assert json_path("$[0]", "Scalar") == "$[0].Scalar"


def test_emit_routes_by_severity():
    r = Reporter()
    er.emit(r, ERR.CE4101, "$[0]", value=300, int_ty="u8", lo=0, hi=255)
    er.emit(r, ERR.CW4101, None, int_ty="usize", bits=64)
    assert [d.kind for d in r.items] == ["error", "warning"]
    assert r.has_errors and r.has_warnings


def test_report_decode_error():
    r = Reporter()
    report_decode_error(r, DecodeError("CE4002", "$.int_ty", name='"U7"'))
    assert r.items[0].code == "CE4002"
    assert r.items[0].message == 'unknown integer type "U7"'
    assert r.items[0].path == "$.int_ty"


def test_format_plain():
    r = Reporter(filename="consts.json")
    r.error("CE4001", "not an integer or an integer literal", "$[2].Scalar.value")
    r.warn("CW4101", "width of usize depends on the target pointer size, assuming 64 bits", None)
    text = r.format(use_color=False, use_unicode=False)
    assert text.splitlines() == [
        "consts.json: error [CE4001]: not an integer or an integer literal.",
        "  ` at $[2].Scalar.value",
        "consts.json: warning [CW4101]: width of usize depends on the target pointer size, assuming 64 bits.",
    ]


def test_format_unicode_and_color():
    r = Reporter()
    r.error("CE4001", "not an integer or an integer literal", "$")
    text = r.format(use_color=True, use_unicode=True)
    assert "╭──┤" in text and "╰── at" in text
    assert "\x1b[31m" in text


def test_print_to_non_tty_is_plain(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    r = Reporter()
    r.error("CE4001", "not an integer or an integer literal", "$")
    stream = io.StringIO()
    r.print(stream)
    assert "\x1b[" not in stream.getvalue()
    assert stream.getvalue().startswith("<input>: error [CE4001]")


def test_print_nothing_when_empty():
    stream = io.StringIO()
    Reporter().print(stream)
    assert stream.getvalue() == ""
