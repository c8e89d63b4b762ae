import pytest

from classgen.core.emitter import CodeEmitter


def test_emit_line_indents_with_current_depth():
    emitter = CodeEmitter(indent="\t", line_ending="\n", depth=2)
    emitter.emit_line("x")
    emitter.emit_line("y", 0)
    assert emitter.render() == "\t\tx\ny\n"


def test_block_balances_braces_and_restores_depth():
    emitter = CodeEmitter(line_ending="\n")
    emitter.emit_line("class A")
    with emitter.block():
        assert emitter.depth == 1
        with emitter.block():
            assert emitter.depth == 2
            emitter.emit_line("inner")
        emitter.emit_line("after")
    assert emitter.depth == 0
    assert emitter.lines == ["class A", "{", "\t{", "\t\tinner", "\t}", "\tafter", "}"]


def test_block_restores_depth_when_body_raises():
    emitter = CodeEmitter(line_ending="\n", depth=1)
    with pytest.raises(RuntimeError):
        with emitter.block():
            with emitter.block():
                raise RuntimeError("boom")
    assert emitter.depth == 1
    assert emitter.lines.count("\t{") == emitter.lines.count("\t}")


def test_blank_lines_carry_no_indentation():
    emitter = CodeEmitter(line_ending="\n", depth=3)
    emitter.emit_blank_line()
    assert emitter.render() == "\n"


def test_custom_indent_and_line_ending():
    emitter = CodeEmitter(indent="    ", line_ending="\r\n")
    with emitter.block():
        emitter.emit_line("a;")
    assert emitter.render() == "{\r\n    a;\r\n}\r\n"


def test_negative_depth_is_rejected():
    with pytest.raises(ValueError):
        CodeEmitter(depth=-1)
