import io

import pytest

from dslc.syntax import (
    Assign,
    BinaryOp,
    BinOp,
    Number,
    Print,
    Program,
    Var,
    format_ast,
    print_ast,
)


def _sample_program():
    return Program(
        [
            Assign("x", Number(10)),
            Assign("y", BinaryOp(BinOp.ADD, Var("x"), Number(5))),
            Print(BinaryOp(BinOp.MUL, Var("x"), Var("y"))),
        ]
    )


def test_format_full_program():
    expected = (
        "[Program] (3 statements)\n"
        "  [Assign] x =\n"
        "    [Number] 10\n"
        "  [Assign] y =\n"
        "    [BinOp] +\n"
        "      [Var] x\n"
        "      [Number] 5\n"
        "  [Print]\n"
        "    [BinOp] *\n"
        "      [Var] x\n"
        "      [Var] y\n"
    )
    assert format_ast(_sample_program()) == expected


@pytest.mark.parametrize(
    "op, symbol",
    [(BinOp.ADD, "+"), (BinOp.SUB, "-"), (BinOp.MUL, "*"), (BinOp.DIV, "/")],
)
def test_operator_symbols(op, symbol):
    assert op.symbol == symbol
    assert format_ast(BinaryOp(op, Number(1), Number(2))).splitlines()[0] == f"[BinOp] {symbol}"


def test_indent_prefixes_two_spaces_per_level():
    text = format_ast(Number(7), indent=3)
    assert text == "      [Number] 7\n"


def test_none_formats_to_empty():
    assert format_ast(None) == ""


def test_empty_program():
    assert format_ast(Program()) == "[Program] (0 statements)\n"


def test_negative_number():
    assert format_ast(Number(-4)) == "[Number] -4\n"


def test_print_ast_to_file_matches_format():
    buf = io.StringIO()
    prog = _sample_program()
    print_ast(prog, 1, buf)
    assert buf.getvalue() == format_ast(prog, 1)


def test_print_ast_defaults_to_stdout(capsys):
    print_ast(Var("abc"))
    assert capsys.readouterr().out == "[Var] abc\n"


def test_program_statements_copied_to_list():
    stmts = (Print(Number(1)), Print(Number(2)))
    prog = Program(stmts)
    assert prog.statements == list(stmts)


def test_unknown_node_rejected():
    with pytest.raises(TypeError):
        format_ast(Program([object()]))


def test_nodes_compare_by_value():
    assert BinaryOp(BinOp.SUB, Var("a"), Number(3)) == BinaryOp(BinOp.SUB, Var("a"), Number(3))
    assert Assign("a", Number(1)) != Assign("b", Number(1))