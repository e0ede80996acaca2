import pytest

from dslc.semantic import SemanticAnalyzer, SemanticError, analyse
from dslc.syntax import Assign, BinaryOp, BinOp, Number, Print, Program, Var


def test_assigned_variables_pass_and_are_in_table():
    program = Program([
        Assign("x", Number(5)),
        Assign("y", BinaryOp(BinOp.ADD, Var("x"), Number(3))),
        Print(Var("y")),
    ])
    table = analyse(program)
    assert sorted(entry.name for entry in table) == ["x", "y"]
    assert all(entry.defined for entry in table)


def test_read_before_assignment_is_allowed():
    program = Program([Print(Var("z")), Assign("z", Number(1))])
    table = analyse(program)
    assert "z" in table


def test_self_reference_is_allowed():
    program = Program([Assign("x", BinaryOp(BinOp.ADD, Var("x"), Number(1)))])
    assert len(analyse(program)) == 1


def test_undeclared_variable_raises():
    program = Program([Print(Var("missing"))])
    with pytest.raises(SemanticError) as info:
        analyse(program)
    assert info.value.undeclared == ["missing"]
    assert info.value.error_count == 1
    assert "Undeclared variable: 'missing'" in str(info.value)


def test_every_reference_is_reported_in_order():
    program = Program([
        Assign("a", BinaryOp(BinOp.MUL, Var("b"), Var("c"))),
        Print(Var("b")),
    ])
    with pytest.raises(SemanticError) as info:
        analyse(program)
    assert info.value.undeclared == ["b", "c", "b"]
    assert info.value.error_count == 3


def test_analyzer_table_is_shared_with_result():
    analyzer = SemanticAnalyzer()
    table = analyzer.analyse(Program([Assign("n", Number(2))]))
    assert table is analyzer.table
    assert analyzer.table.lookup("n").name == "n"


def test_empty_program_and_none():
    assert len(analyse(Program())) == 0
    assert len(analyse(None)) == 0


def test_non_node_raises_type_error():
    with pytest.raises(TypeError):
        analyse(Program([Print("not a node")]))