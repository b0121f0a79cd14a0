import pytest

from kpltools.debug import format_constant, format_object, format_scope, format_type
from kpltools.symtab import (
    ParamKind,
    SymbolTable,
    make_array_type,
    make_char_constant,
    make_char_type,
    make_int_constant,
    make_int_type,
)


def test_basic_types():
    assert format_type(make_int_type()) == "Int"
    assert format_type(make_char_type()) == "Char"


def test_array_type_nests():
    inner = make_array_type(3, make_char_type())
    assert format_type(inner) == "Arr(3,Char)"
    outer = make_array_type(7, inner)
    assert format_type(outer) == f"Arr(7,{format_type(inner)})"


def test_constants():
    assert format_constant(make_int_constant(42)) == "42"
    assert format_constant(make_char_constant("x")) == "'x'"


def test_constant_object_with_indent():
    table = SymbolTable()
    const = table.create_constant("C")
    const.value = make_int_constant(5)
    text = format_object(const, 3)
    assert text.startswith("   Const C = ")
    assert text.endswith("5")
    assert "\n" not in text


def test_parameter_kinds():
    table = SymbolTable()
    proc = table.create_procedure("P")
    by_value = table.create_parameter("a", ParamKind.VALUE, proc)
    by_value.type = make_int_type()
    by_ref = table.create_parameter("b", ParamKind.REFERENCE, proc)
    by_ref.type = make_char_type()
    assert format_object(by_value, 0) == "Param a : Int"
    assert format_object(by_ref, 0) == "Param VAR b : Char"


def test_function_header_and_scope_indent():
    table = SymbolTable()
    program = table.create_program("PRG")
    table.enter_block(program.scope)
    func = table.create_function("F")
    func.type = make_int_type()
    table.declare(func)
    table.enter_block(func.scope)
    var = table.create_variable("x")
    var.type = make_char_type()
    table.declare(var)
    table.exit_block()

    text = format_object(func, 2)
    lines = text.split("\n")
    assert lines[0] == "  Function F : Int"
    assert lines[1] == " " * 6 + format_object(var, 0)
    assert text.endswith("\n")


def test_scope_joins_objects_with_newlines():
    table = SymbolTable()
    program = table.create_program("PRG")
    table.enter_block(program.scope)
    for name in ("a", "b", "c"):
        var = table.create_variable(name)
        var.type = make_int_type()
        table.declare(var)
    text = format_scope(program.scope, 1)
    assert text.count("\n") == 3
    assert text.splitlines() == [format_object(obj, 1) for obj in program.scope.objects]


def test_program_prints_empty_scope():
    table = SymbolTable()
    program = table.create_program("EMPTY")
    assert format_object(program, 0) == "Program EMPTY\n"


def test_missing_type_raises():
    table = SymbolTable()
    var = table.create_variable("v")
    with pytest.raises(ValueError):
        format_object(var, 0)