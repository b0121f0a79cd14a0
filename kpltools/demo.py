"""Build a sample symbol table by hand and print it."""

from __future__ import annotations

import argparse
import sys

from kpltools.debug import format_object
from kpltools.symtab import (
    ParamKind,
    SymbolTable,
    make_array_type,
    make_char_constant,
    make_char_type,
    make_int_constant,
    make_int_type,
)


def build_demo_table() -> SymbolTable:
    """Return a table holding program PRG with a function and a procedure."""
    table = SymbolTable()

    program = table.create_program("PRG")
    table.enter_block(program.scope)

    obj = table.create_constant("c1")
    obj.value = make_int_constant(10)
    table.declare(obj)

    obj = table.create_constant("c2")
    obj.value = make_char_constant("a")
    table.declare(obj)

    obj = table.create_type("t1")
    obj.type = make_array_type(10, make_int_type())
    table.declare(obj)

    obj = table.create_variable("v1")
    obj.type = make_int_type()
    table.declare(obj)

    obj = table.create_variable("v2")
    obj.type = make_array_type(10, make_array_type(10, make_int_type()))
    table.declare(obj)

    func = table.create_function("f")
    func.type = make_int_type()
    table.declare(func)

    table.enter_block(func.scope)
    obj = table.create_parameter("p1", ParamKind.VALUE, table.current_scope.owner)
    obj.type = make_int_type()
    table.declare(obj)
    obj = table.create_parameter("p2", ParamKind.REFERENCE, table.current_scope.owner)
    obj.type = make_char_type()
    table.declare(obj)
    table.exit_block()

    proc = table.create_procedure("p")
    table.declare(proc)

    table.enter_block(proc.scope)
    obj = table.create_parameter("v1", ParamKind.VALUE, table.current_scope.owner)
    obj.type = make_int_type()
    table.declare(obj)

    obj = table.create_constant("c1")
    obj.value = make_char_constant("a")
    table.declare(obj)

    obj = table.create_constant("c3")
    obj.value = make_int_constant(10)
    table.declare(obj)

    obj = table.create_type("t1")
    obj.type = make_int_type()
    table.declare(obj)

    obj = table.create_type("t2")
    obj.type = make_array_type(10, make_int_type())
    table.declare(obj)

    obj = table.create_variable("v2")
    obj.type = make_array_type(10, make_int_type())
    table.declare(obj)

    obj = table.create_variable("v3")
    obj.type = make_char_type()
    table.declare(obj)
    table.exit_block()

    table.exit_block()
    return table


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print a sample symbol table.")
    parser.parse_args(argv)
    table = build_demo_table()
    sys.stdout.write(format_object(table.program, 0))
    return 0


if __name__ == "__main__":
    sys.exit(main())