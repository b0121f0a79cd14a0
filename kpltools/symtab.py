"""Symbol table for KPL programs: types, constants, objects and scopes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class TypeClass(enum.Enum):
    INT = enum.auto()
    CHAR = enum.auto()
    ARRAY = enum.auto()


class ObjectKind(enum.Enum):
    CONSTANT = enum.auto()
    VARIABLE = enum.auto()
    TYPE = enum.auto()
    FUNCTION = enum.auto()
    PROCEDURE = enum.auto()
    PARAMETER = enum.auto()
    PROGRAM = enum.auto()


class ParamKind(enum.Enum):
    VALUE = enum.auto()
    REFERENCE = enum.auto()


@dataclass
class Type:
    """A KPL type; arrays carry a size and an element type."""

    type_class: TypeClass
    array_size: int = 0
    element_type: Type | None = None


@dataclass
class ConstantValue:
    """An integer or character constant."""

    type_class: TypeClass
    value: int | str


@dataclass(eq=False)
class Scope:
    """The objects declared in one block, linked to the enclosing block."""

    owner: Symbol | None
    outer: Scope | None = None
    objects: list[Symbol] = field(default_factory=list)

    def find(self, name: str) -> Symbol | None:
        """Return the first object in this scope called ``name``, or None."""
        return next((obj for obj in self.objects if obj.name == name), None)


@dataclass(eq=False)
class Symbol:
    """A named object of a KPL program.

    ``type`` is a variable's or parameter's type, a type object's actual type
    or a function's return type. ``scope`` is the block a function, procedure
    or program opens, or the block a variable was declared in.
    """

    name: str
    kind: ObjectKind
    value: ConstantValue | None = None
    type: Type | None = None
    scope: Scope | None = None
    params: list[Symbol] = field(default_factory=list)
    param_kind: ParamKind | None = None
    owner: Symbol | None = None

    def __repr__(self) -> str:
        return f"Symbol({self.name!r}, {self.kind.name})"


def make_int_type() -> Type:
    return Type(TypeClass.INT)


def make_char_type() -> Type:
    return Type(TypeClass.CHAR)


def make_array_type(size: int, element_type: Type) -> Type:
    return Type(TypeClass.ARRAY, size, element_type)


def duplicate_type(type_: Type) -> Type:
    """Return a deep copy of ``type_``."""
    if type_.type_class is TypeClass.ARRAY:
        return make_array_type(type_.array_size, duplicate_type(type_.element_type))
    return Type(type_.type_class)


def compare_type(type1: Type, type2: Type) -> bool:
    """Whether two types are structurally the same."""
    if type1.type_class is not type2.type_class:
        return False
    if type1.type_class is TypeClass.ARRAY:
        return type1.array_size == type2.array_size and compare_type(
            type1.element_type, type2.element_type
        )
    return True


def make_int_constant(value: int) -> ConstantValue:
    return ConstantValue(TypeClass.INT, value)


def make_char_constant(ch: str) -> ConstantValue:
    if len(ch) != 1:
        raise ValueError("a char constant holds exactly one character")
    return ConstantValue(TypeClass.CHAR, ch)


class SymbolTable:
    """Objects of one program, its current block and the built-in routines."""

    def __init__(self) -> None:
        self.program: Symbol | None = None
        self.current_scope: Scope | None = None
        self.globals: list[Symbol] = []

        readc = self.create_function("READC")
        readc.type = make_char_type()
        self.globals.append(readc)

        readi = self.create_function("READI")
        readi.type = make_int_type()
        self.globals.append(readi)

        for proc_name, param_name, param_type in (
            ("WRITEI", "i", make_int_type()),
            ("WRITEC", "ch", make_char_type()),
        ):
            proc = self.create_procedure(proc_name)
            param = self.create_parameter(param_name, ParamKind.VALUE, proc)
            param.type = param_type
            proc.params.append(param)
            self.globals.append(proc)

        self.globals.append(self.create_procedure("WRITELN"))

        self.int_type = make_int_type()
        self.char_type = make_char_type()

    def _with_scope(self, obj: Symbol, outer: Scope | None) -> Symbol:
        obj.scope = Scope(obj, outer)
        return obj

    def create_program(self, name: str) -> Symbol:
        program = self._with_scope(Symbol(name, ObjectKind.PROGRAM), None)
        self.program = program
        return program

    def create_constant(self, name: str) -> Symbol:
        return Symbol(name, ObjectKind.CONSTANT)

    def create_type(self, name: str) -> Symbol:
        return Symbol(name, ObjectKind.TYPE)

    def create_variable(self, name: str) -> Symbol:
        return Symbol(name, ObjectKind.VARIABLE, scope=self.current_scope)

    def create_function(self, name: str) -> Symbol:
        return self._with_scope(Symbol(name, ObjectKind.FUNCTION), self.current_scope)

    def create_procedure(self, name: str) -> Symbol:
        return self._with_scope(Symbol(name, ObjectKind.PROCEDURE), self.current_scope)

    def create_parameter(self, name: str, kind: ParamKind, owner: Symbol) -> Symbol:
        return Symbol(name, ObjectKind.PARAMETER, param_kind=kind, owner=owner)

    def enter_block(self, scope: Scope) -> None:
        self.current_scope = scope

    def exit_block(self) -> None:
        if self.current_scope is None:
            raise RuntimeError("no block to exit")
        self.current_scope = self.current_scope.outer

    def lookup(self, name: str) -> Symbol | None:
        """Find ``name`` in the current block or any block enclosing it."""
        scope = self.current_scope
        while scope is not None:
            found = scope.find(name)
            if found is not None:
                return found
            scope = scope.outer
        return None

    def declare(self, obj: Symbol) -> None:
        """Add ``obj`` to the current block; parameters also join their routine."""
        scope = self.current_scope
        if scope is None:
            raise RuntimeError("no block entered")
        if obj.kind is ObjectKind.PARAMETER:
            owner = scope.owner
            if owner is not None and owner.kind in (ObjectKind.FUNCTION, ObjectKind.PROCEDURE):
                owner.params.append(obj)
        scope.objects.append(obj)