"""Readable dumps of symbol-table contents."""

from __future__ import annotations

from kpltools.symtab import ConstantValue, ObjectKind, ParamKind, Scope, Symbol, Type, TypeClass

_SCOPE_INDENT = 4


def format_type(type_: Type) -> str:
    """Render a type as ``Int``, ``Char`` or ``Arr(size,element)``."""
    if type_.type_class is TypeClass.INT:
        return "Int"
    if type_.type_class is TypeClass.CHAR:
        return "Char"
    if type_.element_type is None:
        raise ValueError("array type has no element type")
    return f"Arr({type_.array_size},{format_type(type_.element_type)})"


def format_constant(value: ConstantValue) -> str:
    """Render a constant: integers as digits, characters in single quotes."""
    if value.type_class is TypeClass.INT:
        return str(value.value)
    if value.type_class is TypeClass.CHAR:
        return f"'{value.value}'"
    return ""


def _require(attribute, obj: Symbol, what: str):
    if attribute is None:
        raise ValueError(f"{obj.kind.name.lower()} {obj.name} has no {what}")
    return attribute


def format_object(obj: Symbol, indent: int = 0) -> str:
    """Render one object; routines and programs are followed by their scope.

    A constant, type, variable or parameter gives a single line with no
    trailing newline. A function, procedure or program gives its header line,
    a newline, and then its scope indented four more spaces.
    """
    pad = " " * indent
    kind = obj.kind
    if kind is ObjectKind.CONSTANT:
        return f"{pad}Const {obj.name} = {format_constant(_require(obj.value, obj, 'value'))}"
    if kind is ObjectKind.TYPE:
        return f"{pad}Type {obj.name} = {format_type(_require(obj.type, obj, 'type'))}"
    if kind is ObjectKind.VARIABLE:
        return f"{pad}Var {obj.name} : {format_type(_require(obj.type, obj, 'type'))}"
    if kind is ObjectKind.PARAMETER:
        label = "Param" if obj.param_kind is ParamKind.VALUE else "Param VAR"
        return f"{pad}{label} {obj.name} : {format_type(_require(obj.type, obj, 'type'))}"

    scope = _require(obj.scope, obj, "scope")
    body = format_scope(scope, indent + _SCOPE_INDENT)
    if kind is ObjectKind.FUNCTION:
        return_type = format_type(_require(obj.type, obj, "return type"))
        return f"{pad}Function {obj.name} : {return_type}\n{body}"
    if kind is ObjectKind.PROCEDURE:
        return f"{pad}Procedure {obj.name}\n{body}"
    return f"{pad}Program {obj.name}\n{body}"


def format_scope(scope: Scope, indent: int = 0) -> str:
    """Render every object of ``scope``, each followed by a newline."""
    return "".join(format_object(obj, indent) + "\n" for obj in scope.objects)