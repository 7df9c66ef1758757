"""Grouping of a parsed TL schema into enums, single types and interfaces."""

from __future__ import annotations

from dataclasses import dataclass, field

from .naming import goify
from .tl_schema import Method, Schema, TlObject

_PRIMITIVE_TYPES = {
    "Bool": "bool",
    "long": "int64",
    "double": "float64",
    "int": "int32",
    "string": "string",
    "bytes": "[]byte",
    "true": "bool",
}


@dataclass(frozen=True)
class EnumValue:
    """One constructor of an enumeration-like interface."""

    name: str
    crc: int


@dataclass
class InternalSchema:
    """A schema grouped by interface, as used by the code generator."""

    interface_comments: dict[str, str] = field(default_factory=dict)
    types: dict[str, list[TlObject]] = field(default_factory=dict)
    single_interface_types: list[TlObject] = field(default_factory=list)
    enums: dict[str, list[EnumValue]] = field(default_factory=dict)
    methods: list[Method] = field(default_factory=list)

    def all_constructors(self) -> tuple[list[str], list[str]]:
        """Return the generated names of all struct constructors and enum values."""
        structs: list[str] = []
        for objects in self.types.values():
            for obj in objects:
                name = goify(obj.name, True)
                if name == goify(obj.interface, True):
                    name = goify(obj.name + "Obj", True)
                structs.append(name)
        structs.extend(goify(obj.name, True) for obj in self.single_interface_types)
        structs.extend(goify(method.name + "Params", True) for method in self.methods)

        enums = [
            goify(value.name, True)
            for values in self.enums.values()
            for value in values
        ]
        return structs, enums

    def go_type(self, type_name: str) -> str:
        """Return the generated type name that a schema type maps to."""
        if type_name == "bitflags":
            raise ValueError("bitflags can't be generated as a type")
        if type_name in _PRIMITIVE_TYPES:
            return _PRIMITIVE_TYPES[type_name]
        if type_name in self.enums or type_name in self.types:
            return goify(type_name, True)
        for obj in self.single_interface_types:
            if obj.interface == type_name:
                return "*" + goify(obj.name, True)
        raise ValueError(f"unknown schema type {type_name!r}")


def interface_is_enum(objects: list[TlObject]) -> bool:
    """Return whether no constructor of an interface has parameters."""
    return all(not obj.parameters for obj in objects)


def create_internal_schema(schema: Schema) -> InternalSchema:
    """Group the constructors of ``schema`` by interface."""
    by_interface: dict[str, list[TlObject]] = {}
    for obj in schema.objects:
        by_interface.setdefault(obj.interface, []).append(obj)

    internal = InternalSchema()
    for interface, objects in by_interface.items():
        if interface_is_enum(objects):
            internal.enums[interface] = [EnumValue(obj.name, obj.crc) for obj in objects]
        elif len(objects) == 1:
            internal.single_interface_types.append(objects[0])
        else:
            internal.types[interface] = objects

    internal.methods = list(schema.methods)
    internal.interface_comments = dict(schema.type_comments)
    return internal