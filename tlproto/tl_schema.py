"""Data model of a parsed TL schema."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Parameter:
    """One parameter of a constructor or method."""

    name: str
    type: str = ""
    comment: str = ""
    is_vector: bool = False
    is_optional: bool = False
    bit_to_trigger: int = 0


@dataclass
class TlObject:
    """A constructor belonging to an interface type."""

    name: str
    comment: str = ""
    crc: int = 0
    parameters: list[Parameter] = field(default_factory=list)
    interface: str = ""


@dataclass
class MethodResponse:
    """The result type of a method."""

    type: str = ""
    is_list: bool = False


@dataclass
class Method:
    """A callable function of the schema."""

    name: str
    crc: int = 0
    comment: str = ""
    parameters: list[Parameter] = field(default_factory=list)
    response: MethodResponse = field(default_factory=MethodResponse)


@dataclass
class Schema:
    """All constructors, methods and type comments of a schema."""

    objects: list[TlObject] = field(default_factory=list)
    methods: list[Method] = field(default_factory=list)
    type_comments: dict[str, str] = field(default_factory=dict)