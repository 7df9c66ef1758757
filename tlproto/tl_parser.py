"""Parser for TL schema text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .tl_cursor import Cursor
from .tl_schema import Method, MethodResponse, Parameter, Schema, TlObject

_EXCLUDED_DEFINITIONS = frozenset(
    {
        "true",
        "boolFalse",
        "boolTrue",
        "vector",
        "invokeAfterMsg",
        "invokeAfterMsgs",
        "initConnection",
        "invokeWithLayer",
        "invokeWithoutUpdates",
        "invokeWithMessagesRange",
        "invokeWithTakeout",
    }
)

_EXCLUDED_TYPES = frozenset({"int", "long", "double", "string", "bytes"})

_HEX = re.compile(r"[0-9a-fA-F]+")


class SchemaParseError(ValueError):
    """The schema text is malformed."""


class ExcludedDefinition(Exception):
    """A definition that the parser deliberately skips."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"excluded: {name}")


@dataclass
class _Definition:
    name: str = ""
    crc: int = 0
    params: list[Parameter] = field(default_factory=list)
    eq_type: str = ""
    is_eq_vector: bool = False


def _read_comment_part(cur: Cursor, at: str, what: str) -> str:
    try:
        return cur.read_at(at)
    except EOFError as exc:
        raise SchemaParseError(f"{what}: {exc}") from exc


def _parse_crc(text: str) -> int:
    if not _HEX.fullmatch(text):
        raise SchemaParseError(f"invalid crc: {text!r}")
    value = int(text, 16)
    if value > 0xFFFFFFFF:
        raise SchemaParseError(f"crc out of range: {text!r}")
    return value


def _parse_param(cur: Cursor) -> Parameter:
    cur.skip_spaces()
    param = Parameter(name=cur.read_at(":"))
    cur.skip(1)

    if cur.is_next("flags."):
        digits = cur.read_digits()
        if not digits:
            raise SchemaParseError(f"invalid bitflag index: {digits}")
        param.bit_to_trigger = int(digits)
        if not cur.is_next("?"):
            raise SchemaParseError("expected '?'")
        param.is_optional = True

    if cur.is_next("Vector"):
        cur.skip(1)
        param.is_vector = True
        param.type = cur.read_at(">")
        cur.skip(1)
    else:
        param.type = cur.read_at(" ")
    return param


def _parse_definition(cur: Cursor) -> _Definition:
    """Parse one definition line; :class:`EOFError` signals the end of input."""
    cur.skip_spaces()

    head = cur.read_at(" ")
    if head in _EXCLUDED_TYPES:
        cur.read_at(";")
        cur.skip(1)
        raise ExcludedDefinition(head)
    cur.unread(len(head))

    definition = _Definition(name=cur.read_at("#"))
    if definition.name in _EXCLUDED_DEFINITIONS:
        cur.read_at(";")
        cur.skip(1)
        raise ExcludedDefinition(definition.name)
    cur.skip(1)

    crc_text = cur.read_at(" ")
    cur.skip_spaces()

    while not cur.is_next("="):
        param = _parse_param(cur)
        cur.skip_spaces()
        if param.name == "flags" and param.type == "#":
            param.type = "bitflags"
        definition.params.append(param)

    cur.skip_spaces()
    if cur.is_next("Vector"):
        cur.skip(1)
        definition.eq_type = cur.read_at(">")
        definition.is_eq_vector = True
        cur.skip(len(">;"))
    else:
        definition.eq_type = cur.read_at(";")
        cur.skip(1)

    definition.crc = _parse_crc(crc_text)
    return definition


def parse_schema(source: str) -> Schema:
    """Parse TL schema text into a :class:`Schema`."""
    schema = Schema()
    if not source:
        return schema

    cur = Cursor(source)
    is_functions = False
    next_type_comment = ""
    constructor_comment = ""
    param_comments: dict[str, str] = {}

    while True:
        cur.skip_spaces()
        if cur.is_next("---functions---"):
            is_functions = True
            continue
        if cur.is_next("---types---"):
            is_functions = False
            continue

        if cur.is_next("//"):
            cur.skip_spaces()
            ctype = _read_comment_part(cur, " ", "read comment type")
            cur.skip_spaces()
            if ctype == "@type":
                next_type_comment = _read_comment_part(cur, "\n", "read comment").strip()
            elif ctype in ("@enum", "@constructor", "@method"):
                constructor_comment = _read_comment_part(cur, "\n", "read comment").strip()
            elif ctype == "@param":
                pname = _read_comment_part(cur, " ", "read comment param name")
                cur.skip_spaces()
                param_comments[pname] = _read_comment_part(
                    cur, "\n", "read comment param"
                ).strip()
            else:
                raise SchemaParseError(f"unknown comment type: {ctype}")
            cur.skip(1)
            continue

        try:
            definition = _parse_definition(cur)
        except EOFError:
            break
        except ExcludedDefinition:
            continue

        for param in definition.params:
            param.comment = param_comments.get(param.name, "")

        if is_functions:
            schema.methods.append(
                Method(
                    name=definition.name,
                    crc=definition.crc,
                    comment=constructor_comment,
                    parameters=definition.params,
                    response=MethodResponse(
                        type=definition.eq_type, is_list=definition.is_eq_vector
                    ),
                )
            )
            continue

        if definition.is_eq_vector:
            raise SchemaParseError("type can't be a vector")

        schema.objects.append(
            TlObject(
                name=definition.name,
                comment=constructor_comment,
                crc=definition.crc,
                parameters=definition.params,
                interface=definition.eq_type,
            )
        )

        if next_type_comment:
            schema.type_comments[definition.eq_type] = next_type_comment
            next_type_comment = ""
        constructor_comment = ""
        param_comments = {}

    return schema