"""Name conversion and parameter helpers for generated TL bindings."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .tl_schema import Method, Parameter, TlObject

# Words that must be written fully upper case (ID, API, URL) rather than capitalised.
CAPITALIZE_PATTERNS = ("id", "api", "url", "p2p", "sha", "srp")

_NUMBER_SEQUENCE = re.compile(r"([a-zA-Z])(\d+)([a-zA-Z]?)")


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_lower(char: str) -> bool:
    return "a" <= char <= "z"


def _to_delimited(name: str, delimiter: str) -> str:
    """Split camel case, snake case and number runs into lower-case words."""
    text = _NUMBER_SEQUENCE.sub(r"\1 \2 \3", name).strip(" ")
    out: list[str] = []
    for index, char in enumerate(text):
        case_changes = False
        if index + 1 < len(text):
            following = text[index + 1]
            case_changes = (_is_upper(char) and _is_lower(following)) or (
                _is_lower(char) and _is_upper(following)
            )

        if index > 0 and out and out[-1] != delimiter and case_changes:
            if _is_upper(char):
                out.append(delimiter + char)
            elif _is_lower(char):
                out.append(char + delimiter)
        elif char in " _-":
            out.append(delimiter)
        else:
            out.append(char)
    return "".join(out).lower()


def goify(name: str, public: bool) -> str:
    """Convert a TL name into an exported (``public``) or unexported identifier."""
    delimited = _to_delimited(name, "|").replace(".", "|")
    words = []
    for index, word in enumerate(delimited.split("|")):
        word = word.lower()
        if word in CAPITALIZE_PATTERNS:
            word = word.upper()
        if index == 0 and not public:
            word = word.lower()
        else:
            if not word:
                raise ValueError(f"empty word in name {name!r}")
            word = word[0].upper() + word[1:]
        words.append(word)
    return "".join(words)


def have_optional_params(params: Iterable[Parameter]) -> bool:
    """Return whether any parameter is optional."""
    return any(param.is_optional for param in params)


def max_bitflag(params: Iterable[Parameter]) -> int:
    """Return the highest flag bit used by the parameters, or 0."""
    return max((param.bit_to_trigger for param in params), default=0)


def params_struct_from_method(method: Method) -> TlObject:
    """Describe the parameters of ``method`` as a constructor object."""
    return TlObject(
        name=method.name + "Params",
        crc=method.crc,
        parameters=method.parameters,
    )