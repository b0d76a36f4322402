"""Platform predicate expressions.

The grammar is the one used by cfg attributes in Cargo manifests::

    cfg(all(unix, target_arch = "x86_64", not(target_env = "musl")))

Only target attributes can be tested. Feature flags, ``debug_assertions``
and similar keys describe the build rather than the platform and are
rejected when the expression is parsed.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Union

from toml_describe.core.errors import PredicateError
from toml_describe.models.target import TargetInfo

# target_<key> = "value" atoms and the TargetInfo attribute they test
TARGET_KEYS = {
    "target_arch": "arch",
    "target_os": "os",
    "target_family": "family",
    "target_env": "env",
    "target_vendor": "vendor",
    "target_endian": "endian",
    "target_pointer_width": "pointer_width",
    "target_abi": "abi",
}

# Bare names that are shorthand for target_family = "<name>"
FAMILY_SHORTHANDS = ("unix", "windows", "wasm")

COMBINATORS = ("any", "all", "not")

_TOKEN = re.compile(
    r'(?P<ident>[A-Za-z_][A-Za-z0-9_]*)'
    r'|"(?P<string>[^"\\]*)"'
    r'|(?P<punct>[(),=])'
)
_SPACE = re.compile(r"\s*")


@dataclass(frozen=True)
class Token:
    kind: str
    value: str
    position: int


@dataclass(frozen=True)
class TargetPredicate:
    """``target_<key> = "value"``, or a family shorthand such as ``unix``."""
    key: str
    value: str

    def matches(self, target: TargetInfo) -> bool:
        return self.value in target.attribute(self.key)

    def __str__(self) -> str:
        return f'target_{self.key} = "{self.value}"'


@dataclass(frozen=True)
class Any:
    children: tuple["Expression", ...]

    def matches(self, target: TargetInfo) -> bool:
        return any(child.matches(target) for child in self.children)

    def __str__(self) -> str:
        return f"any({', '.join(str(c) for c in self.children)})"


@dataclass(frozen=True)
class All:
    children: tuple["Expression", ...]

    def matches(self, target: TargetInfo) -> bool:
        return all(child.matches(target) for child in self.children)

    def __str__(self) -> str:
        return f"all({', '.join(str(c) for c in self.children)})"


@dataclass(frozen=True)
class Not:
    child: "Expression"

    def matches(self, target: TargetInfo) -> bool:
        return not self.child.matches(target)

    def __str__(self) -> str:
        return f"not({self.child})"


Expression = Union[TargetPredicate, Any, All, Not]


def tokenize(text: str) -> Iterator[Token]:
    """Split predicate text into tokens, failing on anything unexpected."""
    pos = _SPACE.match(text, 0).end()
    while pos < len(text):
        match = _TOKEN.match(text, pos)
        if match is None:
            if text[pos] == '"':
                raise PredicateError("Unterminated string", predicate=text, position=pos)
            raise PredicateError(
                f"Unexpected character {text[pos]!r}", predicate=text, position=pos
            )
        kind = match.lastgroup
        yield Token(kind, match.group(kind), pos)
        pos = _SPACE.match(text, match.end()).end()


class _Parser:
    """Recursive descent over the token list."""

    def __init__(self, text: str):
        self.text = text
        self.tokens = list(tokenize(text))
        self.index = 0

    def fail(self, message: str, token: Union[Token, None] = None) -> PredicateError:
        position = token.position if token else len(self.text)
        return PredicateError(message, predicate=self.text, position=position)

    def peek(self) -> Union[Token, None]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def next(self, expected: str) -> Token:
        token = self.peek()
        if token is None:
            raise self.fail(f"Expected {expected}, found end of input")
        self.index += 1
        return token

    def expect_punct(self, value: str) -> Token:
        token = self.next(f"'{value}'")
        if token.kind != "punct" or token.value != value:
            raise self.fail(f"Expected '{value}', found {token.value!r}", token)
        return token

    def at_punct(self, value: str) -> bool:
        token = self.peek()
        return token is not None and token.kind == "punct" and token.value == value

    def parse(self) -> Expression:
        if not self.tokens:
            raise self.fail("Empty predicate")

        first = self.tokens[0]
        if first.kind == "ident" and first.value == "cfg":
            self.index = 1
            self.expect_punct("(")
            expr = self.expression()
            self.expect_punct(")")
        else:
            expr = self.expression()

        trailing = self.peek()
        if trailing is not None:
            raise self.fail(f"Unexpected trailing {trailing.value!r}", trailing)
        return expr

    def expression(self) -> Expression:
        token = self.next("a predicate")
        if token.kind != "ident":
            raise self.fail(f"Expected a predicate, found {token.value!r}", token)

        if token.value in COMBINATORS and self.at_punct("("):
            self.index += 1
            children = self.arguments()
            if token.value == "any":
                return Any(children)
            if token.value == "all":
                return All(children)
            if len(children) != 1:
                raise self.fail("not() takes exactly one predicate", token)
            return Not(children[0])

        if self.at_punct("="):
            self.index += 1
            value = self.next("a quoted value")
            if value.kind != "string":
                raise self.fail(f"Expected a quoted value, found {value.value!r}", value)
            return self.atom(token, value.value)

        return self.atom(token, None)

    def arguments(self) -> tuple[Expression, ...]:
        children = []
        while not self.at_punct(")"):
            children.append(self.expression())
            if self.at_punct(","):
                self.index += 1
            elif not self.at_punct(")"):
                token = self.peek()
                if token is None:
                    raise self.fail("Expected ',' or ')', found end of input")
                raise self.fail(f"Expected ',' or ')', found {token.value!r}", token)
        self.expect_punct(")")
        return tuple(children)

    def atom(self, name: Token, value: Union[str, None]) -> TargetPredicate:
        if value is None:
            if name.value in FAMILY_SHORTHANDS:
                return TargetPredicate("family", name.value)
            raise self.fail(f"'{name.value}' is not a platform predicate", name)

        key = TARGET_KEYS.get(name.value)
        if key is None:
            raise self.fail(f"'{name.value}' is not a platform predicate", name)
        if key == "endian" and value not in ("little", "big"):
            raise self.fail(f"Invalid endianness {value!r}", name)
        if key == "pointer_width" and not value.isdigit():
            raise self.fail(f"Invalid pointer width {value!r}", name)
        return TargetPredicate(key, value)


def parse_predicate(text: str) -> Expression:
    """Parse a platform predicate, with or without the outer ``cfg(...)``."""
    return _Parser(text).parse()
