from typing import List, Tuple, TypeAlias
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Position:
    line: int = 1
    column: int = 1
    index: int = 0

    def __str__(self) -> str:
        return f'line {self.line}, column {self.column}'


class TokenKind(Enum):
    IDENTIFIER = 'identifier'
    NUMBER = 'number'
    STRING = 'string'
    SYMBOL = 'symbol'
    DOT = '.'
    COLON = ':'
    COMMA = ','
    LPAREN = '('
    RPAREN = ')'


DELIMITERS = {
    '.': TokenKind.DOT,
    ':': TokenKind.COLON,
    ',': TokenKind.COMMA,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
}


# hello | hello-world (merged from `hello world`) | 123 | 1.5 | "text" | + | <= | . | : | , | ( | )
@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: Position = field(default_factory=Position)
    words: Tuple[str, ...] = ()


class AtomKind(Enum):
    IDENTIFIER = 'identifier'
    NUMBER = 'number'
    SYMBOL = 'symbol'
    STRING = 'string'


class Node:
    Atom: type['Atom'] = None # type: ignore
    Application: type['Application'] = None # type: ignore


# x | greater-than | 123 | 1.5 | + | "text"
@dataclass(frozen=True)
class Atom(Node):
    kind: AtomKind
    text: str

    @property
    def value(self) -> int | float | str:
        if self.kind is AtomKind.NUMBER:
            return float(self.text) if '.' in self.text else int(self.text)
        return self.text


# (f x y) | (greater-than x y) | (hello-world)
@dataclass(frozen=True)
class Application(Node):
    head: Node
    args: Tuple[Node, ...]
    # head picked by position because the run had no identifier or symbol
    fallback: bool = field(default=False, compare=False, repr=False)

    @property
    def is_nullary(self) -> bool:
        return len(self.args) == 0


Node.Atom = Atom
Node.Application = Application

Program: TypeAlias = List[Node]


def identifier(text: str) -> Atom:
    return Atom(AtomKind.IDENTIFIER, text)


def number(text: str) -> Atom:
    return Atom(AtomKind.NUMBER, text)


def symbol(text: str) -> Atom:
    return Atom(AtomKind.SYMBOL, text)


def string(text: str) -> Atom:
    return Atom(AtomKind.STRING, text)


def apply(head: Node, *args: Node) -> Application:
    return Application(head, tuple(args))
