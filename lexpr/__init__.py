from lexpr.types import Node, Atom, Application, AtomKind, Program, Token, TokenKind, Position
from lexpr.errors import (
    LexprError, LexError, UnbalancedParens, AmbiguousHead, EmptySequence,
    NestingTooDeep, InputTooLong, ConfigError,
)
from lexpr.lexer import lex, tokenize, merge_identifiers
from lexpr.sequence import build_sequence
from lexpr.parser import parse, translate
from lexpr.printer import to_sexpr, print_program

__all__ = [
    "Node", "Atom", "Application", "AtomKind", "Program", "Token", "TokenKind", "Position",
    "LexprError", "LexError", "UnbalancedParens", "AmbiguousHead", "EmptySequence",
    "NestingTooDeep", "InputTooLong", "ConfigError",
    "lex", "tokenize", "merge_identifiers", "build_sequence",
    "parse", "translate", "to_sexpr", "print_program",
]
