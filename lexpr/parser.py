"""Precedence combiner: turns the merged token stream into a Program.

Binding, tightest first: runs (merge boundaries and parentheses), '.', ':', ','.

    Program   := ColonExpr (',' ColonExpr)*
    ColonExpr := DotExpr (':' ColonExpr)?
    DotExpr   := Run ('.' Run)*
"""

from typing import List, Optional, Tuple
import logging

from lexpr.debug import debug
from lexpr.errors import LexprError, UnbalancedParens, EmptySequence, NestingTooDeep, InputTooLong
from lexpr.lexer import lex
from lexpr.printer import print_program, to_sexpr
from lexpr.sequence import Element, Group, build_sequence
from lexpr.types import Node, Atom, Application, Token, TokenKind, Program

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64
DEFAULT_MAX_INPUT_LENGTH = 1_000_000

# tightest first; fixed, never extended at runtime
PRECEDENCE: Tuple[TokenKind, ...] = (TokenKind.DOT, TokenKind.COLON, TokenKind.COMMA)

_RUN_TERMINATORS = frozenset(PRECEDENCE) | {TokenKind.RPAREN}


def flatten(node: Node) -> Tuple[Node, ...]:
    match node:
        case Atom():
            return (node,)
        case Application(head=head, args=args) if node.fallback or node.is_nullary:
            return (head, *args)
        case _:
            return (node,)


def combine_dot(left: Node, right: Node) -> Application:
    """`left . right`: left becomes the first argument of right."""
    match right:
        case Atom():
            return Application(right, (left,))
        case Application(head=head, args=args):
            return Application(head, (left, *args))
    raise TypeError(f'not a node: {right!r}')


def combine_colon(left: Node, right: Node) -> Application:
    """`left : right`: right is appended to left's arguments."""
    tail = flatten(right)
    match left:
        case Atom():
            return Application(left, tail)
        case Application(head=head, args=args):
            return Application(head, args + tail)
    raise TypeError(f'not a node: {left!r}')


class _Tokens:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.index = 0

    @property
    def current(self) -> Optional[Token]:
        return self.tokens[self.index] if self.index < len(self.tokens) else None

    @property
    def previous(self) -> Optional[Token]:
        return self.tokens[self.index - 1] if self.index > 0 else None

    def next(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def at(self, kind: TokenKind) -> bool:
        token = self.current
        return token is not None and token.kind is kind

    def __repr__(self) -> str:
        window = self.tokens[max(0, self.index - 3):self.index + 3]
        return f"Tokens({' '.join(t.text for t in window)} @ {self.index})"


class _Parser:
    def __init__(self, tokens: List[Token], max_depth: int):
        self.input = _Tokens(tokens)
        self.max_depth = max_depth
        self.depth = 0

    def parse_program(self) -> Program:
        if self.input.current is None:
            return []
        program = self._parse_list()
        stray = self.input.current
        if stray is not None:
            # a list only stops early at ')'
            raise UnbalancedParens("unmatched ')'", stray.position)
        return program

    @debug
    def _parse_list(self) -> List[Node]:
        nodes = [self._parse_colon()]
        while self.input.at(TokenKind.COMMA):
            self.input.next()
            nodes.append(self._parse_colon())
        return nodes

    @debug
    def _parse_colon(self) -> Node:
        operands = [self._parse_dot()]
        while self.input.at(TokenKind.COLON):
            self.input.next()
            operands.append(self._parse_dot())

        node = operands.pop()
        while operands:
            node = combine_colon(operands.pop(), node)
        return node

    @debug
    def _parse_dot(self) -> Node:
        node: Optional[Node] = None
        while True:
            elements = self._collect_run()
            if not elements:
                raise self._empty_sequence()

            if self.input.at(TokenKind.DOT):
                run = build_sequence(elements)
                node = run if node is None else combine_dot(node, run)
                self.input.next()
            else:
                run = build_sequence(elements, open_ended=self.input.at(TokenKind.COLON))
                return run if node is None else combine_dot(node, run)

    def _collect_run(self) -> List[Element]:
        elements: List[Element] = []
        while True:
            token = self.input.current
            if token is None or token.kind in _RUN_TERMINATORS:
                return elements
            if token.kind is TokenKind.LPAREN:
                elements.append(self._parse_group())
            else:
                elements.append(self.input.next())

    @debug
    def _parse_group(self) -> Group:
        opening = self.input.next()
        assert opening.kind is TokenKind.LPAREN

        if self.depth >= self.max_depth:
            raise NestingTooDeep(f'parentheses nested deeper than {self.max_depth} levels', opening.position)
        if self.input.current is None:
            raise UnbalancedParens("unmatched '('", opening.position)
        if self.input.at(TokenKind.RPAREN):
            raise EmptySequence('empty parentheses', opening.position)

        self.depth += 1
        try:
            nodes = self._parse_list()
        finally:
            self.depth -= 1

        if not self.input.at(TokenKind.RPAREN):
            raise UnbalancedParens("unmatched '('", opening.position)
        self.input.next()

        if len(nodes) == 1:
            return Group(nodes[0], opening)
        head, *rest = nodes
        return Group(Application(head, tuple(rest), fallback=True), opening)

    def _empty_sequence(self) -> LexprError:
        current = self.input.current
        previous = self.input.previous
        if previous is None and self.input.at(TokenKind.RPAREN):
            return UnbalancedParens("unmatched ')'", current.position)
        if previous is not None and (current is None or current.kind is TokenKind.RPAREN):
            return EmptySequence(f"nothing after '{previous.text}'", previous.position)
        return EmptySequence(f"nothing before '{current.text}'", current.position)


def parse(text: str, *,
          max_depth: int = DEFAULT_MAX_DEPTH,
          max_input_length: int = DEFAULT_MAX_INPUT_LENGTH) -> Program:
    """Translate Lexpr text into a Program, one node per top-level expression.

    Raises the first LexprError met; there is no partial result.
    """
    if len(text) > max_input_length:
        raise InputTooLong(f'input is {len(text)} characters, the limit is {max_input_length}')

    tokens = lex(text)
    parser = _Parser(tokens, max_depth)
    try:
        program = parser.parse_program()
    except RecursionError:
        current = parser.input.current
        raise NestingTooDeep('expression nests too deeply for the interpreter stack',
                             current.position if current is not None else None) from None

    _LOGGER.debug(f'Parsed {len(tokens)} tokens into {len(program)} expressions')
    if _LOGGER.isEnabledFor(logging.DEBUG):
        for node in program:
            _LOGGER.debug(f'  {to_sexpr(node)}')
    return program


def translate(text: str, **limits) -> str:
    """Lexpr text in, Sexpr text out, one expression per line."""
    return print_program(parse(text, **limits))
