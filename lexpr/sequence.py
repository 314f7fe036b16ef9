"""Head selection for a single run of tokens.

A run is everything between two delimiters at one nesting level, with each
parenthesised group already resolved to a node. The builder decides which
element is the function and turns the rest into its arguments, keeping their
source order.
"""

from typing import List, Optional, TypeAlias
from dataclasses import dataclass

from lexpr.debug import debug
from lexpr.errors import AmbiguousHead
from lexpr.types import Node, Atom, Application, Token, TokenKind, Position
from lexpr.types import identifier, number, string, symbol


# ( ... ) after its contents were parsed
@dataclass(frozen=True)
class Group:
    node: Node
    open: Token

    @property
    def position(self) -> Position:
        return self.open.position


Element: TypeAlias = Token | Group


def token_atom(token: Token) -> Atom:
    match token.kind:
        case TokenKind.IDENTIFIER: return identifier(token.text)
        case TokenKind.NUMBER:     return number(token.text)
        case TokenKind.STRING:     return string(token.text)
        case TokenKind.SYMBOL:     return symbol(token.text)
    raise ValueError(f'{token.kind} token cannot be an atom')


def _as_node(element: Element) -> Node:
    if isinstance(element, Group):
        return element.node
    return token_atom(element)


def _candidates(elements: List[Element], kind: TokenKind) -> List[int]:
    return [i for i, e in enumerate(elements) if isinstance(e, Token) and e.kind is kind]


def _describe(elements: List[Element], indices: List[int]) -> str:
    return ', '.join(f"'{elements[i].text}'" for i in indices)


def _find_head(elements: List[Element], open_ended: bool) -> Optional[int]:
    symbols = _candidates(elements, TokenKind.SYMBOL)
    if len(symbols) > 1:
        raise AmbiguousHead(f'several operators compete for the head: {_describe(elements, symbols)}',
                            elements[symbols[1]].position)
    if symbols:
        return symbols[0]

    names = _candidates(elements, TokenKind.IDENTIFIER)
    if len(names) > 1:
        raise AmbiguousHead(f'several names compete for the head: {_describe(elements, names)}',
                            elements[names[1]].position)
    if not names:
        return None

    # `(f) x y`: the name closes the run, so the leading group is the function
    index = names[0]
    if index == len(elements) - 1 and not open_ended and isinstance(elements[0], Group):
        return 0
    return index


@debug
def build_sequence(elements: List[Element], open_ended: bool = False) -> Node:
    """Turn one run into an atom or an application.

    `open_ended` marks a run that sits on the left of a ':' and will receive
    more arguments, which makes a trailing name an infix head rather than an
    argument of a leading group.
    """
    assert len(elements) > 0

    if len(elements) == 1:
        only = elements[0]
        if isinstance(only, Group):
            return only.node
        atom = token_atom(only)
        if len(only.words) > 1:
            return Application(atom, ())
        return atom

    head_index = _find_head(elements, open_ended)
    if head_index is None:
        head, *rest = [_as_node(e) for e in elements]
        return Application(head, tuple(rest), fallback=True)

    head = _as_node(elements[head_index])
    args = tuple(_as_node(e) for i, e in enumerate(elements) if i != head_index)
    return Application(head, args)
