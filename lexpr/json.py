from typing import TypeAlias, List, Tuple

import logging
import ujson

from lexpr.errors import NestingTooDeep
from lexpr.types import Node, Atom, Application, AtomKind, Program

_logger = logging.getLogger(__name__)


JSON: TypeAlias = dict[str, "JSON"] | list["JSON"] | str | int | float | bool | None
JSONArray = list[JSON]


def atom_to_json(atom: Atom) -> JSON:
    if atom.kind is AtomKind.STRING:
        return {'string': atom.text}
    return atom.value


def node_to_json(node: Node) -> JSON:
    """Atoms become JSON scalars, applications become `[head, *args]` arrays."""
    root: JSONArray = []
    stack: List[Tuple[Node, JSONArray]] = [(node, root)]
    while stack:
        item, sink = stack.pop()
        match item:
            case Atom():
                sink.append(atom_to_json(item))
            case Application(head=head, args=args):
                children: JSONArray = []
                sink.append(children)
                for child in reversed((head, *args)):
                    stack.append((child, children))
            case _:
                raise TypeError(f'not a node: {item!r}')
    return root[0]


def program_to_json(program: Program) -> JSONArray:
    return [node_to_json(node) for node in program]


def dumps(program: Program, indent: int = 0) -> str:
    _logger.debug(f"Serializing {len(program)} expressions to JSON")
    try:
        return ujson.dumps(program_to_json(program), ensure_ascii=False, indent=indent)
    except OverflowError as e:
        raise NestingTooDeep(f"expression too deeply nested for JSON output: {e}") from e
