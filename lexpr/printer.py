from typing import List

from lexpr.types import Node, Atom, Application, AtomKind, Program


def _escape(text: str) -> str:
    return (text.replace('\\', '\\\\')
                .replace('"', '\\"')
                .replace('\n', '\\n')
                .replace('\t', '\\t'))


def atom_text(atom: Atom) -> str:
    if atom.kind is AtomKind.STRING:
        return f'"{_escape(atom.text)}"'
    return atom.text


def to_sexpr(node: Node) -> str:
    """Render a node as canonical prefix text, e.g. `(greater-than x y)`.

    Works off an explicit stack so chains thousands of levels deep print fine.
    """
    out: List[str] = []
    stack: List[Node | str] = [node]
    while stack:
        item = stack.pop()
        match item:
            case str():
                out.append(item)
            case Atom():
                out.append(atom_text(item))
            case Application(head=head, args=args):
                stack.append(')')
                for arg in reversed(args):
                    stack.append(arg)
                    stack.append(' ')
                stack.append(head)
                stack.append('(')
            case _:
                raise TypeError(f'not a node: {item!r}')
    return ''.join(out)


def print_program(program: Program) -> str:
    return '\n'.join(to_sexpr(node) for node in program)
