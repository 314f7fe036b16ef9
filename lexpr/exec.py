from typing import Any, Dict, List
import typing
import inspect

from dataclasses import dataclass
import dataclasses

from lexpr.errors import ConfigError
from lexpr.printer import to_sexpr
from lexpr.types import Node, Atom, Application, AtomKind


@dataclass
class ExecutionContext:
    """Directive registry: maps a head name such as `max-depth` to a callable."""
    env: Dict[str, Any] = dataclasses.field(default_factory=dict)

    def register(self, fn, name=None):
        assert isinstance(fn, typing.Callable)
        name = name or fn.__name__
        self.env[name] = fn


def eval_node(ctx: ExecutionContext, e: Node | List[Node]) -> Any:
    """Run directives: each application calls its registered head with the raw argument nodes."""
    if isinstance(e, list):
        return [eval_node(ctx, x) for x in e]

    match e:
        case Application(head=Atom(kind=AtomKind.IDENTIFIER, text=name), args=args):
            if name not in ctx.env:
                raise ConfigError(f"unknown directive {name!r} in {to_sexpr(e)}")
            fn = ctx.env[name]
            try:
                inspect.signature(fn).bind(ctx, *args)
            except TypeError:
                raise ConfigError(f"wrong number of arguments for {name!r} in {to_sexpr(e)}") from None
            return fn(ctx, *args)

        case Atom(kind=AtomKind.IDENTIFIER, text=name) if name in ctx.env:
            return ctx.env[name](ctx)

        case _:
            raise ConfigError(f'not a directive: {to_sexpr(e)}')
