from typing import Optional

from lexpr.types import Position


class LexprError(Exception):
    """Base class for every failure raised while translating Lexpr text."""

    def __init__(self, message: str, position: Optional[Position] = None):
        super().__init__(message)
        self.message = message
        self.position = position

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        if self.position is None:
            return f'{self.kind}: {self.message}'
        return f'{self.kind} at {self.position}: {self.message}'


# unrecognized character, malformed number or string literal
class LexError(LexprError):
    pass


# unmatched '(' or stray ')'
class UnbalancedParens(LexprError):
    pass


# more than one head candidate in a single run
class AmbiguousHead(LexprError):
    pass


# '.', ':' or ',' with nothing on a required side, or '()'
class EmptySequence(LexprError):
    pass


class NestingTooDeep(LexprError):
    pass


class InputTooLong(LexprError):
    pass


class ConfigError(Exception):
    pass
