from typing import List

from lexpr.debug import debug
from lexpr.errors import LexError
from lexpr.types import Token, TokenKind, Position, DELIMITERS


class _Input:
    EOS = '\0'

    def __init__(self, text: str):
        self.text = text
        self.current = _Input.EOS if len(text) == 0 else text[0]
        self.line = 1
        self.column = 1
        self.index = 0

    @property
    def at_end(self) -> bool:
        return self.index >= len(self.text)

    @property
    def position(self) -> Position:
        return Position(self.line, self.column, self.index)

    def peek(self) -> str:
        if self.index + 1 < len(self.text):
            return self.text[self.index + 1]
        return _Input.EOS

    def next(self):
        if self.index < len(self.text):
            if self.current == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.index += 1
        self.current = _Input.EOS if self.at_end else self.text[self.index]

    def __repr__(self) -> str:
        before = self.text[max(0, self.index - 8):self.index]
        after = self.text[self.index + 1:self.index + 8]
        return f"Input({before!r} [{self.current!r}] {after!r} at {self.position})"


def _is_digit(c: str) -> bool:
    return c.isdecimal()

def _is_word_start(c: str) -> bool:
    return c.isalpha() or c == '_'

def _is_word_char(c: str) -> bool:
    return c.isalnum() or c == '_'

def _is_symbol_char(c: str) -> bool:
    return (c.isprintable() and not c.isspace() and c not in DELIMITERS
            and c != '"' and not _is_word_char(c))


@debug
def _skip_whitespace(input: _Input):
    while not input.at_end and input.current.isspace():
        input.next()

@debug
def _lex_delimiter(input: _Input) -> Token:
    start = input.position
    c = input.current
    input.next()
    return Token(DELIMITERS[c], c, start)

@debug
def _lex_word(input: _Input) -> Token:
    assert _is_word_start(input.current)
    start = input.position
    value = ''
    while not input.at_end and _is_word_char(input.current):
        value += input.current
        input.next()
    return Token(TokenKind.IDENTIFIER, value, start, (value,))

@debug
def _lex_number(input: _Input) -> Token:
    assert _is_digit(input.current)
    start = input.position
    value = ''
    while not input.at_end and _is_digit(input.current):
        value += input.current
        input.next()

    # a '.' only belongs to the number when a digit follows it directly
    if input.current == '.' and _is_digit(input.peek()):
        value += '.'
        input.next()
        while not input.at_end and _is_digit(input.current):
            value += input.current
            input.next()
        if input.current == '.' and _is_digit(input.peek()):
            raise LexError(f"malformed number '{value}.': more than one decimal point", start)

    if not input.at_end and _is_word_char(input.current):
        raise LexError(f"malformed number '{value}{input.current}'", start)

    return Token(TokenKind.NUMBER, value, start)

@debug
def _lex_string(input: _Input) -> Token:
    assert input.current == '"'
    start = input.position
    input.next()

    value = ''
    while input.at_end or input.current != '"':
        if input.at_end:
            raise LexError("unterminated string literal", start)
        if input.current == '\\':
            input.next()
            match input.current:
                case 'n': value += '\n'
                case 't': value += '\t'
                case '\\': value += '\\'
                case '"': value += '"'
                case _:
                    if input.at_end:
                        raise LexError("unterminated string literal", start)
                    raise LexError(f"invalid escape sequence '\\{input.current}'", input.position)
            input.next()
        else:
            value += input.current
            input.next()

    assert input.current == '"'
    input.next()
    return Token(TokenKind.STRING, value, start)

@debug
def _lex_symbol(input: _Input) -> Token:
    start = input.position
    value = ''
    while not input.at_end and _is_symbol_char(input.current):
        value += input.current
        input.next()
    return Token(TokenKind.SYMBOL, value, start)

@debug
def _next_token(input: _Input) -> Token:
    c = input.current
    if   c in DELIMITERS:     return _lex_delimiter(input)
    elif c == '"':            return _lex_string(input)
    elif _is_digit(c):        return _lex_number(input)
    elif _is_word_start(c):   return _lex_word(input)
    elif _is_symbol_char(c):  return _lex_symbol(input)
    else:
        raise LexError(f"unexpected character {c!r}", input.position)


def tokenize(text: str) -> List[Token]:
    """Scan text into raw tokens, one identifier token per word."""
    tokens: List[Token] = []
    input = _Input(text)
    _skip_whitespace(input)
    while not input.at_end:
        tokens.append(_next_token(input))
        _skip_whitespace(input)
    return tokens


def merge_identifiers(tokens: List[Token]) -> List[Token]:
    """Fuse runs of adjacent identifier tokens into one hyphen-joined identifier.

    Every other token kind is a merge boundary. Already merged input comes back
    unchanged.
    """
    merged: List[Token] = []
    for token in tokens:
        previous = merged[-1] if merged else None
        if token.kind is TokenKind.IDENTIFIER and previous is not None and previous.kind is TokenKind.IDENTIFIER:
            words = previous.words + token.words
            merged[-1] = Token(TokenKind.IDENTIFIER, '-'.join(words), previous.position, words)
        else:
            merged.append(token)
    return merged


def lex(text: str) -> List[Token]:
    return merge_identifiers(tokenize(text))


assert [t.text for t in lex('hello world')] == ['hello-world']
assert [t.text for t in lex('f x y')] == ['f-x-y']
assert [t.text for t in lex('(f) x y')] == ['(', 'f', ')', 'x-y']
assert [t.text for t in lex('n - 1 .!')] == ['n', '-', '1', '.', '!']
assert [t.text for t in lex('x. f 1.5')] == ['x', '.', 'f', '1.5']
assert [t.kind for t in lex('"a b" 3')] == [TokenKind.STRING, TokenKind.NUMBER]
