import pytest
from lexpr.errors import LexError
from lexpr.lexer import _Input, tokenize, merge_identifiers, lex
from lexpr.types import TokenKind, Position


def kinds(text):
    return [t.kind for t in lex(text)]


def texts(text):
    return [t.text for t in lex(text)]


def test_tokenize_keeps_words_apart():
    tokens = tokenize("hello world")
    assert [t.text for t in tokens] == ["hello", "world"]
    assert all(t.kind is TokenKind.IDENTIFIER for t in tokens)


def test_merge_joins_words_with_hyphens():
    tokens = lex("hello world")
    assert len(tokens) == 1
    assert tokens[0].text == "hello-world"
    assert tokens[0].words == ("hello", "world")
    assert tokens[0].position == Position(1, 1, 0)


def test_merge_ignores_chunking_whitespace():
    assert texts("alpha beta gamma") == texts("alpha   beta\n\tgamma") == ["alpha-beta-gamma"]


def test_merge_is_idempotent():
    tokens = lex("(x) greater than (y), f x y")
    assert merge_identifiers(tokens) == tokens


def test_numbers_are_merge_boundaries():
    assert texts("a 1 b") == ["a", "1", "b"]


def test_symbols_are_merge_boundaries():
    assert texts("a + b") == ["a", "+", "b"]
    assert kinds("a+b") == [TokenKind.IDENTIFIER, TokenKind.SYMBOL, TokenKind.IDENTIFIER]


def test_delimiters_are_merge_boundaries():
    assert texts("a. b: c, d (e) f") == ["a", ".", "b", ":", "c", ",", "d", "(", "e", ")", "f"]


def test_delimiter_kinds():
    assert kinds(". : , ( )") == [
        TokenKind.DOT, TokenKind.COLON, TokenKind.COMMA, TokenKind.LPAREN, TokenKind.RPAREN,
    ]


def test_unicode_and_underscore_identifiers():
    assert texts("größer als") == ["größer-als"]
    assert texts("snake_case x") == ["snake_case-x"]


def test_symbol_runs():
    assert texts("<= >= !=") == ["<=", ">=", "!="]
    assert kinds("*") == [TokenKind.SYMBOL]


def test_decimal_number():
    tokens = lex("3.14")
    assert [t.kind for t in tokens] == [TokenKind.NUMBER]
    assert tokens[0].text == "3.14"


def test_dot_after_number_is_operator():
    assert texts("3. f") == ["3", ".", "f"]
    assert texts("3.f") == ["3", ".", "f"]
    assert texts("n - 1 .!") == ["n", "-", "1", ".", "!"]


def test_dot_after_identifier_is_operator():
    assert texts("x.5") == ["x", ".", "5"]


def test_number_with_two_decimal_points():
    with pytest.raises(LexError, match="decimal point"):
        lex("1.2.3")


def test_number_glued_to_letters():
    with pytest.raises(LexError, match="malformed number"):
        lex("12ab")


def test_string_literal():
    tokens = lex('say "hello world"')
    assert tokens[1].kind is TokenKind.STRING
    assert tokens[1].text == "hello world"


def test_string_escapes():
    assert lex(r'"a\"b\\c\nd\te"')[0].text == 'a"b\\c\nd\te'


def test_unterminated_string():
    with pytest.raises(LexError, match="unterminated"):
        lex('"abc')


def test_invalid_escape():
    with pytest.raises(LexError, match="invalid escape"):
        lex(r'"\q"')


def test_control_character():
    with pytest.raises(LexError, match="unexpected character") as info:
        lex("a \x01 b")
    assert info.value.position == Position(1, 3, 2)


def test_positions_track_lines_and_columns():
    tokens = tokenize("a\n  b")
    assert tokens[1].position == Position(2, 3, 4)


def test_empty_input():
    assert lex("") == []
    assert lex("  \n\t ") == []


def test_non_ascii_decimal_digits_are_numbers():
    tokens = lex("٣ f ١.٥")
    assert [t.kind for t in tokens] == [TokenKind.NUMBER, TokenKind.IDENTIFIER, TokenKind.NUMBER]
    assert [t.text for t in tokens] == ["٣", "f", "١.٥"]


def test_input_repr_shows_cursor():
    assert repr(_Input("abc")) == "Input('' ['a'] 'bc' at line 1, column 1)"
