import json

import pytest
from lexpr.errors import NestingTooDeep
from lexpr.json import node_to_json, program_to_json, dumps
from lexpr.parser import parse
from lexpr.printer import to_sexpr, print_program
from lexpr.types import Application, identifier, number, string, symbol, apply


def test_atom_prints_its_text():
    assert to_sexpr(identifier("greater-than")) == "greater-than"
    assert to_sexpr(number("1.50")) == "1.50"
    assert to_sexpr(symbol("<=")) == "<="


def test_string_is_requoted():
    assert to_sexpr(string('a "b"\n')) == '"a \\"b\\"\\n"'


def test_application():
    node = apply(identifier("f"), identifier("x"), apply(symbol("-"), identifier("n"), number("1")))
    assert to_sexpr(node) == "(f x (- n 1))"


def test_nullary_call():
    assert to_sexpr(Application(identifier("hello-world"), ())) == "(hello-world)"


def test_application_head():
    node = apply(apply(identifier("f"), number("1")), number("2"))
    assert to_sexpr(node) == "((f 1) 2)"


def test_print_program_one_per_line():
    assert print_program([identifier("a"), apply(identifier("f"), number("1"))]) == "a\n(f 1)"
    assert print_program([]) == ""


# --- JSON ---

def test_json_atoms():
    assert node_to_json(identifier("x")) == "x"
    assert node_to_json(number("42")) == 42
    assert node_to_json(number("1.5")) == 1.5
    assert node_to_json(string("hi")) == {"string": "hi"}


def test_json_nested_order():
    node = parse("x. greater than: y - 1")[0]
    assert node_to_json(node) == ["greater-than", "x", ["-", "y", 1]]


def test_json_nested_head():
    node = apply(apply(identifier("f"), number("1")), number("2"), number("3"))
    assert node_to_json(node) == [["f", 1], 2, 3]


def test_program_to_json():
    assert program_to_json(parse("f 1, g")) == [["f", 1], "g"]


def test_dumps_is_valid_json():
    assert json.loads(dumps(parse('say "hi", hello world'))) == [["say", {"string": "hi"}], ["hello-world"]]


def test_dumps_too_deep():
    with pytest.raises(NestingTooDeep, match="too deeply nested for JSON"):
        dumps(parse("x" + ". f" * 2000))
