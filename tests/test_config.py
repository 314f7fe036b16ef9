import pytest
from lexpr.config import Config, load_config, load_config_file
from lexpr.errors import ConfigError
from lexpr.exec import ExecutionContext, eval_node
from lexpr.parser import parse
from lexpr.types import identifier


def test_defaults():
    config = load_config("")
    assert config == Config()
    assert config.limits == {"max_depth": 64, "max_input_length": 1_000_000}


def test_all_directives():
    config = load_config("""
        max depth: 128,
        max input length: 50000,
        output format: json,
        log level: debug
    """)
    assert config.max_depth == 128
    assert config.max_input_length == 50000
    assert config.output_format == "json"
    assert config.log_level == "debug"


def test_directive_without_colon():
    assert load_config("max depth 12").max_depth == 12


def test_quoted_and_upper_case_choices():
    config = load_config('output format: "JSON", log level: INFO')
    assert config.output_format == "json"
    assert config.log_level == "info"


def test_updates_given_config():
    config = Config(max_depth=5)
    load_config("output format: json", config)
    assert config.max_depth == 5
    assert config.output_format == "json"


def test_unknown_directive():
    with pytest.raises(ConfigError, match="unknown directive 'colour'"):
        load_config("colour: blue")


def test_not_a_directive():
    with pytest.raises(ConfigError, match="not a directive"):
        load_config("42")


def test_wrong_arity():
    with pytest.raises(ConfigError, match="wrong number of arguments"):
        load_config("max depth: 1 2")


def test_non_positive_number():
    with pytest.raises(ConfigError, match="positive"):
        load_config("max depth: 0")


def test_fractional_number():
    with pytest.raises(ConfigError, match="whole number"):
        load_config("max depth: 1.5")


def test_bad_choice():
    with pytest.raises(ConfigError, match="must be one of"):
        load_config("output format: xml")


def test_syntax_error_in_config():
    with pytest.raises(ConfigError, match="cannot read configuration"):
        load_config("max depth: (")


def test_load_config_file(tmp_path):
    path = tmp_path / "lexpr.conf"
    path.write_text("max input length: 10", encoding="utf-8")
    assert load_config_file(path).max_input_length == 10


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError, match="cannot open"):
        load_config_file(tmp_path / "nope.conf")


def test_execution_context_passes_raw_nodes():
    seen = []

    def greet(ctx, who):
        seen.append(who)
        return "done"

    ctx = ExecutionContext()
    ctx.register(greet)
    assert eval_node(ctx, parse("greet: world")) == ["done"]
    assert seen == [identifier("world")]
