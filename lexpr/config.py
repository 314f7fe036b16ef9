"""Tool configuration, written in Lexpr itself.

    max depth: 128,
    max input length: 50000,
    output format: json,
    log level: debug

Each line translates to a directive call such as `(max-depth 128)` which is
then run against the setters registered below.
"""

from dataclasses import dataclass
from pathlib import Path
import logging

from lexpr.errors import LexprError, ConfigError
from lexpr.exec import ExecutionContext, eval_node
from lexpr.parser import parse, DEFAULT_MAX_DEPTH, DEFAULT_MAX_INPUT_LENGTH
from lexpr.printer import to_sexpr
from lexpr.types import Node, Atom, AtomKind

_LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = 'lexpr.conf'

OUTPUT_FORMATS = ('sexpr', 'json')
LOG_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')


@dataclass
class Config:
    max_depth: int = DEFAULT_MAX_DEPTH
    max_input_length: int = DEFAULT_MAX_INPUT_LENGTH
    output_format: str = 'sexpr'
    log_level: str = 'warning'

    @property
    def limits(self) -> dict:
        return {'max_depth': self.max_depth, 'max_input_length': self.max_input_length}


def _positive_int(directive: str, node: Node) -> int:
    if not (isinstance(node, Atom) and node.kind is AtomKind.NUMBER and isinstance(node.value, int)):
        raise ConfigError(f'{directive} expects a whole number, got {to_sexpr(node)}')
    if node.value <= 0:
        raise ConfigError(f'{directive} must be positive, got {node.value}')
    return node.value


def _choice(directive: str, node: Node, choices: tuple) -> str:
    if not (isinstance(node, Atom) and node.kind in (AtomKind.IDENTIFIER, AtomKind.STRING)):
        raise ConfigError(f'{directive} expects a name, got {to_sexpr(node)}')
    value = node.text.lower()
    if value not in choices:
        raise ConfigError(f"{directive} must be one of {', '.join(choices)}, got {node.text!r}")
    return value


def config_context(config: Config) -> ExecutionContext:
    ctx = ExecutionContext()

    def set_max_depth(ctx: ExecutionContext, depth: Node) -> None:
        config.max_depth = _positive_int('max-depth', depth)
    ctx.register(set_max_depth, name='max-depth')

    def set_max_input_length(ctx: ExecutionContext, length: Node) -> None:
        config.max_input_length = _positive_int('max-input-length', length)
    ctx.register(set_max_input_length, name='max-input-length')

    def set_output_format(ctx: ExecutionContext, output_format: Node) -> None:
        config.output_format = _choice('output-format', output_format, OUTPUT_FORMATS)
    ctx.register(set_output_format, name='output-format')

    def set_log_level(ctx: ExecutionContext, level: Node) -> None:
        config.log_level = _choice('log-level', level, LOG_LEVELS)
    ctx.register(set_log_level, name='log-level')

    return ctx


def load_config(text: str, config: Config | None = None) -> Config:
    config = config or Config()
    try:
        program = parse(text)
    except LexprError as e:
        raise ConfigError(f'cannot read configuration: {e}') from e

    eval_node(config_context(config), program)
    return config


def load_config_file(path: str | Path) -> Config:
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except OSError as e:
        raise ConfigError(f'cannot open configuration file {path}: {e.strerror}') from e
    config = load_config(text)
    _LOGGER.info(f'Loaded configuration from {path}: {config}')
    return config
