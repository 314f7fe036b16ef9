"""CLI: python -m lexpr [input.lx] [-o output.sx]"""

from pathlib import Path
import argparse
import logging
import sys

from lexpr.config import Config, DEFAULT_CONFIG_FILE, OUTPUT_FORMATS, load_config_file
from lexpr.errors import LexprError, ConfigError
from lexpr.json import dumps
from lexpr.parser import parse
from lexpr.printer import print_program

_LOGGER = logging.getLogger(__name__ if __name__ != '__main__' else 'lexpr')


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lexpr',
        description='Translate Lexpr notation into prefix S-expressions'
    )
    parser.add_argument('input', nargs='?', help='Input file path (default: standard input)')
    parser.add_argument('-o', '--output', help='Output file path (default: standard output)')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, help='Output format')
    parser.add_argument('--config', help=f'Configuration file (default: ./{DEFAULT_CONFIG_FILE} when present)')
    parser.add_argument('--max-depth', type=int, help='Deepest parenthesis nesting accepted')
    parser.add_argument('--max-input-length', type=int, help='Longest input accepted, in characters')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Log progress (-v for info, -vv for debug)')
    return parser


def resolve_config(args: argparse.Namespace) -> Config:
    if args.config:
        config = load_config_file(args.config)
    elif Path(DEFAULT_CONFIG_FILE).is_file():
        config = load_config_file(DEFAULT_CONFIG_FILE)
    else:
        config = Config()

    if args.format:
        config.output_format = args.format
    if args.max_depth is not None:
        if args.max_depth <= 0:
            raise ConfigError('--max-depth must be positive')
        config.max_depth = args.max_depth
    if args.max_input_length is not None:
        if args.max_input_length <= 0:
            raise ConfigError('--max-input-length must be positive')
        config.max_input_length = args.max_input_length
    if args.verbose:
        config.log_level = 'debug' if args.verbose > 1 else 'info'
    return config


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        config = resolve_config(args)
    except ConfigError as e:
        print(f'error: {e}', file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        if args.input in (None, '-'):
            text = sys.stdin.read()
        else:
            text = Path(args.input).read_text(encoding='utf-8')
    except OSError as e:
        print(f'error: cannot read {args.input}: {e.strerror}', file=sys.stderr)
        return 2
    except UnicodeDecodeError as e:
        print(f"error: {args.input or 'standard input'} is not valid UTF-8: byte {e.start} ({e.reason})", file=sys.stderr)
        return 2

    try:
        program = parse(text, **config.limits)
        if config.output_format == 'json':
            result = dumps(program)
        else:
            result = print_program(program)
    except LexprError as e:
        _LOGGER.debug('Translation failed', exc_info=True)
        print(f'error: {e}', file=sys.stderr)
        return 1

    _LOGGER.info(f'Translated {len(program)} expressions')

    if result:
        result += '\n'
    if args.output in (None, '-'):
        sys.stdout.write(result)
    else:
        Path(args.output).write_text(result, encoding='utf-8')
    return 0


if __name__ == "__main__":
    if sys.platform.lower() == "win32":
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore
        sys.stderr.reconfigure(encoding='utf-8') # type: ignore

    sys.exit(main())
