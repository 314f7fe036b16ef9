import logging
import os

_LOGGER = logging.getLogger(__name__)

DEBUG_ENABLED = os.environ.get('LEXPR_PARSE_DEBUG') == 'true'
DEBUG_DEPTH = 0

# debug decorator
def debug(func):
    if not DEBUG_ENABLED:
        return func

    def wrapper(*args, **kwargs):
        global DEBUG_DEPTH
        saved_depth = DEBUG_DEPTH
        prefix = '  ' * DEBUG_DEPTH
        _LOGGER.debug(f"{prefix}{func.__name__}({', '.join(repr(x) for x in args)}, {kwargs}) {{")
        try:
            DEBUG_DEPTH += 1
            result = func(*args, **kwargs)
            _LOGGER.debug(f"{'  ' * DEBUG_DEPTH}return {result!r}")
            return result
        except Exception as e:
            _LOGGER.debug(f"{prefix}}}raise {e!r}")
            raise
        finally:
            DEBUG_DEPTH -= 1
            assert saved_depth == DEBUG_DEPTH
            _LOGGER.debug(f"{prefix}}}")
    wrapper.__name__ = func.__name__
    wrapper.__wrapped__ = func
    return wrapper
