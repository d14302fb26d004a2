import functools
import logging
import time

logger = logging.getLogger(__name__)


def log_call(fn):
    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        logger.debug(f"Calling {fn.__qualname__} {args[1:] if args else ()} {kwargs}")
        started = time.monotonic()
        try:
            return fn(*args, **kwargs)
        finally:
            logger.debug(f"{fn.__qualname__} finished in {time.monotonic() - started:.2f}s")
    return __wrapped
