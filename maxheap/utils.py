import logging
import time


def check(condition, msg=""):
    """ Unlike assert, which can be optimized out,
    check will always check whether condition is satisfied or throw AssertionError if not
    """
    if not condition:
        raise AssertionError(msg)


class Logger:
    """Facade over the "maxheap" logger.

    Library code only emits records. Nothing is printed until an application
    calls set_logging_level, which installs a stream handler with
    HeapLogFormatter.
    """

    _heap_logger = logging.getLogger("maxheap")
    _heap_logger.addHandler(logging.NullHandler())
    _handler = None

    LEVEL_MAP = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    @classmethod
    def set_logging_level(cls, level):
        if cls._handler:
            Logger.warning("logging_level has already been set")
            return
        level = level.upper()
        if level not in cls.LEVEL_MAP:
            raise RuntimeError("invalid level {}".format(level))

        cls._heap_logger.setLevel(cls.LEVEL_MAP[level])
        cls._handler = logging.StreamHandler()
        cls._handler.setFormatter(HeapLogFormatter())
        cls._heap_logger.addHandler(cls._handler)

    @classmethod
    def reset(cls):
        """Removes the handler and level installed by set_logging_level"""
        if cls._handler:
            cls._heap_logger.removeHandler(cls._handler)
        cls._handler = None
        cls._heap_logger.setLevel(logging.NOTSET)

    @classmethod
    def is_enable_for_debug(cls):
        return cls._heap_logger.isEnabledFor(logging.DEBUG)

    # stacklevel=2 reports the caller of the facade, not this module
    @classmethod
    def debug(cls, msg, *args):
        cls._heap_logger.debug(msg, *args, stacklevel=2)

    @classmethod
    def warning(cls, msg, *args):
        cls._heap_logger.warning(msg, *args, stacklevel=2)


_COLOR_FOR_LEVEL = {
    logging.DEBUG: "\033[1;33m",
    logging.WARNING: "\033[1;35m",
    logging.ERROR: "\033[1;31m",
    logging.CRITICAL: "\033[1;41m",
}
_RESET_COLOR = "\033[1;0m"


def get_log_prefix(record: logging.LogRecord):
    """absl-like prefix: level initial, MMDD HH:MM:SS.micro, file:line"""
    if record.levelno in Logger.LEVEL_MAP.values():
        initial = record.levelname[0]
    else:
        initial = "?"
    color = _COLOR_FOR_LEVEL.get(record.levelno, "")
    created = time.localtime(record.created)
    return "{}{}{}{} {}.{:06d} {}:{}] ".format(
        color,
        initial,
        time.strftime("%m%d", created),
        _RESET_COLOR if color else "",
        time.strftime("%H:%M:%S", created),
        int(record.created % 1.0 * 1e6),
        record.filename,
        record.lineno,
    )


class HeapLogFormatter(logging.Formatter):
    def format(self, record):
        return get_log_prefix(record) + super(HeapLogFormatter, self).format(record)
