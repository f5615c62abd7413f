import logging
import threading

from colorama import Fore, Style

from ..configuration import LoggingConfig

DEFAULT_LOGGER_NAME = "wechatpay-signer"

# Predefined list of colors
THREAD_COLORS = [Fore.CYAN, Fore.GREEN, Fore.YELLOW, Fore.BLUE, Fore.WHITE, Fore.MAGENTA]
ASSIGNED_COLORS = {}

TRACE_LOGLEVEL = 5
logging.addLevelName(TRACE_LOGLEVEL, "TRACE")


def get_thread_color(thread_id):
    """
    Retrieves a color for the thread, assigning and remembering it for future calls.
    :param thread_id: Unique thread identifier (integer).
    :return: A color from the available list, or a default color if none are available.
    """
    if thread_id in ASSIGNED_COLORS:
        return ASSIGNED_COLORS[thread_id]

    if THREAD_COLORS:
        color = THREAD_COLORS.pop(0)
        ASSIGNED_COLORS[thread_id] = color
        return color
    else:
        return Fore.RESET


class ThreadColorFormatter(logging.Formatter):
    """
    Colors each line by the thread that emitted it, warnings and above in red.
    """

    def format(self, record):
        thread_color = get_thread_color(threading.get_ident())

        if record.levelno >= logging.WARNING:
            thread_color = Fore.RED

        log_line = super().format(record)
        return f"{thread_color}{log_line}{Style.RESET_ALL}"


class SignerLogger(logging.Logger):
    def __init__(self, name, level=logging.NOTSET):
        super().__init__(name, level)

    def trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE_LOGLEVEL):
            self._log(TRACE_LOGLEVEL, msg, args, **kwargs)


logging.setLoggerClass(SignerLogger)


def _level(name: str) -> int:
    return logging.getLevelName(name.upper())


def init_logger(logging_config: LoggingConfig, name=DEFAULT_LOGGER_NAME):
    logger = get_logger(name)

    levels = [_level(logging_config.level)]
    if logging_config.file and logging_config.file.level:
        levels.append(_level(logging_config.file.level))
    logger.setLevel(min(levels))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter_args = {
        'fmt': "{asctime:^19} | {name:^20.20} | {levelname[0]:^1} | {thread:^10} | {message}",
        'style': "{",
        'datefmt': "%Y-%m-%d %H:%M:%S"
    }

    console_handler = logging.StreamHandler()
    console_handler.setLevel(_level(logging_config.level))
    if logging_config.colored:
        console_handler.setFormatter(ThreadColorFormatter(**formatter_args))
    else:
        console_handler.setFormatter(logging.Formatter(**formatter_args))
    logger.addHandler(console_handler)

    file_config = logging_config.file
    if file_config:
        file_handler = logging.FileHandler(file_config.path, mode="a")
        file_handler.setLevel(_level(file_config.level or logging_config.level))
        file_handler.setFormatter(logging.Formatter(**formatter_args))
        logger.addHandler(file_handler)


def get_logger(name=DEFAULT_LOGGER_NAME) -> SignerLogger:
    """
    Returns a logger instance configured for the given name.
    """
    logger = logging.getLogger(name)
    logger.propagate = False

    return logger
