import logging
import sys
import traceback
from colorlog import StreamHandler, ColoredFormatter


LOG_FORMAT = "%(asctime)s %(log_color)s%(class_name)s:%(levelname)s%(reset)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LoggerAdapter(logging.LoggerAdapter):
    """Adds ``class_name`` to every record and inlines exception tracebacks.

    Passing ``formatter`` in ``extra`` switches the package handler to that
    formatter, which is how each logger type gets its own colors.
    """

    def log(self, level, msg, *args, **kwargs):
        if not self.isEnabledFor(level):
            return

        exc_info = kwargs.pop("exc_info", None)
        if exc_info:
            if isinstance(exc_info, BaseException):
                exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
            elif not isinstance(exc_info, tuple):
                exc_info = sys.exc_info()
            if exc_info[0] is not None:
                msg = f"{msg}\n" + "".join(
                    traceback.format_exception(exc_info[0], exc_info[1], exc_info[2])
                )

        extra = dict(kwargs.pop("extra", None) or {})
        formatter = extra.pop("formatter", None)
        if formatter is not None:
            handler.setFormatter(formatter)

        kwargs["extra"] = {**self.extra, **extra}
        self.logger.log(level, msg, *args, **kwargs)


class_color_map = {
    "event": {
        "INFO": "light_blue",
        "DEBUG": "cyan",
        "ERROR": "red",
        "WARNING": "yellow",
        "CRITICAL": "red,bg_white",
    },
}

# Package logger; every Event logs through a child of this one
logger = logging.getLogger("reactive_events")
logger.setLevel(logging.DEBUG)

handler = StreamHandler()
handler.setLevel(logging.DEBUG)

formatter = ColoredFormatter(
    LOG_FORMAT,
    datefmt=DATE_FORMAT,
    reset=True,
    log_colors={
        "DEBUG": "cyan",
        "INFO": "light_blue",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "red,bg_white",
    },
)

handler.setFormatter(formatter)
logger.addHandler(handler)

# Keep event logs out of the application's root handlers
logger.propagate = False
