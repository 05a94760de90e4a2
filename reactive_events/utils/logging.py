from reactive_events.config.logging import (
    logger as package_logger,
    class_color_map,
    LoggerAdapter,
    LOG_FORMAT,
    DATE_FORMAT,
)
from colorlog import ColoredFormatter
import logging


class Logger:
    def __init__(self, name: str, type: str, level: str = "warning"):
        self.name = name
        self.type = type

        def get_color(type, level):
            return class_color_map.get(type, {}).get(level, "white")

        colors = {
            level_name: get_color(self.type, level_name)
            for level_name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        }
        self.formatter = ColoredFormatter(
            LOG_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors=colors,
            reset=True,
        )

        # Children inherit the package handler, so none is attached here
        self._logger = package_logger.getChild(self.name)
        self._logger.setLevel(getattr(logging, level.upper()))

        self.logger = LoggerAdapter(self._logger, {"class_name": self.name})

    def get_logger(self):
        return self._logger

    def set_level(self, level: str) -> None:
        self._logger.setLevel(getattr(logging, level.upper()))

    def debug(self, message: str, exc_info=None):
        self.logger.debug(
            msg=message, extra={"formatter": self.formatter}, exc_info=exc_info
        )
