import logging
from pythonjsonlogger import jsonlogger

from . import config


def setup_logger(level: str = None):
    logHandler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s',
                                         rename_fields={'levelname': 'level', 'asctime': 'timestamp'})
    logHandler.setFormatter(formatter)
    logger = logging.getLogger()
    # Avoid stacking handlers when the app module is reloaded
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, jsonlogger.JsonFormatter):
            logger.removeHandler(handler)
    logger.addHandler(logHandler)
    logger.setLevel(level or config.LOG_LEVEL)
