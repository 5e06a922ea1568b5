# jaeger_otel_client/utils/logger.py
import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

logger = logging.getLogger("jaeger_otel_client")


def configure_logging(level: int = logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT)


def log_info(msg: str, *args):
    logger.info(msg, *args)


def log_warning(msg: str, *args):
    logger.warning(msg, *args)


def log_error(msg: str, *args):
    logger.error(msg, *args)
