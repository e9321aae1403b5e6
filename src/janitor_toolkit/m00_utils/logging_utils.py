"""
logging_utils.py

Logging setup shared by the pipeline runners.
"""
import logging


def configure_logging(notebook: bool = True, logging_mode: str = "auto"):
    """
    Configures root logging for a runner.

    'off' disables logging; 'on' logs at INFO; 'auto' logs at INFO outside
    notebooks and at WARNING inside them.
    """
    if logging_mode == "off":
        logging.disable(logging.CRITICAL)
    else:
        logging.disable(logging.NOTSET)
        level = logging.INFO if logging_mode == "on" or not notebook else logging.WARNING
        logging.basicConfig(
            level=level, format="%(asctime)s - %(levelname)s - %(message)s", force=True
        )
