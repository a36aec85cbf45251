#!/usr/bin/env python3
import logging
import os
from datetime import datetime

import uvicorn

from sporting.core.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging() -> str:
    """
    Send root logging to the console and to a per-start file in LOG_DIR

    Returns:
        str: path of the log file
    """
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_path = os.path.join(settings.LOG_DIR, f"sporting_{datetime.now():%Y%m%d_%H%M%S}.log")

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler(), logging.FileHandler(log_path, encoding='utf-8')]

    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL)
    root.handlers = []
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return log_path


if __name__ == "__main__":
    log_path = configure_logging()
    logging.info(f"Serving {settings.PROJECT_NAME} on {settings.HOST}:{settings.PORT}, logging to {log_path}")
    uvicorn.run("sporting.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
