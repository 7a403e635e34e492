"""Gunicorn configuration file.

Loaded areas and render state live in the worker's memory, so the server runs
a single worker that is never recycled.
"""

import logging
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8080')}"
backlog = 256

workers = 1
worker_class = "uvicorn.workers.UvicornWorker"

# Exporting every area queries Overpass once per area, one after another.
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "1800"))
graceful_timeout = 30
keepalive = 5

errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()
accesslog = "-"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s"'
logconfig_dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s [%(process)d] [%(levelname)s] %(message)s",
            "datefmt": "[%Y-%m-%d %H:%M:%S %z]",
        },
        "access": {
            "format": access_log_format,
        },
    },
    "handlers": {
        "error_console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "gunicorn.error": {
            "level": loglevel.upper(),
            "handlers": ["error_console"],
            "propagate": False,
        },
    },
    "root": {
        "level": loglevel.upper(),
        "handlers": ["error_console"],
    },
}

proc_name = "street-lists"

# Recycling the worker would drop the loaded areas.
max_requests = 0

preload_app = False

wsgi_app = "app:app"

daemon = False


def on_starting(_server):
    """Log when server starts."""
    logging.getLogger("gunicorn.error").info(
        "Starting Gunicorn with %d worker, timeout %ds", workers, timeout
    )


def worker_abort(worker):
    """Log worker timeouts."""
    logging.getLogger("gunicorn.error").warning(
        "Worker %d was aborted due to timeout",
        worker.pid,
    )
