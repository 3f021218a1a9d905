import contextvars
import logging
import sys
from datetime import datetime, timezone

from pythonjsonlogger.json import JsonFormatter

from whitelist_admin.core import config

request_id_var = contextvars.ContextVar("request_id", default=None)

# Secrets to redact
SECRETS = ["token", "secret", "password", "authorization", "cookie"]


class RedactingJsonFormatter(JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            now = datetime.now(timezone.utc).strftime(
                "%Y-%m-%dT%H:%M:%S.%fZ"
            )
            log_record["timestamp"] = now

        if log_record.get("level"):
            log_record["level"] = log_record["level"].upper()
        else:
            log_record["level"] = record.levelname

        req_id = request_id_var.get()
        if req_id:
            log_record["request_id"] = req_id

        log_record["service_name"] = config.SERVICE_NAME

        for key, value in list(log_record.items()):
            if any(s in key.lower() for s in SECRETS) and isinstance(
                value, str
            ):
                log_record[key] = "***REDACTED***"


def setup_logging(level: str = config.LOG_LEVEL) -> None:
    logger = logging.getLogger()
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = RedactingJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Tone down noisy uvicorn access logs
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
