"""Structured JSON logging for production observability"""

import logging
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator
from pythonjsonlogger import jsonlogger

from instruction_gateway.domain.models import TransactionOutcome

logger = logging.getLogger("instruction_gateway")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "instruction-gateway"


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers
    root.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)


@contextmanager
def log_errors(step: str) -> Iterator[None]:
    """Log any exception escaping the block, then let it propagate unchanged"""
    try:
        yield
    except Exception:
        logger.error("Unexpected error", extra={"step": step}, exc_info=True)
        raise


def log_instruction_outcome(
    request_id: str,
    outcome: TransactionOutcome,
    duration_ms: float,
) -> None:
    """Log structured instruction outcome for analysis"""
    logger.info(
        "Instruction processed",
        extra={
            "request_id": request_id,
            "step": "instruction_complete",
            "status": outcome.status.value,
            "status_code": outcome.status_code.value,
            "type": outcome.type.value if outcome.type else None,
            "duration_ms": duration_ms,
        },
    )
