"""
Structured logging and metrics for the medical study content client
"""
import sys
from typing import Optional
from contextvars import ContextVar
import structlog
from structlog.processors import CallsiteParameter, CallsiteParameterAdder
from prometheus_client import Counter, Histogram
import logging

from medstudy.config import settings

# Set by the host application to correlate log lines with its own requests
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# Prometheus metrics
llm_requests = Counter("medstudy_llm_requests_total", "Total Gemini requests", ["model", "operation", "status"])
llm_duration = Histogram("medstudy_llm_duration_seconds", "Gemini request duration", ["model", "operation"])
llm_retries = Counter("medstudy_llm_retries_total", "Gemini calls retried after a failure")
mock_responses = Counter("medstudy_mock_responses_total", "Responses served from mock data", ["operation"])


def add_request_context(logger, method_name, event_dict):
    """Add request context to log events"""
    request_id = request_id_var.get()

    if request_id:
        event_dict["request_id"] = request_id

    event_dict["service"] = "medstudy"
    event_dict["environment"] = settings.environment.value

    return event_dict


def setup_logging():
    """Configure structured logging for the package"""

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO)
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_request_context,
        CallsiteParameterAdder(
            parameters=[CallsiteParameter.FILENAME, CallsiteParameter.LINENO]
        ),
        structlog.processors.UnicodeDecoder(),
    ]

    # Use JSON in production
    if settings.log_format == "json" or settings.is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.BoundLogger:
    """Get a configured logger instance"""
    return structlog.get_logger(name)


class MetricsLogger:
    """Helper class for logging with metrics"""

    def __init__(self, logger: structlog.BoundLogger):
        self.logger = logger

    def log_llm_request(self, model: str, operation: str, prompt_length: int):
        """Log Gemini request"""
        self.logger.info("llm_request",
                         model=model,
                         operation=operation,
                         prompt_length=prompt_length)

    def log_llm_complete(self, model: str, operation: str, duration: float,
                         tokens_used: int = 0, success: bool = True):
        """Log Gemini completion"""
        status = "success" if success else "error"
        llm_requests.labels(model=model, operation=operation, status=status).inc()
        llm_duration.labels(model=model, operation=operation).observe(duration)

        if success:
            self.logger.info("llm_complete",
                             model=model,
                             operation=operation,
                             duration_seconds=duration,
                             tokens_used=tokens_used)
        else:
            self.logger.error("llm_failed",
                              model=model,
                              operation=operation,
                              duration_seconds=duration)

    def log_retry(self, operation: str, attempt: int, delay: float, error: str):
        """Log a retried call"""
        llm_retries.inc()
        self.logger.warning("Gemini API call failed, retrying",
                            operation=operation,
                            attempt=attempt,
                            delay_seconds=delay,
                            error=error)

    def log_mock_response(self, operation: str, topic: str):
        """Log a response served from mock data"""
        mock_responses.labels(operation=operation).inc()
        self.logger.info("API key not available, using mock data",
                         operation=operation,
                         topic=topic)


# Initialize logging on module import
setup_logging()

# Create default logger
logger = get_logger(__name__)
metrics_logger = MetricsLogger(logger)
