"""
Monitoring and observability configuration.

Provides Prometheus metrics and structured logging for the API key service.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
import logging
import os
from pythonjsonlogger import jsonlogger


# Prometheus Metrics
API_KEY_EXTRACTIONS_TOTAL = Counter(
    'api_key_extractions_total',
    'Total number of API key extractions by outcome',
    ['result']
)

API_KEY_REQUEST_DURATION_SECONDS = Histogram(
    'api_key_request_duration_seconds',
    'API key check request duration in seconds',
    ['endpoint'],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0)
)

API_KEY_ERRORS_TOTAL = Counter(
    'api_key_errors_total',
    'Total number of unexpected errors while checking API keys',
    ['error_type']
)


def record_extraction(result) -> None:
    """
    Count an extraction outcome.

    Args:
        result: ExtractionResult from the API key handler
    """
    outcome = 'ok' if result.ok else result.error.kind.value
    API_KEY_EXTRACTIONS_TOTAL.labels(result=outcome).inc()


def configure_json_formatter() -> None:
    """Add JSON formatter to root logger handlers to capture extra fields."""
    formatter = jsonlogger.JsonFormatter(
        '%(asctime)s %(name)s %(levelname)s %(message)s',
        timestamp=True
    )

    if not logging.root.handlers:
        logging.root.addHandler(logging.StreamHandler())

    # Apply JSON formatter to all existing handlers
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)

    log_level_name = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logging.root.setLevel(getattr(logging, log_level_name, logging.INFO))


def get_metrics():
    """
    Generate Prometheus metrics in exposition format.

    Returns:
        Tuple of (metrics_data, content_type)
    """
    return generate_latest(), CONTENT_TYPE_LATEST
