"""
Prometheus metrics endpoint blueprint.
"""
from flask import Blueprint, Response
from apikey_auth.monitoring import get_metrics

metrics_bp = Blueprint('metrics', __name__)


@metrics_bp.route('/metrics', methods=['GET'])
def prometheus_metrics():
    """
    Prometheus metrics endpoint.

    Returns Prometheus-formatted metrics:
    - api_key_extractions_total: Extractions by outcome
    - api_key_request_duration_seconds: /authn latency histogram
    - api_key_errors_total: Unexpected errors by type

    Returns:
        200 OK: Metrics in Prometheus exposition format
    """
    metrics_data, content_type = get_metrics()
    return Response(metrics_data, mimetype=content_type)
