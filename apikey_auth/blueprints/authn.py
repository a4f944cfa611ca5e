"""
Authentication endpoint blueprint.

Handles nginx auth_request integration for ApiKey header checks.
"""
import time
import logging
from flask import Blueprint, request, make_response
from apikey_auth.auth.decorators import current_handler, unauthorized_response
from apikey_auth.monitoring import (
    API_KEY_REQUEST_DURATION_SECONDS,
    API_KEY_ERRORS_TOTAL,
    record_extraction
)

logger = logging.getLogger(__name__)

authn_bp = Blueprint('authn', __name__)


@authn_bp.route('/authn', methods=['GET', 'POST', 'PUT', 'DELETE', 'PATCH', 'HEAD', 'OPTIONS'])
def authenticate():
    """
    Nginx auth_request endpoint.

    Checks that the Authorization header carries an "ApiKey <key>" value.
    The key is not looked up anywhere; only its presence and shape are
    checked.

    Returns:
        200 OK: Header is well-formed
            - Sets X-Auth-Key-Present: true
        401 Unauthorized: Header missing or malformed
            - Sets WWW-Authenticate: ApiKey
            - JSON body {"error": ..., "message": ...}
        500 Internal Server Error: System error
    """
    start_time = time.time()

    try:
        handler = current_handler()
        result = handler.extract(request.headers)
        record_extraction(result)

        duration = time.time() - start_time
        API_KEY_REQUEST_DURATION_SECONDS.labels(endpoint='authn').observe(duration)

        log_fields = dict(result.to_dict(), **{
            'route': request.headers.get('X-Original-URI', request.path),
            'method': request.headers.get('X-Original-Method', request.method),
            'duration_ms': round(duration * 1000, 2)
        })

        if result.ok:
            logger.info("API key header accepted", extra=log_fields)
            response = make_response('', 200)
            response.headers['X-Auth-Key-Present'] = 'true'
            return response

        logger.warning("API key header rejected", extra=log_fields)
        return unauthorized_response(result.error, handler.scheme)

    except Exception as e:
        duration = time.time() - start_time

        API_KEY_ERRORS_TOTAL.labels(error_type=type(e).__name__).inc()

        logger.error("Authentication error", extra={
            'route': request.headers.get('X-Original-URI', request.path),
            'error_type': type(e).__name__,
            'error_message': str(e),
            'duration_ms': round(duration * 1000, 2)
        }, exc_info=True)

        return make_response('Internal server error', 500)
