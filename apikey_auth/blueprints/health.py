"""
Health check endpoint blueprint.
"""
from flask import Blueprint, jsonify
from apikey_auth.auth.decorators import current_handler

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    """
    Health check endpoint.

    Returns:
        200 OK: JSON {"status": "healthy", "header_name": ..., "scheme": ...}
    """
    handler = current_handler()
    return jsonify({
        'status': 'healthy',
        'header_name': handler.header_name,
        'scheme': handler.scheme
    }), 200
