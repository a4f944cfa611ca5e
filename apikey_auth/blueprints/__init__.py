"""
Flask blueprints for the API key service endpoints.
"""

from .authn import authn_bp
from .health import health_bp
from .metrics import metrics_bp

__all__ = ['authn_bp', 'health_bp', 'metrics_bp']
