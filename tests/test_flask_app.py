"""
Unit tests for Flask application endpoints.

Tests /authn, /health and /metrics using the Flask test client, plus the
require_api_key view decorator.
"""
from unittest.mock import Mock

import pytest
from flask import g, jsonify

from apikey_auth.app import create_app
from apikey_auth.auth import APIKeyHandler, require_api_key


class TestHealthEndpoint:
    """Test /health endpoint."""

    def test_health_check_success(self, client):
        """Health check reports the configured header and scheme."""
        response = client.get('/health')

        assert response.status_code == 200
        data = response.get_json()
        assert data['status'] == 'healthy'
        assert data['header_name'] == 'Authorization'
        assert data['scheme'] == 'ApiKey'

    def test_health_check_custom_header(self):
        """Health check reflects a custom header name."""
        app = create_app(handler=APIKeyHandler(header_name='X-Api-Auth'))

        with app.test_client() as client:
            response = client.get('/health')

        assert response.get_json()['header_name'] == 'X-Api-Auth'


class TestAuthnEndpoint:
    """Test /authn endpoint."""

    def test_valid_key_allowed(self, client):
        """Well-formed ApiKey header returns 200."""
        response = client.get('/authn', headers={'Authorization': 'ApiKey abc123'})

        assert response.status_code == 200
        assert response.headers['X-Auth-Key-Present'] == 'true'

    def test_key_not_echoed(self, client):
        """The key is not returned to the caller."""
        response = client.get('/authn', headers={'Authorization': 'ApiKey abc123'})

        assert b'abc123' not in response.data
        assert 'abc123' not in str(response.headers)

    def test_missing_header_rejected(self, client):
        """Missing Authorization header returns 401."""
        response = client.get('/authn')

        assert response.status_code == 401
        assert response.headers['WWW-Authenticate'] == 'ApiKey'
        assert response.get_json() == {
            'error': 'no_auth_header',
            'message': 'no authorization header included'
        }

    def test_wrong_scheme_rejected(self, client):
        """Bearer scheme is malformed for this service."""
        response = client.get('/authn', headers={'Authorization': 'Bearer abc123'})

        assert response.status_code == 401
        assert response.get_json() == {
            'error': 'malformed_header',
            'message': 'malformed authorization header'
        }

    def test_scheme_without_key_rejected(self, client):
        """Bare "ApiKey" is malformed."""
        response = client.get('/authn', headers={'Authorization': 'ApiKey'})

        assert response.status_code == 401
        assert response.get_json()['error'] == 'malformed_header'

    def test_lowercase_header_name(self, client):
        """Header name lookup is case-insensitive."""
        response = client.get('/authn', headers={'authorization': 'ApiKey abc123'})

        assert response.status_code == 200

    def test_repeated_auth_headers_use_first(self, client):
        """Two Authorization headers are checked using the first one."""
        response = client.get('/authn', headers=[
            ('Authorization', 'ApiKey first123'),
            ('Authorization', 'Bearer second456'),
        ])

        assert response.status_code == 200

    def test_other_methods(self, client):
        """POST requests are checked the same way."""
        response = client.post('/authn', headers={'Authorization': 'ApiKey abc123'}, data='{}')

        assert response.status_code == 200

    def test_nginx_original_headers_accepted(self, client):
        """nginx forwarding headers do not affect the outcome."""
        response = client.get('/authn', headers={
            'Authorization': 'ApiKey abc123',
            'X-Original-URI': '/api/things?page=2',
            'X-Original-Method': 'GET'
        })

        assert response.status_code == 200

    def test_extractions_counted(self, client, extraction_count):
        """Each outcome increments api_key_extractions_total."""
        ok_before = extraction_count('ok')
        missing_before = extraction_count('no_auth_header')
        malformed_before = extraction_count('malformed_header')

        client.get('/authn', headers={'Authorization': 'ApiKey abc123'})
        client.get('/authn')
        client.get('/authn', headers={'Authorization': 'Basic abc'})

        assert extraction_count('ok') == ok_before + 1
        assert extraction_count('no_auth_header') == missing_before + 1
        assert extraction_count('malformed_header') == malformed_before + 1

    def test_handler_failure_returns_500(self):
        """Unexpected handler errors return 500."""
        handler = Mock(spec=APIKeyHandler)
        handler.extract.side_effect = RuntimeError('boom')
        app = create_app(handler=handler)

        with app.test_client() as client:
            response = client.get('/authn', headers={'Authorization': 'ApiKey abc123'})

        assert response.status_code == 500

    def test_reject_empty_handler(self):
        """An app configured with reject_empty denies "ApiKey "."""
        app = create_app(handler=APIKeyHandler(reject_empty=True))

        with app.test_client() as client:
            response = client.get('/authn', headers={'Authorization': 'ApiKey '})

        assert response.status_code == 401


class TestMetricsEndpoint:
    """Test /metrics endpoint."""

    def test_metrics_exposed(self, client):
        """Metrics endpoint returns Prometheus exposition text."""
        client.get('/authn')

        response = client.get('/metrics')

        assert response.status_code == 200
        assert b'api_key_extractions_total' in response.data


class TestRequireApiKey:
    """Test the require_api_key view decorator."""

    @pytest.fixture
    def protected_client(self, app):
        """Client for an app with a protected view."""
        @app.route('/protected')
        @require_api_key
        def protected():
            return jsonify({'key': g.api_key})

        with app.test_client() as client:
            yield client

    def test_valid_key_reaches_view(self, protected_client):
        """View runs with the key stored on g."""
        response = protected_client.get('/protected', headers={'Authorization': 'ApiKey abc123'})

        assert response.status_code == 200
        assert response.get_json() == {'key': 'abc123'}

    def test_missing_key_short_circuits(self, protected_client):
        """View is not called without an Authorization header."""
        response = protected_client.get('/protected')

        assert response.status_code == 401
        assert response.get_json()['error'] == 'no_auth_header'

    def test_malformed_key_short_circuits(self, protected_client):
        """View is not called for a malformed header."""
        response = protected_client.get('/protected', headers={'Authorization': 'apikey abc123'})

        assert response.status_code == 401
        assert response.get_json()['error'] == 'malformed_header'

    def test_repeated_auth_headers_first_key(self, protected_client):
        """With two Authorization headers the view sees the first key only."""
        response = protected_client.get('/protected', headers=[
            ('Authorization', 'ApiKey first123'),
            ('Authorization', 'ApiKey second456'),
        ])

        assert response.status_code == 200
        assert response.get_json() == {'key': 'first123'}

    def test_empty_key_quirk(self, protected_client):
        """"ApiKey " reaches the view with an empty key."""
        response = protected_client.get('/protected', headers={'Authorization': 'ApiKey '})

        assert response.status_code == 200
        assert response.get_json() == {'key': ''}
