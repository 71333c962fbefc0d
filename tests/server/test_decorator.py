"""Tests for endpoint error handler decorator"""
import pytest
from flask import Flask, json

from src.server.decorators import endpoint_error_handler
from src.server.enums import Endpoint
from src.server.schemas import DecodeRequest
from src.core import ResponseKey, TruncatedInputError


@pytest.fixture
def app():
    """Create Flask test app"""
    app = Flask(__name__)
    app.config['TESTING'] = True
    return app


class TestEndpointErrorHandler:
    """Test suite for endpoint_error_handler decorator"""

    def test_decorator_extracts_json_data(self, app):
        """Test that decorator extracts JSON data from request"""
        @app.route('/test', methods=['POST'])
        @endpoint_error_handler(Endpoint.DECODE)
        def test_endpoint(data):
            return {"received": data}, 200

        with app.test_client() as client:
            response = client.post('/test', json={"test": "value"})

            assert response.status_code == 200
            result = json.loads(response.data)
            assert result["received"]["test"] == "value"

    def test_decorator_handles_missing_body(self, app):
        """Test that an empty body is treated as an empty object"""
        @app.route('/test', methods=['POST'])
        @endpoint_error_handler(Endpoint.DECODE)
        def test_endpoint(data):
            return {"received": data}, 200

        with app.test_client() as client:
            response = client.post('/test', data='')

            assert response.status_code == 200
            assert json.loads(response.data)["received"] == {}

    def test_decorator_rejects_non_object_body(self, app):
        @app.route('/test', methods=['POST'])
        @endpoint_error_handler(Endpoint.DECODE)
        def test_endpoint(data):
            return {"received": data}, 200

        with app.test_client() as client:
            response = client.post('/test', json=[1, 2, 3])

            assert response.status_code == 400
            assert "must be an object" in json.loads(response.data)[ResponseKey.ERROR.value]

    def test_decorator_validates_with_pydantic_model(self, app):
        """Test that decorator passes a validated model to the handler"""
        @app.route('/test', methods=['POST'])
        @endpoint_error_handler(Endpoint.DECODE, DecodeRequest)
        def test_endpoint(data: DecodeRequest):
            return {"wkb": data.wkb}, 200

        with app.test_client() as client:
            response = client.post('/test', json={"wkb": "0102"})

            assert response.status_code == 200
            assert json.loads(response.data)["wkb"] == "0102"

    def test_decorator_handles_validation_error(self, app):
        @app.route('/test', methods=['POST'])
        @endpoint_error_handler(Endpoint.DECODE, DecodeRequest)
        def test_endpoint(data: DecodeRequest):
            return {}, 200

        with app.test_client() as client:
            response = client.post('/test', json={})

            assert response.status_code == 400
            result = json.loads(response.data)
            assert "wkb" in result[ResponseKey.ERROR.value]
            assert result[ResponseKey.ERROR_TYPE.value] == "ValidationError"

    def test_decorator_handles_codec_error(self, app):
        @app.route('/test', methods=['POST'])
        @endpoint_error_handler(Endpoint.DECODE)
        def test_endpoint(data):
            raise TruncatedInputError(5, 8, 2)

        with app.test_client() as client:
            response = client.post('/test', json={})

            assert response.status_code == 400
            result = json.loads(response.data)
            assert "needed 8 bytes" in result[ResponseKey.ERROR.value]
            assert result[ResponseKey.ERROR_TYPE.value] == "TruncatedInputError"

    def test_decorator_handles_value_error(self, app):
        @app.route('/test', methods=['POST'])
        @endpoint_error_handler(Endpoint.ENCODE)
        def test_endpoint(data):
            raise ValueError("Invalid value")

        with app.test_client() as client:
            response = client.post('/test', json={})

            assert response.status_code == 400
            assert json.loads(response.data)[ResponseKey.ERROR.value] == "Invalid value"

    def test_decorator_handles_generic_exception(self, app):
        """Test that unexpected errors are returned as 500"""
        @app.route('/test', methods=['POST'])
        @endpoint_error_handler(Endpoint.ENCODE)
        def test_endpoint(data):
            raise RuntimeError("Unexpected error")

        with app.test_client() as client:
            response = client.post('/test', json={})

            assert response.status_code == 500
            result = json.loads(response.data)
            assert result[ResponseKey.ERROR.value] == "encode failed: Unexpected error"
            assert result[ResponseKey.ERROR_TYPE.value] == "RuntimeError"
