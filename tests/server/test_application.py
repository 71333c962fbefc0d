"""Tests for ServerApplication Flask endpoints"""
import pytest
import json

from src.server.application import ServerApplication
from src.server.enums import ServiceName
from src.server.services import CodecServiceFactory
from src.core import ResponseKey, CodecConfig

POINT_HEX = "0101000000000000000000f03f000000000000f03f"


@pytest.fixture
def app():
    """Create ServerApplication test instance and return the Flask app"""
    CodecServiceFactory.reset_instance()
    server_app = ServerApplication(config=CodecConfig())
    yield server_app.app
    CodecServiceFactory.reset_instance()


@pytest.fixture
def client(app):
    """Create Flask test client"""
    return app.test_client()


class TestServerApplicationEndpoints:
    """Test suite for ServerApplication endpoints"""

    def test_status_endpoint_returns_ok(self, client):
        """Test status endpoint reports server and codec service status"""
        response = client.get('/')

        assert response.status_code == 200
        result = json.loads(response.data)
        assert result["status"] == "running"
        service_status = result["services"][ServiceName.CODEC.value]
        assert service_status["status"] == "ready"
        assert service_status["dimension_mode"] == "per_geometry"

    def test_decode_endpoint_requires_post(self, client):
        response = client.get('/decode')

        assert response.status_code in [405, 404]

    def test_encode_endpoint_requires_json(self, client):
        """Test encode endpoint rejects an empty body"""
        response = client.post('/encode', data='')

        assert response.status_code == 400
        result = json.loads(response.data)
        assert ResponseKey.ERROR.value in result


class TestDecodeEndpoint:
    """Test suite for /decode"""

    def test_decode_point(self, client):
        response = client.post('/decode', json={"wkb": POINT_HEX})

        assert response.status_code == 200
        result = json.loads(response.data)
        assert result["kind"] == "Point"
        assert result["geometry"] == {"type": "Point", "coordinates": [1.0, 1.0]}
        assert result["wkt"] == "POINT (1 1)"

    def test_decode_measured_point_has_no_wkt(self, client):
        wkb = "0101000100" + "000000000000f03f" * 3
        response = client.post('/decode', json={"wkb": wkb})

        assert response.status_code == 200
        result = json.loads(response.data)
        assert result["geometry"]["dimensions"] == "XYM"
        assert result["wkt"] is None

    def test_decode_invalid_hex(self, client):
        response = client.post('/decode', json={"wkb": "zz"})

        assert response.status_code == 400
        result = json.loads(response.data)
        assert result[ResponseKey.ERROR.value].startswith("Validation error")

    def test_decode_big_endian(self, client):
        response = client.post('/decode', json={"wkb": "00" + POINT_HEX[2:]})

        assert response.status_code == 400
        result = json.loads(response.data)
        assert result[ResponseKey.ERROR_TYPE.value] == "UnsupportedByteOrderError"

    def test_decode_truncated(self, client):
        response = client.post('/decode', json={"wkb": POINT_HEX[:-4]})

        assert response.status_code == 400
        result = json.loads(response.data)
        assert result[ResponseKey.ERROR_TYPE.value] == "TruncatedInputError"

    def test_decode_empty(self, client):
        response = client.post('/decode', json={"wkb": ""})

        assert response.status_code == 400
        result = json.loads(response.data)
        assert result[ResponseKey.ERROR_TYPE.value] == "EmptyInputError"

    def test_decode_deeply_nested_collections(self, client):
        """Test that deeply nested collections are a client error"""
        wkb = "010700000001000000" * 330
        wkb += "0101000000" + "00" * 16
        response = client.post('/decode', json={"wkb": wkb})

        assert response.status_code == 400
        result = json.loads(response.data)
        assert result[ResponseKey.ERROR_TYPE.value] == "NestingTooDeepError"


class TestEncodeEndpoint:
    """Test suite for /encode"""

    def test_encode_point_hex(self, client):
        response = client.post('/encode', json={
            "geometry": {"type": "Point", "coordinates": [1.0, 1.0]}
        })

        assert response.status_code == 200
        result = json.loads(response.data)
        assert result["wkb"] == POINT_HEX
        assert result["size"] == 21

    def test_encode_byte_list(self, client):
        response = client.post('/encode', json={
            "geometry": {"type": "LineString", "coordinates": []},
            "hex": False
        })

        assert response.status_code == 200
        result = json.loads(response.data)
        assert result["wkb"] == [1, 2, 0, 0, 0, 0, 0, 0, 0]
        assert result["size"] == 9

    def test_encode_invalid_geometry(self, client):
        response = client.post('/encode', json={
            "geometry": {"type": "Triangle", "coordinates": []}
        })

        assert response.status_code == 400
        result = json.loads(response.data)
        assert result[ResponseKey.ERROR_TYPE.value] == "GeometryModelError"

    def test_encode_then_decode(self, client):
        geometry = {
            "type": "GeometryCollection",
            "geometries": [
                {"type": "Point", "coordinates": [1.0, 2.0]},
                {"type": "LineString", "coordinates": [[0.0, 0.0, 1.0], [1.0, 1.0, 2.0]]},
            ],
        }
        encoded = json.loads(client.post('/encode', json={"geometry": geometry}).data)
        decoded = json.loads(client.post('/decode', json={"wkb": encoded["wkb"]}).data)

        assert decoded["geometry"] == geometry


class TestUpperCaseConfiguration:
    """Test suite for configuration read from the environment"""

    def test_hex_uppercase_from_env(self, monkeypatch):
        monkeypatch.setenv("WKB_HEX_UPPERCASE", "true")
        CodecServiceFactory.reset_instance()
        try:
            client = ServerApplication().app.test_client()
            response = client.post('/encode', json={
                "geometry": {"type": "Point", "coordinates": [1.0, 1.0]}
            })
            assert json.loads(response.data)["wkb"] == POINT_HEX.upper()
        finally:
            CodecServiceFactory.reset_instance()
