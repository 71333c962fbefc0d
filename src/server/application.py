"""Server application implementation"""
from typing import Any, Optional
from flask import Flask, jsonify
from flask_cors import CORS

from src.core import CodecConfig
from src.server.enums import HTTPStatus, Endpoint, ServiceName
from src.server.services import CodecServiceFactory, StructuredLogger
from src.server.controllers.base_controller import ServerController
from src.server.decorators import endpoint_error_handler
from src.server.schemas import DecodeRequest, EncodeRequest, DecodeResponse, EncodeResponse


class ServerApplication:
    """Main application class implementing dependency injection"""

    def __init__(self, app_name: str = "WKB Codec Server", config: Optional[CodecConfig] = None) -> None:
        """
        Initialize the Flask application with dependencies.

        Args:
            app_name: Name of the Flask application
            config: Codec configuration; read from the environment when omitted
        """
        self._app: Flask = Flask(app_name)
        CORS(self._app)
        self._logger = StructuredLogger.from_env("Server")
        self._controller: ServerController | None = None
        self._codec_service = None
        self._setup_dependencies(config)
        self._setup_routes()

    def _setup_dependencies(self, config: Optional[CodecConfig]) -> None:
        """Setup all dependencies using dependency injection"""
        self._codec_service = CodecServiceFactory.get_instance(self._logger, config)

        services = {
            ServiceName.CODEC: self._codec_service,
        }

        self._controller = ServerController(self._logger, services=services)
        self._controller.initialize()

    def _setup_routes(self) -> None:
        """Setup Flask routes"""
        self._app.add_url_rule("/", Endpoint.STATUS.value, self._get_status, methods=["GET"])
        self._app.add_url_rule("/decode", Endpoint.DECODE.value, self._decode, methods=["POST"])
        self._app.add_url_rule("/encode", Endpoint.ENCODE.value, self._encode, methods=["POST"])

    def _get_status(self) -> Any:
        """
        Get server status endpoint.

        Returns:
            JSON response with server and codec service status
        """
        return jsonify(self._controller.get_status())

    @endpoint_error_handler(Endpoint.DECODE, DecodeRequest)
    def _decode(self, data: DecodeRequest) -> tuple:
        """
        Decode hex WKB into a GeoJSON-like geometry.

        Expected JSON payload:
        {
            "wkb": "0101000000000000000000f03f000000000000f03f"
        }

        Returns:
            tuple: (response, status_code) with geometry, kind and WKT
        """
        result = self._codec_service.decode_hex(data.wkb)
        response = DecodeResponse(**result)
        return jsonify(response.model_dump()), HTTPStatus.OK.value

    @endpoint_error_handler(Endpoint.ENCODE, EncodeRequest)
    def _encode(self, data: EncodeRequest) -> tuple:
        """
        Encode a GeoJSON-like geometry into WKB.

        Expected JSON payload:
        {
            "geometry": {"type": "Point", "coordinates": [1.0, 1.0]},
            "hex": true (optional, defaults to true)
        }

        Returns:
            tuple: (response, status_code) with WKB and its size in bytes
        """
        result = self._codec_service.encode_dict(data.geometry, as_hex=data.hex)
        response = EncodeResponse(**result)
        return jsonify(response.model_dump()), HTTPStatus.OK.value

    @property
    def app(self) -> Flask:
        """Get Flask application instance"""
        return self._app
