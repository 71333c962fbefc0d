from typing import Any, Dict, Optional
import logging

from shapely.errors import GEOSException

from src.core import CodecConfig, DEFAULT_CODEC_CONFIG, ResponseKey
from src.components.byte_cursor import HexCodec
from src.components.wkb import WkbDecoder, WkbEncoder
from src.components.geometry import GeoJsonAdapter, ShapelyAdapter
from src.models import Geometry
from src.server.enums import ServiceStatus
from src.server.services.logging import StructuredLogger

logger = logging.getLogger(__name__)


class CodecService:
    """
    Service translating between hex WKB and GeoJSON-like dictionaries

    Follows Dependency Injection and Single Responsibility principles
    """

    def __init__(self, logger: StructuredLogger, config: CodecConfig = DEFAULT_CODEC_CONFIG):
        """
        Initialize codec service

        Args:
            logger: Logger instance for structured logging
            config: Codec configuration shared by decoder and encoder
        """
        self._logger = logger
        self._config = config
        self._decoder = WkbDecoder(config)
        self._encoder = WkbEncoder(config)

    @property
    def config(self) -> CodecConfig:
        return self._config

    def get_status(self) -> Dict[str, Any]:
        """Get service status with the active codec configuration"""
        return {
            ResponseKey.STATUS.value: ServiceStatus.READY.value,
            "dimension_mode": self._config.dimension_mode.value,
            "hex_uppercase": self._config.hex_uppercase,
            "strict_trailing_bytes": self._config.strict_trailing_bytes,
            "max_depth": self._config.max_depth,
        }

    @staticmethod
    def to_wkt(geometry: Geometry) -> Optional[str]:
        """Get WKT text through Shapely, or None when M values would be lost"""
        if any(point.m is not None for point in geometry.iter_points()):
            return None
        try:
            return ShapelyAdapter.to_shapely(geometry).wkt
        except (ValueError, GEOSException) as e:
            logger.warning(f"WKT unavailable for {geometry.type_name}: {str(e)}")
            return None

    def decode_hex(self, wkb_hex: str) -> Dict[str, Any]:
        """
        Decode hex WKB into a response dictionary

        Args:
            wkb_hex: WKB as hex text

        Returns:
            Dictionary with geometry dict, kind name and WKT text

        Raises:
            DecodingError: If the WKB is malformed
        """
        geometry = self._decoder.decode(wkb_hex, is_hex=True)
        self._logger.info(
            "Decoded WKB",
            kind=geometry.type_name,
            layout=geometry.layout.value,
            size=len(wkb_hex) // 2
        )
        return {
            ResponseKey.GEOMETRY.value: GeoJsonAdapter.to_dict(geometry),
            ResponseKey.KIND.value: geometry.type_name,
            ResponseKey.WKT.value: self.to_wkt(geometry),
        }

    def encode_dict(self, geometry_dict: Dict[str, Any], as_hex: bool = True) -> Dict[str, Any]:
        """
        Encode a GeoJSON-like dictionary into WKB

        Args:
            geometry_dict: Geometry dictionary
            as_hex: Return hex text (otherwise a list of byte values)

        Returns:
            Dictionary with WKB and its byte size

        Raises:
            GeometryModelError: If the dictionary is malformed or nested too deep
        """
        geometry = GeoJsonAdapter.from_dict(geometry_dict, self._config.max_depth)
        wkb = self._encoder.encode(geometry)
        self._logger.info("Encoded WKB", kind=geometry.type_name, size=len(wkb))
        return {
            ResponseKey.WKB.value: (
                HexCodec.to_hex(wkb, uppercase=self._config.hex_uppercase) if as_hex else list(wkb)
            ),
            ResponseKey.SIZE.value: len(wkb),
        }


class CodecServiceFactory:
    """Factory for creating codec service instances, one per codec configuration"""

    _instances: Dict[CodecConfig, CodecService] = {}

    @classmethod
    def get_instance(cls, logger: StructuredLogger, config: Optional[CodecConfig] = None) -> CodecService:
        """
        Get the shared codec service for a configuration

        Args:
            logger: Logger instance, used when the service is first created
            config: Codec configuration; read from the environment when omitted

        Returns:
            CodecService instance
        """
        config = config or CodecConfig.from_env()
        if config not in cls._instances:
            cls._instances[config] = CodecService(logger, config)
        return cls._instances[config]

    @classmethod
    def reset_instance(cls, config: Optional[CodecConfig] = None) -> None:
        """
        Reset cached instances (useful for testing)

        Args:
            config: Configuration to drop; all instances are dropped when omitted
        """
        if config is None:
            cls._instances.clear()
        else:
            cls._instances.pop(config, None)
