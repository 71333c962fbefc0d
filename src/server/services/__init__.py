from src.server.services.logging import StructuredLogger
from src.server.services.codec_service import CodecService, CodecServiceFactory

__all__ = [
    "StructuredLogger",
    "CodecService",
    "CodecServiceFactory",
]
