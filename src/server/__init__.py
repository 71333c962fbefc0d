"""Server module initialization"""
from src.server.application import ServerApplication
from src.server.launcher import ServerLauncher, ListenSettings
from src.server.decorators import endpoint_error_handler
from src.server.schemas import (
    DecodeRequest,
    EncodeRequest,
    DecodeResponse,
    EncodeResponse,
    ErrorResponse,
)

__all__ = [
    "ServerApplication",
    "ServerLauncher",
    "ListenSettings",
    "endpoint_error_handler",
    "DecodeRequest",
    "EncodeRequest",
    "DecodeResponse",
    "EncodeResponse",
    "ErrorResponse",
]
