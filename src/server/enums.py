import logging
from enum import Enum


class ServiceStatus(Enum):
    """Status reported by a single service"""
    READY = "ready"
    ERROR = "error"


class ServerStatus(Enum):
    """Lifecycle of the server controller"""
    STARTING = "starting"
    RUNNING = "running"
    ERROR = "error"


class LogLevel(Enum):
    """Levels accepted in LOG_LEVEL"""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def logging_level(self) -> int:
        """Get matching standard logging level"""
        return getattr(logging, self.name)


class HTTPStatus(Enum):
    OK = 200
    BAD_REQUEST = 400
    INTERNAL_SERVER_ERROR = 500


class ServiceName(Enum):
    """Keys of the services registered with the controller"""
    CODEC = "codec_service"


class Endpoint(Enum):
    """Flask endpoint names, also used in error messages"""
    STATUS = "status"
    DECODE = "decode"
    ENCODE = "encode"
