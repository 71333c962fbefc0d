"""Development server entry point for the codec service"""
import os
from dataclasses import dataclass

from src.server.application import ServerApplication
from src.server.services.logging import StructuredLogger

_TRUE_VALUES = ("1", "true", "yes")


@dataclass(frozen=True)
class ListenSettings:
    """Address and debug flag for the development server"""
    host: str = "0.0.0.0"
    port: int = 8082
    debug: bool = False

    @classmethod
    def from_env(cls) -> "ListenSettings":
        """
        Read HOST, PORT and FLASK_DEBUG

        Raises:
            ValueError: If PORT is not an integer
        """
        return cls(
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", cls.port)),
            debug=os.getenv("FLASK_DEBUG", "").strip().lower() in _TRUE_VALUES,
        )


class ServerLauncher:
    """Builds the codec application and serves it with the Flask server"""

    @staticmethod
    def run(application: ServerApplication, settings: ListenSettings) -> None:
        StructuredLogger.from_env("Launcher").info(
            "Starting codec server",
            app=application.app.name,
            host=settings.host,
            port=settings.port,
            debug=settings.debug
        )
        application.app.run(
            host=settings.host,
            port=settings.port,
            debug=settings.debug,
            use_reloader=False
        )

    @classmethod
    def run_from_env(cls) -> None:
        """Create the application and run it with settings from the environment"""
        cls.run(ServerApplication(), ListenSettings.from_env())
