from typing import Dict, Any, Optional

from src.core.enums import ResponseKey
from src.server.enums import ServiceName, ServiceStatus, ServerStatus
from src.server.services.logging import StructuredLogger


class ServerController:
    """
    Aggregates the status of the services behind the HTTP endpoints

    A service that fails to report its status is listed as errored and
    the server as a whole is reported as errored until it recovers.
    """

    def __init__(
        self,
        logger: StructuredLogger,
        services: Optional[Dict[ServiceName, Any]] = None
    ):
        """
        Initialize controller

        Args:
            logger: Structured logger shared with the services
            services: Services keyed by name; each must expose get_status()
        """
        self._logger = logger
        self._services = services or {}
        self._status = ServerStatus.STARTING

    @property
    def status(self) -> ServerStatus:
        return self._status

    def initialize(self) -> None:
        """
        Check the registered services and mark the server as running

        Raises:
            TypeError: If a registered service has no get_status method
        """
        for name, service in self._services.items():
            if not callable(getattr(service, "get_status", None)):
                self._status = ServerStatus.ERROR
                raise TypeError(f"Service '{name.value}' does not report its status")

        self._status = ServerStatus.RUNNING
        self._logger.info(
            "Server controller ready",
            services=",".join(name.value for name in self._services)
        )

    def _service_status(self, name: ServiceName, service: Any) -> Dict[str, Any]:
        try:
            return service.get_status()
        except Exception as e:
            self._logger.error("Service status failed", service=name.value, error=str(e))
            return {ResponseKey.STATUS.value: ServiceStatus.ERROR.value}

    def get_status(self) -> Dict[str, Any]:
        """
        Get current server status

        Returns:
            Dictionary with server status and per-service status
        """
        components = {
            name.value: self._service_status(name, service)
            for name, service in self._services.items()
        }
        errored = any(
            status.get(ResponseKey.STATUS.value) == ServiceStatus.ERROR.value
            for status in components.values()
        )
        status = ServerStatus.ERROR if errored else self._status

        return {
            ResponseKey.STATUS.value: status.value,
            ResponseKey.SERVICES.value: components
        }
