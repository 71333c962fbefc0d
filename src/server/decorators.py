"""Server-side decorators for endpoint handlers"""
from functools import wraps
from typing import Callable, Any, Type, Optional
from flask import request, jsonify
from werkzeug.exceptions import BadRequest, UnsupportedMediaType
from pydantic import BaseModel, ValidationError
import traceback
import logging

from src.core import WkbCodecException
from src.server.enums import Endpoint, HTTPStatus
from src.server.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(message: str, error: Exception) -> Any:
    body = ErrorResponse(error=message, error_type=type(error).__name__)
    return jsonify(body.model_dump())


def _format_validation_errors(error: ValidationError) -> str:
    return "; ".join([
        f"{item['loc'][0] if item['loc'] else 'body'}: {item['msg']}"
        for item in error.errors()
    ])


def endpoint_error_handler(
    endpoint: Endpoint,
    request_model: Optional[Type[BaseModel]] = None
) -> Callable:
    """
    Decorator for endpoint handlers to provide unified error handling and JSON extraction.

    Handles:
    - JSON data extraction and validation
    - Pydantic model validation (optional, for type safety)
    - Codec errors (malformed WKB or geometry, returned as 400)
    - BadRequest and ValueError exceptions (returned as 400)
    - Generic exceptions (logged with traceback and returned as 500)

    The decorated function receives the validated request as first parameter after self:
        @endpoint_error_handler(Endpoint.DECODE, DecodeRequest)
        def _decode(self, data: DecodeRequest):
            ...

    Args:
        endpoint: The Endpoint enum member for this handler
        request_model: Optional Pydantic BaseModel class for request validation

    Returns:
        Decorated function with JSON extraction, validation, and error handling
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                try:
                    raw_data = request.get_json(force=True)
                except (BadRequest, UnsupportedMediaType):
                    raw_data = None

                if raw_data is None:
                    raw_data = {}

                if not isinstance(raw_data, dict):
                    raise BadRequest("JSON body must be an object")

                if request_model:
                    data = request_model(**raw_data)
                else:
                    data = raw_data

                return func(*args, data, **kwargs)
            except ValidationError as e:
                error_msgs = _format_validation_errors(e)
                logger.error(f"{endpoint.value} validation error: {error_msgs}")
                return _error_response(f"Validation error: {error_msgs}", e), HTTPStatus.BAD_REQUEST.value
            except WkbCodecException as e:
                logger.error(f"{endpoint.value} codec error: {str(e)}")
                return _error_response(str(e), e), HTTPStatus.BAD_REQUEST.value
            except (BadRequest, ValueError) as e:
                logger.error(f"{endpoint.value} bad request: {str(e)}")
                return _error_response(str(e), e), HTTPStatus.BAD_REQUEST.value
            except Exception as e:
                error_trace = traceback.format_exc()
                logger.error(
                    f"{endpoint.value} failed: {str(e)}\n"
                    f"Error type: {type(e).__name__}\n"
                    f"Traceback:\n{error_trace}"
                )
                return _error_response(f"{endpoint.value} failed: {str(e)}", e), HTTPStatus.INTERNAL_SERVER_ERROR.value

        return wrapper

    return decorator
