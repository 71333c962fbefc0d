"""API request/response models using Pydantic for type safety and validation in Flask"""
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, field_validator

from src.core import InvalidHexError
from src.components.byte_cursor import HexCodec


class DecodeRequest(BaseModel):
    """
    WKB decoding request model for type safety and validation.

    Used with endpoint_error_handler decorator for automatic validation:
        @endpoint_error_handler(Endpoint.DECODE, DecodeRequest)
    """
    wkb: str = Field(..., description="WKB as hex text, two digits per byte")

    @field_validator("wkb")
    @classmethod
    def check_hex(cls, value: str) -> str:
        """Reject text that is not hex before it reaches the decoder"""
        try:
            HexCodec.from_hex(value)
        except InvalidHexError as e:
            raise ValueError(str(e))
        return value

    class Config:
        json_schema_extra = {
            "example": {
                "wkb": "0101000000000000000000f03f000000000000f03f"
            }
        }


class EncodeRequest(BaseModel):
    """
    Geometry encoding request model for type safety and validation.
    """
    geometry: Dict[str, Any] = Field(..., description="GeoJSON-like geometry dictionary")
    hex: bool = Field(default=True, description="Return hex text instead of a list of byte values")

    class Config:
        json_schema_extra = {
            "example": {
                "geometry": {"type": "Point", "coordinates": [1.0, 1.0]},
                "hex": True
            }
        }


class DecodeResponse(BaseModel):
    """Decoded geometry response model"""
    geometry: Dict[str, Any] = Field(..., description="GeoJSON-like geometry dictionary")
    kind: str = Field(..., description="Geometry type name")
    wkt: Optional[str] = Field(default=None, description="WKT text, absent for geometries with M values")


class EncodeResponse(BaseModel):
    """Encoded geometry response model"""
    wkb: Any = Field(..., description="WKB as hex text or list of byte values")
    size: int = Field(..., description="WKB size in bytes")


class ErrorResponse(BaseModel):
    """Error response model"""
    error: str = Field(..., description="Error message")
    error_type: Optional[str] = Field(default=None, description="Exception class name")
