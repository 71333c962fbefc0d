"""Module level entry points using default decoder and encoder instances"""
from typing import BinaryIO, Union

from src.components.wkb.decoder import WkbDecoder, WkbInput
from src.components.wkb.encoder import WkbEncoder
from src.models import Geometry

_DEFAULT_DECODER = WkbDecoder()
_DEFAULT_ENCODER = WkbEncoder()


def decode(data: WkbInput, is_hex: bool = False) -> Geometry:
    """Decode WKB bytes (or hex text) into a geometry tree"""
    return _DEFAULT_DECODER.decode(data, is_hex=is_hex)


def encode(geometry: Geometry, as_hex: bool = False) -> Union[bytes, str]:
    """Encode a geometry tree into WKB bytes (or lower-case hex text)"""
    return _DEFAULT_ENCODER.encode(geometry, as_hex=as_hex)


def load(source_file: BinaryIO) -> Geometry:
    """
    Decode a geometry from an open binary file

    Args:
        source_file: Readable file-like object holding one WKB value

    Returns:
        Root geometry
    """
    return decode(source_file.read())


def dump(geometry: Geometry, dest_file: BinaryIO) -> None:
    """
    Encode a geometry and write the WKB bytes to an open binary file

    Args:
        geometry: Geometry to encode
        dest_file: Writable file-like object
    """
    dest_file.write(encode(geometry))
