import re
from typing import Union

from src.core import InvalidHexError

_NON_HEX_DIGIT = re.compile(r"[^0-9a-fA-F]")


class HexCodec:
    """
    Conversion between bytes and hex text

    Hex text is two digits per byte, most significant nibble first, with no
    prefix or separators. Parsing is case-insensitive.
    """

    @staticmethod
    def to_hex(data: Union[bytes, bytearray, memoryview], uppercase: bool = False) -> str:
        """
        Convert bytes to hex text

        Args:
            data: Bytes to convert
            uppercase: Emit upper-case digits (default lower-case)

        Returns:
            Hex string of length 2 * len(data)
        """
        text = bytes(data).hex()
        return text.upper() if uppercase else text

    @staticmethod
    def from_hex(text: Union[str, bytes, bytearray]) -> bytes:
        """
        Parse hex text into bytes

        Args:
            text: Hex digits as str or ASCII bytes

        Returns:
            Decoded bytes

        Raises:
            InvalidHexError: If the text has odd length or a non hex digit
        """
        if isinstance(text, (bytes, bytearray)):
            try:
                text = bytes(text).decode("ascii")
            except UnicodeDecodeError as e:
                raise InvalidHexError("input is not ASCII text", position=e.start)

        if not isinstance(text, str):
            raise InvalidHexError(f"expected str or bytes, got {type(text).__name__}")

        match = _NON_HEX_DIGIT.search(text)
        if match:
            raise InvalidHexError(
                f"non hex digit {match.group()!r}",
                position=match.start()
            )

        if len(text) % 2:
            raise InvalidHexError(f"odd number of hex digits ({len(text)})")

        return bytes.fromhex(text)
