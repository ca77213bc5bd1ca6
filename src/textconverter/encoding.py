"""Byte-order mark detection."""

import codecs
import logging

logger = logging.getLogger(__name__)

# UTF-32 LE must be tested before UTF-16 LE, its mark starts with FF FE
_BYTE_ORDER_MARKS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)

MAX_BOM_LENGTH = max(len(bom) for bom, _ in _BYTE_ORDER_MARKS)


def detect_byte_order_mark(data: bytes) -> tuple[str | None, int]:
    """
    Identify a byte-order mark at the start of ``data``.

    Args:
        data: Leading bytes of the input, at least MAX_BOM_LENGTH when available

    Returns:
        Tuple of (codec name, mark length); (None, 0) when there is no mark
    """
    for bom, encoding in _BYTE_ORDER_MARKS:
        if data.startswith(bom):
            logger.debug(f"Detected {encoding} byte-order mark")
            return encoding, len(bom)
    return None, 0
