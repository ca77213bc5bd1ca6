"""Converters between plain text, format=flowed text and HTML."""

from types import MappingProxyType

from ..models.formats import TextFormat
from ..validation import ArgumentError
from .base import TextConverter
from .flowed import FlowedToText, TextToFlowed
from .html import FlowedToHtml, HtmlToHtml, HtmlToText, TextToHtml
from .text import TextToText

CONVERTERS: MappingProxyType[tuple[TextFormat, TextFormat], type[TextConverter]] = MappingProxyType(
    {
        (converter._input_format, converter._output_format): converter
        for converter in (
            TextToText,
            TextToFlowed,
            FlowedToText,
            TextToHtml,
            FlowedToHtml,
            HtmlToHtml,
            HtmlToText,
        )
    }
)


def create_converter(
    input_format: TextFormat | str, output_format: TextFormat | str, **options
) -> TextConverter:
    """
    Create the converter for a pair of formats.

    Args:
        input_format: Format of the input
        output_format: Format to produce
        **options: Keyword arguments for the converter's constructor

    Returns:
        A configured converter instance

    Raises:
        ArgumentError: If a format is unknown or no converter handles the pair
    """
    try:
        key = (TextFormat(input_format), TextFormat(output_format))
    except ValueError as e:
        raise ArgumentError("format", str(e)) from e

    converter = CONVERTERS.get(key)
    if converter is None:
        raise ArgumentError(
            "output_format",
            f"No converter from {key[0].value} to {key[1].value}",
        )
    return converter(**options)


__all__ = [
    "CONVERTERS",
    "FlowedToHtml",
    "FlowedToText",
    "HtmlToHtml",
    "HtmlToText",
    "TextConverter",
    "TextToFlowed",
    "TextToHtml",
    "TextToText",
    "create_converter",
]
