"""Shared configuration and streaming orchestration for all converters."""

import copy
import io
import logging
from contextlib import ExitStack
from typing import ClassVar, TextIO

from ..config import get_settings
from ..models.formats import TextFormat
from ..streams import decoding_reader, encoding_writer, is_text_stream
from ..validation import ArgumentError, require, require_positive, validate_encoding

logger = logging.getLogger(__name__)

_NOT_SET = object()


class TextConverter:
    """
    Base class for converters between text formats.

    Subclasses declare their input/output formats and implement
    ``_transform(reader, writer)``; everything else (configuration, encodings,
    header and footer, stream handling) lives here.

    Constructor arguments left as None take their defaults from
    ``get_settings().converter``.
    """

    _input_format: ClassVar[TextFormat]
    _output_format: ClassVar[TextFormat]

    # Error handler used when encoding output to bytes
    _output_errors: ClassVar[str] = "replace"

    def __init__(
        self,
        *,
        input_encoding: str | None = None,
        output_encoding: str | None = None,
        detect_encoding_from_byte_order_mark: bool | None = None,
        input_stream_buffer_size: int | None = None,
        output_stream_buffer_size: int | None = None,
        header: str | None = None,
        footer: str | None = None,
    ):
        defaults = get_settings().converter

        self.input_encoding = defaults.input_encoding if input_encoding is None else input_encoding
        self.output_encoding = defaults.output_encoding if output_encoding is None else output_encoding
        self.detect_encoding_from_byte_order_mark = (
            defaults.detect_encoding_from_byte_order_mark
            if detect_encoding_from_byte_order_mark is None
            else detect_encoding_from_byte_order_mark
        )
        self.input_stream_buffer_size = (
            defaults.input_stream_buffer_size
            if input_stream_buffer_size is None
            else input_stream_buffer_size
        )
        self.output_stream_buffer_size = (
            defaults.output_stream_buffer_size
            if output_stream_buffer_size is None
            else output_stream_buffer_size
        )
        self.header = header
        self.footer = footer

    @property
    def input_format(self) -> TextFormat:
        return self._input_format

    @property
    def output_format(self) -> TextFormat:
        return self._output_format

    @property
    def input_encoding(self) -> str:
        """Codec used to decode byte input."""
        return self._input_encoding

    @input_encoding.setter
    def input_encoding(self, value: str) -> None:
        self._input_encoding = validate_encoding(value, "input_encoding")

    @property
    def output_encoding(self) -> str:
        """Codec used to encode byte output."""
        return self._output_encoding

    @output_encoding.setter
    def output_encoding(self, value: str) -> None:
        self._output_encoding = validate_encoding(value, "output_encoding")

    @property
    def input_stream_buffer_size(self) -> int:
        return self._input_stream_buffer_size

    @input_stream_buffer_size.setter
    def input_stream_buffer_size(self, value: int) -> None:
        self._input_stream_buffer_size = require_positive(value, "input_stream_buffer_size")

    @property
    def output_stream_buffer_size(self) -> int:
        return self._output_stream_buffer_size

    @output_stream_buffer_size.setter
    def output_stream_buffer_size(self, value: int) -> None:
        self._output_stream_buffer_size = require_positive(value, "output_stream_buffer_size")

    def convert(self, source, destination=_NOT_SET):
        """
        Convert text.

        Called with a single string, returns the converted string. Called
        with a source and a destination, streams from one to the other and
        returns None. Sources may be text readers or readable byte streams,
        destinations text writers or writable byte streams. Byte streams are
        decoded with ``input_encoding`` and encoded with ``output_encoding``.

        Streams passed in are left open.

        Raises:
            ArgumentError: If source or destination is None, or source is a
                str while a destination is given
        """
        if destination is _NOT_SET:
            require(source, "source")
            if not isinstance(source, str):
                raise ArgumentError("source", "source must be a str when no destination is given")
            output = io.StringIO()
            self.convert(io.StringIO(source, newline=""), output)
            return output.getvalue()

        require(source, "source")
        require(destination, "destination")
        if isinstance(source, str):
            raise ArgumentError("source", "source must be a stream when a destination is given")

        # Later changes to this instance must not affect a running conversion
        converter = copy.copy(self)

        with ExitStack() as stack:
            if is_text_stream(source):
                reader = source
            else:
                reader = stack.enter_context(
                    decoding_reader(
                        source,
                        converter.input_encoding,
                        buffer_size=converter.input_stream_buffer_size,
                        detect_bom=converter.detect_encoding_from_byte_order_mark,
                    )
                )

            if is_text_stream(destination):
                writer = destination
            else:
                writer = stack.enter_context(
                    encoding_writer(
                        destination,
                        converter.output_encoding,
                        buffer_size=converter.output_stream_buffer_size,
                        errors=converter._output_errors,
                    )
                )

            converter._run(reader, writer)
            writer.flush()

        return None

    def _run(self, reader: TextIO, writer: TextIO) -> None:
        logger.debug(
            f"Converting {self.input_format.value} -> {self.output_format.value} "
            f"with {type(self).__name__}"
        )

        if self.header is not None:
            writer.write(self.header)

        self._transform(reader, writer)

        if self.footer is not None:
            writer.write(self.footer)

    def _transform(self, reader: TextIO, writer: TextIO) -> None:
        raise NotImplementedError
