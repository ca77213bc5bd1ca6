"""Text conversion endpoint."""

import logging

from fastapi import APIRouter, HTTPException

from ..config import get_settings
from ..converters import (
    CONVERTERS,
    FlowedToHtml,
    FlowedToText,
    HtmlToHtml,
    TextToFlowed,
    TextToHtml,
    create_converter,
)
from ..logging_config import log_with_context
from ..models.responses import ConvertRequest, ConvertResponse, ErrorResponse
from ..validation import ArgumentError, RangeError

logger = logging.getLogger(__name__)

router = APIRouter()

# Request options each converter understands
_CONVERTER_OPTIONS = {
    TextToFlowed: {"max_line_length"},
    FlowedToText: {"delete_space"},
    TextToHtml: {"output_html_fragment"},
    FlowedToHtml: {"delete_space", "output_html_fragment"},
    HtmlToHtml: {"filter_comments"},
}


def _converter_options(request: ConvertRequest) -> dict:
    converter = CONVERTERS.get((request.input_format, request.output_format))
    supported = _CONVERTER_OPTIONS.get(converter, set())
    given = request.options.model_dump(exclude_none=True)

    ignored = set(given) - supported
    if ignored:
        logger.debug(f"Ignoring options not used by this conversion: {sorted(ignored)}")

    options = {name: value for name, value in given.items() if name in supported}
    options["header"] = request.header
    options["footer"] = request.footer
    return options


@router.post(
    "/convert",
    response_model=ConvertResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}},
)
def convert(request: ConvertRequest) -> ConvertResponse:
    """
    Convert content between plain text, format=flowed text and HTML.

    Args:
        request: Formats, content and converter options

    Returns:
        ConvertResponse with the converted content

    Raises:
        HTTPException: For unsupported conversions, invalid options or oversized content
    """
    max_size = get_settings().content.max_content_size
    size = len(request.content.encode("utf-8"))
    if size > max_size:
        logger.warning(f"Rejected {size} byte conversion request (limit {max_size})")
        raise HTTPException(
            status_code=413,
            detail=ErrorResponse(
                error=f"Content size {size} exceeds limit of {max_size} bytes",
                error_type="content_too_large",
            ).model_dump(),
        )

    try:
        converter = create_converter(
            request.input_format, request.output_format, **_converter_options(request)
        )
        content = converter.convert(request.content)

    except (ArgumentError, RangeError) as e:
        logger.warning(
            f"Invalid conversion {request.input_format.value} -> {request.output_format.value}: {e}"
        )
        raise HTTPException(
            status_code=400,
            detail=ErrorResponse(error=str(e), error_type="validation_error").model_dump(),
        )

    except Exception as e:
        logger.exception(f"Unexpected error converting content: {e}")
        raise HTTPException(
            status_code=500,
            detail=ErrorResponse(
                error="Internal server error", error_type="internal_error"
            ).model_dump(),
        )

    log_with_context(
        logger,
        logging.INFO,
        "Conversion completed",
        input_format=request.input_format.value,
        output_format=request.output_format.value,
        size=size,
    )
    return ConvertResponse(
        input_format=request.input_format,
        output_format=request.output_format,
        content=content,
    )
