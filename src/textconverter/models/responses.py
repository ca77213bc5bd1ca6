"""Request and response models for API endpoints."""

from pydantic import BaseModel, Field

from .formats import TextFormat


class ErrorResponse(BaseModel):
    """Response model for errors."""
    success: bool = False
    error: str
    error_type: str


class ConvertOptions(BaseModel):
    """Converter-specific options; each converter uses the ones that apply to it."""
    max_line_length: int | None = Field(
        None, description="Wrap width for flowed output (text -> flowed)"
    )
    delete_space: bool | None = Field(
        None, description="Remove soft-break spaces when unflowing (DelSp=yes)"
    )
    output_html_fragment: bool | None = Field(
        None, description="Omit the <html><body> wrapper (text/flowed -> html)"
    )
    filter_comments: bool | None = Field(
        None, description="Drop HTML comments (html -> html)"
    )


class ConvertRequest(BaseModel):
    """Request model for a conversion."""
    input_format: TextFormat = Field(..., description="Format of content (text, flowed, html)")
    output_format: TextFormat = Field(..., description="Format to convert to (text, flowed, html)")
    content: str = Field(..., description="Content to convert")
    header: str | None = Field(None, description="Text written verbatim before the output")
    footer: str | None = Field(None, description="Text written verbatim after the output")
    options: ConvertOptions = Field(
        default_factory=ConvertOptions, description="Converter options"
    )


class ConvertResponse(BaseModel):
    """Response model for a successful conversion."""
    success: bool = True
    input_format: TextFormat = Field(..., description="Format of the input")
    output_format: TextFormat = Field(..., description="Format of the output")
    content: str = Field(..., description="Converted content")
