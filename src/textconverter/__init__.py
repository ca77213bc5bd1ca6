"""Text Converter - streaming conversion between plain text, format=flowed text and HTML."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("textconverter")
except PackageNotFoundError:
    __version__ = "0.0.0"  # Fallback for development
