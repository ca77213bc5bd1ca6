"""Per-tag state handed to HtmlToHtml tag callbacks."""

from collections.abc import Callable

from .tags import HtmlTagId
from .tokens import HtmlAttribute, HtmlTagToken
from .writer import HtmlWriter


class HtmlTagContext:
    """
    A tag being re-serialized by HtmlToHtml.

    Callbacks read the tag identity and attributes from here and set the
    flags to change what gets emitted. A context is only valid for the
    duration of the callback it is passed to.
    """

    def __init__(self, token: HtmlTagToken):
        self._token = token
        self.delete_start_tag = False
        self.delete_end_tag = False
        self.invoke_callback_for_end_tag = False
        self.suppress_inner_content = False

    @property
    def tag_id(self) -> HtmlTagId:
        return self._token.id

    @property
    def tag_name(self) -> str:
        return self._token.name

    @property
    def attributes(self) -> list[HtmlAttribute]:
        return self._token.attributes

    @property
    def is_end_tag(self) -> bool:
        return self._token.is_end_tag

    @property
    def is_empty_element(self) -> bool:
        return self._token.is_empty_element

    def write_tag(self, writer: HtmlWriter, write_attributes: bool = False) -> None:
        """
        Write this tag as it appeared in the input.

        Args:
            writer: Writer to emit the tag to
            write_attributes: Also copy all attributes, in their original order
        """
        if self.is_end_tag:
            writer.write_end_tag(self.tag_name)
            return

        if self.is_empty_element:
            writer.write_empty_element_tag(self.tag_name)
        else:
            writer.write_start_tag(self.tag_name)

        if write_attributes:
            for attribute in self.attributes:
                writer.write_attribute(attribute)

    def __repr__(self) -> str:
        return f"HtmlTagContext(tag_name={self.tag_name!r}, is_end_tag={self.is_end_tag})"


HtmlTagCallback = Callable[[HtmlTagContext, HtmlWriter], None]
