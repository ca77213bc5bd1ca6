"""Known HTML tag and attribute names.

The name -> identifier tables are built once at import time and exposed as
read-only mappings.
"""

from enum import Enum
from types import MappingProxyType


class HtmlTagId(str, Enum):
    """Identifier of a known HTML tag; UNKNOWN for anything else."""

    UNKNOWN = ""
    A = "a"
    ABBR = "abbr"
    ADDRESS = "address"
    AREA = "area"
    ARTICLE = "article"
    ASIDE = "aside"
    AUDIO = "audio"
    B = "b"
    BASE = "base"
    BDI = "bdi"
    BDO = "bdo"
    BIG = "big"
    BLOCKQUOTE = "blockquote"
    BODY = "body"
    BR = "br"
    BUTTON = "button"
    CANVAS = "canvas"
    CAPTION = "caption"
    CENTER = "center"
    CITE = "cite"
    CODE = "code"
    COL = "col"
    COLGROUP = "colgroup"
    DD = "dd"
    DEL = "del"
    DETAILS = "details"
    DFN = "dfn"
    DIV = "div"
    DL = "dl"
    DT = "dt"
    EM = "em"
    EMBED = "embed"
    FIELDSET = "fieldset"
    FIGCAPTION = "figcaption"
    FIGURE = "figure"
    FONT = "font"
    FOOTER = "footer"
    FORM = "form"
    FRAME = "frame"
    FRAMESET = "frameset"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    HEAD = "head"
    HEADER = "header"
    HR = "hr"
    HTML = "html"
    I = "i"  # noqa: E741
    IFRAME = "iframe"
    IMAGE = "img"
    INPUT = "input"
    INS = "ins"
    KBD = "kbd"
    LABEL = "label"
    LEGEND = "legend"
    LI = "li"
    LINK = "link"
    MAIN = "main"
    MAP = "map"
    MARK = "mark"
    META = "meta"
    NAV = "nav"
    NOSCRIPT = "noscript"
    OBJECT = "object"
    OL = "ol"
    OPTGROUP = "optgroup"
    OPTION = "option"
    P = "p"
    PARAM = "param"
    PRE = "pre"
    Q = "q"
    S = "s"
    SAMP = "samp"
    SCRIPT = "script"
    SECTION = "section"
    SELECT = "select"
    SMALL = "small"
    SOURCE = "source"
    SPAN = "span"
    STRIKE = "strike"
    STRONG = "strong"
    STYLE = "style"
    SUB = "sub"
    SUMMARY = "summary"
    SUP = "sup"
    TABLE = "table"
    TBODY = "tbody"
    TD = "td"
    TEMPLATE = "template"
    TEXTAREA = "textarea"
    TFOOT = "tfoot"
    TH = "th"
    THEAD = "thead"
    TIME = "time"
    TITLE = "title"
    TR = "tr"
    TRACK = "track"
    TT = "tt"
    U = "u"
    UL = "ul"
    VAR = "var"
    VIDEO = "video"
    WBR = "wbr"
    XMP = "xmp"

    @classmethod
    def from_name(cls, name: str) -> "HtmlTagId":
        """Look up a tag name, case-insensitively."""
        return TAG_IDS.get(name.lower(), cls.UNKNOWN)


class HtmlAttributeId(str, Enum):
    """Identifier of a known HTML attribute; UNKNOWN for anything else."""

    UNKNOWN = ""
    ACTION = "action"
    ALIGN = "align"
    ALT = "alt"
    BACKGROUND = "background"
    BGCOLOR = "bgcolor"
    BORDER = "border"
    CELLPADDING = "cellpadding"
    CELLSPACING = "cellspacing"
    CHARSET = "charset"
    CHECKED = "checked"
    CITE = "cite"
    CLASS = "class"
    COLOR = "color"
    COLS = "cols"
    COLSPAN = "colspan"
    CONTENT = "content"
    COORDS = "coords"
    DATA = "data"
    DATETIME = "datetime"
    DIR = "dir"
    DISABLED = "disabled"
    FACE = "face"
    FOR = "for"
    HEIGHT = "height"
    HREF = "href"
    HREFLANG = "hreflang"
    HTTP_EQUIV = "http-equiv"
    ID = "id"
    LANG = "lang"
    LONGDESC = "longdesc"
    MEDIA = "media"
    METHOD = "method"
    NAME = "name"
    NOWRAP = "nowrap"
    REL = "rel"
    REV = "rev"
    ROWS = "rows"
    ROWSPAN = "rowspan"
    SELECTED = "selected"
    SHAPE = "shape"
    SIZE = "size"
    SPAN = "span"
    SRC = "src"
    SRCSET = "srcset"
    START = "start"
    STYLE = "style"
    SUMMARY = "summary"
    TABINDEX = "tabindex"
    TARGET = "target"
    TITLE = "title"
    TYPE = "type"
    USEMAP = "usemap"
    VALIGN = "valign"
    VALUE = "value"
    WIDTH = "width"

    @classmethod
    def from_name(cls, name: str) -> "HtmlAttributeId":
        """Look up an attribute name, case-insensitively."""
        return ATTRIBUTE_IDS.get(name.lower(), cls.UNKNOWN)


TAG_IDS = MappingProxyType(
    {tag.value: tag for tag in HtmlTagId if tag is not HtmlTagId.UNKNOWN}
)

ATTRIBUTE_IDS = MappingProxyType(
    {attr.value: attr for attr in HtmlAttributeId if attr is not HtmlAttributeId.UNKNOWN}
)

# Void elements never have content or an end tag
EMPTY_ELEMENTS = frozenset(
    {
        HtmlTagId.AREA,
        HtmlTagId.BASE,
        HtmlTagId.BR,
        HtmlTagId.COL,
        HtmlTagId.EMBED,
        HtmlTagId.FRAME,
        HtmlTagId.HR,
        HtmlTagId.IMAGE,
        HtmlTagId.INPUT,
        HtmlTagId.LINK,
        HtmlTagId.META,
        HtmlTagId.PARAM,
        HtmlTagId.SOURCE,
        HtmlTagId.TRACK,
        HtmlTagId.WBR,
    }
)

# Elements whose content is written without entity escaping
RAW_TEXT_ELEMENTS = frozenset({HtmlTagId.SCRIPT, HtmlTagId.STYLE, HtmlTagId.XMP})

# Elements rendered on their own line when extracting text
BLOCK_ELEMENTS = frozenset(
    {
        HtmlTagId.ADDRESS,
        HtmlTagId.ARTICLE,
        HtmlTagId.ASIDE,
        HtmlTagId.BLOCKQUOTE,
        HtmlTagId.CAPTION,
        HtmlTagId.CENTER,
        HtmlTagId.DD,
        HtmlTagId.DIV,
        HtmlTagId.DL,
        HtmlTagId.DT,
        HtmlTagId.FIELDSET,
        HtmlTagId.FIGCAPTION,
        HtmlTagId.FIGURE,
        HtmlTagId.FOOTER,
        HtmlTagId.FORM,
        HtmlTagId.H1,
        HtmlTagId.H2,
        HtmlTagId.H3,
        HtmlTagId.H4,
        HtmlTagId.H5,
        HtmlTagId.H6,
        HtmlTagId.HEADER,
        HtmlTagId.HR,
        HtmlTagId.LI,
        HtmlTagId.MAIN,
        HtmlTagId.NAV,
        HtmlTagId.OL,
        HtmlTagId.P,
        HtmlTagId.PRE,
        HtmlTagId.SECTION,
        HtmlTagId.TABLE,
        HtmlTagId.TR,
        HtmlTagId.UL,
    }
)
