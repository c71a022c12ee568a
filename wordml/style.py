"""Style definitions: a single ``w:style`` element and its children."""

from dataclasses import dataclass

from wordml.element import RawElement, StringEnum, XmlElement, attr, child, children


class StyleType(StringEnum):
    """The kind of content a style applies to."""

    CHARACTER = "character"
    PARAGRAPH = "paragraph"
    TABLE = "table"
    NUMBERING = "numbering"


@dataclass
class _Named(XmlElement):
    """An element carrying a required string ``w:val`` attribute."""

    value: str = attr("w:val", str)


@dataclass
class _Flag(XmlElement):
    """An element carrying an optional boolean ``w:val`` attribute."""

    value: bool | None = attr("w:val", bool, default=None)


@dataclass
class StyleName(_Named):
    TAG = "w:name"


@dataclass
class Aliases(_Named):
    TAG = "w:aliases"


@dataclass
class Next(_Named):
    TAG = "w:next"


@dataclass
class Link(_Named):
    TAG = "w:link"


@dataclass
class Rsid(_Named):
    TAG = "w:rsid"


@dataclass
class BasedOn(_Named):
    TAG = "w:basedOn"


@dataclass
class AutoRedefine(_Flag):
    TAG = "w:autoRedefine"


@dataclass
class Hidden(_Flag):
    TAG = "w:hidden"


@dataclass
class Locked(_Flag):
    TAG = "w:locked"


@dataclass
class Personal(_Flag):
    TAG = "w:personal"


@dataclass
class PersonalCompose(_Flag):
    TAG = "w:personalCompose"


@dataclass
class PersonalReply(_Flag):
    TAG = "w:personalReply"


@dataclass
class QFormat(_Flag):
    TAG = "w:qFormat"


@dataclass
class SemiHidden(_Flag):
    TAG = "w:semiHidden"


@dataclass
class UnhideWhenUsed(_Flag):
    TAG = "w:unhideWhenUsed"


@dataclass
class Priority(XmlElement):
    TAG = "w:uiPriority"

    value: int | None = attr("w:val", int, default=None)


@dataclass(kw_only=True)
class Style(XmlElement):
    """A style that applies to a region of the document.

    Paragraph, character and table formatting are kept as raw elements.
    """

    TAG = "w:style"

    ty: StyleType | None = attr("w:type", StyleType, default=None)
    style_id: str = attr("w:styleId", str)
    default: bool | None = attr("w:default", bool, default=None)
    custom_style: bool | None = attr("w:customStyle", bool, default=None)

    name: StyleName | None = child("w:name", StyleName)
    aliases: Aliases | None = child("w:aliases", Aliases)
    base: BasedOn | None = child("w:basedOn", BasedOn)
    next: Next | None = child("w:next", Next)
    link: Link | None = child("w:link", Link)
    auto_redefine: AutoRedefine | None = child("w:autoRedefine", AutoRedefine)
    hidden: Hidden | None = child("w:hidden", Hidden)
    priority: Priority | None = child("w:uiPriority", Priority)
    semi_hidden: SemiHidden | None = child("w:semiHidden", SemiHidden)
    unhide_when_used: UnhideWhenUsed | None = child("w:unhideWhenUsed", UnhideWhenUsed)
    q_format: QFormat | None = child("w:qFormat", QFormat)
    locked: Locked | None = child("w:locked", Locked)
    personal: Personal | None = child("w:personal", Personal)
    personal_compose: PersonalCompose | None = child("w:personalCompose", PersonalCompose)
    personal_reply: PersonalReply | None = child("w:personalReply", PersonalReply)
    rsid: Rsid | None = child("w:rsid", Rsid)
    paragraph: RawElement | None = child("w:pPr", RawElement)
    character: RawElement | None = child("w:rPr", RawElement)
    table: RawElement | None = child("w:tblPr", RawElement)
    table_row: RawElement | None = child("w:trPr", RawElement)
    table_cell: RawElement | None = child("w:tcPr", RawElement)
    conditional_table_property: list[RawElement] = children("w:tblStylePr", RawElement)