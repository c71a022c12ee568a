"""Document defaults: properties inherited by every paragraph and run."""

from dataclasses import dataclass

from wordml.element import RawElement, XmlElement, child


@dataclass
class DefaultCharacterProperty(XmlElement):
    """Default run properties, kept as a raw ``w:rPr`` element."""

    TAG = "w:rPrDefault"

    inner: RawElement | None = child("w:rPr", RawElement)


@dataclass
class DefaultParagraphProperty(XmlElement):
    """Default paragraph properties, kept as a raw ``w:pPr`` element."""

    TAG = "w:pPrDefault"

    inner: RawElement | None = child("w:pPr", RawElement)


@dataclass
class DefaultStyle(XmlElement):
    """The ``w:docDefaults`` element; both children are always present."""

    TAG = "w:docDefaults"

    character: DefaultCharacterProperty | None = child(
        "w:rPrDefault", DefaultCharacterProperty
    )
    paragraph: DefaultParagraphProperty | None = child(
        "w:pPrDefault", DefaultParagraphProperty
    )

    def __post_init__(self):
        if self.character is None:
            self.character = DefaultCharacterProperty()
        if self.paragraph is None:
            self.paragraph = DefaultParagraphProperty()