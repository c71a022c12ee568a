"""Declarative mapping between dataclasses and WordprocessingML elements.

Element classes are dataclasses deriving from :class:`XmlElement`.  Each field
is declared with :func:`attr`, :func:`child` or :func:`children`, which record
how the field is read from and written to XML.  Names are matched literally,
prefix included, so ``w:val`` means exactly that attribute name.
"""

import copy
import enum
import xml.etree.ElementTree as ET
from dataclasses import MISSING, dataclass, field, fields
from xml.parsers import expat

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
SCHEMA_MAIN = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
SCHEMA_WORDML_14 = "http://schemas.microsoft.com/office/word/2010/wordml"
SCHEMA_RELATIONSHIPS_DOCUMENT = (
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
)

REQUIRED = MISSING

_META_KEY = "wordml"
_TRUE_VALUES = frozenset({"true", "1", "on"})
_FALSE_VALUES = frozenset({"false", "0", "off"})


class XmlError(ValueError):
    """Raised when XML cannot be parsed or does not fit the element model."""


class StringEnum(str, enum.Enum):
    """An enumeration whose members are written as fixed attribute strings."""

    def __str__(self):
        return self.value

    @classmethod
    def from_xml(cls, value):
        """Return the member spelled ``value`` in XML."""
        try:
            return cls(value)
        except ValueError:
            raise XmlError(f"unknown {cls.__name__} value {value!r}") from None


class _Role(enum.Enum):
    ATTR = "attr"
    CHILD = "child"
    CHILDREN = "children"


@dataclass(frozen=True)
class _Spec:
    role: _Role
    name: str
    kind: type


def attr(xml_name, kind, default=REQUIRED):
    """Declare a field stored in the attribute ``xml_name``.

    ``kind`` is ``str``, ``int``, ``bool`` or a :class:`StringEnum` subclass.
    Without a default the attribute must be present when reading.
    """
    return field(default=default, metadata={_META_KEY: _Spec(_Role.ATTR, xml_name, kind)})


def child(tag, kind):
    """Declare an optional field stored as a single child element ``tag``."""
    return field(default=None, metadata={_META_KEY: _Spec(_Role.CHILD, tag, kind)})


def children(tag, kind):
    """Declare a list field stored as repeated child elements ``tag``."""
    return field(default_factory=list, metadata={_META_KEY: _Spec(_Role.CHILDREN, tag, kind)})


def _decode(kind, raw, name):
    if kind is bool:
        if raw in _TRUE_VALUES:
            return True
        if raw in _FALSE_VALUES:
            return False
        raise XmlError(f"attribute {name} is not a boolean: {raw!r}")
    if kind is int:
        try:
            return int(raw)
        except ValueError:
            raise XmlError(f"attribute {name} is not an integer: {raw!r}") from None
    if isinstance(kind, type) and issubclass(kind, StringEnum):
        return kind.from_xml(raw)
    return raw


def _encode(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, StringEnum):
        return value.value
    return str(value)


def _parse(text):
    """Parse ``text`` without namespace processing, keeping prefixed names."""
    builder = ET.TreeBuilder()
    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    try:
        parser.Parse(text, True)
    except expat.ExpatError as exc:
        raise XmlError(f"malformed XML: {exc}") from exc
    return builder.close()


def _escape(text):
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def _serialize(element, self_close=True):
    head = "<" + element.tag + "".join(
        f' {name}="{_escape(value)}"' for name, value in element.attrib.items()
    )
    body = _escape(element.text or "") + "".join(
        _serialize(sub) + _escape(sub.tail or "") for sub in element
    )
    if not body and self_close:
        return head + "/>"
    return f"{head}>{body}</{element.tag}>"


@dataclass(eq=False)
class RawElement:
    """An element kept verbatim, for content the model does not describe."""

    element: ET.Element

    @property
    def tag(self):
        return self.element.tag

    @classmethod
    def from_element(cls, element):
        copied = copy.deepcopy(element)
        copied.tail = None
        return cls(copied)

    def to_element(self):
        return copy.deepcopy(self.element)

    def __eq__(self, other):
        if not isinstance(other, RawElement):
            return NotImplemented
        return _serialize(self.element) == _serialize(other.element)

    __hash__ = None


class XmlElement:
    """Base class for dataclasses that map onto one XML element.

    Subclasses set ``TAG`` to their element name.  Part roots also set
    ``PART_NAMESPACES``; they are then written with the XML declaration,
    those namespace attributes and an explicit end tag.
    """

    TAG = ""
    PART_NAMESPACES = ()

    @classmethod
    def from_str(cls, text):
        return cls.from_element(_parse(text))

    @classmethod
    def from_element(cls, element):
        if element.tag != cls.TAG:
            raise XmlError(f"expected element {cls.TAG}, found {element.tag}")
        values = {}
        for f in fields(cls):
            spec = f.metadata.get(_META_KEY)
            if spec is None:
                continue
            if spec.role is _Role.ATTR:
                raw = element.get(spec.name)
                if raw is None:
                    if f.default is MISSING and f.default_factory is MISSING:
                        raise XmlError(f"{cls.TAG} is missing attribute {spec.name}")
                    continue
                values[f.name] = _decode(spec.kind, raw, spec.name)
            elif spec.role is _Role.CHILD:
                matches = [sub for sub in element if sub.tag == spec.name]
                if matches:
                    values[f.name] = spec.kind.from_element(matches[-1])
            else:
                values[f.name] = [
                    spec.kind.from_element(sub) for sub in element if sub.tag == spec.name
                ]
        return cls(**values)

    def to_element(self):
        element = ET.Element(self.TAG)
        for f in fields(self):
            spec = f.metadata.get(_META_KEY)
            if spec is None:
                continue
            value = getattr(self, f.name)
            if spec.role is _Role.ATTR:
                if value is not None:
                    element.set(spec.name, _encode(value))
            elif spec.role is _Role.CHILD:
                if value is not None:
                    element.append(value.to_element())
            else:
                element.extend(item.to_element() for item in value)
        return element

    def to_string(self):
        element = self.to_element()
        if not self.PART_NAMESPACES:
            return _serialize(element)
        root = ET.Element(element.tag, dict(self.PART_NAMESPACES))
        root.attrib.update(element.attrib)
        root.text = element.text
        root.extend(list(element))
        return XML_DECLARATION + _serialize(root, self_close=False)