import pytest

from wordml.element import XmlError
from wordml.default_style import (
    DefaultCharacterProperty,
    DefaultParagraphProperty,
    DefaultStyle,
)

DEFAULT_TEXT = "<w:docDefaults><w:rPrDefault/><w:pPrDefault/></w:docDefaults>"


def test_write_default():
    assert DefaultStyle().to_string() == DEFAULT_TEXT


def test_read_default():
    assert DefaultStyle.from_str(DEFAULT_TEXT) == DefaultStyle()


def test_missing_children_take_defaults():
    style = DefaultStyle.from_str("<w:docDefaults/>")
    assert style.character == DefaultCharacterProperty()
    assert style.paragraph == DefaultParagraphProperty()
    assert style.to_string() == DEFAULT_TEXT


def test_inner_properties_round_trip():
    text = (
        "<w:docDefaults>"
        '<w:rPrDefault><w:rPr><w:sz w:val="24"/></w:rPr></w:rPrDefault>'
        '<w:pPrDefault><w:pPr><w:spacing w:after="160"/></w:pPr></w:pPrDefault>'
        "</w:docDefaults>"
    )
    style = DefaultStyle.from_str(text)
    assert style.character.inner.tag == "w:rPr"
    assert style.paragraph.inner.tag == "w:pPr"
    assert style.to_string() == text


def test_wrong_tag_is_an_error():
    with pytest.raises(XmlError):
        DefaultStyle.from_str("<w:rPrDefault/>")