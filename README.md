# wordml

`wordml` reads and writes three XML parts of a WordprocessingML (`.docx`)
package as Python dataclasses:

- `word/webSettings.xml` is `wordml.web_settings.WebSettings`.
- `word/settings.xml` is `wordml.settings.Settings`. Its child elements are
  defined in `wordml.settings_elements`.
- `word/styles.xml` is `wordml.styles.Styles`. It is built from
  `wordml.style.Style`, `wordml.default_style.DefaultStyle` and
  `wordml.latent_styles.LatentStyles`.

Each XML element is a class. The element's attributes and child elements
are fields of that class. Only the standard library is used.

## Installation

```
pip install wordml
```

## Reading a part

```python
from wordml.web_settings import WebSettings, AllowPNG

xml = """<?xml version="1.0" encoding="UTF-8"?>
<w:webSettings xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
    <w:allowPNG />
    <w:doNotSaveAsSingleFile />
</w:webSettings>"""

web = WebSettings.from_str(xml)
assert web.allow_png == AllowPNG()
assert web.optimize_for_browser is None
```

How parsing treats each kind of field:

- **Optional attributes.** A missing optional attribute comes back as `None`.
- **Single child elements.** A missing child comes back as `None`.
  - If a child appears more than once, the last one wins.
- **Repeated child elements.** These come back as a list. The list is empty when there are none.
- **Unknown content.** Attributes and child elements that the model does not describe are ignored.
- **Element names.** Names are matched literally, prefix included. For example, `w:val` matches exactly that attribute name.

`wordml.element.XmlError` is raised when:

- the input is not well-formed XML;
- the root element is not the expected one;
- a required attribute is missing, for example `w:styleId` on a `w:style`;
- an attribute value cannot be decoded.

Boolean attributes accept `true`, `1` and `on`, or `false`, `0` and `off`.

## Writing a part

```python
from wordml.styles import Styles
from wordml.style import Style, StyleType

styles = Styles()
styles.push(Style(ty=StyleType.PARAGRAPH, style_id="Heading1"))
print(styles.to_string())
```

`Settings` and `WebSettings` are written the same way, with `to_string()`.

How writing treats each part:

- **Root elements.** A part root is written with the XML declaration, the namespace declarations Word expects, and an explicit end tag.
- **Children.** Children are written in the order the fields are declared, whatever order they were read in.
- **Unset values.** Fields set to `None` are omitted.
- **Booleans.** Booleans are written as `true` or `false`.
- **Nested elements.** Any element can be written on its own with `to_string()`. Empty nested elements are written self-closed, for example `<w:style w:type="numbering" w:styleId="id"/>`.

## Styles

- **`Style`.** Construct it with keyword arguments. `style_id` is required.
- **`Styles.push(style)`.** Appends a style and returns the `Styles` object.
- **`LatentStyles.push(style)`.** Appends a `LatentStyle`, sets `count` to the number of entries, and returns the `LatentStyles` object.
- **`DefaultStyle`.** Its `character` (`w:rPrDefault`) and `paragraph` (`w:pPrDefault`) fields are always present. When they are not given, both default to empty elements.

## Enumerations

Enumerated attribute values are `wordml.element.StringEnum` members:

- `StyleType`, in `wordml.style`;
- `ViewType`, `ZoomType`, `ProofStateType` and `CharacterSpacingControlType`, in `wordml.settings_elements`.

`from_xml(value)` turns the text of an attribute into a member. An unknown value raises `XmlError`.

## What the package does not do

- **No package handling.** It does not open or write `.docx` files. You pass the XML text of a part in, and you get XML text back.
- **No model for formatting.** The following are not modelled:
  - paragraph, run and table formatting (`w:pPr`, `w:rPr`, `w:tblPr`, `w:trPr`, `w:tcPr`, `w:tblStylePr`);
  - footnote and endnote properties in the settings part (`w:footnotePr`, `w:endnotePr`).

  These elements are kept verbatim as `wordml.element.RawElement` objects and written back unchanged.
- **Placeholder settings elements.** Many settings elements carry no fields. For example, `w:compat`, `w:mailMerge` and `w:documentProtection` are read and written only as empty elements.

## Running the tests

```
pip install -e ".[test]"
pytest
```