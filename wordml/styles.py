"""Styles part, stored as ``/word/styles.xml``."""

import logging
from dataclasses import dataclass

from wordml.default_style import DefaultStyle
from wordml.element import SCHEMA_MAIN, XmlElement, child, children
from wordml.latent_styles import LatentStyles
from wordml.style import Style

log = logging.getLogger(__name__)


@dataclass
class Styles(XmlElement):
    """The root element of the styles part."""

    TAG = "w:styles"
    PART_NAMESPACES = (("xmlns:w", SCHEMA_MAIN),)

    default: DefaultStyle | None = child("w:docDefaults", DefaultStyle)
    latent_styles: LatentStyles | None = child("w:latentStyles", LatentStyles)
    styles: list[Style] = children("w:style", Style)

    def push(self, style):
        """Append ``style``; return ``self``."""
        self.styles.append(style)
        return self

    def to_string(self):
        log.debug("[Styles] Started writing.")
        text = super().to_string()
        log.debug("[Styles] Finished writing.")
        return text