"""Web settings part, stored as ``/word/webSettings.xml``."""

import logging
from dataclasses import dataclass

from wordml.element import SCHEMA_MAIN, SCHEMA_WORDML_14, XmlElement, child

log = logging.getLogger(__name__)


@dataclass
class OptimizeForBrowser(XmlElement):
    TAG = "w:optimizeForBrowser"


@dataclass
class RelyOnVml(XmlElement):
    TAG = "w:relyOnVML"


@dataclass
class AllowPNG(XmlElement):
    TAG = "w:allowPNG"


@dataclass
class DoNotSaveAsSingleFile(XmlElement):
    TAG = "w:doNotSaveAsSingleFile"


@dataclass
class WebSettings(XmlElement):
    """The root element of the web settings part."""

    TAG = "w:webSettings"
    PART_NAMESPACES = (("xmlns:w", SCHEMA_MAIN), ("xmlns:w14", SCHEMA_WORDML_14))

    optimize_for_browser: OptimizeForBrowser | None = child(
        "w:optimizeForBrowser", OptimizeForBrowser
    )
    rely_on_vml: RelyOnVml | None = child("w:relyOnVML", RelyOnVml)
    allow_png: AllowPNG | None = child("w:allowPNG", AllowPNG)
    do_not_save_as_single_file: DoNotSaveAsSingleFile | None = child(
        "w:doNotSaveAsSingleFile", DoNotSaveAsSingleFile
    )

    def to_string(self):
        log.debug("[WebSettings] Started writing.")
        text = super().to_string()
        log.debug("[WebSettings] Finished writing.")
        return text