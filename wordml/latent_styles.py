"""Latent style information of the styles part."""

from dataclasses import dataclass

from wordml.element import XmlElement, attr, children


@dataclass
class LatentStyle(XmlElement):
    """An exception to the latent style defaults for one named style."""

    TAG = "w:lsdException"

    name: str | None = attr("w:name", str, default=None)
    locked: bool | None = attr("w:locked", bool, default=None)
    priority: int | None = attr("w:uiPriority", int, default=None)
    semi_hidden: bool | None = attr("w:semiHidden", bool, default=None)
    unhiden_when_used: bool | None = attr("w:unhideWhenUsed", bool, default=None)
    q_format: bool | None = attr("w:qFormat", bool, default=None)


@dataclass
class LatentStyles(XmlElement):
    """Default behaviour of latent styles and the exceptions to it."""

    TAG = "w:latentStyles"

    locked_state: bool | None = attr("w:defLockedState", bool, default=None)
    priority: int | None = attr("w:defUIPriority", int, default=None)
    semi_hidden: bool | None = attr("w:defSemiHidden", bool, default=None)
    unhide_when_used: bool | None = attr("w:defUnhideWhenUsed", bool, default=None)
    format: bool | None = attr("w:defQFormat", bool, default=None)
    count: int | None = attr("w:count", int, default=None)
    styles: list[LatentStyle] = children("w:lsdException", LatentStyle)

    def push(self, style):
        """Append ``style`` and update the count; return ``self``."""
        self.styles.append(style)
        self.count = len(self.styles)
        return self