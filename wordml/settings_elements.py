"""Elements that appear as children of the document settings part."""

from dataclasses import dataclass

from wordml.element import StringEnum, XmlElement, attr, child, children


class ViewType(StringEnum):
    """Document view setting."""

    NONE = "none"
    PRINT = "print"
    OUTLINE = "outline"
    MASTER_PAGES = "masterPages"
    NORMAL = "normal"
    WEB = "web"


class ZoomType(StringEnum):
    """Preset magnification."""

    NONE = "none"
    FULL_PAGE = "fullPage"
    BEST_FIT = "bestFit"
    TEXT_FIT = "textFit"


class ProofStateType(StringEnum):
    """State of spelling or grammar checking."""

    CLEAN = "clean"
    DIRTY = "dirty"


class CharacterSpacingControlType(StringEnum):
    """Character-level whitespace compression."""

    DO_NOT_COMPRESS = "doNotCompress"
    COMPRESS_PUNCTUATION = "compressPunctuation"
    COMPRESS_PUNCTUATION_AND_JAPANESE_KANA = "compressPunctuationAndJapaneseKana"


@dataclass
class _Toggle(XmlElement):
    """An element carrying an optional boolean ``w:value`` attribute."""

    val: bool | None = attr("w:value", bool, default=None)


@dataclass
class _Measure(XmlElement):
    """An element carrying a required integer ``w:val`` attribute."""

    val: int = attr("w:val", int)


@dataclass
class _Text(XmlElement):
    """An element carrying a required string ``w:val`` attribute."""

    val: str = attr("w:val", str)


@dataclass
class WriteProtection(XmlElement):
    TAG = "w:writeProtection"


@dataclass
class SmartTagType(XmlElement):
    TAG = "w:smartTagType"


@dataclass
class View(XmlElement):
    TAG = "w:view"

    val: ViewType = attr("w:val", ViewType)


@dataclass
class Zoom(XmlElement):
    TAG = "w:zoom"

    val: ZoomType | None = attr("w:val", ZoomType, default=None)
    percent: int | None = attr("w:percent", int, default=None)


@dataclass
class RemovePersonalInformation(_Toggle):
    TAG = "w:removePersonalInformation"


@dataclass
class RemoveDateAndTime(_Toggle):
    TAG = "w:removeDateAndTime"


@dataclass
class DoNotDisplayPageBoundaries(_Toggle):
    TAG = "w:doNotDisplayPageBoundaries"


@dataclass
class DisplayBackgroundShape(_Toggle):
    TAG = "w:displayBackgroundShape"


@dataclass
class PrintPostScriptOverText(_Toggle):
    TAG = "w:printPostScriptOverText"


@dataclass
class PrintFractionalCharacterWidth(_Toggle):
    TAG = "w:printFractionalCharacterWidth"


@dataclass
class PrintFormsData(_Toggle):
    TAG = "w:printFormsData"


@dataclass
class EmbedTrueTypeFonts(_Toggle):
    TAG = "w:embedTrueTypeFonts"


@dataclass
class EmbedSystemFonts(_Toggle):
    TAG = "w:embedSystemFonts"


@dataclass
class SaveSubsetFonts(_Toggle):
    TAG = "w:saveSubsetFonts"


@dataclass
class SaveFormsData(_Toggle):
    TAG = "w:saveFormsData"


@dataclass
class MirrorMargins(_Toggle):
    TAG = "w:mirrorMargins"


@dataclass
class AlignBordersAndEdges(_Toggle):
    TAG = "w:alignBordersAndEdges"


@dataclass
class BordersDoNotSurroundHeader(_Toggle):
    TAG = "w:bordersDoNotSurroundHeader"


@dataclass
class BordersDoNotSurroundFooter(_Toggle):
    TAG = "w:bordersDoNotSurroundFooter"


@dataclass
class GutterAtTop(_Toggle):
    TAG = "w:gutterAtTop"


@dataclass
class HideSpellingErrors(_Toggle):
    TAG = "w:hideSpellingErrors"


@dataclass
class HideGrammaticalErrors(_Toggle):
    TAG = "w:hideGrammaticalErrors"


@dataclass
class ActiveWritingStyle(XmlElement):
    TAG = "w:activeWritingStyle"


@dataclass
class ProofState(XmlElement):
    TAG = "w:proofState"

    spelling: ProofStateType | None = attr("w:spelling", ProofStateType, default=None)
    grammar: ProofStateType | None = attr("w:grammar", ProofStateType, default=None)


@dataclass
class FormsDesign(_Toggle):
    TAG = "w:formsDesign"


@dataclass
class AttachedTemplate(XmlElement):
    TAG = "w:attachedTemplate"

    val: str = attr("r:id", str)


@dataclass
class LinkStyles(_Toggle):
    TAG = "w:linkStyles"


@dataclass
class StylePaneFormatFilter(XmlElement):
    TAG = "w:stylePaneFormatFilter"


@dataclass
class StylePaneSortMethod(XmlElement):
    TAG = "w:stylePaneSortMethod"


@dataclass
class DocumentType(XmlElement):
    TAG = "w:documentType"


@dataclass
class MailMerge(XmlElement):
    TAG = "w:mailMerge"


@dataclass
class RevisionView(XmlElement):
    TAG = "w:revisionView"


@dataclass
class TrackRevisions(_Toggle):
    TAG = "w:trackRevisions"


@dataclass
class DoNotTrackMoves(_Toggle):
    TAG = "w:doNotTrackMoves"


@dataclass
class DoNotTrackFormatting(_Toggle):
    TAG = "w:doNotTrackFormatting"


@dataclass
class DocumentProtection(XmlElement):
    TAG = "w:documentProtection"


@dataclass
class AutoFormatOverride(XmlElement):
    TAG = "w:autoFormatOverride"


@dataclass
class StyleLockTheme(_Toggle):
    TAG = "w:styleLockTheme"


@dataclass
class StyleLockQfset(_Toggle):
    TAG = "w:styleLockQFSet"


@dataclass
class DefaultTabStop(_Measure):
    TAG = "w:defaultTabStop"


@dataclass
class AutoHyphenation(_Toggle):
    TAG = "w:autoHyphenation"


@dataclass
class ConsecutiveHyphenLimit(XmlElement):
    TAG = "w:consecutiveHyphenLimit"


@dataclass
class HyphenationZone(XmlElement):
    TAG = "w:hyphenationZone"


@dataclass
class DoNotHyphenateCaps(_Toggle):
    TAG = "w:doNotHyphenateCaps"


@dataclass
class ShowEnvelope(_Toggle):
    TAG = "w:showEnvelope"


@dataclass
class SummaryLength(XmlElement):
    TAG = "w:summaryLength"


@dataclass
class ClickAndTypeStyle(XmlElement):
    TAG = "w:clickAndTypeStyle"


@dataclass
class DefaultTableStyle(XmlElement):
    TAG = "w:defaultTableStyle"


@dataclass
class BookFoldRevPrinting(_Toggle):
    TAG = "w:bookFoldRevPrinting"


@dataclass
class BookFoldPrinting(_Toggle):
    TAG = "w:bookFoldPrinting"


@dataclass
class BookFoldPrintingSheets(XmlElement):
    TAG = "w:bookFoldPrintingSheets"


@dataclass
class DrawingGridHorizontalSpacing(_Measure):
    TAG = "w:drawingGridHorizontalSpacing"


@dataclass
class DrawingGridVerticalSpacing(_Measure):
    TAG = "w:drawingGridVerticalSpacing"


@dataclass
class DisplayHorizontalDrawingGridEvery(_Measure):
    TAG = "w:displayHorizontalDrawingGridEvery"


@dataclass
class DisplayVerticalDrawingGridEvery(_Measure):
    TAG = "w:displayVerticalDrawingGridEvery"


@dataclass
class DoNotUseMarginsForDrawingGridOrigin(_Toggle):
    TAG = "w:doNotUseMarginsForDrawingGridOrigin"


@dataclass
class DrawingGridHorizontalOrigin(XmlElement):
    TAG = "w:drawingGridHorizontalOrigin"


@dataclass
class DrawingGridVerticalOrigin(XmlElement):
    TAG = "w:drawingGridVerticalOrigin"


@dataclass
class DoNotShadeFormData(_Toggle):
    TAG = "w:doNotShadeFormData"


@dataclass
class NoPunctuationKerning(_Toggle):
    TAG = "w:noPunctuationKerning"


@dataclass
class CharacterSpacingControl(XmlElement):
    TAG = "w:characterSpacingControl"

    val: CharacterSpacingControlType = attr("w:val", CharacterSpacingControlType)


@dataclass
class PrintTwoOnOne(_Toggle):
    TAG = "w:printTwoOnOne"


@dataclass
class StrictFirstAndLastChars(_Toggle):
    TAG = "w:strictFirstAndLastChars"


@dataclass
class NoLineBreaksAfter(XmlElement):
    TAG = "w:noLineBreaksAfter"


@dataclass
class NoLineBreaksBefore(XmlElement):
    TAG = "w:noLineBreaksBefore"


@dataclass
class SavePreviewPicture(_Toggle):
    TAG = "w:savePreviewPicture"


@dataclass
class DoNotValidateAgainstSchema(_Toggle):
    TAG = "w:doNotValidateAgainstSchema"


@dataclass
class SaveInvalidXml(_Toggle):
    TAG = "w:saveInvalidXml"


@dataclass
class IgnoreMixedContent(_Toggle):
    TAG = "w:ignoreMixedContent"


@dataclass
class AlwaysShowPlaceholderText(_Toggle):
    TAG = "w:alwaysShowPlaceholderText"


@dataclass
class DoNotDemarcateInvalidXml(_Toggle):
    TAG = "w:doNotDemarcateInvalidXml"


@dataclass
class SaveXmlDataOnly(_Toggle):
    TAG = "w:saveXmlDataOnly"


@dataclass
class UseXsltwhenSaving(_Toggle):
    TAG = "w:useXSLTWhenSaving"


@dataclass
class SaveThroughXslt(XmlElement):
    TAG = "w:saveThroughXslt"


@dataclass
class ShowXmltags(_Toggle):
    TAG = "w:showXMLTags"


@dataclass
class AlwaysMergeEmptyNamespace(_Toggle):
    TAG = "w:alwaysMergeEmptyNamespace"


@dataclass
class UpdateFields(_Toggle):
    TAG = "w:updateFields"


@dataclass
class HdrShapeDefaults(XmlElement):
    TAG = "w:hdrShapeDefaults"


@dataclass
class Compat(XmlElement):
    TAG = "w:compat"


@dataclass
class DocVar(XmlElement):
    TAG = "w:docVar"

    name: str = attr("w:name", str)
    val: str = attr("w:val", str)


@dataclass
class DocVars(XmlElement):
    TAG = "w:docVars"

    vars: list[DocVar] = children("w:docVar", DocVar)


@dataclass
class Rsid(_Text):
    TAG = "w:rsid"


@dataclass
class RsidRoot(_Text):
    TAG = "w:rsidRoot"


@dataclass
class Rsids(XmlElement):
    TAG = "w:rsids"

    ro: RsidRoot | None = child("w:rsidRoot", RsidRoot)
    rsids: list[Rsid] = children("w:rsid", Rsid)


@dataclass
class UiCompat97to2003(_Toggle):
    TAG = "w:uiCompat97To2003"


@dataclass
class ClrSchemeMapping(XmlElement):
    TAG = "w:clrSchemeMapping"


@dataclass
class DoNotIncludeSubdocsInStats(_Toggle):
    TAG = "w:doNotIncludeSubdocsInStats"


@dataclass
class DoNotAutoCompressPictures(_Toggle):
    TAG = "w:doNotAutoCompressPictures"


@dataclass
class ForceUpgrade(XmlElement):
    TAG = "w:forceUpgrade"


@dataclass
class Captions(XmlElement):
    TAG = "w:captions"


@dataclass
class ReadModeInkLockDown(XmlElement):
    TAG = "w:readModeInkLockDown"


@dataclass
class ShapeDefaults(XmlElement):
    TAG = "w:shapeDefaults"


@dataclass
class DoNotEmbedSmartTags(_Toggle):
    TAG = "w:doNotEmbedSmartTags"


@dataclass
class DecimalSymbol(_Text):
    TAG = "w:decimalSymbol"


@dataclass
class ListSeparator(_Text):
    TAG = "w:listSeparator"


@dataclass
class EvenAndOddHeaders(XmlElement):
    TAG = "w:evenAndOddHeaders"


@dataclass
class ThemeFontLang(XmlElement):
    TAG = "w:themeFontLang"

    val: str | None = attr("w:val", str, default=None)
    east_asia: str | None = attr("w:eastAsia", str, default=None)