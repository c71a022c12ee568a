"""Document settings part, stored as ``/word/settings.xml``."""

import logging
from dataclasses import dataclass

from wordml.element import (
    SCHEMA_MAIN,
    SCHEMA_RELATIONSHIPS_DOCUMENT,
    SCHEMA_WORDML_14,
    RawElement,
    XmlElement,
    child,
)
from wordml.settings_elements import (
    ActiveWritingStyle,
    AlignBordersAndEdges,
    AlwaysMergeEmptyNamespace,
    AlwaysShowPlaceholderText,
    AttachedTemplate,
    AutoFormatOverride,
    AutoHyphenation,
    BookFoldPrinting,
    BookFoldPrintingSheets,
    BookFoldRevPrinting,
    BordersDoNotSurroundFooter,
    BordersDoNotSurroundHeader,
    Captions,
    CharacterSpacingControl,
    ClickAndTypeStyle,
    ClrSchemeMapping,
    Compat,
    ConsecutiveHyphenLimit,
    DecimalSymbol,
    DefaultTableStyle,
    DefaultTabStop,
    DisplayBackgroundShape,
    DisplayHorizontalDrawingGridEvery,
    DisplayVerticalDrawingGridEvery,
    DocumentProtection,
    DocumentType,
    DocVars,
    DoNotAutoCompressPictures,
    DoNotDemarcateInvalidXml,
    DoNotDisplayPageBoundaries,
    DoNotEmbedSmartTags,
    DoNotHyphenateCaps,
    DoNotIncludeSubdocsInStats,
    DoNotShadeFormData,
    DoNotTrackFormatting,
    DoNotTrackMoves,
    DoNotUseMarginsForDrawingGridOrigin,
    DoNotValidateAgainstSchema,
    DrawingGridHorizontalOrigin,
    DrawingGridHorizontalSpacing,
    DrawingGridVerticalOrigin,
    DrawingGridVerticalSpacing,
    EmbedSystemFonts,
    EmbedTrueTypeFonts,
    EvenAndOddHeaders,
    ForceUpgrade,
    FormsDesign,
    GutterAtTop,
    HdrShapeDefaults,
    HideGrammaticalErrors,
    HideSpellingErrors,
    HyphenationZone,
    IgnoreMixedContent,
    LinkStyles,
    ListSeparator,
    MailMerge,
    MirrorMargins,
    NoLineBreaksAfter,
    NoLineBreaksBefore,
    NoPunctuationKerning,
    PrintFormsData,
    PrintFractionalCharacterWidth,
    PrintPostScriptOverText,
    PrintTwoOnOne,
    ProofState,
    ReadModeInkLockDown,
    RemoveDateAndTime,
    RemovePersonalInformation,
    RevisionView,
    Rsids,
    SaveFormsData,
    SaveInvalidXml,
    SavePreviewPicture,
    SaveSubsetFonts,
    SaveThroughXslt,
    SaveXmlDataOnly,
    ShapeDefaults,
    ShowEnvelope,
    ShowXmltags,
    StrictFirstAndLastChars,
    StyleLockQfset,
    StyleLockTheme,
    StylePaneFormatFilter,
    StylePaneSortMethod,
    SummaryLength,
    ThemeFontLang,
    TrackRevisions,
    UiCompat97to2003,
    UpdateFields,
    UseXsltwhenSaving,
    View,
    WriteProtection,
    Zoom,
)

log = logging.getLogger(__name__)


@dataclass
class Settings(XmlElement):
    """The root element of the document settings part.

    Children are written in the order the fields are declared, whatever
    order they were read in.  Footnote and endnote properties are kept as
    raw elements.
    """

    TAG = "w:settings"
    PART_NAMESPACES = (
        ("xmlns:r", SCHEMA_RELATIONSHIPS_DOCUMENT),
        ("xmlns:w", SCHEMA_MAIN),
        ("xmlns:w14", SCHEMA_WORDML_14),
    )

    write_protection: WriteProtection | None = child("w:writeProtection", WriteProtection)
    view: View | None = child("w:view", View)
    zoom: Zoom | None = child("w:zoom", Zoom)
    remove_personal_information: RemovePersonalInformation | None = child(
        "w:removePersonalInformation", RemovePersonalInformation
    )
    remove_date_and_time: RemoveDateAndTime | None = child(
        "w:removeDateAndTime", RemoveDateAndTime
    )
    do_not_display_page_boundaries: DoNotDisplayPageBoundaries | None = child(
        "w:doNotDisplayPageBoundaries", DoNotDisplayPageBoundaries
    )
    display_background_shape: DisplayBackgroundShape | None = child(
        "w:displayBackgroundShape", DisplayBackgroundShape
    )
    print_post_script_over_text: PrintPostScriptOverText | None = child(
        "w:printPostScriptOverText", PrintPostScriptOverText
    )
    print_fractional_character_width: PrintFractionalCharacterWidth | None = child(
        "w:printFractionalCharacterWidth", PrintFractionalCharacterWidth
    )
    print_forms_data: PrintFormsData | None = child("w:printFormsData", PrintFormsData)
    embed_true_type_fonts: EmbedTrueTypeFonts | None = child(
        "w:embedTrueTypeFonts", EmbedTrueTypeFonts
    )
    embed_system_fonts: EmbedSystemFonts | None = child(
        "w:embedSystemFonts", EmbedSystemFonts
    )
    save_subset_fonts: SaveSubsetFonts | None = child("w:saveSubsetFonts", SaveSubsetFonts)
    save_forms_data: SaveFormsData | None = child("w:saveFormsData", SaveFormsData)
    mirror_margins: MirrorMargins | None = child("w:mirrorMargins", MirrorMargins)
    align_borders_and_edges: AlignBordersAndEdges | None = child(
        "w:alignBordersAndEdges", AlignBordersAndEdges
    )
    borders_do_not_surround_header: BordersDoNotSurroundHeader | None = child(
        "w:bordersDoNotSurroundHeader", BordersDoNotSurroundHeader
    )
    borders_do_not_surround_footer: BordersDoNotSurroundFooter | None = child(
        "w:bordersDoNotSurroundFooter", BordersDoNotSurroundFooter
    )
    gutter_at_top: GutterAtTop | None = child("w:gutterAtTop", GutterAtTop)
    hide_spelling_errors: HideSpellingErrors | None = child(
        "w:hideSpellingErrors", HideSpellingErrors
    )
    hide_grammatical_errors: HideGrammaticalErrors | None = child(
        "w:hideGrammaticalErrors", HideGrammaticalErrors
    )
    active_writing_style: ActiveWritingStyle | None = child(
        "w:activeWritingStyle", ActiveWritingStyle
    )
    proof_state: ProofState | None = child("w:proofState", ProofState)
    forms_design: FormsDesign | None = child("w:formsDesign", FormsDesign)
    attached_template: AttachedTemplate | None = child(
        "w:attachedTemplate", AttachedTemplate
    )
    link_styles: LinkStyles | None = child("w:linkStyles", LinkStyles)
    style_pane_format_filter: StylePaneFormatFilter | None = child(
        "w:stylePaneFormatFilter", StylePaneFormatFilter
    )
    style_pane_sort_method: StylePaneSortMethod | None = child(
        "w:stylePaneSortMethod", StylePaneSortMethod
    )
    document_type: DocumentType | None = child("w:documentType", DocumentType)
    mail_merge: MailMerge | None = child("w:mailMerge", MailMerge)
    revision_view: RevisionView | None = child("w:revisionView", RevisionView)
    track_revisions: TrackRevisions | None = child("w:trackRevisions", TrackRevisions)
    do_not_track_moves: DoNotTrackMoves | None = child("w:doNotTrackMoves", DoNotTrackMoves)
    do_not_track_formatting: DoNotTrackFormatting | None = child(
        "w:doNotTrackFormatting", DoNotTrackFormatting
    )
    document_protection: DocumentProtection | None = child(
        "w:documentProtection", DocumentProtection
    )
    auto_format_override: AutoFormatOverride | None = child(
        "w:autoFormatOverride", AutoFormatOverride
    )
    style_lock_theme: StyleLockTheme | None = child("w:styleLockTheme", StyleLockTheme)
    style_lock_qfset: StyleLockQfset | None = child("w:styleLockQFSet", StyleLockQfset)
    default_tab_stop: DefaultTabStop | None = child("w:defaultTabStop", DefaultTabStop)
    auto_hyphenation: AutoHyphenation | None = child("w:autoHyphenation", AutoHyphenation)
    consecutive_hyphen_limit: ConsecutiveHyphenLimit | None = child(
        "w:consecutiveHyphenLimit", ConsecutiveHyphenLimit
    )
    hyphenation_zone: HyphenationZone | None = child("w:hyphenationZone", HyphenationZone)
    do_not_hyphenate_caps: DoNotHyphenateCaps | None = child(
        "w:doNotHyphenateCaps", DoNotHyphenateCaps
    )
    show_envelope: ShowEnvelope | None = child("w:showEnvelope", ShowEnvelope)
    summary_length: SummaryLength | None = child("w:summaryLength", SummaryLength)
    click_and_type_style: ClickAndTypeStyle | None = child(
        "w:clickAndTypeStyle", ClickAndTypeStyle
    )
    default_table_style: DefaultTableStyle | None = child(
        "w:defaultTableStyle", DefaultTableStyle
    )
    even_and_odd_headers: EvenAndOddHeaders | None = child(
        "w:evenAndOddHeaders", EvenAndOddHeaders
    )
    book_fold_rev_printing: BookFoldRevPrinting | None = child(
        "w:bookFoldRevPrinting", BookFoldRevPrinting
    )
    book_fold_printing: BookFoldPrinting | None = child(
        "w:bookFoldPrinting", BookFoldPrinting
    )
    book_fold_printing_sheets: BookFoldPrintingSheets | None = child(
        "w:bookFoldPrintingSheets", BookFoldPrintingSheets
    )
    drawing_grid_horizontal_spacing: DrawingGridHorizontalSpacing | None = child(
        "w:drawingGridHorizontalSpacing", DrawingGridHorizontalSpacing
    )
    drawing_grid_vertical_spacing: DrawingGridVerticalSpacing | None = child(
        "w:drawingGridVerticalSpacing", DrawingGridVerticalSpacing
    )
    display_horizontal_drawing_grid_every: DisplayHorizontalDrawingGridEvery | None = child(
        "w:displayHorizontalDrawingGridEvery", DisplayHorizontalDrawingGridEvery
    )
    display_vertical_drawing_grid_every: DisplayVerticalDrawingGridEvery | None = child(
        "w:displayVerticalDrawingGridEvery", DisplayVerticalDrawingGridEvery
    )
    do_not_use_margins_for_drawing_grid_origin: DoNotUseMarginsForDrawingGridOrigin | None = child(
        "w:doNotUseMarginsForDrawingGridOrigin", DoNotUseMarginsForDrawingGridOrigin
    )
    drawing_grid_horizontal_origin: DrawingGridHorizontalOrigin | None = child(
        "w:drawingGridHorizontalOrigin", DrawingGridHorizontalOrigin
    )
    drawing_grid_vertical_origin: DrawingGridVerticalOrigin | None = child(
        "w:drawingGridVerticalOrigin", DrawingGridVerticalOrigin
    )
    do_not_shade_form_data: DoNotShadeFormData | None = child(
        "w:doNotShadeFormData", DoNotShadeFormData
    )
    no_punctuation_kerning: NoPunctuationKerning | None = child(
        "w:noPunctuationKerning", NoPunctuationKerning
    )
    character_spacing_control: CharacterSpacingControl | None = child(
        "w:characterSpacingControl", CharacterSpacingControl
    )
    print_two_on_one: PrintTwoOnOne | None = child("w:printTwoOnOne", PrintTwoOnOne)
    strict_first_and_last_chars: StrictFirstAndLastChars | None = child(
        "w:strictFirstAndLastChars", StrictFirstAndLastChars
    )
    no_line_breaks_after: NoLineBreaksAfter | None = child(
        "w:noLineBreaksAfter", NoLineBreaksAfter
    )
    no_line_breaks_before: NoLineBreaksBefore | None = child(
        "w:noLineBreaksBefore", NoLineBreaksBefore
    )
    save_preview_picture: SavePreviewPicture | None = child(
        "w:savePreviewPicture", SavePreviewPicture
    )
    do_not_validate_against_schema: DoNotValidateAgainstSchema | None = child(
        "w:doNotValidateAgainstSchema", DoNotValidateAgainstSchema
    )
    save_invalid_xml: SaveInvalidXml | None = child("w:saveInvalidXml", SaveInvalidXml)
    ignore_mixed_content: IgnoreMixedContent | None = child(
        "w:ignoreMixedContent", IgnoreMixedContent
    )
    always_show_placeholder_text: AlwaysShowPlaceholderText | None = child(
        "w:alwaysShowPlaceholderText", AlwaysShowPlaceholderText
    )
    do_not_demarcate_invalid_xml: DoNotDemarcateInvalidXml | None = child(
        "w:doNotDemarcateInvalidXml", DoNotDemarcateInvalidXml
    )
    save_xml_data_only: SaveXmlDataOnly | None = child("w:saveXmlDataOnly", SaveXmlDataOnly)
    use_xsltwhen_saving: UseXsltwhenSaving | None = child(
        "w:useXSLTWhenSaving", UseXsltwhenSaving
    )
    save_through_xslt: SaveThroughXslt | None = child("w:saveThroughXslt", SaveThroughXslt)
    show_xmltags: ShowXmltags | None = child("w:showXMLTags", ShowXmltags)
    always_merge_empty_namespace: AlwaysMergeEmptyNamespace | None = child(
        "w:alwaysMergeEmptyNamespace", AlwaysMergeEmptyNamespace
    )
    update_fields: UpdateFields | None = child("w:updateFields", UpdateFields)
    hdr_shape_defaults: HdrShapeDefaults | None = child(
        "w:hdrShapeDefaults", HdrShapeDefaults
    )
    footnote_pr: RawElement | None = child("w:footnotePr", RawElement)
    endnote_pr: RawElement | None = child("w:endnotePr", RawElement)
    compat: Compat | None = child("w:compat", Compat)
    doc_vars: DocVars | None = child("w:docVars", DocVars)
    rsids: Rsids | None = child("w:rsids", Rsids)
    ui_compat97_to2003: UiCompat97to2003 | None = child(
        "w:uiCompat97To2003", UiCompat97to2003
    )
    theme_font_lang: ThemeFontLang | None = child("w:themeFontLang", ThemeFontLang)
    clr_scheme_mapping: ClrSchemeMapping | None = child(
        "w:clrSchemeMapping", ClrSchemeMapping
    )
    do_not_include_subdocs_in_stats: DoNotIncludeSubdocsInStats | None = child(
        "w:doNotIncludeSubdocsInStats", DoNotIncludeSubdocsInStats
    )
    do_not_auto_compress_pictures: DoNotAutoCompressPictures | None = child(
        "w:doNotAutoCompressPictures", DoNotAutoCompressPictures
    )
    force_upgrade: ForceUpgrade | None = child("w:forceUpgrade", ForceUpgrade)
    captions: Captions | None = child("w:captions", Captions)
    read_mode_ink_lock_down: ReadModeInkLockDown | None = child(
        "w:readModeInkLockDown", ReadModeInkLockDown
    )
    shape_defaults: ShapeDefaults | None = child("w:shapeDefaults", ShapeDefaults)
    do_not_embed_smart_tags: DoNotEmbedSmartTags | None = child(
        "w:doNotEmbedSmartTags", DoNotEmbedSmartTags
    )
    decimal_symbol: DecimalSymbol | None = child("w:decimalSymbol", DecimalSymbol)
    list_separator: ListSeparator | None = child("w:listSeparator", ListSeparator)

    def to_string(self):
        log.debug("[Settings] Started writing.")
        text = super().to_string()
        log.debug("[Settings] Finished writing.")
        return text