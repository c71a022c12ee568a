import pytest

from wordml.element import XmlError
from wordml.settings_elements import (
    AttachedTemplate,
    CharacterSpacingControl,
    CharacterSpacingControlType,
    Compat,
    DefaultTabStop,
    DocVar,
    DocVars,
    DrawingGridHorizontalSpacing,
    EvenAndOddHeaders,
    ListSeparator,
    MirrorMargins,
    ProofState,
    ProofStateType,
    Rsid,
    RsidRoot,
    Rsids,
    StyleLockQfset,
    ThemeFontLang,
    TrackRevisions,
    UpdateFields,
    View,
    ViewType,
    WriteProtection,
    Zoom,
    ZoomType,
)


def test_empty_element_serialization():
    assert WriteProtection().to_string() == "<w:writeProtection/>"


def test_measure_serialization():
    assert DefaultTabStop(720).to_string() == '<w:defaultTabStop w:val="720"/>'


def test_view_reads_enum_value():
    view = View.from_str('<w:view w:val="masterPages"/>')
    assert view.val is ViewType.MASTER_PAGES


def test_view_requires_value():
    with pytest.raises(XmlError):
        View.from_str("<w:view/>")


def test_unknown_enum_value_rejected():
    with pytest.raises(XmlError):
        View.from_str('<w:view w:val="sideways"/>')


def test_zoom_parse():
    zoom = Zoom.from_str('<w:zoom w:val="bestFit" w:percent="120"/>')
    assert zoom == Zoom(val=ZoomType.BEST_FIT, percent=120)


def test_zoom_bad_percent():
    with pytest.raises(XmlError):
        Zoom.from_str('<w:zoom w:percent="big"/>')


@pytest.mark.parametrize("cls", [MirrorMargins, TrackRevisions, UpdateFields, StyleLockQfset])
@pytest.mark.parametrize("val", [None, True, False])
def test_toggle_round_trip(cls, val):
    element = cls(val=val)
    assert cls.from_str(element.to_string()) == element


def test_toggle_reads_numeric_boolean():
    assert TrackRevisions.from_str('<w:trackRevisions w:value="0"/>').val is False
    assert TrackRevisions.from_str('<w:trackRevisions w:value="1"/>').val is True


def test_toggle_rejects_other_tag():
    with pytest.raises(XmlError):
        TrackRevisions.from_str('<w:mirrorMargins w:value="true"/>')


def test_style_lock_qfset_tag():
    element = StyleLockQfset.from_str('<w:styleLockQFSet w:value="true"/>')
    assert element.val is True


def test_proof_state_round_trip():
    state = ProofState(spelling=ProofStateType.CLEAN, grammar=ProofStateType.DIRTY)
    assert ProofState.from_str(state.to_string()) == state


def test_character_spacing_control():
    parsed = CharacterSpacingControl.from_str(
        '<w:characterSpacingControl w:val="compressPunctuationAndJapaneseKana"/>'
    )
    assert parsed.val is CharacterSpacingControlType.COMPRESS_PUNCTUATION_AND_JAPANESE_KANA


def test_attached_template_uses_relationship_id():
    parsed = AttachedTemplate.from_str('<w:attachedTemplate r:id="rId1"/>')
    assert parsed.val == "rId1"
    assert AttachedTemplate.from_str(parsed.to_string()) == parsed


def test_doc_vars_keep_order():
    doc_vars = DocVars(vars=[DocVar("a", "1"), DocVar("b", "2")])
    parsed = DocVars.from_str(doc_vars.to_string())
    assert [(v.name, v.val) for v in parsed.vars] == [("a", "1"), ("b", "2")]


def test_doc_var_requires_name():
    with pytest.raises(XmlError):
        DocVar.from_str('<w:docVar w:val="x"/>')


def test_rsids_parse():
    parsed = Rsids.from_str(
        '<w:rsids><w:rsidRoot w:val="00A1"/><w:rsid w:val="00B2"/><w:rsid w:val="00C3"/></w:rsids>'
    )
    assert parsed == Rsids(ro=RsidRoot("00A1"), rsids=[Rsid("00B2"), Rsid("00C3")])


def test_theme_font_lang_round_trip():
    lang = ThemeFontLang(val="en-US", east_asia="zh-CN")
    assert ThemeFontLang.from_str(lang.to_string()) == lang
    assert ThemeFontLang.from_str("<w:themeFontLang/>") == ThemeFontLang()


def test_text_and_measure_round_trip():
    assert ListSeparator.from_str(ListSeparator(",").to_string()) == ListSeparator(",")
    spacing = DrawingGridHorizontalSpacing(180)
    assert DrawingGridHorizontalSpacing.from_str(spacing.to_string()) == spacing


def test_distinct_empty_classes_not_equal():
    assert Compat.from_str("<w:compat/>") == Compat()
    assert Compat() != EvenAndOddHeaders()