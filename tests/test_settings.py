import pytest

from wordml.element import (
    SCHEMA_MAIN,
    SCHEMA_RELATIONSHIPS_DOCUMENT,
    SCHEMA_WORDML_14,
    XML_DECLARATION,
    XmlError,
)
from wordml.settings import Settings
from wordml.settings_elements import (
    CharacterSpacingControl,
    CharacterSpacingControlType,
    DecimalSymbol,
    DefaultTabStop,
    DocVar,
    DocVars,
    ProofState,
    ProofStateType,
    Rsid,
    RsidRoot,
    Rsids,
    TrackRevisions,
    Zoom,
)

ROOT_OPEN = (
    f'<w:settings xmlns:r="{SCHEMA_RELATIONSHIPS_DOCUMENT}" '
    f'xmlns:w="{SCHEMA_MAIN}" xmlns:w14="{SCHEMA_WORDML_14}">'
)


def test_default_writes_empty_part():
    expected = XML_DECLARATION + ROOT_OPEN + "</w:settings>"
    assert Settings().to_string() == expected


def test_default_reads_back():
    assert Settings.from_str(Settings().to_string()) == Settings()


def test_reads_children():
    text = (
        f'<w:settings xmlns:w="{SCHEMA_MAIN}">'
        '<w:zoom w:percent="100"/>'
        '<w:trackRevisions w:value="true"/>'
        '<w:defaultTabStop w:val="720"/>'
        '<w:characterSpacingControl w:val="doNotCompress"/>'
        '<w:proofState w:spelling="clean" w:grammar="dirty"/>'
        "</w:settings>"
    )
    settings = Settings.from_str(text)
    assert settings.zoom == Zoom(percent=100)
    assert settings.track_revisions == TrackRevisions(val=True)
    assert settings.default_tab_stop == DefaultTabStop(val=720)
    assert settings.character_spacing_control == CharacterSpacingControl(
        val=CharacterSpacingControlType.DO_NOT_COMPRESS
    )
    assert settings.proof_state == ProofState(
        spelling=ProofStateType.CLEAN, grammar=ProofStateType.DIRTY
    )
    assert settings.view is None


def test_writes_in_declared_order():
    settings = Settings.from_str(
        '<w:settings><w:defaultTabStop w:val="720"/><w:zoom w:percent="100"/></w:settings>'
    )
    expected = (
        XML_DECLARATION
        + ROOT_OPEN
        + '<w:zoom w:percent="100"/><w:defaultTabStop w:val="720"/></w:settings>'
    )
    assert settings.to_string() == expected


def test_round_trip_with_lists():
    settings = Settings(
        doc_vars=DocVars(vars=[DocVar(name="a", val="1"), DocVar(name="b", val="2")]),
        rsids=Rsids(ro=RsidRoot(val="00AA0001"), rsids=[Rsid(val="00AA0001"), Rsid(val="00AA0002")]),
        decimal_symbol=DecimalSymbol(val="."),
    )
    assert Settings.from_str(settings.to_string()) == settings


def test_footnote_properties_kept_verbatim():
    text = (
        "<w:settings>"
        '<w:footnotePr><w:numFmt w:val="decimal"/></w:footnotePr>'
        "</w:settings>"
    )
    settings = Settings.from_str(text)
    assert settings.footnote_pr.tag == "w:footnotePr"
    assert settings.to_string() == (
        XML_DECLARATION
        + ROOT_OPEN
        + '<w:footnotePr><w:numFmt w:val="decimal"/></w:footnotePr></w:settings>'
    )


def test_wrong_root_rejected():
    with pytest.raises(XmlError):
        Settings.from_str("<w:webSettings/>")


def test_bad_child_value_rejected():
    with pytest.raises(XmlError):
        Settings.from_str('<w:settings><w:defaultTabStop w:val="wide"/></w:settings>')


def test_malformed_xml_rejected():
    with pytest.raises(XmlError):
        Settings.from_str("<w:settings>")