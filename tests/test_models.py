import pytest
from pydantic import ValidationError

from ramayana.core.models import FIELD_ALIASES, Document, Kanda, Sarga, Shloka, ShlokaView


def _shloka(**overrides):
    fields = dict(id="1.1.1", sanskrit="स", roman_transliteration="sa", meaning="m")
    fields.update(overrides)
    return Shloka(**fields)


def test_field_aliases_match_wire_format():
    assert FIELD_ALIASES["Document"] == {"kandas": "kandas"}
    assert FIELD_ALIASES["Kanda"] == {
        "Kanda_Number": "id",
        "Sanskrit_Name": "name",
        "Description": "description",
        "Theme_Color": "color_theme",
        "Sargas": "sargas",
    }
    assert FIELD_ALIASES["Sarga"] == {
        "Sarga_Number": "id",
        "Description": "description",
        "Sloka_Count": "shloka_count",
        "Shlokas": "shlokas",
    }
    assert FIELD_ALIASES["Shloka"] == {
        "Shloka_Number": "id",
        "Sanskrit": "sanskrit",
        "Roman_Transliteration": "roman_transliteration",
        "Meaning": "meaning",
    }


def test_models_are_frozen():
    shloka = _shloka()
    with pytest.raises(ValidationError):
        shloka.meaning = "changed"


def test_lookup_helpers():
    s1, s2 = _shloka(id="1.1.1"), _shloka(id="1.1.2")
    sarga = Sarga(id="1", description="d", shloka_count=99, shlokas=(s1, s2))
    kanda = Kanda(id="1", name="बाल", description="d", color_theme="#FFF", sargas=(sarga,))
    doc = Document(kandas=(kanda,))

    assert doc.kanda("1") is kanda
    assert doc.kanda("7") is None
    assert kanda.sarga("1") is sarga
    assert kanda.sarga("2") is None
    assert sarga.shloka("1.1.2") is s2
    assert sarga.shloka("1.1.9") is None


def test_shloka_text_per_view():
    shloka = _shloka(sanskrit="संस्कृतम्", roman_transliteration="saṃskṛtam", meaning="Sanskrit")
    assert shloka.text(ShlokaView.SANSKRIT) == "संस्कृतम्"
    assert shloka.text(ShlokaView.TRANSLITERATION) == "saṃskṛtam"
    assert shloka.text(ShlokaView.MEANING) == "Sanskrit"


def test_view_labels_in_tab_order():
    assert [v.label for v in ShlokaView] == ["संस्कृत", "Transliteration", "Meaning"]


def test_empty_document():
    assert Document.empty().kandas == ()
