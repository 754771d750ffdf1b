from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

# Every field is required and keeps the external key as its alias, so the
# bundled JSON and the embedded sample decode without any renaming step.
_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ShlokaView(str, Enum):
    """The three fixed text variants a shloka is shown in."""

    SANSKRIT = "संस्कृत"
    TRANSLITERATION = "Transliteration"
    MEANING = "Meaning"

    @property
    def label(self) -> str:
        return self.value


class Shloka(BaseModel):
    model_config = _MODEL_CONFIG

    id: StrictStr = Field(alias="Shloka_Number")
    sanskrit: StrictStr = Field(alias="Sanskrit")
    roman_transliteration: StrictStr = Field(alias="Roman_Transliteration")
    meaning: StrictStr = Field(alias="Meaning")

    def text(self, view: ShlokaView) -> str:
        if view is ShlokaView.TRANSLITERATION:
            return self.roman_transliteration
        if view is ShlokaView.MEANING:
            return self.meaning
        return self.sanskrit


class Sarga(BaseModel):
    model_config = _MODEL_CONFIG

    id: StrictStr = Field(alias="Sarga_Number")
    description: StrictStr = Field(alias="Description")
    # Declared count only; the source data may carry fewer shlokas.
    shloka_count: StrictInt = Field(alias="Sloka_Count")
    shlokas: tuple[Shloka, ...] = Field(alias="Shlokas")

    def shloka(self, shloka_id: str) -> Shloka | None:
        return next((s for s in self.shlokas if s.id == shloka_id), None)


class Kanda(BaseModel):
    model_config = _MODEL_CONFIG

    id: StrictStr = Field(alias="Kanda_Number")
    name: StrictStr = Field(alias="Sanskrit_Name")
    description: StrictStr = Field(alias="Description")
    color_theme: StrictStr = Field(alias="Theme_Color")  # hex string, resolved by the UI
    sargas: tuple[Sarga, ...] = Field(alias="Sargas")

    def sarga(self, sarga_id: str) -> Sarga | None:
        return next((s for s in self.sargas if s.id == sarga_id), None)


class Document(BaseModel):
    model_config = _MODEL_CONFIG

    kandas: tuple[Kanda, ...] = Field(alias="kandas")

    def kanda(self, kanda_id: str) -> Kanda | None:
        return next((k for k in self.kandas if k.id == kanda_id), None)

    @classmethod
    def empty(cls) -> "Document":
        """Document with no kandas, for previews."""
        return cls(kandas=())


def _aliases(model: type[BaseModel]) -> dict[str, str]:
    return {f.alias or name: name for name, f in model.model_fields.items()}


# external key -> internal field name, per nesting level
FIELD_ALIASES: dict[str, dict[str, str]] = {
    m.__name__: _aliases(m) for m in (Document, Kanda, Sarga, Shloka)
}
