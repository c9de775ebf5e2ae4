# varnam\core\domain\models.py
from pydantic import BaseModel, ConfigDict, Field, model_validator


class SchemeDetails(BaseModel):
    """
    Describes one installed transliteration scheme.
    Built by the scheme registry after the native handle has been described;
    it holds plain strings only.
    """
    model_config = ConfigDict(frozen=True)

    lang_code: str = Field(..., description="Language code of the target script (e.g., 'ml')")
    identifier: str = Field(..., description="Scheme identifier accepted by open_session()")
    display_name: str
    author: str
    compiled_date: str
    is_stable: bool = False


class CorpusDetails(BaseModel):
    """
    Snapshot of the learned-word store behind a session.
    Not refreshed by later learn() calls; query again for a new value.
    """
    model_config = ConfigDict(frozen=True)

    words_count: int = Field(..., ge=0, serialization_alias="wordsCount")


class LearnStatus(BaseModel):
    """Aggregate result of a bulk learn from file."""
    model_config = ConfigDict(frozen=True)

    total_words: int = Field(..., ge=0)
    failed_words: int = Field(0, ge=0)

    @model_validator(mode="after")
    def _failed_within_total(self) -> "LearnStatus":
        if self.failed_words > self.total_words:
            raise ValueError(
                f"failed_words ({self.failed_words}) exceeds total_words ({self.total_words})"
            )
        return self

    @property
    def learned_words(self) -> int:
        return self.total_words - self.failed_words
