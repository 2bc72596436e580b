"""
Data models for the Language Translation service.

The response models mirror the JSON objects returned by the ``/v2`` API.
:class:`CreateModelOptions` is the only request‑side model; it groups the
arguments of :meth:`LanguageTranslation.create_model`.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from lang_services_lib.data_models.base_model import BaseServiceModel


class Language(str, Enum):
    """Language codes accepted as ``source`` / ``target`` of a translation."""

    ARABIC = "ar"
    CHINESE = "zh"
    ENGLISH = "en"
    FRENCH = "fr"
    GERMAN = "de"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "ko"
    PORTUGUESE = "pt"
    SPANISH = "es"

    def __str__(self) -> str:
        return self.value


class TranslationModel(BaseServiceModel):
    """
    A server‑side translation pipeline.

    Attributes
    ----------
    model_id : str
        Identifier used by ``get_model``, ``delete_model`` and ``translate``.
    name : Optional[str]
        Custom name given at creation time.
    base_model_id : Optional[str]
        Model the custom one was trained from (empty for base models).
    source, target : Optional[str]
        Language codes of the pipeline.
    status : Optional[str]
        Training state reported by the service, e.g. ``"available"``,
        ``"training"``, ``"uploaded"`` or ``"error"``.
    default_model : Optional[bool]
        ``True`` for models provided by the service itself.
    """

    model_id: str
    name: Optional[str] = None
    base_model_id: Optional[str] = None
    source: Optional[str] = None
    target: Optional[str] = None
    domain: Optional[str] = None
    status: Optional[str] = None
    owner: Optional[str] = None
    customizable: Optional[bool] = None
    default_model: Optional[bool] = None


class IdentifiableLanguage(BaseServiceModel):
    language: str
    name: Optional[str] = None


class IdentifiedLanguage(BaseServiceModel):
    language: str
    confidence: float


class Translation(BaseServiceModel):
    translation: str


class TranslationResult(BaseServiceModel):
    """
    Result of a ``translate`` call.

    Attributes
    ----------
    word_count : int
        Number of words in the submitted text.
    character_count : int
        Number of characters in the submitted text.
    translations : List[Translation]
        One entry per submitted paragraph.
    """

    word_count: int = 0
    character_count: int = 0
    translations: List[Translation] = Field(default_factory=list)

    @property
    def first_translation(self) -> Optional[str]:
        if not self.translations:
            return None
        return self.translations[0].translation


class CreateModelOptions(BaseModel):
    """
    Arguments of a custom‑model creation.

    At least one of the three training artifacts should be given; each may be
    a filesystem path or an open binary file.
    """

    model_config = ConfigDict(protected_namespaces=())

    base_model_id: Optional[str] = None
    name: Optional[str] = None
    forced_glossary: Optional[Any] = None
    monolingual_corpus: Optional[Any] = None
    parallel_corpus: Optional[Any] = None
