from lang_services_lib.services.language_translation import LanguageTranslation
from lang_services_lib.services.text_to_speech import TextToSpeech
from lang_services_lib.services.service_call import ServiceCall
from lang_services_lib.data_models.language_translation import (
    CreateModelOptions,
    Language,
)
from lang_services_lib.data_models.text_to_speech import AudioFormat
from lang_services_lib.exceptions import (
    LangServicesError,
    InvalidArgumentError,
    DeserializationError,
    ServiceResponseError,
    BadRequestError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    InternalServerError,
)

__all__ = [
    "LanguageTranslation",
    "TextToSpeech",
    "ServiceCall",
    "CreateModelOptions",
    "Language",
    "AudioFormat",
    "LangServicesError",
    "InvalidArgumentError",
    "DeserializationError",
    "ServiceResponseError",
    "BadRequestError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "InternalServerError",
]
