"""
Client for the Language Translation service.

The service translates text from one language to another, identifies the
language a text is written in, and manages custom translation models trained
from uploaded glossaries and corpora.

Example
-------
>>> service = LanguageTranslation(username="USERNAME", password="PASSWORD")
>>> result = service.translate("hello", source=Language.ENGLISH,
...                            target=Language.SPANISH).execute()
>>> result.first_translation
'hola'
"""

from typing import List, Optional, Union

from lang_services_lib.data_models.constants import (
    BASE_MODEL_ID_PARAM,
    DEFAULT_PARAM,
    FORCED_GLOSSARY_PARAM,
    LANGUAGES_FIELD,
    MODEL_ID_PARAM,
    MODELS_FIELD,
    MONOLINGUAL_CORPUS_PARAM,
    NAME_PARAM,
    PARALLEL_CORPUS_PARAM,
    SOURCE_PARAM,
    TARGET_PARAM,
    TEXT_PARAM,
    HttpHeaders,
    HttpMediaType,
)
from lang_services_lib.data_models.language_translation import (
    CreateModelOptions,
    IdentifiableLanguage,
    IdentifiedLanguage,
    Language,
    TranslationModel,
    TranslationResult,
)
from lang_services_lib.services import converters
from lang_services_lib.services.service_call import ServiceCall
from lang_services_lib.services.service_interface import BaseService
from lang_services_lib.utils import validators
from lang_services_lib.utils.request_builder import RequestBuilder

LanguageLike = Union[Language, str]


class LanguageTranslation(BaseService):
    """
    Language Translation ``/v2`` API.

    Every method validates its arguments, builds the request and returns an
    unexecuted :class:`ServiceCall`.
    """

    service_name = "language_translation"
    default_url = "https://gateway.watsonplatform.net/language-translation/api"

    PATH_IDENTIFY = "/v2/identify"
    PATH_TRANSLATE = "/v2/translate"
    PATH_IDENTIFIABLE_LANGUAGES = "/v2/identifiable_languages"
    PATH_MODELS = "/v2/models"
    PATH_MODEL = "/v2/models/{}"

    # ------------------------------------------------------------------ #
    def create_model(
        self, options: CreateModelOptions
    ) -> ServiceCall[TranslationModel]:
        """
        Create a custom translation model.

        ``base_model_id`` and ``name`` travel in the query string; each
        supplied training artifact becomes one multipart file part.
        """
        validators.not_null(options, "options cannot be null")
        validators.not_empty(
            options.base_model_id, "options.base_model_id cannot be null or empty"
        )

        builder = RequestBuilder.post(self.PATH_MODELS)
        builder.with_query(BASE_MODEL_ID_PARAM, options.base_model_id)
        if options.name:
            builder.with_query(NAME_PARAM, options.name)

        # either forced glossary, monolingual corpus or parallel corpus
        if options.forced_glossary is not None:
            builder.with_form_file(FORCED_GLOSSARY_PARAM, options.forced_glossary)
        if options.monolingual_corpus is not None:
            builder.with_form_file(
                MONOLINGUAL_CORPUS_PARAM, options.monolingual_corpus
            )
        if options.parallel_corpus is not None:
            builder.with_form_file(PARALLEL_CORPUS_PARAM, options.parallel_corpus)

        return self.create_service_call(
            builder.build(), converters.get_object(TranslationModel)
        )

    def delete_model(self, model_id: str) -> ServiceCall[None]:
        validators.not_empty(model_id, "model_id cannot be null or empty")
        request = RequestBuilder.delete(self.PATH_MODEL.format(model_id)).build()
        return self.create_service_call(request, converters.get_void())

    def get_identifiable_languages(self) -> ServiceCall[List[IdentifiableLanguage]]:
        request = RequestBuilder.get(self.PATH_IDENTIFIABLE_LANGUAGES).build()
        return self.create_service_call(
            request,
            converters.get_generic_object(IdentifiableLanguage, LANGUAGES_FIELD),
        )

    def get_model(self, model_id: str) -> ServiceCall[TranslationModel]:
        validators.not_empty(model_id, "model_id cannot be null or empty")
        request = RequestBuilder.get(self.PATH_MODEL.format(model_id)).build()
        return self.create_service_call(
            request, converters.get_object(TranslationModel)
        )

    def get_models(
        self,
        show_default: Optional[bool] = None,
        source: Optional[LanguageLike] = None,
        target: Optional[LanguageLike] = None,
    ) -> ServiceCall[List[TranslationModel]]:
        """
        List translation models, optionally filtered.

        Parameters
        ----------
        show_default : Optional[bool]
            ``True`` lists only default models, ``False`` only custom ones,
            ``None`` leaves the filter out.
        source, target : Optional[Language | str]
            Language filters; empty values are ignored.
        """
        builder = RequestBuilder.get(self.PATH_MODELS)
        if source:
            builder.with_query(SOURCE_PARAM, str(source))
        if target:
            builder.with_query(TARGET_PARAM, str(target))
        if show_default is not None:
            builder.with_query(DEFAULT_PARAM, show_default)

        return self.create_service_call(
            builder.build(),
            converters.get_generic_object(TranslationModel, MODELS_FIELD),
        )

    def identify(self, text: str) -> ServiceCall[List[IdentifiedLanguage]]:
        """Identify the languages ``text`` may be written in, most likely first."""
        validators.not_empty(text, "text cannot be null or empty")
        request = (
            RequestBuilder.post(self.PATH_IDENTIFY)
            .with_header(HttpHeaders.ACCEPT, HttpMediaType.APPLICATION_JSON)
            .with_body_content(text, HttpMediaType.TEXT_PLAIN)
            .build()
        )
        return self.create_service_call(
            request,
            converters.get_generic_object(IdentifiedLanguage, LANGUAGES_FIELD),
        )

    def translate(
        self,
        text: str,
        model_id: Optional[str] = None,
        source: Optional[LanguageLike] = None,
        target: Optional[LanguageLike] = None,
    ) -> ServiceCall[TranslationResult]:
        """
        Translate ``text`` using a model, or a source and target language.

        Either ``model_id`` or both ``source`` and ``target`` must be given.
        When a model id is supplied the languages are not sent, since the
        model already determines them.
        """
        validators.not_empty(text, "text cannot be null or empty")
        if model_id is not None:
            validators.not_empty(model_id, "model_id cannot be null or empty")
        else:
            validators.is_true(
                bool(source) and bool(target),
                "model_id or both source and target must be specified",
            )

        body = {TEXT_PARAM: [text]}
        if model_id:
            body[MODEL_ID_PARAM] = model_id
        else:
            body[SOURCE_PARAM] = str(source)
            body[TARGET_PARAM] = str(target)

        request = (
            RequestBuilder.post(self.PATH_TRANSLATE)
            .with_header(HttpHeaders.ACCEPT, HttpMediaType.APPLICATION_JSON)
            .with_body_json(body)
            .build()
        )
        return self.create_service_call(
            request, converters.get_object(TranslationResult)
        )
