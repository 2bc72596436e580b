"""
Client for the Text to Speech service.
"""

from typing import List, Optional

from lang_services_lib.data_models.constants import (
    ACCEPT_PARAM,
    TEXT_PARAM,
    VOICE_PARAM,
    VOICES_FIELD,
    HttpHeaders,
)
from lang_services_lib.data_models.text_to_speech import AudioFormat, Voice
from lang_services_lib.services import converters
from lang_services_lib.services.service_call import ServiceCall
from lang_services_lib.services.service_interface import BaseService
from lang_services_lib.utils import validators
from lang_services_lib.utils.request_builder import RequestBuilder


class TextToSpeech(BaseService):
    """
    Text to Speech ``/v1`` API: lists voices and synthesizes audio.

    >>> tts = TextToSpeech(username="USERNAME", password="PASSWORD")
    >>> audio = tts.synthesize("hello", audio_format=AudioFormat.OGG).execute()
    """

    service_name = "text_to_speech"
    default_url = "https://stream.watsonplatform.net/text-to-speech/api"

    PATH_VOICES = "/v1/voices"
    PATH_VOICE = "/v1/voices/{}"
    PATH_SYNTHESIZE = "/v1/synthesize"

    def get_voices(self) -> ServiceCall[List[Voice]]:
        request = RequestBuilder.get(self.PATH_VOICES).build()
        return self.create_service_call(
            request, converters.get_generic_object(Voice, VOICES_FIELD)
        )

    def get_voice(self, voice_name: str) -> ServiceCall[Voice]:
        validators.not_empty(voice_name, "voice_name cannot be null or empty")
        request = RequestBuilder.get(self.PATH_VOICE.format(voice_name)).build()
        return self.create_service_call(request, converters.get_object(Voice))

    def synthesize(
        self,
        text: str,
        voice: Optional[str] = None,
        audio_format: AudioFormat = AudioFormat.WAV,
    ) -> ServiceCall[bytes]:
        """
        Synthesize ``text`` into audio bytes of the requested format.

        ``voice`` defaults to the service's default voice when omitted.
        """
        validators.not_empty(text, "text cannot be null or empty")
        validators.not_null(audio_format, "audio_format cannot be null")

        builder = RequestBuilder.post(self.PATH_SYNTHESIZE)
        if voice:
            builder.with_query(VOICE_PARAM, voice)
        builder.with_query(ACCEPT_PARAM, str(audio_format))
        builder.with_header(HttpHeaders.ACCEPT, str(audio_format))
        builder.with_body_json({TEXT_PARAM: text})

        return self.create_service_call(builder.build(), converters.get_binary())
