import os
import unittest
from unittest.mock import MagicMock, patch

from lang_services_lib import LanguageTranslation, TextToSpeech
from lang_services_lib.utils.request_builder import RequestBuilder
from tests.base import make_response


class TestServiceConfiguration(unittest.TestCase):
    def test_default_endpoints(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(
                LanguageTranslation().get_endpoint(),
                "https://gateway.watsonplatform.net/language-translation/api",
            )
            self.assertEqual(
                TextToSpeech().get_endpoint(),
                "https://stream.watsonplatform.net/text-to-speech/api",
            )

    def test_settings_from_environment(self):
        env = {
            "LANG_SERVICES_LANGUAGE_TRANSLATION_URL": "https://lt.example.test/api",
            "LANG_SERVICES_LANGUAGE_TRANSLATION_USERNAME": "env-user",
            "LANG_SERVICES_LANGUAGE_TRANSLATION_PASSWORD": "env-pass",
        }
        with patch.dict(os.environ, env, clear=True):
            service = LanguageTranslation()

        self.assertEqual(service.get_name(), "language_translation")
        self.assertEqual(service.get_endpoint(), "https://lt.example.test/api")
        self.assertEqual(service.http.session.auth, ("env-user", "env-pass"))

    def test_arguments_override_environment(self):
        env = {"LANG_SERVICES_TEXT_TO_SPEECH_URL": "https://env.example.test"}
        with patch.dict(os.environ, env, clear=True):
            service = TextToSpeech(endpoint="https://arg.example.test", api_key="k")

        self.assertEqual(service.get_endpoint(), "https://arg.example.test")
        self.assertEqual(service.http.session.headers["Authorization"], "Bearer k")

    def test_setters_rebuild_transport(self):
        service = LanguageTranslation(endpoint="https://old.example.test")
        old_http = service.http

        service.set_endpoint("https://new.example.test/api")
        service.set_username_and_password("u", "p")
        service.set_default_headers({"X-Watson-Learning-Opt-Out": "1"})
        service.http.session.send = MagicMock(return_value=make_response(json_body={}))
        service.http.send(RequestBuilder.get("/v2/models").build())

        self.assertIsNot(service.http, old_http)
        prepared = service.http.session.send.call_args[0][0]
        self.assertEqual(prepared.url, "https://new.example.test/api/v2/models")
        self.assertEqual(prepared.headers["X-Watson-Learning-Opt-Out"], "1")
        self.assertTrue(prepared.headers["User-Agent"].startswith("lang-services-python/"))
        self.assertTrue(prepared.headers["Authorization"].startswith("Basic "))

    def test_context_manager_shuts_down_pool(self):
        with LanguageTranslation(endpoint="https://example.test") as service:
            executor = service._get_executor()
        self.assertIsNone(service._executor)
        with self.assertRaises(RuntimeError):
            executor.submit(print)


if __name__ == "__main__":
    unittest.main()
