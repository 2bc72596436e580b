import io
import json
import os
import tempfile
import unittest
from unittest.mock import MagicMock, patch

from lang_services_cli import translate as cli
from lang_services_lib import AudioFormat, NotFoundError
from lang_services_lib.data_models.language_translation import (
    IdentifiedLanguage,
    TranslationModel,
    TranslationResult,
)


class TestCli(unittest.TestCase):
    def setUp(self):
        patcher = patch.object(cli, "LanguageTranslation")
        self.service_cls = patcher.start()
        self.addCleanup(patcher.stop)
        self.service = self.service_cls.return_value.__enter__.return_value

    def run_cli(self, argv):
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = cli.run(argv)
        return code, out.getvalue()

    def test_translate_with_languages(self):
        self.service.translate.return_value.execute.return_value = TranslationResult(
            word_count=1, character_count=5, translations=[{"translation": "hola"}]
        )

        code, out = self.run_cli(
            ["--username", "u", "translate", "hello", "--source", "en", "--target", "es"]
        )

        self.assertEqual(code, 0)
        self.service.translate.assert_called_once_with(
            "hello", model_id=None, source="en", target="es"
        )
        self.assertEqual(json.loads(out)["translations"], [{"translation": "hola"}])
        self.assertEqual(self.service_cls.call_args[1]["username"], "u")

    def test_identify_reads_stdin(self):
        self.service.identify.return_value.execute.return_value = [
            IdentifiedLanguage(language="fr", confidence=0.97)
        ]

        with patch("sys.stdin", io.StringIO("Bonjour\n")):
            code, out = self.run_cli(["identify"])

        self.assertEqual(code, 0)
        self.service.identify.assert_called_once_with("Bonjour")
        self.assertEqual(json.loads(out), [{"language": "fr", "confidence": 0.97}])

    def test_models_filters(self):
        self.service.get_models.return_value.execute.return_value = [
            TranslationModel(model_id="en-es", source="en", target="es")
        ]

        code, out = self.run_cli(["models", "--no-default", "--source", "en"])

        self.assertEqual(code, 0)
        self.service.get_models.assert_called_once_with(
            show_default=False, source="en", target=None
        )
        self.assertEqual(json.loads(out)[0]["model_id"], "en-es")

    def test_service_error_returns_non_zero(self):
        self.service.get_identifiable_languages.return_value.execute.side_effect = (
            NotFoundError(404, "gone")
        )

        code, out = self.run_cli(["languages"])

        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_synthesize_writes_audio_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "hello.ogg")
            with patch.object(cli, "TextToSpeech") as tts_cls:
                tts = tts_cls.return_value.__enter__.return_value
                tts.synthesize.return_value.execute.return_value = b"OggS"

                code, _ = self.run_cli(
                    ["synthesize", "hello", "-o", path, "--format", "ogg"]
                )

            self.assertEqual(code, 0)
            tts.synthesize.assert_called_once_with(
                "hello", voice=None, audio_format=AudioFormat.OGG
            )
            with open(path, "rb") as f:
                self.assertEqual(f.read(), b"OggS")

    def test_failed_synthesize_leaves_no_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "out.wav")
            with patch.object(cli, "TextToSpeech") as tts_cls:
                tts = tts_cls.return_value.__enter__.return_value
                tts.synthesize.return_value.execute.side_effect = NotFoundError(
                    404, "no voice"
                )

                code, out = self.run_cli(["synthesize", "hello", "-o", path])

            self.assertEqual(code, 1)
            self.assertEqual(out, "")
            self.assertFalse(os.path.exists(path))


if __name__ == "__main__":
    unittest.main()
