"""
Command‑line front‑end for the language services.

Each sub‑command maps to one client method, executes it synchronously and
prints the result as JSON on standard output (synthesized audio is written to
the file given with ``-o``).  Credentials and endpoints default to the
``LANG_SERVICES_*`` environment variables read by the clients.

---

# Quick ways to run the script

1. Translate with a source and target language

>>> lang-services translate "Hello world" --source en --target es

2. Translate with a custom model

>>> lang-services translate "Hello world" --model-id en-es-conversational

3. Identify the language of a text read from STDIN

>>> echo "Bonjour tout le monde" | lang-services identify

4. List default models from English

>>> lang-services models --default --source en

5. Synthesize speech

>>> lang-services synthesize "Hello" -o hello.ogg --format ogg
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from pydantic import BaseModel

from lang_services_lib import (
    AudioFormat,
    LangServicesError,
    LanguageTranslation,
    TextToSpeech,
)
from lang_services_lib.utils.logger import prepare_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lang-services",
        description="Translate, identify and synthesize text with remote services.",
    )
    parser.add_argument("--url", help="Service endpoint (overrides environment).")
    parser.add_argument("--username", help="HTTP basic username.")
    parser.add_argument("--password", help="HTTP basic password.")
    parser.add_argument("--apikey", help="Bearer API key.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log requests to STDERR."
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_translate = sub.add_parser("translate", help="Translate text.")
    p_translate.add_argument("text", nargs="?", help="Text (defaults to STDIN).")
    p_translate.add_argument("--model-id", help="Translation model identifier.")
    p_translate.add_argument("--source", help="Source language code.")
    p_translate.add_argument("--target", help="Target language code.")

    p_identify = sub.add_parser("identify", help="Identify the language of text.")
    p_identify.add_argument("text", nargs="?", help="Text (defaults to STDIN).")

    sub.add_parser("languages", help="List identifiable languages.")

    p_models = sub.add_parser("models", help="List translation models.")
    p_models.add_argument(
        "--default",
        dest="show_default",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only default (or, with --no-default, only custom) models.",
    )
    p_models.add_argument("--source", help="Filter by source language.")
    p_models.add_argument("--target", help="Filter by target language.")

    p_synth = sub.add_parser("synthesize", help="Synthesize speech from text.")
    p_synth.add_argument("text", nargs="?", help="Text (defaults to STDIN).")
    p_synth.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        required=True,
        help="Audio output file, written only when synthesis succeeds.",
    )
    p_synth.add_argument("--voice", help="Voice name.")
    p_synth.add_argument(
        "--format",
        dest="audio_format",
        choices=[f.name.lower() for f in AudioFormat],
        default="wav",
        help="Audio format (default: wav).",
    )
    return parser


def _read_text(text: Optional[str]) -> str:
    if text is not None:
        return text
    return sys.stdin.read().strip()


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(exclude_none=True)
    if isinstance(result, list):
        return [_to_jsonable(r) for r in result]
    return result


def _service_kwargs(args: argparse.Namespace, logger: logging.Logger) -> dict:
    return {
        "endpoint": args.url,
        "username": args.username,
        "password": args.password,
        "api_key": args.apikey,
        "logger": logger,
    }


def run(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = prepare_logger(
        "lang_services_cli", logging.DEBUG if args.verbose else logging.WARNING
    )
    kwargs = _service_kwargs(args, logger)

    try:
        if args.command == "synthesize":
            with TextToSpeech(**kwargs) as tts:
                audio = tts.synthesize(
                    _read_text(args.text),
                    voice=args.voice,
                    audio_format=AudioFormat.from_name(args.audio_format),
                ).execute()
            with open(args.output, "wb") as f:
                f.write(audio)
            return 0

        with LanguageTranslation(**kwargs) as service:
            if args.command == "translate":
                call = service.translate(
                    _read_text(args.text),
                    model_id=args.model_id,
                    source=args.source,
                    target=args.target,
                )
            elif args.command == "identify":
                call = service.identify(_read_text(args.text))
            elif args.command == "languages":
                call = service.get_identifiable_languages()
            else:
                call = service.get_models(
                    show_default=args.show_default,
                    source=args.source,
                    target=args.target,
                )
            result = call.execute()
    except LangServicesError as exc:
        logger.error("%s", exc)
        return 1

    json.dump(_to_jsonable(result), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
