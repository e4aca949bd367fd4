import argparse
import logging
import sys
from pathlib import Path

from ordquiz.config import (
    GEMINI_API_KEY,
    GEMINI_MODEL,
    GEMINI_PROBE_MODELS,
    INGEST_DELAY_SECONDS,
    MANIFEST_PATH,
    PDF_BASE_URL,
    PDF_DIR,
    QUESTION_BANK_PATH,
    QUIZ_API_URL,
)
from ordquiz.logging_setup import setup_console_logging

setup_console_logging()
log = logging.getLogger("cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="HP ORD quiz tools")
    sub = parser.add_subparsers(dest="command", required=True)

    download = sub.add_parser("download", help="Download exam PDFs listed in the manifest")
    download.add_argument("--manifest", type=Path, default=MANIFEST_PATH)
    download.add_argument("--pdf-dir", type=Path, default=PDF_DIR)
    download.add_argument("--base-url", default=PDF_BASE_URL)

    ingest = sub.add_parser("ingest", help="Extract ORD questions from downloaded PDFs")
    ingest.add_argument("--manifest", type=Path, default=MANIFEST_PATH)
    ingest.add_argument("--pdf-dir", type=Path, default=PDF_DIR)
    ingest.add_argument(
        "--output",
        type=Path,
        default=QUESTION_BANK_PATH,
        help="Question bank file to write",
    )
    ingest.add_argument("--model", default=GEMINI_MODEL)
    ingest.add_argument("--delay", type=float, default=INGEST_DELAY_SECONDS)

    check = sub.add_parser("check-models", help="Find a Gemini model that answers")
    check.add_argument("models", nargs="*", default=GEMINI_PROBE_MODELS)

    play = sub.add_parser("play", help="Play in the terminal against a running server")
    play.add_argument("--url", default=QUIZ_API_URL)
    play.add_argument("--name", default=None, help="Guest name for the leaderboard")
    play.add_argument("--token", default=None, help="Identity token of a signed-in player")

    serve = sub.add_parser("serve", help="Run the quiz web service")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser.parse_args(argv)


def _require_api_key() -> None:
    if not GEMINI_API_KEY:
        log.error("Missing GEMINI_API_KEY in environment")
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    if args.command == "download":
        from pdf_download import download_manifest

        saved = download_manifest(args.manifest, args.pdf_dir, args.base_url)
        print(f"Saved {len(saved)} PDFs to {args.pdf_dir}")

    elif args.command == "ingest":
        _require_api_key()
        from ord_extract import run_manifest
        from ordquiz.services.generation_service import GeminiModel

        model = GeminiModel(GEMINI_API_KEY, args.model)
        items = run_manifest(
            args.manifest,
            args.pdf_dir,
            args.output,
            model,
            delay_seconds=args.delay,
        )
        print(f"Saved {len(items)} questions to {args.output}")

    elif args.command == "check-models":
        _require_api_key()
        from ordquiz.services.generation_service import probe_models

        print("Testing model names...")
        working = probe_models(args.models, GEMINI_API_KEY)
        if working is None:
            print("No model answered")
            sys.exit(1)
        print(f"Model {working} works!")

    elif args.command == "play":
        from ordquiz.client import QuizApiClient
        from ordquiz.client.terminal import TerminalQuiz

        client = QuizApiClient(args.url, token=args.token)
        TerminalQuiz(client, guest_name=args.name).run()

    elif args.command == "serve":
        import uvicorn

        uvicorn.run(
            "ordquiz.app:app",
            host=args.host,
            port=args.port,
            log_level="info",
        )


if __name__ == "__main__":
    main()
