#!/usr/bin/env python3
"""
RAG command line - ingest, query and serve

Usage:
    python -m rag.cli ingest notes.txt --metadata '{"source": "notes"}'
    python -m rag.cli ingest records.json --records       # JSON array, replaces the store
    python -m rag.cli ingest records.json --records --append
    python -m rag.cli query "watermelon" --mode extractive
    python -m rag.cli query                               # interactive
    python -m rag.cli reset
    python -m rag.cli serve --port 8000
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from common.exceptions import RagError
from common.logging_config import setup_logging

from .client import RagClient
from .config import RagConfig

logger = logging.getLogger(__name__)


def _print_json(payload) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def cmd_ingest(client: RagClient, args: argparse.Namespace) -> None:
    raw = Path(args.path).read_text(encoding="utf-8")
    if args.records:
        records = json.loads(raw)
        if args.append:
            count = client.append_records(records)
        else:
            count = client.init_records(records)
        _print_json({"ok": True, "count": count, "vectorStoreKey": client.store_key})
        return

    metadata = json.loads(args.metadata) if args.metadata else {"source": Path(args.path).name}
    result = client.ingest_text(raw, metadata, args.chunk_size, args.chunk_overlap)
    _print_json({"ok": True, **result.model_dump()})


def _run_query(client: RagClient, question: str, args: argparse.Namespace) -> None:
    options = {}
    if args.mode:
        options["answerMode"] = args.mode
    if args.top_k:
        options["topK"] = args.top_k
    if args.strict:
        options["strict"] = True
    result = client.query(question, **options)
    _print_json(result.to_response())


def cmd_query(client: RagClient, args: argparse.Namespace) -> None:
    if args.question:
        _run_query(client, args.question, args)
        return

    print("RAG CLI")
    print("Type a question, or 'exit' to quit.")
    while True:
        try:
            question = input("\n> ").strip()
        except EOFError:
            break
        if not question:
            continue
        if question.lower() in {"exit", "quit"}:
            break
        try:
            _run_query(client, question, args)
        except RagError as exc:
            print(f"Error: {exc}")


def cmd_reset(client: RagClient, args: argparse.Namespace) -> None:
    client.reset()
    _print_json({"ok": True, "vectorStoreKey": client.store_key})


def cmd_serve(client: RagClient, args: argparse.Namespace) -> None:
    import uvicorn

    from .app import create_app

    uvicorn.run(create_app(client=client), host=args.host, port=args.port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hybrid RAG engine")
    parser.add_argument("--env-file", default=None, help=".env file to load")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    ingest = sub.add_parser("ingest", help="ingest a text file or a JSON record array")
    ingest.add_argument("path")
    ingest.add_argument("--records", action="store_true", help="file holds a JSON array of records")
    ingest.add_argument("--append", action="store_true", help="append records instead of replacing")
    ingest.add_argument("--metadata", default=None, help="JSON object attached to every chunk")
    ingest.add_argument("--chunk-size", type=int, default=None)
    ingest.add_argument("--chunk-overlap", type=int, default=None)
    ingest.set_defaults(handler=cmd_ingest)

    query = sub.add_parser("query", help="ask a question (interactive without one)")
    query.add_argument("question", nargs="?", default=None)
    query.add_argument("--mode", choices=["none", "extractive", "llm", "documents", "answer"])
    query.add_argument("--top-k", type=int, default=None)
    query.add_argument("--strict", action="store_true")
    query.set_defaults(handler=cmd_query)

    reset = sub.add_parser("reset", help="delete the vector store")
    reset.set_defaults(handler=cmd_reset)

    serve = sub.add_parser("serve", help="run the HTTP service")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.set_defaults(handler=cmd_serve)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    client = RagClient(RagConfig.from_env(args.env_file))
    if client.is_mock:
        logger.info("No API key configured, running with the mock provider")
    try:
        args.handler(client, args)
    except (RagError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
