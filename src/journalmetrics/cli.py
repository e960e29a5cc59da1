"""Command line entry points for journalmetrics."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from journalmetrics.api.schemas import serialize_records
from journalmetrics.config import Settings, get_settings
from journalmetrics.ingestion import DirectoryJournalLoader, JournalError, LoaderConfig
from journalmetrics.services.report import ReportService


def run_report(
    directory: Path | None = None,
    *,
    settings: Settings | None = None,
    json_out: Path | None = None,
) -> list[dict]:
    settings = settings or get_settings()
    loader = DirectoryJournalLoader(
        Path(directory).expanduser() if directory else settings.resolved_journal_dir,
        LoaderConfig(file_extension=settings.file_extension, encoding=settings.encoding),
    )
    records = ReportService(loader).build_report()
    payload = serialize_records(records, extended=settings.include_extended_metrics)
    if json_out:
        json_out.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return payload


def _serve(args: argparse.Namespace, settings: Settings) -> int:
    import uvicorn

    host = args.host if args.host is not None else settings.host
    port = args.port if args.port is not None else settings.port
    print(f"Server is listening on port {port}")
    uvicorn.run("journalmetrics.api.app:app", host=host, port=port, log_level=settings.log_level.lower())
    return 0


def _report(args: argparse.Namespace, settings: Settings) -> int:
    try:
        payload = run_report(args.directory, settings=settings, json_out=args.json_out)
    except JournalError as exc:
        print(f"Error reading markdown files: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(payload, indent=2))
    return 0


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Daily journal metrics.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Serve the metrics report over HTTP")
    serve.add_argument("--host", type=str, default=None, help="Interface to bind (defaults to settings)")
    serve.add_argument("--port", type=int, default=None, help="Port to listen on (defaults to settings)")

    report = subparsers.add_parser("report", help="Print the metrics report as JSON")
    report.add_argument("--directory", type=Path, default=None, help="Journal directory to scan")
    report.add_argument("--json-out", type=Path, default=None, help="Optional path to write the JSON report")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    settings = get_settings()
    if args.command == "serve":
        return _serve(args, settings)
    return _report(args, settings)


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    sys.exit(main())
