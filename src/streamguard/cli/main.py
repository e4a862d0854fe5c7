from __future__ import annotations

"""
StreamGuard, M3U playlist tooling and IPTV stream liveness checks.
Copyright (C) 2025  Theori Inc.

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as published
by the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

"""StreamGuard CLI."""

import argparse
import json
import logging
import sys
from typing import Any

from ..commands import (
    check_streams,
    format_playlists,
    generate_api,
    generate_playlists,
    update_readme,
    validate_playlists,
)
from ..config import PathSettings, ProbeSettings, load_path_settings, load_probe_settings
from ..errors import StreamGuardError
from ..log import setup_logging
from ..models import BatchRun, ValidationReport
from ..playlist import PlaylistStore
from ..probe import TqdmProgress
from ..runtime import StreamGuard

logger = logging.getLogger(__name__)

MAX_LISTED_FAILURES = 10


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="streamguard", description="M3U playlist tooling and IPTV stream liveness checks")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $STREAMGUARD_LOG_LEVEL or WARNING)")
    groups = parser.add_subparsers(dest="group", required=True)

    playlist = groups.add_parser("playlist", help="Playlist commands").add_subparsers(dest="command", required=True)
    playlist.add_parser("format", help="Rewrite playlists in canonical form")
    playlist.add_parser("generate", help="Build the master playlist and per-category playlists")
    playlist.add_parser("validate", help="Check playlists for structural errors")

    test = playlist.add_parser("test", help="Probe every stream URL for liveness")
    test.add_argument("--concurrency", type=int, default=None, help="Probes in flight at once (default: 5)")
    test.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds (default: 5)")
    test.add_argument("--json", action="store_true", help="Output JSON instead of a human-friendly summary")
    test.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    test.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for self-signed stream servers)",
    )

    api = groups.add_parser("api", help="JSON API commands").add_subparsers(dest="command", required=True)
    api.add_parser("generate", help="Write streams.json, categories.json and stats.json")

    readme = groups.add_parser("readme", help="README commands").add_subparsers(dest="command", required=True)
    readme.add_parser("update", help="Refresh the README statistics block")
    return parser


def _print_json(data: dict[str, Any] | Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


def _print_test_report(run: BatchRun) -> None:
    failures = run.failures
    if failures:
        print("\nFailed streams:\n")
        for outcome in failures[:MAX_LISTED_FAILURES]:
            print(f"   {outcome.name}")
            print(f"   {outcome.url}")
            print(f"   {outcome.error or 'Connection failed'}\n")
        if len(failures) > MAX_LISTED_FAILURES:
            print(f"   ... and {len(failures) - MAX_LISTED_FAILURES} more\n")

    summary = run.summary()
    print("\nTest Summary:")
    print(f"✓ Successful: {summary.success_count}")
    print(f"✗ Failed: {summary.failed_count}")
    print(f"Total: {summary.total}")
    print(f"Success rate: {summary.format_rate()}")


def _print_validation_report(report: ValidationReport) -> None:
    print("Validation Results:\n")
    for result in report.results:
        mark = "✓" if result.valid else "✗"
        print(f"{mark} {result.file} ({result.streams_count} streams)")
        for error in result.errors:
            print(f"   error: {error}")
        for warning in result.warnings:
            print(f"   warning: {warning}")
        print()

    print("Summary:")
    print(f"Total playlists: {len(report.results)}")
    print(f"Valid playlists: {report.valid_count}")
    print(f"Total streams: {report.total_streams}")
    print(f"Errors: {report.total_errors}")
    print(f"Warnings: {report.total_warnings}")
    print("\nValidation failed!" if not report.ok else "\nAll playlists are valid!")


def _run_format(paths: PathSettings, _args: argparse.Namespace) -> int:
    formatted = format_playlists(PlaylistStore(paths.streams_dir))
    for name, count in formatted.items():
        print(f"✓ {name}: formatted {count} streams")
    print(f"\nFormatted {len(formatted)} playlist(s) successfully!")
    return 0


def _run_generate(paths: PathSettings, _args: argparse.Namespace) -> int:
    result = generate_playlists(PlaylistStore(paths.streams_dir), paths.output_dir)
    print(f"Master playlist: {result.master_path} ({result.total_streams} streams)")
    for category, count in result.categories.items():
        print(f"   {category}: {count} streams")
    print(f"\nGenerated {len(result.written)} playlists successfully!")
    return 0


def _run_validate(paths: PathSettings, _args: argparse.Namespace) -> int:
    report = validate_playlists(PlaylistStore(paths.streams_dir))
    _print_validation_report(report)
    return 0 if report.ok else 1


def _run_test(paths: PathSettings, args: argparse.Namespace) -> int:
    settings: ProbeSettings = load_probe_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False
    progress = TqdmProgress(file=sys.stderr, disable=args.no_progress or args.json)
    guard = StreamGuard(settings=settings, progress=progress)

    run = check_streams(
        PlaylistStore(paths.streams_dir),
        guard=guard,
        concurrency=args.concurrency,
        timeout=args.timeout,
    )
    if args.json:
        _print_json(run)
    else:
        _print_test_report(run)
    return 0


def _run_api(paths: PathSettings, _args: argparse.Namespace) -> int:
    documents = generate_api(PlaylistStore(paths.streams_dir), paths.api_dir)
    print(f"✓ streams.json ({documents.streams['total']} streams)")
    print(f"✓ categories.json ({documents.categories['total']} categories)")
    print("✓ stats.json")
    print(f"\nAPI generated successfully in {paths.api_dir}!")
    return 0


def _run_readme(paths: PathSettings, _args: argparse.Namespace) -> int:
    stats = update_readme(paths.stats_path, paths.readme_path)
    if stats is None:
        print('No stats.json found. Run "streamguard api generate" first.')
        return 0
    print(f"README updated: {stats.get('totalStreams', 0)} streams, {stats.get('totalCategories', 0)} categories")
    return 0


_HANDLERS = {
    ("playlist", "format"): _run_format,
    ("playlist", "generate"): _run_generate,
    ("playlist", "validate"): _run_validate,
    ("playlist", "test"): _run_test,
    ("api", "generate"): _run_api,
    ("readme", "update"): _run_readme,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if getattr(args, "concurrency", None) is not None and args.concurrency < 1:
        parser.error("--concurrency must be >= 1")
    if getattr(args, "timeout", None) is not None and args.timeout <= 0:
        parser.error("--timeout must be > 0")

    handler = _HANDLERS[(args.group, args.command)]
    try:
        return handler(load_path_settings(), args)
    except StreamGuardError as exc:
        logger.debug("Command %s %s failed", args.group, args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
