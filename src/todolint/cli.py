"""Command-line interface for todolint."""

import argparse
import json
import logging
import sys

EXIT_CLEAN = 0
EXIT_FLAGGED = 1
EXIT_CONFIG_ERROR = 2


def _setup_logging(verbose: bool) -> None:
    from todolint.config import get_settings

    level = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _build_pipeline(args):
    from todolint.pipeline import LintPipeline

    return LintPipeline(
        terms=args.terms,
        location=args.location,
        url=args.url,
        discover_url=False if args.no_discover else None,
    )


def _print_report(report, as_json: bool) -> None:
    if as_json:
        print(json.dumps(report.to_dict(), indent=2))
        return

    for diagnostic in report.diagnostics:
        print(diagnostic)
    print(report.summary)


def cmd_check(args):
    """Check a single comment body."""
    from todolint.models.base import CommentKind

    pipeline = _build_pipeline(args)
    report = pipeline.analyze_text(args.text, kind=CommentKind(args.kind))
    _print_report(report, args.json)
    return EXIT_FLAGGED if report.flagged else EXIT_CLEAN


def cmd_scan(args):
    """Check every comment in Python source files."""
    pipeline = _build_pipeline(args)
    report = pipeline.analyze_paths(args.paths)
    _print_report(report, args.json)
    return EXIT_FLAGGED if report.flagged else EXIT_CLEAN


def cmd_rules(args):
    """List available rules."""
    from todolint.rules import RULE_REGISTRY

    print("\nAvailable Rules:")
    print("=" * 60)
    for name, cls in RULE_REGISTRY.items():
        doc = cls.__doc__.strip().split('\n')[0] if cls.__doc__ else "No description"
        print(f"\n  {name}")
        print(f"    Version: {cls.version}")
        print(f"    {doc}")
    print()
    return EXIT_CLEAN


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    uvicorn.run(
        "todolint.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return EXIT_CLEAN


def _add_rule_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--terms", "-t", nargs="+", default=None, help="Warning terms to search for")
    parser.add_argument("--location", "-l", default=None, help="Where terms must appear: start or anywhere")
    parser.add_argument("--url", "-u", default=None, help="Issue tracker reference that documents a comment")
    parser.add_argument("--no-discover", action="store_true", help="Do not read the tracker URL from package.json")
    parser.add_argument("--json", "-j", action="store_true", help="Output as JSON")


def main(argv=None):
    """Main CLI entry point."""
    from todolint.errors import ConfigurationError

    parser = argparse.ArgumentParser(
        description="todolint - Flag warning comments without an issue tracker reference"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser("check", help="Check a single comment body")
    check_parser.add_argument("text", help="Comment text, without delimiters")
    check_parser.add_argument("--kind", choices=["line", "block"], default="line", help="Comment kind")
    _add_rule_options(check_parser)

    # Scan command
    scan_parser = subparsers.add_parser("scan", help="Check comments in Python source files")
    scan_parser.add_argument("paths", nargs="+", help="Files or directories to scan")
    _add_rule_options(scan_parser)

    # List rules command
    subparsers.add_parser("rules", help="List available rules")

    # Server command
    server_parser = subparsers.add_parser("serve", help="Start the API server")
    server_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    server_parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    server_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    args = parser.parse_args(argv)

    commands = {
        "check": cmd_check,
        "scan": cmd_scan,
        "rules": cmd_rules,
        "serve": cmd_serve,
    }
    if args.command not in commands:
        parser.print_help()
        return EXIT_CONFIG_ERROR

    try:
        _setup_logging(args.verbose)
        return commands[args.command](args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
