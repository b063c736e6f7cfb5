"""Command-line interface for scoring resume documents."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from .config import DEFAULT_CONFIG_PATH, load_config
from .domain import InvalidDocumentError, format_ats_report, sample_resume
from .engine import ScoringEngine
from .observability import ScoringObserver, setup_logging

console = Console()
err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_BLOCKED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-ats",
        description="Resume ATS - deterministic resume scoring and export readiness",
    )
    parser.add_argument(
        "--config", "-c",
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log scoring computations",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    score = sub.add_parser("score", help="Print the ATS breakdown for a resume")
    score.add_argument("file", help="Resume JSON file, or - for stdin")
    score.add_argument("--json", action="store_true", help="Emit the breakdown as JSON")

    readiness = sub.add_parser("readiness", help="Print the export readiness checklist")
    readiness.add_argument("file", help="Resume JSON file, or - for stdin")
    readiness.add_argument("--json", action="store_true", help="Emit the result as JSON")

    export_check = sub.add_parser("export-check", help="Check whether the resume may be exported")
    export_check.add_argument("file", help="Resume JSON file, or - for stdin")
    export_check.add_argument("--min-score", type=int, default=None, help="Minimum ATS score (default: from config)")

    tips = sub.add_parser("tips", help="Print per-section improvement tips")
    tips.add_argument("file", help="Resume JSON file, or - for stdin")

    sub.add_parser("sample", help="Print the built-in sample resume as JSON")
    return parser


def load_document(path: str) -> Any:
    """Read a JSON resume document from *path* (``-`` reads stdin)."""
    if path == "-":
        return json.load(sys.stdin)
    with open(Path(path), encoding="utf-8") as f:
        return json.load(f)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    # RESUME_ATS_* overrides may come from a .env file
    load_dotenv()

    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ValueError as e:
        err_console.print(f"Invalid configuration: {e}", style="red")
        return EXIT_USAGE
    if args.verbose:
        config.verbose = True
    setup_logging(config.verbose)

    if args.command == "sample":
        _print_json(sample_resume())
        return EXIT_OK

    try:
        document = load_document(args.file)
    except FileNotFoundError:
        err_console.print(f"File not found: {args.file}", style="red")
        return EXIT_USAGE
    except json.JSONDecodeError as e:
        err_console.print(f"Invalid JSON in {args.file}: {e}", style="red")
        return EXIT_USAGE
    except UnicodeDecodeError as e:
        err_console.print(f"Not UTF-8 text: {args.file} ({e})", style="red")
        return EXIT_USAGE
    except OSError as e:
        err_console.print(f"Cannot read {args.file}: {e.strerror or e}", style="red")
        return EXIT_USAGE

    engine = ScoringEngine(config=config, observer=ScoringObserver(source="cli"))
    try:
        code = _run_command(args, engine, document)
    except InvalidDocumentError as e:
        err_console.print(f"Invalid resume document: {e}", style="red")
        return EXIT_USAGE

    if config.verbose:
        err_console.print(engine.observer.summary_table())
    return code


def _run_command(args: argparse.Namespace, engine: ScoringEngine, document: Any) -> int:
    if args.command == "score":
        breakdown = engine.breakdown(document)
        if args.json:
            _print_json(breakdown.to_dict())
        else:
            console.print(Markdown(format_ats_report(breakdown)))
        return EXIT_OK

    if args.command == "readiness":
        result = engine.readiness(document)
        if args.json:
            _print_json(result.to_dict())
            return EXIT_OK
        status = "[green]READY[/green]" if result.is_ready_for_export else "[yellow]NOT READY[/yellow]"
        console.print(f"Readiness: {result.completeness_score}% {status}")
        for section in result.missing_sections:
            console.print(f"  - {section}")
        return EXIT_OK

    if args.command == "export-check":
        decision = engine.export_check(document, min_score=args.min_score)
        if decision.can_export:
            console.print(
                f"[green]Export allowed[/green] (ATS {decision.total_score}/100, "
                f"readiness {decision.readiness.completeness_score}%)"
            )
            return EXIT_OK
        console.print(
            f"[red]Export blocked[/red] (ATS {decision.total_score}/100, minimum {decision.min_score})"
        )
        for reason in decision.blocker_reasons:
            console.print(f"  - {reason}")
        return EXIT_BLOCKED

    if args.command == "tips":
        _print_tips(engine.tips(document))
        return EXIT_OK

    raise AssertionError(f"Unhandled command: {args.command}")


def _print_tips(tips: Dict[str, List[str]]) -> None:
    table = Table(title="Section Tips", show_lines=True)
    table.add_column("Section", style="bold")
    table.add_column("Tips")
    for section, items in tips.items():
        table.add_row(section, "\n".join(items) if items else "[dim]Looks good[/dim]")
    console.print(table)


def _print_json(data: Any) -> None:
    sys.stdout.write(json.dumps(data, indent=2, ensure_ascii=False) + "\n")


if __name__ == "__main__":
    sys.exit(main())
