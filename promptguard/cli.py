"""
Command-line front end for the scanner.

Reads text from an argument, a file or stdin and prints either a summary,
the full result as JSON, or the redacted text.

Exit codes:
    0 - safe to send, or review suggested
    1 - redaction or blocking recommended
    2 - usage or configuration error
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from .config import ScannerConfig
from .core.exceptions import ConfigurationError
from .core.logging_config import configure_scan_logging
from .scanners import SecurityScanner, SensitivityLevel

logger = logging.getLogger("promptguard.cli")

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promptguard",
        description="Scan text for secrets and personal data before sending it to a language model.",
    )
    parser.add_argument("text", nargs="?", help="Text to scan (reads stdin when omitted)")
    parser.add_argument("--file", help="Path to a UTF-8 text file to scan")
    parser.add_argument(
        "--sensitivity",
        choices=[level.value for level in SensitivityLevel],
        help="Which severities to report (default: from PROMPTGUARD_SENSITIVITY, else high)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--redact", action="store_true", help="Print the redacted text")
    output.add_argument("--json", action="store_true", help="Print the full scan result as JSON")
    return parser


def read_input(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def format_summary(summary: dict) -> str:
    lines = [
        f"Score: {summary['score']}/100 (grade {summary['grade']})",
        f"Issues: {summary['totalIssues']}",
    ]
    counts = [f"{name} {count}" for name, count in summary["severityCounts"].items() if count]
    lines.append(f"Severity: {', '.join(counts) if counts else 'none'}")
    for finding in summary["findings"]:
        lines.append(
            f"  [{finding['severity']}] {finding['type']}: "
            f"{finding['preview']} -> {finding['suggestion']}"
        )
    recommendation = summary["recommendation"]
    lines.append(f"{recommendation['message']} (action: {recommendation['action']})")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ScannerConfig.from_env()
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    configure_scan_logging(log_file=config.log_file, log_level=config.log_level)

    try:
        text = read_input(args)
    except (OSError, UnicodeDecodeError) as e:
        print(f"ERROR: could not read {args.file}: {e}", file=sys.stderr)
        return EXIT_ERROR

    scanner = SecurityScanner.from_config(config)
    result = scanner.scan(text, args.sensitivity)

    if args.redact:
        sys.stdout.write(scanner.redact(text, result.findings))
    elif args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_summary(scanner.get_summary(result)))

    if result.recommendation.action in ("redact", "block"):
        return EXIT_FINDINGS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
