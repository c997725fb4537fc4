#!/usr/bin/env python3
"""LogLens - Entry point"""

import argparse
import json
import sys

from rich.console import Console

from loglens import VERSION, LogAnalyzer, ParseFailure, print_report
from loglens.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="LogLens - Mixed-format log file analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", help="Log file to analyze (.log, .txt)")
    parser.add_argument("-o", "--output", help="Output file (JSON)")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("-n", "--rows", type=int, default=20,
                        help="Rows shown per table (0 for all)")
    parser.add_argument("--debug", action="store_true", help="Log skipped lines")
    parser.add_argument("--version", action="version", version=f"LogLens v{VERSION}")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.rows < 0:
        parser.error("--rows must be 0 or greater")

    console = Console()
    setup_logging(debug=args.debug, console=Console(stderr=True))

    analyzer = LogAnalyzer(console=None if args.json else console)

    try:
        result = analyzer.analyze_file(args.logfile)
    except ParseFailure as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    report = result.to_dict()
    if args.json:
        print(json.dumps(report, indent=2, default=str))
    else:
        print_report(result, console, rows=args.rows or None)

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(report, f, indent=2, default=str)
        if args.json:
            print(f"Report saved to: {args.output}", file=sys.stderr)
        else:
            console.print(f"\n[green]Report saved to:[/] {args.output}")


if __name__ == "__main__":
    main()
