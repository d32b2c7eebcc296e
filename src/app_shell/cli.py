import argparse
import json
import logging
import sys
from pathlib import Path

from src.app_shell.context import IndexContext
from src.components.loader import DataFileLoadError, LoadInput, LoadReport, run_load
from src.rules.loader import load_rules, resolve_rules_path
from src.rules.models import Rules

logger = logging.getLogger("cli")


def configure_logging(rules: Rules, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, rules.logging.level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=rules.logging.format)


def get_context(args: argparse.Namespace) -> IndexContext:
    rules_path = resolve_rules_path(args.rules)
    if not rules_path.exists():
        logger.error(f"Rules file {rules_path} not found.")
        sys.exit(1)

    rules = load_rules(rules_path)
    configure_logging(rules, args.verbose)
    return IndexContext.create(Path(args.root), rules)


def load_index(ctx: IndexContext, strict: bool) -> LoadReport:
    # Files are buffered first, then drained into the index when the hook goes in
    report = run_load(LoadInput(strict=strict or ctx.rules.datafiles.strict), ctx.loader)
    ctx.install_index()
    return report


def handle_load(ctx: IndexContext, args: argparse.Namespace) -> int:
    try:
        report = load_index(ctx, args.strict)
    except (DataFileLoadError, FileNotFoundError) as e:
        logger.error(str(e))
        return 1

    summary = {
        "files": len(report.registered),
        "failures": [
            {"path": failure.relpath, "errors": [e.code for e in failure.errors]}
            for failure in report.failures
        ],
        "traits": ctx.index.summary(),
    }
    print(json.dumps(summary, indent=2))
    return 0 if report.success else 1


def handle_show(ctx: IndexContext, args: argparse.Namespace) -> int:
    try:
        load_index(ctx, args.strict)
    except (DataFileLoadError, FileNotFoundError) as e:
        logger.error(str(e))
        return 1

    descriptors = ctx.index.implementors_of(args.trait)
    if not descriptors:
        logger.error(f"No implementors found for {args.trait}.")
        return 1

    for descriptor in descriptors:
        print(descriptor)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Trait implementors index")
    parser.add_argument("--rules", help="Path to rules.yaml (default: $IMPL_RULES_PATH or ./rules.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # load
    load_parser = subparsers.add_parser("load", help="Load data files and print a summary")
    load_parser.add_argument("root", help="Directory holding implementors data files")
    load_parser.add_argument("--strict", action="store_true", help="Fail on the first bad file")

    # show
    show_parser = subparsers.add_parser("show", help="Print the implementors of one trait")
    show_parser.add_argument("root", help="Directory holding implementors data files")
    show_parser.add_argument("trait", help="Trait path, e.g. core::ops::Mul")
    show_parser.add_argument("--strict", action="store_true", help="Fail on the first bad file")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    ctx = get_context(args)

    if args.command == "load":
        return handle_load(ctx, args)
    elif args.command == "show":
        return handle_show(ctx, args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
