"""kueueleuleu — make the containers of Pods, Jobs and CronJobs run one after the other."""

import argparse
import os
import sys

import yaml

from kueueleuleu import __version__
from kueueleuleu.config import load_config
from kueueleuleu.core.constants import DEFAULT_CONFIG_FILE
from kueueleuleu.core.convert import convert_manifests
from kueueleuleu.pacts.errors import KueueleuleuError


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_manifests(stream) -> list:
    """Load every YAML document from an open text stream."""
    try:
        return list(yaml.safe_load_all(stream))
    except yaml.YAMLError as e:
        raise KueueleuleuError(f"cannot read YAML: {e}") from e


def read_manifests(path: str) -> list:
    """Load manifests from a file, or from stdin when path is '-'."""
    if path == "-":
        return parse_manifests(sys.stdin)
    try:
        with open(path, encoding="utf-8") as f:
            return parse_manifests(f)
    except OSError as e:
        raise KueueleuleuError(f"cannot open file: {e}") from e


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def dump_manifests(manifests: list[dict]) -> str:
    """Serialize manifests as a YAML stream, each document introduced by '---'."""
    return "".join(
        "---\n" + yaml.dump(m, default_flow_style=False, sort_keys=False)
        for m in manifests
    )


def write_output(text: str, output: str | None) -> None:
    """Write to the output file, or to stdout."""
    if not output:
        sys.stdout.write(text)
        return
    with open(output, "w", encoding="utf-8") as f:
        f.write(text)
    print(f"Wrote {output}", file=sys.stderr)


def emit_warnings(warnings: list[str]) -> None:
    """Print all warnings to stderr."""
    for w in warnings:
        print(f"⚠ {w}", file=sys.stderr)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kueueleuleu",
        description="Convert Pods, Jobs and CronJobs so their containers run sequentially",
        epilog="Report bugs to: <https://github.com/norbjd/kueueleuleu/issues>",
    )
    parser.add_argument(
        "-f", "--file",
        help="Path to YAML file or - (stdin)",
    )
    parser.add_argument(
        "-o", "--output",
        help="Write converted manifests to this file (default: stdout)",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG_FILE,
        help=f"Configuration file (default: {DEFAULT_CONFIG_FILE}, optional)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
        help="Output version information and exit",
    )
    return parser


def main(argv=None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.file:
        parser.error("input is not set (use -f FILE or -f -)")

    warnings: list[str] = []
    try:
        config = load_config(args.config, warnings)
        manifests = read_manifests(args.file)
        converted = convert_manifests(manifests, config, warnings)
    except KueueleuleuError as e:
        emit_warnings(warnings)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    emit_warnings(warnings)
    if not converted:
        print("No manifests found — nothing to write.", file=sys.stderr)
        return 0

    if args.output:
        os.makedirs(os.path.dirname(os.path.abspath(args.output)), exist_ok=True)
    write_output(dump_manifests(converted), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
