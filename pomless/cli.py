"""
pomless.cli - pomless Command Line Interface

Subcommands:

- pomless locate <dir>           Show which descriptor describes a directory
- pomless show <dir>             Print the synthesized model as JSON
- pomless pom <dir> [-o FILE]    Print (or write) the model as a POM

Global flags:
- pomless -v ...                 Debug logging
- pomless --max-depth N ...      Limit the parent walk
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pomless.config import ReaderSettings
from pomless.errors import ModelError


def _make_reader(args: argparse.Namespace):
    from pomless.reader import ModelReader

    settings = ReaderSettings.from_env()
    if args.max_depth is not None:
        settings = ReaderSettings(max_parent_depth=args.max_depth)
    return ModelReader(settings=settings)


def cmd_locate(args: argparse.Namespace) -> int:
    """Print the descriptor kind and file of a directory."""
    from pomless.locator import DescriptorLocator

    descriptor = DescriptorLocator().locate(Path(args.directory))
    if descriptor is None:
        print(f"Error: no descriptor found in {args.directory}", file=sys.stderr)
        return 1
    print(f"{descriptor.kind.value}\t{descriptor.path}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Print the synthesized model as JSON."""
    try:
        model = _make_reader(args).synthesize(args.directory)
    except (ModelError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(model.to_dict(), indent=2))
    return 0


def cmd_pom(args: argparse.Namespace) -> int:
    """Render the synthesized model as a POM."""
    from pomless.pom import render_pom, write_pom

    try:
        model = _make_reader(args).synthesize(args.directory)
    except (ModelError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            path = write_pom(model, Path(args.output))
        except OSError as e:
            print(f"Error writing {args.output}: {e}", file=sys.stderr)
            return 1
        print(f"✓ Wrote {path}")
    else:
        sys.stdout.write(render_pom(model))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="pomless",
        description="Synthesize build models from Eclipse project descriptors",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        metavar="N",
        help="Maximum number of parent levels to resolve",
    )

    subparsers = parser.add_subparsers(dest="subcommand", title="commands")

    locate_parser = subparsers.add_parser(
        "locate", help="Show the descriptor found in a project directory"
    )
    locate_parser.add_argument("directory", help="Project directory")

    show_parser = subparsers.add_parser("show", help="Print the project model as JSON")
    show_parser.add_argument("directory", help="Project directory")

    pom_parser = subparsers.add_parser("pom", help="Render the project model as a POM")
    pom_parser.add_argument("directory", help="Project directory")
    pom_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the POM to this file instead of standard output",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the pomless CLI. Calls sys.exit with return code."""
    sys.exit(_main(argv))


def _main(argv: Optional[list[str]] = None) -> int:
    """Internal main that returns exit code."""
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.max_depth is not None and args.max_depth < 1:
        print("Error: --max-depth must be at least 1", file=sys.stderr)
        return 2

    if args.subcommand == "locate":
        return cmd_locate(args)
    elif args.subcommand == "show":
        return cmd_show(args)
    elif args.subcommand == "pom":
        return cmd_pom(args)

    parser.print_help()
    return 2


if __name__ == "__main__":
    main()
