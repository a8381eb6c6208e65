"""Command-line entry point for the model generator.

Usage::

    scgen-model widgets/button
    scgen-model widgets/button Button --author "Jane Doe"
    python -m scgen.cli widgets/button --loc frameworks/widgets --pretend
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from jinja2 import TemplateError
from pydantic import ValidationError

from scgen.config import GeneratorConfig
from scgen.scaffolder.generator import GeneratorUsageError, ModelGenerator
from scgen.scaffolder.manifest import LocationNotFound
from scgen.utils import console, print_error, print_success


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scgen-model",
        description="Creates a model object with its fixture and unit test",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  scgen-model contacts/contact\n"
            "  scgen-model contacts/contact Contact --author 'Jane Doe'\n"
            "  scgen-model contact --loc clients/contacts --pretend\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default="",
        help="Model name, optionally prefixed with its client: client_name/model_name",
    )
    parser.add_argument(
        "class_name",
        nargs="?",
        default=None,
        help="Class name to use instead of the one derived from the model name",
    )
    parser.add_argument(
        "--loc", "-l",
        dest="location",
        default=None,
        help="Location of build. If not passed, search clients and frameworks dirs",
    )
    parser.add_argument(
        "--author",
        default=None,
        help="Author name written into the generated model",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Project root directory (default: current directory)",
    )
    parser.add_argument(
        "--pretend", "-p",
        action="store_true",
        help="Print the planned files without writing anything",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress per-file output",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``scgen-model`` and ``python -m scgen.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = GeneratorConfig.from_env(
            project_root=Path(args.root) if args.root else None,
            location_override=args.location,
            author=args.author,
            pretend=args.pretend,
            quiet=args.quiet,
        )
    except ValidationError as exc:
        print_error(f"Error: invalid configuration: {exc}")
        sys.exit(1)

    generator = ModelGenerator(config)

    try:
        written = generator.generate(args.name, args.class_name)
    except GeneratorUsageError as exc:
        print_error(f"Error: {exc}")
        console.print(parser.format_usage(), markup=False)
        sys.exit(1)
    except LocationNotFound as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    except (OSError, TemplateError) as exc:
        print_error(f"Error: generation stopped: {exc}")
        sys.exit(1)

    if written and not config.quiet:
        print_success(f"Generated {len(written)} files.")


if __name__ == "__main__":
    main()
