"""Command line interface for the greg loader generator."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError, GregError
from .manifest import resolve
from .output import assemble
from .registry import load_registry
from .template import render_template
from .types import Profile, Target, Version

logger = logging.getLogger(__name__)

TEMPLATES = ["greg.h", "greg.c"]


def parse_version(raw: str) -> Version:
    """Parse a version ceiling such as "3.3" or "4"."""
    major, _, minor = raw.partition(".")
    try:
        return Version(int(major), int(minor or 0))
    except ValueError:
        raise ConfigurationError(f"Invalid version: {raw}") from None


def parse_extensions(raw: str) -> frozenset[str]:
    """Parse a comma-separated list of extension names."""
    return frozenset(name.strip() for name in raw.split(",") if name.strip())


def _version_arg(raw: str) -> Version:
    try:
        return parse_version(raw)
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="greg", description="Generate an OpenGL extension loader"
    )
    parser.add_argument(
        "--api", default="gl", help="client API to generate loader for (default: gl)"
    )
    parser.add_argument(
        "--core", action="store_true", help="use the core profile (OpenGL only)"
    )
    parser.add_argument(
        "--version",
        type=_version_arg,
        default=Version(4, 4),
        help="highest API version to generate for (default: 4.4)",
    )
    parser.add_argument(
        "--extensions",
        type=parse_extensions,
        default=frozenset(),
        help="comma-separated list of extensions to generate for",
    )
    parser.add_argument(
        "--spec", type=Path, default=Path("spec/gl.xml"), help="Path to gl.xml file"
    )
    parser.add_argument(
        "--templates",
        type=Path,
        default=Path("templates"),
        help="Directory containing greg.h.in and greg.c.in",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Output directory for generated files",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Report accepted versions and extensions"
    )
    return parser


def generate(target: Target, spec: Path, templates: Path) -> dict[str, str]:
    """Generate the contents of every output file, keyed by file name."""
    root = load_registry(spec)
    manifest = resolve(root, target)
    logger.info("Manifest: %s", manifest.summary())

    bindings = assemble(manifest, target, root).bindings()
    return {
        name: render_template(templates / f"{name}.in", bindings) for name in TEMPLATES
    }


def write_outputs(output_dir: Path, contents: dict[str, str]) -> None:
    """Write every output file, or none of them.

    Files are staged next to their destination and only moved into place
    once all of them have been written. If a move fails, files already
    moved by this call are removed again.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    staged = {}
    written = []
    try:
        for name, content in contents.items():
            path = output_dir / f"{name}.tmp"
            staged[name] = path
            path.write_text(content, encoding="utf-8")
        for name, path in staged.items():
            path.replace(output_dir / name)
            written.append(output_dir / name)
    except OSError:
        for path in written + list(staged.values()):
            if path.is_file():
                path.unlink()
        raise


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    target = Target(
        api=args.api,
        version=args.version,
        profile=Profile.CORE if args.core else None,
        extensions=args.extensions,
    )

    profile = " core" if target.profile else ""
    print(f"Generating {target.api} {target.version}{profile} loader...")

    # Render everything before writing so a failure leaves no partial output
    try:
        contents = generate(target, args.spec, args.templates)
        write_outputs(args.output_dir, contents)
    except (GregError, OSError) as e:
        print(e)
        sys.exit(1)

    print(f"Output written to: {args.output_dir}")


if __name__ == "__main__":
    main()
