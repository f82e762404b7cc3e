"""
Entry point for the ReSlides command line.

This allows running the package with:
    python -m src.reslides build script.txt
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.config.loader import ConfigurationError, get_config_path
from src.config.settings import AppSettings, create_settings, get_settings
from src.services.packager import build_bundle, write_bundle
from src.services.pptx_export import export_pptx
from src.services.script_parser import parse_script
from src.services.script_serializer import serialize_script
from src.services.theme import PresentationTheme
from src.utils.error_handling import AppException, EmptyScriptError
from src.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def load_settings(config_dir: Optional[Path] = None) -> AppSettings:
    """Load settings from config.yaml, or defaults when none is present."""
    if config_dir is not None:
        return create_settings(config_dir)
    try:
        get_config_path("config.yaml")
    except ConfigurationError:
        logger.warning("No config.yaml found, using default settings")
        return AppSettings()
    return get_settings()


def read_script(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def cmd_build(args: argparse.Namespace, settings: AppSettings) -> int:
    slides = parse_script(read_script(args.script))
    theme = PresentationTheme.from_settings(settings.theme)

    bundle = build_bundle(slides, settings.output, theme)
    written = write_bundle(bundle, args.output_dir, as_zip=args.zip)

    if args.pptx:
        pptx_path = args.output_dir / settings.output.pptx_filename
        pptx_path.write_bytes(export_pptx(slides, theme))
        written.append(pptx_path)

    print(f"Generated {len(slides)} slides:")
    for slide in slides:
        print(f"  {slide}")
    print("Files:")
    for path in written:
        print(f"  {path}")
    return 0


def cmd_parse(args: argparse.Namespace, settings: AppSettings) -> int:
    slides = parse_script(read_script(args.script))
    if args.normalize:
        print(serialize_script(slides), end="")
    else:
        print(json.dumps([slide.to_dict() for slide in slides], indent=2, ensure_ascii=False))
    return 0


def cmd_serve(args: argparse.Namespace, settings: AppSettings) -> int:
    import uvicorn

    uvicorn.run(
        "src.api.main:app",
        host=args.host or settings.api.host,
        port=args.port or settings.api.port,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Turn a plain-text slide script into a presentation",
        prog="reslides",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory containing config.yaml (default: the project's config/)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Generate the presentation files")
    build.add_argument("script", help="Script file, or '-' to read from stdin")
    build.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Directory for generated files (default: output)",
    )
    build.add_argument(
        "--zip",
        action="store_true",
        help="Write a single zip archive instead of loose files",
    )
    build.add_argument(
        "--pptx",
        action="store_true",
        help="Also export a PowerPoint file",
    )
    build.set_defaults(handler=cmd_build)

    parse = subparsers.add_parser("parse", help="Print the parsed slides")
    parse.add_argument("script", help="Script file, or '-' to read from stdin")
    parse.add_argument(
        "--normalize",
        action="store_true",
        help="Print the script rewritten with canonical keywords instead of JSON",
    )
    parse.set_defaults(handler=cmd_parse)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None, help="Bind address (default: api.host)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: api.port)")
    serve.set_defaults(handler=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ReSlides CLI."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config_dir)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    level = "DEBUG" if args.debug else settings.logging.level
    setup_logging(level, settings.logging.format)

    try:
        return args.handler(args, settings)
    except EmptyScriptError as e:
        print(e.message, file=sys.stderr)
        return 1
    except AppException as e:
        logger.error(e.message, extra=e.details)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
