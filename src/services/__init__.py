"""Script parsing and artifact generation services."""

from src.services.chart_renderer import assign_chart_files, chart_filename, render_chart_page
from src.services.packager import Bundle, BundleFile, build_bundle, write_bundle
from src.services.pptx_export import export_pptx
from src.services.presentation_renderer import render_presentation
from src.services.readme import generate_readme
from src.services.script_parser import ScriptParser, parse_script
from src.services.script_serializer import serialize_script
from src.services.theme import PresentationTheme

__all__ = [
    "Bundle",
    "BundleFile",
    "PresentationTheme",
    "ScriptParser",
    "assign_chart_files",
    "build_bundle",
    "chart_filename",
    "export_pptx",
    "generate_readme",
    "parse_script",
    "render_chart_page",
    "render_presentation",
    "serialize_script",
    "write_bundle",
]
