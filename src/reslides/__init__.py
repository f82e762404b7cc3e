"""
ReSlides - turn a plain-text slide script into a presentation.

This package exposes the script parser together with the HTML, zip and
PowerPoint generators built on top of it.
"""

__version__ = "0.1.0"

# Main exports
from src.domain.slide import Graph, Slide
from src.services.packager import Bundle, build_bundle, write_bundle
from src.services.pptx_export import export_pptx
from src.services.script_parser import ScriptParser, parse_script
from src.services.script_serializer import serialize_script

__all__ = [
    "Bundle",
    "Graph",
    "ScriptParser",
    "Slide",
    "build_bundle",
    "export_pptx",
    "parse_script",
    "serialize_script",
    "write_bundle",
    "__version__",
]
