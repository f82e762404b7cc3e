"""Write Slide records back out as a script using the canonical keywords."""

from __future__ import annotations

from typing import Iterable, List

from src.domain.slide import Graph, Slide


def format_number(value: float) -> str:
    """Shortest text that parses back to the same float (``1.0`` -> ``1``)."""
    if value == int(value) and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def serialize_graph(graph: Graph) -> str:
    labels = ", ".join(graph.labels)
    values = ", ".join(format_number(v) for v in graph.values)
    return f"Data: Labels: {labels}; Values: {values}"


def serialize_slide(slide: Slide, number: int) -> List[str]:
    """Return the script lines for one slide.

    Each content item gets its own ``Content:`` line so items containing
    commas survive the round trip.
    """
    lines = [f"Slide {number}"]
    if slide.title:
        lines.append(f"Title: {slide.title}")
    lines.extend(f"Content: {item}" for item in slide.content)
    if slide.graph is not None:
        lines.append(serialize_graph(slide.graph))
    if slide.description:
        lines.append(f"Description: {slide.description}")
    if slide.attachments:
        lines.append(f"Attachment: {', '.join(slide.attachments)}")
    return lines


def serialize_script(slides: Iterable[Slide]) -> str:
    """Serialize slides to script text, separating slides with a blank line."""
    blocks = [
        "\n".join(serialize_slide(slide, number))
        for number, slide in enumerate(slides, start=1)
    ]
    return "\n\n".join(blocks) + ("\n" if blocks else "")
