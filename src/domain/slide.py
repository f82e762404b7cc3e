"""Slide and Graph records produced by the script parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Graph:
    """Label and value series backing one slide's chart.

    Labels and values are populated independently. The parser does not
    enforce equal lengths; renderers decide how to pair them.

    Attributes:
        labels: Category labels in script order
        values: Numeric values in script order
    """

    labels: Tuple[str, ...] = ()
    values: Tuple[float, ...] = ()

    @property
    def is_renderable(self) -> bool:
        """True when both series have at least one entry."""
        return bool(self.labels) and bool(self.values)

    def pairs(self) -> list[tuple[str, float]]:
        """Return (label, value) pairs, stopping at the shorter series."""
        return list(zip(self.labels, self.values))

    def to_dict(self) -> Dict[str, Any]:
        return {"labels": list(self.labels), "values": list(self.values)}


@dataclass(frozen=True)
class Slide:
    """One structured record extracted from a script.

    Attributes:
        title: Display title, empty when the script gave none
        content: Bullet/paragraph items in display order
        graph: Chart data, None when no data line was seen
        description: Caption text, last value in the script wins
        attachments: Attachment references in the order seen
    """

    title: str = ""
    content: Tuple[str, ...] = ()
    graph: Optional[Graph] = None
    description: str = ""
    attachments: Tuple[str, ...] = field(default=())

    @property
    def has_chart(self) -> bool:
        return self.graph is not None and self.graph.is_renderable

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation of this slide."""
        return {
            "title": self.title,
            "content": list(self.content),
            "graph": self.graph.to_dict() if self.graph is not None else None,
            "description": self.description,
            "attachments": list(self.attachments),
        }

    def __str__(self) -> str:
        chart = " +chart" if self.graph is not None else ""
        return f"Slide({self.title or '<untitled>'}: {len(self.content)} items{chart})"
