"""Line-oriented parser turning a plain-text slide script into Slide records.

A script is a sequence of lines. ``Diapositiva N`` (or ``Slide N``) starts a
new slide; keyword lines such as ``Título:``, ``Contenido:``, ``Datos:``,
``Descripción:`` and ``Adjunto:`` fill in the current slide, and any other
line is treated as extra bullet content. Keywords are matched
case-insensitively, accents optional, and both the Spanish and the English
spellings are accepted.

Parsing never fails: unrecognized lines become content and unparseable
numbers are dropped.

Example:
    >>> slides = parse_script("Diapositiva 1\\nTítulo: Hola\\nContenido: a; b")
    >>> slides[0].title, slides[0].content
    ('Hola', ('a', 'b'))
"""

from __future__ import annotations

import logging
import math
import re
import unicodedata
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Pattern, Sequence, Tuple

from src.domain.slide import Graph, Slide

logger = logging.getLogger(__name__)

LINE_BREAK_PATTERN = re.compile(r"\r?\n")

SLIDE_MARKER_PATTERN = re.compile(r"^(?:diapositiva|slide)\s+\d+", re.IGNORECASE)
TITLE_PATTERN = re.compile(r"^(?:t[ií]tulo|title)\s*:", re.IGNORECASE)
CONTENT_PATTERN = re.compile(r"^(?:contenido|contexto|content|context)\s*:", re.IGNORECASE)
DATA_PATTERN = re.compile(r"^(?:datos|gr[aá]fica|data|chart)\s*:", re.IGNORECASE)
DESCRIPTION_PATTERN = re.compile(r"^(?:descripci[oó]n|description)\s*:", re.IGNORECASE)
ATTACHMENT_PATTERN = re.compile(r"^(?:adjuntos?|attachments?)\s*:", re.IGNORECASE)

# Sections inside a data line; the colon is optional as in "Labels a, b"
LABELS_SECTION_PATTERN = re.compile(r"^labels?\s*:?", re.IGNORECASE)
VALUES_SECTION_PATTERN = re.compile(r"^(?:valor(?:es)?|values?)\s*:?", re.IGNORECASE)

# Leading numeric prefix, so "4.2%" reads as 4.2 and "foo" is rejected
NUMBER_PREFIX_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

CONTENT_DELIMITER = ";"
LIST_DELIMITER = ","


def split_fragments(text: str, delimiter: str) -> List[str]:
    """Split text on a delimiter, trimming and dropping empty fragments."""
    return [part.strip() for part in text.split(delimiter) if part.strip()]


def parse_number(token: str) -> Optional[float]:
    """Read the numeric prefix of a token, or None if there is none."""
    match = NUMBER_PREFIX_PATTERN.match(token.strip())
    if not match:
        return None
    value = float(match.group(0))
    # "1e999" overflows to inf
    if not math.isfinite(value):
        return None
    return value


def parse_graph(text: str) -> Graph:
    """Build a Graph from the remainder of a data line.

    Sections are separated by ``;``. A ``Labels:`` section sets the labels, a
    ``Values:``/``Valores:`` section sets the numeric values, anything else is
    ignored. A repeated section replaces the earlier one.
    """
    labels: Tuple[str, ...] = ()
    values: Tuple[float, ...] = ()

    for section in (s.strip() for s in text.split(CONTENT_DELIMITER)):
        if LABELS_SECTION_PATTERN.match(section):
            remainder = LABELS_SECTION_PATTERN.sub("", section, count=1)
            labels = tuple(split_fragments(remainder, LIST_DELIMITER))
        elif VALUES_SECTION_PATTERN.match(section):
            remainder = VALUES_SECTION_PATTERN.sub("", section, count=1)
            numbers = (parse_number(token) for token in remainder.split(LIST_DELIMITER))
            values = tuple(n for n in numbers if n is not None)

    return Graph(labels=labels, values=values)


@dataclass
class _SlideDraft:
    """Mutable accumulator for the slide currently being parsed."""

    title: str = ""
    content: List[str] = field(default_factory=list)
    graph: Optional[Graph] = None
    description: str = ""
    attachments: List[str] = field(default_factory=list)

    def freeze(self) -> Slide:
        return Slide(
            title=self.title,
            content=tuple(self.content),
            graph=self.graph,
            description=self.description,
            attachments=tuple(self.attachments),
        )


@dataclass
class _ParseState:
    """Per-call parser state: finished slides plus the current cursor."""

    slides: List[Slide] = field(default_factory=list)
    current: Optional[_SlideDraft] = None

    def start_slide(self) -> None:
        self.flush()
        self.current = _SlideDraft()

    def draft(self) -> _SlideDraft:
        # Lines before the first marker open an implicit slide
        if self.current is None:
            self.current = _SlideDraft()
        return self.current

    def flush(self) -> None:
        if self.current is not None:
            self.slides.append(self.current.freeze())
            self.current = None


LineHandler = Callable[[_ParseState, str], None]


def _on_slide_marker(state: _ParseState, remainder: str) -> None:
    state.start_slide()


def _on_title(state: _ParseState, remainder: str) -> None:
    state.draft().title = remainder


def _on_content(state: _ParseState, remainder: str) -> None:
    state.draft().content.extend(split_fragments(remainder, CONTENT_DELIMITER))


def _on_data(state: _ParseState, remainder: str) -> None:
    state.draft().graph = parse_graph(remainder)


def _on_description(state: _ParseState, remainder: str) -> None:
    state.draft().description = remainder


def _on_attachment(state: _ParseState, remainder: str) -> None:
    state.draft().attachments.extend(split_fragments(remainder, LIST_DELIMITER))


DEFAULT_RULES: Tuple[Tuple[Pattern[str], LineHandler], ...] = (
    (SLIDE_MARKER_PATTERN, _on_slide_marker),
    (TITLE_PATTERN, _on_title),
    (CONTENT_PATTERN, _on_content),
    (DATA_PATTERN, _on_data),
    (DESCRIPTION_PATTERN, _on_description),
    (ATTACHMENT_PATTERN, _on_attachment),
)


def split_lines(raw: str) -> List[str]:
    """Split raw text into trimmed, non-empty lines.

    Text is NFC-normalized first so a decomposed accent (``i`` + U+0301)
    matches the same keywords as the precomposed ``í``.
    """
    text = unicodedata.normalize("NFC", raw)
    return [line.strip() for line in LINE_BREAK_PATTERN.split(text) if line.strip()]


class ScriptParser:
    """Stateless parser driven by an ordered table of (pattern, handler) rules.

    Rules are tried top to bottom and the first match wins. The matched
    prefix is stripped and the trimmed remainder handed to the handler.
    Lines matching no rule are split on ``;`` and appended as content.

    Instances hold no per-parse state, so one parser can be shared freely.
    """

    def __init__(self, rules: Sequence[Tuple[Pattern[str], LineHandler]] = DEFAULT_RULES):
        self.rules = tuple(rules)

    def parse(self, raw: str) -> List[Slide]:
        """Parse a script into an ordered list of slides.

        Args:
            raw: Multi-line script text

        Returns:
            Slides in script order; empty when the script has no content
        """
        lines = split_lines(raw or "")
        state = _ParseState()

        for line in lines:
            self._dispatch(state, line)

        state.flush()

        logger.debug(
            "Parsed slide script",
            extra={"line_count": len(lines), "slide_count": len(state.slides)},
        )
        return state.slides

    def _dispatch(self, state: _ParseState, line: str) -> None:
        for pattern, handler in self.rules:
            match = pattern.match(line)
            if match:
                handler(state, line[match.end():].strip())
                return
        _on_content(state, line)


_default_parser = ScriptParser()


def parse_script(raw: str) -> List[Slide]:
    """Parse a script with the default keyword rules."""
    return _default_parser.parse(raw)
