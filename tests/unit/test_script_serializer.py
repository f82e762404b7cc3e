"""Unit tests for writing slides back out as a script."""

import pytest

from src.domain.slide import Graph, Slide
from src.services.script_parser import parse_script
from src.services.script_serializer import (
    format_number,
    serialize_graph,
    serialize_script,
    serialize_slide,
)


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize(
        "value,expected",
        [(1.0, "1"), (-3.0, "-3"), (4.2, "4.2"), (0.5, "0.5"), (0.0, "0")],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected


class TestSerializeSlide:
    """Tests for serialize_slide and serialize_graph."""

    def test_empty_slide_is_marker_only(self):
        assert serialize_slide(Slide(), 3) == ["Slide 3"]

    def test_all_fields(self):
        slide = Slide(
            title="Costs",
            content=("Rent, mostly", "Staff"),
            graph=Graph(labels=("a", "b"), values=(1.0, 2.5)),
            description="Breakdown",
            attachments=("a.pdf", "b.csv"),
        )

        assert serialize_slide(slide, 1) == [
            "Slide 1",
            "Title: Costs",
            "Content: Rent, mostly",
            "Content: Staff",
            "Data: Labels: a, b; Values: 1, 2.5",
            "Description: Breakdown",
            "Attachment: a.pdf, b.csv",
        ]

    def test_empty_graph_keeps_data_line(self):
        assert serialize_graph(Graph()) == "Data: Labels: ; Values: "


class TestSerializeScript:
    """Tests for serialize_script."""

    def test_no_slides(self):
        assert serialize_script([]) == ""

    def test_slides_separated_by_blank_line(self):
        text = serialize_script([Slide(title="A"), Slide(title="B")])
        assert text == "Slide 1\nTitle: A\n\nSlide 2\nTitle: B\n"

    def test_parsed_script_survives_round_trip(self, sample_script, chart_script):
        """Test parsing the normalized script gives back the same slides."""
        for script in (sample_script, chart_script):
            slides = parse_script(script)
            assert parse_script(serialize_script(slides)) == slides

    def test_round_trip_keeps_empty_graph_and_empty_slide(self):
        slides = parse_script("Slide 1\nSlide 2\nDatos: nada")
        normalized = parse_script(serialize_script(slides))

        assert normalized == slides
        assert normalized[0].graph is None
        assert normalized[1].graph == Graph()
