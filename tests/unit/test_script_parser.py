"""Unit tests for the slide script parser."""

import pytest

from src.domain.slide import Graph, Slide
from src.services.script_parser import (
    ScriptParser,
    parse_graph,
    parse_number,
    parse_script,
    split_fragments,
    split_lines,
)


class TestLineSplitting:
    """Test line pre-processing."""

    def test_splits_unix_and_windows_line_endings(self):
        """Test both \\n and \\r\\n are line breaks."""
        assert split_lines("a\nb\r\nc") == ["a", "b", "c"]

    def test_trims_and_drops_blank_lines(self):
        """Test whitespace-only lines are discarded."""
        assert split_lines("  a  \n\n   \n\tb\t") == ["a", "b"]

    def test_empty_input(self):
        assert split_lines("") == []

    def test_decomposed_accents_are_composed(self):
        assert split_lines("Ti\u0301tulo: x") == ["T\u00edtulo: x"]

    def test_split_fragments_drops_empty_pieces(self):
        """Test whitespace-only fragments between delimiters are dropped."""
        assert split_fragments(" x ;  ; y;;", ";") == ["x", "y"]


class TestSlideMarkers:
    """Test slide boundaries."""

    def test_two_slides(self):
        """Test the canonical two-slide example."""
        slides = parse_script("Slide 1\nTitle: A\nContent: x; y\n\nSlide 2\nTitle: B")

        assert len(slides) == 2
        assert slides[0].title == "A"
        assert slides[0].content == ("x", "y")
        assert slides[1].title == "B"
        assert slides[1].content == ()

    def test_spanish_marker(self):
        slides = parse_script("Diapositiva 1\nTítulo: Hola\nDiapositiva 2\nTítulo: Adiós")
        assert [s.title for s in slides] == ["Hola", "Adiós"]

    def test_marker_is_case_insensitive(self):
        slides = parse_script("DIAPOSITIVA 1\nTitulo: a\nslide 2\nTitulo: b")
        assert [s.title for s in slides] == ["a", "b"]

    def test_marker_number_does_not_order_slides(self):
        """Test sequence order wins over the number after the marker."""
        slides = parse_script("Slide 9\nTitle: first\nSlide 1\nTitle: second")
        assert [s.title for s in slides] == ["first", "second"]

    def test_consecutive_markers_yield_empty_slide(self):
        """Test an empty slide between two markers is kept with defaults."""
        slides = parse_script("Slide 1\nSlide 2\nTitle: B")

        assert len(slides) == 2
        assert slides[0] == Slide()
        assert slides[0].graph is None

    def test_marker_without_number_is_content(self):
        slides = parse_script("Slide 1\nSlide deck overview")
        assert slides[0].content == ("Slide deck overview",)

    def test_blank_lines_never_split_or_merge_slides(self):
        with_blanks = parse_script("Slide 1\nTitle: A\n\n\nContent: z")
        without_blanks = parse_script("Slide 1\nTitle: A\nContent: z")

        assert with_blanks == without_blanks
        assert len(with_blanks) == 1
        assert with_blanks[0].content == ("z",)


class TestEmptyAndImplicitSlides:
    """Test empty input and lazy slide creation."""

    @pytest.mark.parametrize("raw", ["", "   ", "\n\n", "\r\n \r\n"])
    def test_blank_input_yields_no_slides(self, raw):
        assert parse_script(raw) == []

    def test_none_input_yields_no_slides(self):
        assert parse_script(None) == []

    def test_freeform_line_without_marker_creates_slide(self):
        """Test content before any marker is not lost."""
        slides = parse_script("just some text; and more")

        assert len(slides) == 1
        assert slides[0].content == ("just some text", "and more")

    def test_keyword_line_without_marker_creates_slide(self):
        slides = parse_script("Título: Sin marcador\nContenido: uno")

        assert len(slides) == 1
        assert slides[0].title == "Sin marcador"
        assert slides[0].content == ("uno",)

    def test_implicit_slide_is_flushed_by_first_marker(self):
        slides = parse_script("intro line\nSlide 1\nTitle: Real")

        assert len(slides) == 2
        assert slides[0].content == ("intro line",)
        assert slides[1].title == "Real"


class TestTitleAndDescription:
    """Test title and description keywords."""

    @pytest.mark.parametrize("line", ["TITULO: x", "Título: x", "titulo: x", "TÍTULO: x", "Title: x"])
    def test_title_spellings(self, line):
        """Test case and accent insensitivity of the title keyword."""
        slides = parse_script(line)
        assert slides[0].title == "x"

    def test_last_title_wins(self):
        slides = parse_script("Slide 1\nTitle: first\nTitle: second")
        assert slides[0].title == "second"

    def test_title_keeps_inner_semicolons(self):
        slides = parse_script("Title: a; b")
        assert slides[0].title == "a; b"

    def test_space_before_colon_is_accepted(self):
        slides = parse_script("Titulo : spaced")
        assert slides[0].title == "spaced"

    @pytest.mark.parametrize(
        "line", ["Descripción: d", "Descripcion: d", "DESCRIPCIÓN: d", "description: d"]
    )
    def test_description_spellings(self, line):
        slides = parse_script(line)
        assert slides[0].description == "d"

    def test_decomposed_accents_match_keywords(self):
        """Test keywords typed with combining accents are still recognized."""
        slides = parse_script("Ti\u0301tulo: Hola\nDescripcio\u0301n: d\nGra\u0301fica: Labels: a; Valores: 1")

        assert slides[0].title == "Hola"
        assert slides[0].description == "d"
        assert slides[0].content == ()
        assert slides[0].graph.values == (1.0,)

    def test_last_description_wins(self):
        slides = parse_script("Descripcion: one\nDescripcion: two")
        assert slides[0].description == "two"


class TestContent:
    """Test content keywords and fallback lines."""

    @pytest.mark.parametrize("keyword", ["Contenido", "Contexto", "Content", "Context", "CONTENIDO"])
    def test_content_keywords(self, keyword):
        slides = parse_script(f"{keyword}: a; b")
        assert slides[0].content == ("a", "b")

    def test_content_preserves_order_across_lines(self):
        slides = parse_script("Contenido: a; b\nfree c\nContexto: d")
        assert slides[0].content == ("a", "b", "free c", "d")

    def test_fallback_splits_on_semicolon(self):
        slides = parse_script("Slide 1\nuno ; dos;  ;tres")
        assert slides[0].content == ("uno", "dos", "tres")

    def test_commas_do_not_split_content(self):
        slides = parse_script("Contenido: resumir, generar ideas y redactar")
        assert slides[0].content == ("resumir, generar ideas y redactar",)

    def test_keyword_must_start_the_line(self):
        slides = parse_script("Note Title: not a title")
        assert slides[0].title == ""
        assert slides[0].content == ("Note Title: not a title",)


class TestData:
    """Test data/chart lines."""

    def test_non_numeric_values_are_dropped(self):
        slides = parse_script("Data: Labels: a, b; Values: 1, foo, 3")

        assert slides[0].graph == Graph(labels=("a", "b"), values=(1.0, 3.0))

    @pytest.mark.parametrize("keyword", ["Datos", "Gráfica", "Grafica", "GRÁFICA", "Data", "Chart"])
    def test_data_keywords(self, keyword):
        slides = parse_script(f"{keyword}: Labels: x; Valores: 2")
        assert slides[0].graph == Graph(labels=("x",), values=(2.0,))

    @pytest.mark.parametrize("section", ["Valores", "Valor", "Values", "Value", "VALORES"])
    def test_value_section_spellings(self, section):
        graph = parse_graph(f"Labels: a; {section}: 5")
        assert graph.values == (5.0,)

    def test_label_singular(self):
        assert parse_graph("Label: only").labels == ("only",)

    def test_no_recognized_sections_gives_empty_graph(self):
        """Test a data line always produces a graph, even an empty one."""
        slides = parse_script("Slide 1\nDatos: something else")

        assert slides[0].graph is not None
        assert slides[0].graph == Graph()
        assert not slides[0].graph.is_renderable

    def test_no_data_line_leaves_graph_absent(self):
        slides = parse_script("Slide 1\nTitle: x")
        assert slides[0].graph is None

    def test_second_data_line_replaces_graph(self):
        """Test graphs are replaced wholesale, not merged."""
        slides = parse_script(
            "Slide 1\nData: Labels: a, b; Values: 1, 2\nData: Values: 9"
        )
        assert slides[0].graph == Graph(labels=(), values=(9.0,))

    def test_length_mismatch_is_kept(self):
        graph = parse_graph("Labels: a, b, c; Values: 1")
        assert graph.labels == ("a", "b", "c")
        assert graph.values == (1.0,)

    def test_unknown_sections_are_ignored(self):
        graph = parse_graph("Type: bar; Labels: a; Color: red; Values: 1")
        assert graph == Graph(labels=("a",), values=(1.0,))

    def test_labels_drop_blank_entries(self):
        assert parse_graph("Labels: a, , b,").labels == ("a", "b")


class TestParseNumber:
    """Test lenient number parsing."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("4.2", 4.2),
            (" -3 ", -3.0),
            ("+7", 7.0),
            (".5", 0.5),
            ("1e3", 1000.0),
            ("12%", 12.0),
            ("3.", 3.0),
        ],
    )
    def test_numeric_prefix(self, token, expected):
        assert parse_number(token) == expected

    @pytest.mark.parametrize("token", ["foo", "", "nan", "inf", "-", ".", "e5", "1e999", "-1e999"])
    def test_non_numbers(self, token):
        assert parse_number(token) is None

    def test_overflowing_values_are_dropped(self):
        """Test values too large for a float never reach the graph."""
        slides = parse_script("Slide 1\nData: Labels: a, b; Values: 1e999, 2, -1e400")
        assert slides[0].graph.values == (2.0,)


class TestAttachments:
    """Test attachment lines."""

    def test_attachments_accumulate_in_order(self):
        slides = parse_script("Slide 1\nAdjunto: a.pdf\nAdjunto: b.png, c.csv")
        assert slides[0].attachments == ("a.pdf", "b.png", "c.csv")

    @pytest.mark.parametrize("keyword", ["Adjunto", "Adjuntos", "Attachment", "attachments"])
    def test_attachment_keywords(self, keyword):
        slides = parse_script(f"{keyword}: file.txt")
        assert slides[0].attachments == ("file.txt",)

    def test_attachments_drop_blank_entries(self):
        slides = parse_script("Adjunto: , x ,, ")
        assert slides[0].attachments == ("x",)


class TestScriptParser:
    """Test the parser object itself."""

    def test_parser_is_reusable(self):
        parser = ScriptParser()
        first = parser.parse("Slide 1\nTitle: a")
        second = parser.parse("Slide 1\nTitle: b")

        assert first[0].title == "a"
        assert second[0].title == "b"
        assert len(second) == 1

    def test_custom_rules(self):
        """Test the rule table can be replaced."""
        import re
        from src.services.script_parser import DEFAULT_RULES, _on_title

        rules = (*DEFAULT_RULES, (re.compile(r"^heading\s*:", re.IGNORECASE), _on_title))
        slides = ScriptParser(rules).parse("Heading: custom")

        assert slides[0].title == "custom"

    def test_result_slides_are_immutable(self):
        slides = parse_script("Slide 1\nTitle: a")
        with pytest.raises(AttributeError):
            slides[0].title = "changed"

    def test_full_sample(self, sample_script):
        """Test the sample script parses into the expected records."""
        slides = parse_script(sample_script)

        assert len(slides) == 2
        assert slides[0].title == "Presentacion de prueba"
        assert slides[0].content == (
            "Esto es la primera diapositiva",
            "Tiene varios puntos de texto",
            "Puede listar items",
        )
        assert slides[1].graph == Graph(
            labels=("Resumenes", "Ideas", "Redaccion"),
            values=(4.2, 3.8, 2.5),
        )
        assert slides[1].description == "Frecuencia de uso por actividad"
        assert slides[1].content == (
            "La mayoria usa IA para resumir, generar ideas y redactar trabajos.",
        )
