"""
Tests for content tree parsing and text extraction.
"""

import pytest

from conftest import document, paragraph, table
from google_docs_editor.api.content import extract_text, parse_content, parse_document
from google_docs_editor.types import OpaqueBlock, Paragraph, Run, Table, TableCell


class TestParseDocument:
    """Tests for building the typed tree from Docs API JSON."""

    def test_parse_title_and_blocks(self, sample_document):
        """Should keep title, id, and one block per structural element."""
        doc = parse_document(sample_document)

        assert doc.document_id == "doc123"
        assert doc.title == "Test Doc"
        assert len(doc.content) == 2
        assert isinstance(doc.content[0], OpaqueBlock)
        assert doc.content[0].kind == "sectionBreak"
        assert isinstance(doc.content[1], Paragraph)
        assert doc.content[1].end_index == 26

    def test_missing_title_defaults_to_untitled(self):
        """Should fall back to 'Untitled' when the title is absent."""
        doc = parse_document({"documentId": "abc"})

        assert doc.title == "Untitled"
        assert doc.content == []

    def test_runs_carry_paragraph_named_style(self):
        """Should attach the paragraph's named style to each run."""
        blocks = parse_content([paragraph("Intro\n", 1, named_style="HEADING_2")])

        assert blocks[0].runs == [Run(text="Intro\n", style_name="HEADING_2")]

    def test_non_text_paragraph_elements_are_skipped(self):
        """Should ignore paragraph elements without a textRun (e.g. inline images)."""
        blocks = parse_content(
            [
                {
                    "endIndex": 4,
                    "paragraph": {
                        "elements": [
                            {"inlineObjectElement": {"inlineObjectId": "img"}},
                            {"textRun": {"content": "ab\n"}},
                        ]
                    },
                }
            ]
        )

        assert [run.text for run in blocks[0].runs] == ["ab\n"]

    def test_table_cells_are_parsed_recursively(self):
        """Should parse cell content into nested blocks."""
        blocks = parse_content([table([["a", "b"]])])

        parsed = blocks[0]
        assert isinstance(parsed, Table)
        assert len(parsed.rows) == 1
        assert len(parsed.rows[0]) == 2
        assert isinstance(parsed.rows[0][0].content[0], Paragraph)


class TestExtractText:
    """Tests for flattening content trees into text."""

    def test_empty_tree(self):
        """Should return an empty string for an empty tree."""
        assert extract_text([]) == ""

    def test_runs_concatenated_without_separator(self):
        """Run boundaries are not word boundaries."""
        blocks = [
            Paragraph(runs=[Run(text="Hel"), Run(text="lo "), Run(text="world\n")])
        ]

        assert extract_text(blocks) == "Hello world"

    def test_paragraphs_and_surrounding_whitespace(self, sample_document):
        """Should concatenate paragraphs and strip the result."""
        doc = parse_document(sample_document)

        assert extract_text(doc.content) == "This is a test sentence."

    def test_table_flattening(self):
        """Should render a table between markers, one line per row."""
        blocks = parse_content([table([["a", "b"], ["c", "d"]])])

        assert extract_text(blocks) == "\n".join(
            ["[TABLE]", "a | b", "c | d", "[/TABLE]"]
        )

    def test_table_between_paragraphs(self):
        """Should place the table block after preceding text."""
        raw = document(
            [
                paragraph("Before\n", 1),
                table([["x", "y"]], start_index=8, end_index=20),
                paragraph("After\n", 20),
            ]
        )

        text = extract_text(parse_document(raw).content)

        assert text == "Before\n[TABLE]\nx | y\n[/TABLE]\nAfter"

    def test_cell_text_is_trimmed(self):
        """Should strip whitespace around each cell's text."""
        blocks = [
            Table(
                rows=[
                    [
                        TableCell(content=[Paragraph(runs=[Run(text="  spaced  \n")])]),
                        TableCell(content=[]),
                    ]
                ]
            )
        ]

        assert extract_text(blocks) == "[TABLE]\nspaced | \n[/TABLE]"

    def test_nested_table_in_cell(self):
        """Should apply the same walk to tables nested inside cells."""
        inner = Table(rows=[[TableCell(content=[Paragraph(runs=[Run(text="in\n")])])]])
        outer = Table(rows=[[TableCell(content=[inner])]])

        assert extract_text([outer]) == "[TABLE]\n[TABLE]\nin\n[/TABLE]\n[/TABLE]"

    def test_opaque_blocks_contribute_nothing(self):
        """Section breaks and similar elements carry no text."""
        blocks = [OpaqueBlock(kind="sectionBreak", end_index=1), Paragraph(runs=[Run(text="x\n")])]

        assert extract_text(blocks) == "x"

    def test_unknown_block_type_raises(self):
        """Should refuse blocks outside the tree's union."""
        with pytest.raises(TypeError):
            extract_text(["not a block"])
