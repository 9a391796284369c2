"""Tests for the lesson Markdown renderer.

Organized by block kind, then inline spans, then whole-document behavior.
"""

import pytest

from tutor.markdown import (
    CodeBlock,
    Heading,
    OrderedList,
    Paragraph,
    UnorderedList,
    classify,
    escape_html,
    render,
    render_block,
    render_inline,
    split_blocks,
)


# === BLOCK SPLITTING ===


class TestSplitBlocks:
    def test_empty_document_has_no_blocks(self):
        assert split_blocks("") == []

    def test_whitespace_only_document_has_no_blocks(self):
        assert split_blocks("  \n \t\n\n   ") == []

    def test_multiple_blank_lines_are_one_separator(self):
        assert split_blocks("A\n\n\n\nB") == ["A", "B"]

    def test_whitespace_only_lines_separate_blocks(self):
        assert split_blocks("A\n   \t\nB") == ["A", "B"]

    def test_blocks_are_trimmed(self):
        assert split_blocks("  first  \n\n  second\n") == ["first", "second"]

    def test_single_newline_keeps_one_block(self):
        assert split_blocks("line1\nline2") == ["line1\nline2"]


# === CLASSIFICATION ===


class TestClassify:
    def test_fenced_code(self):
        assert classify("```py\nprint(1)\n```") == CodeBlock(language="py", code="print(1)")

    def test_fence_without_language(self):
        assert classify("```\nx\ny\n```") == CodeBlock(language="", code="x\ny")

    def test_language_tag_is_trimmed(self):
        assert classify("```  sql  \nSELECT 1;\n```").language == "sql"

    def test_unterminated_fence_is_paragraph(self):
        assert isinstance(classify("```js\nlet x=1;"), Paragraph)

    @pytest.mark.parametrize(
        "block, level, text",
        [
            ("# One", 1, "One"),
            ("## Two", 2, "Two"),
            ("### Three", 3, "Three"),
        ],
    )
    def test_heading_levels(self, block, level, text):
        assert classify(block) == Heading(level=level, text=text)

    def test_hash_without_space_is_paragraph(self):
        assert isinstance(classify("#hashtag"), Paragraph)

    def test_four_hashes_is_paragraph(self):
        assert isinstance(classify("#### Deep"), Paragraph)

    def test_unordered_list_with_dash_and_star(self):
        assert classify("- a\n* b") == UnorderedList(items=["a", "b"])

    def test_ordered_list(self):
        assert classify("1. a\n10. b") == OrderedList(items=["a", "b"])

    def test_list_lines_without_marker_are_raw_items(self):
        assert classify("- a\ncontinued") == UnorderedList(items=["a", "continued"])
        assert classify("1. a\nplain") == OrderedList(items=["a", "plain"])

    def test_only_first_line_decides_list_kind(self):
        assert isinstance(classify("intro\n- a\n- b"), Paragraph)

    def test_marker_without_space_is_paragraph(self):
        assert isinstance(classify("-dash"), Paragraph)
        assert isinstance(classify("1.no space"), Paragraph)

    def test_bold_line_is_not_a_list(self):
        assert isinstance(classify("**Note** this"), Paragraph)

    def test_code_wins_over_heading_shape(self):
        block = classify("```\n# not a heading\n```")
        assert block == CodeBlock(language="", code="# not a heading")


# === BLOCK RENDERING ===


class TestRenderBlock:
    def test_code_block_markup(self):
        html = render_block(CodeBlock(language="js", code="a < b"))
        assert html == '<pre><code class="language-js">a &lt; b</code></pre>'

    def test_empty_language_keeps_class_prefix(self):
        assert render_block(CodeBlock(language="", code="x")) == '<pre><code class="language-">x</code></pre>'

    def test_heading_markup(self):
        assert render_block(Heading(level=2, text="*Hi*")) == "<h2><em>Hi</em></h2>"

    def test_unordered_list_markup(self):
        assert render_block(UnorderedList(items=["a", "`b`"])) == "<ul><li>a</li><li><code>b</code></li></ul>"

    def test_ordered_list_markup(self):
        assert render_block(OrderedList(items=["x"])) == "<ol><li>x</li></ol>"

    def test_paragraph_line_breaks(self):
        assert render_block(Paragraph(text="a\nb")) == "<p>a<br />b</p>"


# === ESCAPING ===


class TestEscapeHtml:
    def test_escapes_three_characters(self):
        assert escape_html("<a & b>") == "&lt;a &amp; b&gt;"

    def test_ampersand_escaped_before_brackets(self):
        # existing entities are escaped once, not twice
        assert escape_html("&lt;") == "&amp;lt;"
        assert "&amp;amp;" not in escape_html("<>&")


# === INLINE SPANS ===


class TestInlineSpans:
    def test_bold(self):
        assert render_inline("a **b** c") == "a <strong>b</strong> c"

    def test_italic(self):
        assert render_inline("a *b* c") == "a <em>b</em> c"

    def test_inline_code(self):
        assert render_inline("use `x = 1`") == "use <code>x = 1</code>"

    def test_bold_resolved_before_italic(self):
        assert render_inline("**bold *and* text**") == "<strong>bold <em>and</em> text</strong>"

    def test_non_greedy_spans(self):
        assert render_inline("**a** and **b**") == "<strong>a</strong> and <strong>b</strong>"
        assert render_inline("*a* and *b*") == "<em>a</em> and <em>b</em>"

    def test_inline_code_is_not_escaped(self):
        assert render_inline("`<div>`") == "<code><div></code>"

    def test_empty_backticks_are_left_alone(self):
        assert render_inline("``") == "``"

    def test_unpaired_star_is_left_alone(self):
        assert render_inline("2 * 3") == "2 * 3"

    def test_spans_do_not_cross_lines(self):
        assert render_inline("*a\nb*") == "*a\nb*"


# === WHOLE DOCUMENTS ===


class TestRender:
    def test_empty_document(self):
        assert render("") == ""

    def test_whitespace_document(self):
        assert render("\n\n   \n") == ""

    def test_render_is_deterministic(self):
        doc = "# T\n\n- a\n- **b**\n\n```py\nx<1\n```\n\nend *here*"
        assert render(doc) == render(doc)

    def test_fenced_code_escapes_and_keeps_language(self):
        html = render("```js\nlet x = 1 < 2;\n```")
        assert html == '<pre><code class="language-js">let x = 1 &lt; 2;</code></pre>'

    def test_fenced_code_body_has_no_inline_spans(self):
        html = render("```\n**not bold** *not em* `not code`\n```")
        assert "<strong>" not in html
        assert "<em>" not in html
        assert "**not bold** *not em* `not code`" in html

    def test_unterminated_fence_falls_through_to_paragraph(self):
        html = render("```js\nlet x=1;")
        assert "<pre>" not in html
        assert html.startswith("<p>")
        assert html.endswith("</p>")

    def test_heading_level_three(self):
        assert render("### Title") == "<h3>Title</h3>"

    def test_two_headings_in_order(self):
        assert render("# A\n\n## B") == "<h1>A</h1><h2>B</h2>"

    def test_unordered_list_items(self):
        html = render("- one\n- two\n- three")
        assert html == "<ul><li>one</li><li>two</li><li>three</li></ul>"
        assert html.count("<li>") == 3

    def test_ordered_list_items(self):
        assert render("1. a\n2. b") == "<ol><li>a</li><li>b</li></ol>"

    def test_inline_bold_before_italic(self):
        assert render("**bold *and* text**") == "<p><strong>bold <em>and</em> text</strong></p>"

    def test_paragraph_line_break(self):
        assert render("line1\nline2") == "<p>line1<br />line2</p>"

    def test_multiple_blank_lines_make_two_paragraphs(self):
        assert render("A\n\n\n\nB") == "<p>A</p><p>B</p>"

    def test_blocks_join_without_separator(self):
        html = render("# Intro\n\nSome *text*.\n\n- x\n\n```\nc\n```")
        assert html == (
            "<h1>Intro</h1>"
            "<p>Some <em>text</em>.</p>"
            "<ul><li>x</li></ul>"
            '<pre><code class="language-">c</code></pre>'
        )

    def test_code_block_with_blank_line_inside_is_split(self):
        # blank lines always end a block, even inside a fence
        html = render("```\na\n\nb\n```")
        assert "<pre>" not in html
        assert html.count("<p>") == 2

    def test_windows_line_endings_separate_blocks(self):
        assert render("A\r\n\r\nB") == "<p>A</p><p>B</p>"

    @pytest.mark.parametrize(
        "doc",
        [
            "```",
            "``````",
            "# ",
            "- ",
            "1. ",
            "*",
            "**",
            "***",
            "`",
            "\x00\x01\xff",
            "<script>alert(1)</script>",
            "```\n```\n```",
        ],
    )
    def test_degenerate_input_never_raises(self, doc):
        assert isinstance(render(doc), str)

    def test_lone_fence_is_an_empty_code_block(self):
        assert render("```") == '<pre><code class="language-"></code></pre>'


# === UNICODE EDGE CASES ===


class TestUnicodeEdgeCases:
    def test_leading_byte_order_mark_is_trimmed(self):
        assert render("\ufeff# Title") == "<h1>Title</h1>"

    def test_byte_order_mark_only_document_is_empty(self):
        assert render("\ufeff") == ""

    def test_byte_order_mark_line_separates_blocks(self):
        assert render("A\n\ufeff\nB") == "<p>A</p><p>B</p>"

    def test_non_ascii_digits_do_not_start_ordered_list(self):
        assert isinstance(classify("\u0661. x"), Paragraph)
        assert render("\u0661. x") == "<p>\u0661. x</p>"

    def test_bold_does_not_span_carriage_return(self):
        assert "<strong>" not in render_inline("**a\rb**")

    def test_italic_does_not_span_line_separator(self):
        assert render_inline("*a\u2028b*") == "*a\u2028b*"
