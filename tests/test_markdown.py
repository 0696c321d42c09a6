import pytest

from gemini_relay.render import render_markdown


def test_bold_then_italic():
    assert render_markdown("**a** *b*") == "<strong>a</strong> <em>b</em>"


def test_link_opens_new_tab():
    assert render_markdown("[x](http://y)") == '<a href="http://y" target="_blank">x</a>'


def test_heading_becomes_h3():
    assert render_markdown("## Title") == "<h3>Title</h3>"


def test_heading_after_other_lines():
    assert render_markdown("Intro\n## Heading\nBody") == "Intro<br><h3>Heading</h3><br>Body"


def test_deeper_heading_is_left_alone():
    assert render_markdown("### deep") == "### deep"


def test_list_items_share_one_container():
    assert render_markdown("* one\n* two") == "<ul><li>one</li><br><li>two</li></ul>"


def test_whole_output_wrapped_when_any_item_present():
    assert render_markdown("Intro\n* a\nOutro") == "<ul>Intro<br><li>a</li><br>Outro</ul>"


def test_separate_lists_are_merged():
    assert render_markdown("* a\n\ntext\n* b") == "<ul><li>a</li><br><br>text<br><li>b</li></ul>"


def test_bold_inside_list_item():
    assert render_markdown("* **bold** item") == "<ul><li><strong>bold</strong> item</li></ul>"


def test_newlines_become_breaks():
    assert render_markdown("line1\nline2") == "line1<br>line2"


@pytest.mark.parametrize("text", ["**unclosed", "2 * 3 * 4", "plain text", ""])
def test_unmatched_patterns_are_literal(text):
    assert render_markdown(text) == text


@pytest.mark.parametrize(
    "text",
    [
        "**a** *b*",
        "[x](http://y)",
        "## Title",
        "* one\n* two",
        "Intro\n## Heading\n* item with [link](http://z)",
    ],
)
def test_rendering_rendered_html_is_stable(text):
    once = render_markdown(text)
    assert render_markdown(once) == once


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  ## Title", "<h3>Title</h3>"),
        ("\t## Title", "<h3>Title</h3>"),
        ("a\n  ## T", "a<br><h3>T</h3>"),
        ("a\n\t## T", "a<br><h3>T</h3>"),
    ],
)
def test_heading_allows_leading_whitespace(text, expected):
    assert render_markdown(text) == expected


def test_indented_star_is_not_a_list_item():
    assert render_markdown("  * x") == "  * x"


def test_italic_does_not_span_lines():
    assert render_markdown("text*\n* item") == "<ul>text*<br><li>item</li></ul>"


def test_italic_within_a_line_after_break():
    assert render_markdown("a\n*b*") == "a<br><em>b</em>"
