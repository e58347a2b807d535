from a11ytoolbar.parser.html_parser import remove_child
from a11ytoolbar.utils.style_util import has_layout_box, is_visible
from a11ytoolbar.utils.util import text_content, tree_position
from a11ytoolbar.view.document import Document

PAGE = """
<html>
<head><title>Page</title><style>.secret { display: none; }</style></head>
<body>
  <div id="main">
    <p id="shown">Visible text</p>
    <p class="secret" id="styled">Hidden by class</p>
    <p style="display:none" id="inline">Hidden inline</p>
    <p hidden id="attr">Hidden by attribute</p>
    <div style="visibility: hidden"><span id="invisible">Ghost</span></div>
  </div>
</body>
</html>
"""


def test_style_rules_decide_visibility(make_document):
    document = make_document(PAGE)
    assert is_visible(document.query_selector("#shown"))
    assert not is_visible(document.query_selector("#styled"))
    assert not is_visible(document.query_selector("#inline"))
    assert not is_visible(document.query_selector("#attr"))

    ghost = document.query_selector("#invisible")
    assert has_layout_box(ghost)
    assert not is_visible(ghost)


def test_head_content_has_no_layout_box(make_document):
    document = make_document(PAGE)
    assert not has_layout_box(document.query_selector("title"))


def test_unrendered_document_has_no_layout_box():
    document = Document("<p id='x'>text</p>")
    assert not has_layout_box(document.query_selector("#x"))
    document.render()
    assert has_layout_box(document.query_selector("#x"))


def test_body_and_query_selector_all(make_document):
    document = make_document(PAGE)
    assert document.body.tag == "body"
    assert len(document.query_selector_all("p")) == 4
    assert document.query_selector("article") is None
    assert document.query_selector_all("p >") == []


def test_class_toggling_restyles(make_document):
    document = make_document(PAGE)
    shown = document.query_selector("#shown")
    document.add_class(shown, "secret")
    assert document.needs_style
    document.render()
    assert not is_visible(shown)

    document.remove_class(shown, "secret")
    document.render()
    assert is_visible(shown)
    assert shown.attributes["class"] == ""


def test_set_inline_style_merges_properties(make_document):
    document = make_document("<div style='color: red'>x</div>")
    div = document.query_selector("div")
    document.set_inline_style(div, "transform", "scale(1.5)")
    assert div.attributes["style"] == "color: red; transform: scale(1.5)"
    document.set_inline_style(div, "transform", None)
    document.set_inline_style(div, "color", None)
    assert "style" not in div.attributes


def test_document_order_and_connectivity(make_document):
    document = make_document(PAGE)
    shown = document.query_selector("#shown")
    styled = document.query_selector("#styled")
    main = document.query_selector("#main")

    assert tree_position(shown, document.nodes) < tree_position(styled, document.nodes)
    assert tree_position(main, document.nodes) < tree_position(shown, document.nodes)
    assert tree_position(shown, document.nodes)[:-1] == tree_position(main, document.nodes)

    remove_child(main, shown)
    assert not document.is_connected(shown)
    assert tree_position(shown, document.nodes) is None
    assert document.is_connected(styled)


def test_text_content_includes_descendants(make_document):
    document = make_document("<p>one <b>two</b></p>")
    assert text_content(document.query_selector("p")) == "one two"
