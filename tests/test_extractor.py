import pytest

from a11ytoolbar.parser.css_parser import parse_selector
from a11ytoolbar.parser.html_parser import remove_child
from a11ytoolbar.setting.constant import MAX_EXTRACT_LENGTH, TRUNCATION_MARKER
from a11ytoolbar.view.extractor import (
    extract_all,
    extract_from,
    find_content_container,
    find_main_content,
    has_substantial_content,
    is_content_text,
    walk_text,
)

ARTICLE = """
<body>
<div class="accessibility-toolbar"><button>Zoom in</button></div>
<article id="story">
  <h1 id="title">Big news today</h1>
  <p id="first">The first paragraph has plenty of words</p>
  <p id="second">Second paragraph continues the story!</p>
  <p id="dup">The first paragraph has plenty of words</p>
  <p style="display:none">Hidden text here</p>
  <p style="visibility:hidden">Invisible text here</p>
  <script>var x = 1;</script>
  <p>A</p>
  <p id="last">Closing words</p>
</article>
</body>
"""


@pytest.fixture
def document(make_document):
    return make_document(ARTICLE)


@pytest.fixture
def exclude():
    return parse_selector(".accessibility-toolbar")


def test_reads_from_heading_to_the_end_of_the_article(document, exclude):
    text = extract_from(document.body, document.query_selector("#title"), exclude)
    assert text == (
        "Big news today. "
        "The first paragraph has plenty of words. "
        "Second paragraph continues the story! "
        "Closing words"
    )


def test_substantial_paragraph_is_read_on_its_own(document, exclude):
    text = extract_from(document.body, document.query_selector("#second"), exclude)
    assert text == "Second paragraph continues the story!"


def test_extraction_keeps_no_state_between_calls(document, exclude):
    title = document.query_selector("#title")
    first = extract_from(document.body, title, exclude)
    assert extract_from(document.body, title, exclude) == first
    assert first.count("plenty of words") == 1


def test_hidden_script_and_noise_are_skipped(document, exclude):
    text = extract_from(document.body, document.query_selector("#title"), exclude)
    assert "Hidden" not in text
    assert "Invisible" not in text
    assert "var x" not in text
    assert " A " not in text and ". A." not in text


def test_toolbar_text_is_never_read(document, exclude):
    toolbar = document.query_selector(".accessibility-toolbar")
    text = extract_from(document.body, toolbar, exclude)
    assert "Zoom in" not in text
    assert text.startswith("Big news today")


def test_detached_start_reads_nothing(document, exclude):
    first = document.query_selector("#first")
    remove_child(first.parent, first)
    assert extract_from(document.body, first, exclude) == ""


def test_small_container_falls_back_to_root(make_document):
    document = make_document('<div><p id="x">Short</p></div><p>Next part of page</p>')
    start = document.query_selector("#x")
    assert find_content_container(start, document.body) is document.body
    assert extract_from(document.body, start) == "Short. Next part of page"


def test_content_container_search_starts_at_the_node(document):
    first = document.query_selector("#first")
    assert find_content_container(first, document.body) is first
    title = document.query_selector("#title")
    assert find_content_container(title, document.body) is document.query_selector("#story")


def test_long_content_is_truncated(make_document):
    paragraphs = "".join("<p>Sentence number {} is here.</p>".format(i) for i in range(400))
    document = make_document(paragraphs)
    text = extract_from(document.body, document.body)
    assert text.endswith(TRUNCATION_MARKER)
    assert len(text) <= MAX_EXTRACT_LENGTH + len(TRUNCATION_MARKER)
    assert text.startswith("Sentence number 0 is here. Sentence number 1 is here.")


def test_cjk_sentence_endings(make_document):
    document = make_document("<p>你好世界。</p><p>再见朋友</p>")
    assert extract_from(document.body, document.body.children[0]) == "你好世界。 再见朋友"


def test_walk_text_drops_nodes_detached_mid_walk(document):
    story = document.query_selector("#story")
    walk = walk_text(story)
    node, position = next(walk)
    assert node.text == "Big news today"
    assert position == (0, 0)

    second = document.query_selector("#second")
    remove_child(story, second)
    remaining = [node.text for node, position in walk]
    assert "Second paragraph continues the story!" not in remaining
    assert "Closing words" in remaining


def test_find_main_content(document, make_document):
    assert find_main_content(document, "#story") is document.query_selector("#story")
    assert find_main_content(document, "#missing") is document.body
    assert find_main_content(document) is document.body

    with_main = make_document("<nav>Menu</nav><main><p>Body</p></main>")
    assert find_main_content(with_main).tag == "main"


def test_extract_all_keeps_hidden_text_but_not_chrome(document, exclude):
    text = extract_all(document.body, exclude)
    assert "Zoom in" not in text
    assert "var x" not in text
    assert "Hidden text here" in text
    assert text.count("plenty of words") == 2


def test_has_substantial_content(make_document):
    document = make_document('<p id="a">Tiny</p><p id="b">This one is long enough to count</p>')
    assert not has_substantial_content(document.query_selector("#a"))
    assert has_substantial_content(document.query_selector("#b"))


def test_text_nested_in_noscript_is_never_read(make_document):
    document = make_document(
        "<main><p>Real article text here</p>"
        "<noscript><p>Please enable JavaScript</p></noscript></main>")
    main = document.query_selector("main")
    assert extract_all(main) == "Real article text here"
    assert extract_from(document.body, main) == "Real article text here"

    nested = document.query_selector("noscript p").children[0]
    assert not is_content_text(nested, [])
