from a11ytoolbar.parser.html_parser import *
from a11ytoolbar.setting.constant import *
from a11ytoolbar.utils.util import *
from a11ytoolbar.utils.style_util import *

def has_substantial_content(node):
    return len(text_content(node).strip()) > MIN_SUBSTANTIAL_TEXT

def find_content_container(node, root):
    current = node
    while current is not None and current is not root:
        if isinstance(current, Element) \
            and current.tag in CONTENT_CONTAINER_TAGS \
            and has_substantial_content(current):
            return current
        current = current.parent
    return root

def walk_text(container):
    """Yield (text node, tree position) pairs under container in document order.

    A node that no longer hangs off the parent it was reached from has been
    detached since, and is dropped along with its subtree.
    """
    stack = [(container, None, ())]
    while stack:
        node, parent, position = stack.pop()
        if parent is not None and node.parent is not parent:
            continue
        if isinstance(node, Text):
            yield node, position
            continue
        children = list(node.children)
        for i in reversed(range(len(children))):
            stack.append((children[i], node, position + (i,)))

def is_content_text(node, exclude):
    parent = node.parent
    if parent is None:
        return False
    for ancestor in ancestors(parent):
        if isinstance(ancestor, Element) and ancestor.tag in NON_CONTENT_TAGS:
            return False
    if exclude and closest(parent, exclude):
        return False
    if not node.text.strip():
        return False
    return True

def accept_text(node, position, exclude, start_position):
    if not is_content_text(node, exclude):
        return False
    if not is_visible(node.parent):
        return False
    # tree order, so text inside the start node itself is kept
    return position >= start_position

def extract_from(root, start_node, exclude=None):
    """Text to read aloud from start_node onwards, in document order."""
    start_position = tree_position(start_node, root)
    if start_position is None:
        return ""
    container = find_content_container(start_node, root)
    container_position = tree_position(container, root)

    content = ""
    seen_texts = set()
    for node, position in walk_text(container):
        if not accept_text(node, container_position + position, exclude, start_position):
            continue

        text = node.text.strip()
        if text in seen_texts or len(text) <= 1:
            continue
        if content and not content.rstrip().endswith(tuple(SENTENCE_ENDINGS)):
            content = content.rstrip() + ". "
        content += text + " "
        seen_texts.add(text)

        if len(content) > MAX_EXTRACT_LENGTH:
            content = content[:MAX_EXTRACT_LENGTH].rstrip() + TRUNCATION_MARKER
            break

    return content.strip()

def find_main_content(document, selector=None):
    if selector:
        node = document.query_selector(selector)
        if node: return node
    return document.query_selector("main") or document.body

def extract_all(root, exclude=None):
    fragments = []
    for node, position in walk_text(root):
        if is_content_text(node, exclude):
            fragments.append(node.text.strip())
    return " ".join(fragments)
