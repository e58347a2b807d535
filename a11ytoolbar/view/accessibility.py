from a11ytoolbar.parser.html_parser import *
from a11ytoolbar.setting.constant import *

def get_role(node):
    if isinstance(node, Text):
        return "StaticText"
    if "role" in node.attributes:
        return node.attributes["role"]
    elif node.tag == "a":
        return "link"
    elif node.tag == "input":
        input_type = node.attributes.get("type", "text").casefold()
        if input_type in BUTTON_INPUT_TYPES:
            return "button"
        elif input_type == "image":
            return "image"
        return "textbox"
    elif node.tag == "button":
        return "button"
    elif node.tag == "img":
        return "image"
    elif node.tag == "video":
        return "video"
    elif node.tag == "audio":
        return "audio"
    elif node.tag == "select":
        return "combobox"
    elif node.tag == "html":
        return "document"
    return "none"

def is_interactive(node):
    return isinstance(node, Element) and node.tag in INTERACTIVE_TAGS

def is_document_root(node):
    return isinstance(node, Element) and node.tag in ["html", "body"]

def direct_text(node):
    """Text of the node's own text children, never of its descendants."""
    if isinstance(node, Text):
        return node.text.strip()[:MAX_DIRECT_TEXT]
    fragments = [child.text.strip() for child in node.children
                 if isinstance(child, Text) and child.text.strip()]
    return " ".join(fragments)[:MAX_DIRECT_TEXT].strip()

def direct_label(node):
    if isinstance(node, Text):
        return direct_text(node)
    for name in ["alt", "aria-label", "title", "placeholder", "value"]:
        value = node.attributes.get(name, "").strip()
        if value:
            return value
    return direct_text(node)

def describe(node):
    if node is None or is_document_root(node):
        return ""
    text = direct_label(node)
    if text:
        return text
    role = get_role(node)
    if role in ROLE_NAMES:
        return ROLE_NAMES[role]
    return node.tag.lower()

def type_prefix(node):
    if not isinstance(node, Element):
        return ""
    input_type = node.attributes.get("type", "text").casefold()
    if node.tag == "button" or (node.tag == "input" and input_type in BUTTON_INPUT_TYPES):
        return "button"
    elif node.tag == "a":
        return "link"
    elif node.tag == "input":
        return INPUT_TYPE_PREFIXES.get(input_type, "input box")
    elif node.tag == "select":
        return "dropdown"
    elif node.tag == "textarea":
        return "text area"
    elif node.tag == "img":
        return "image"
    return ""

def describe_with_type(node):
    if node is None or is_document_root(node):
        return ""
    text = direct_label(node)
    if not text:
        return ""
    prefix = type_prefix(node)
    if prefix:
        return prefix + ": " + text
    return text

def child_elements(node):
    return [child for child in node.children if isinstance(child, Element)]

def should_skip(node):
    """Whether a node is a wrapper whose children already carry its text.

    Containers with a labelled or interactive child are skipped so the same
    content is not announced twice, as are unlabelled nodes that only wrap
    other elements.
    """
    if not isinstance(node, Element):
        return False
    children = child_elements(node)
    if node.tag in CONTAINER_TAGS:
        for child in children:
            if direct_label(child) or is_interactive(child):
                return True
    return not direct_label(node) and len(children) > 0
