import logging
from a11ytoolbar.parser.css_parser import *
from a11ytoolbar.utils.util import *
from a11ytoolbar.utils.style_util import *
from a11ytoolbar.setting.config import *

logger = logging.getLogger(__name__)

class Document:
    """The host page: node tree, style rules and presentation classes."""
    def __init__(self, body="", url=None):
        self.url = url
        self.nodes = None
        self.rules = []
        self.needs_style = False
        self.load(body)

    def load(self, body):
        self.nodes = HTMLParser(body).parse()
        self.rules = DEFAULT_STYLE_SHEET.copy()
        for node in tree_to_list(self.nodes, []):
            if isinstance(node, Element) and node.tag == "style":
                self.rules.extend(CSSParser(text_content(node)).parse())
        self.set_needs_render()

    @classmethod
    def from_file(cls, path):
        with open(path, encoding="utf8", errors="replace") as f:
            return cls(f.read(), url=path)

    def set_needs_render(self):
        self.needs_style = True

    def render(self):
        if self.needs_style:
            style(self.nodes, sorted(self.rules, key=cascade_priority))
            self.needs_style = False

    @property
    def body(self):
        for child in self.nodes.children:
            if isinstance(child, Element) and child.tag == "body":
                return child
        return self.nodes

    def query_selector(self, selector, root=None):
        results = self.query_selector_all(selector, root)
        return results[0] if results else None

    def query_selector_all(self, selector, root=None):
        try:
            selectors = parse_selector(selector)
        except Exception:
            logger.warning("Invalid selector %r", selector)
            return []
        return [node for node in tree_to_list(root or self.nodes, [])
                if matches_any(selectors, node)]

    def is_connected(self, node):
        return node is not None and is_connected(node, self.nodes)

    def add_class(self, node, name):
        classes = node.class_list()
        if name in classes: return
        node.attributes["class"] = " ".join(classes + [name])
        self.set_needs_render()

    def remove_class(self, node, name):
        classes = node.class_list()
        if name not in classes: return
        node.attributes["class"] = " ".join([c for c in classes if c != name])
        self.set_needs_render()

    def toggle_class(self, node, name, enabled):
        if enabled:
            self.add_class(node, name)
        else:
            self.remove_class(node, name)

    def set_inline_style(self, node, property, value):
        pairs = CSSParser(node.attributes.get("style", "")).body()
        if value is None:
            pairs.pop(property, None)
        else:
            pairs[property] = value
        if pairs:
            node.attributes["style"] = serialize_style(pairs)
        else:
            node.attributes.pop("style", None)
        self.set_needs_render()

    def __repr__(self):
        return "Document(url={})".format(self.url)
