from a11ytoolbar.parser.css_parser import *
from a11ytoolbar.setting.constant import *

def style(node, rules):
    node.style = {}
    for property, default_value in INHERITED_PROPERTIES.items():
        if node.parent and node.parent.style:
            node.style[property] = node.parent.style[property]
        else:
            node.style[property] = default_value
    for property, default_value in CSS_PROPERTIES.items():
        node.style[property] = default_value

    if isinstance(node, Element):
        for selector, body in rules:
            if not selector.matches(node): continue
            for property, value in body.items():
                set_property(node, property, value)
        # the style attribute should override style sheet values.
        if "style" in node.attributes:
            pairs = CSSParser(node.attributes["style"]).body()
            for property, value in pairs.items():
                set_property(node, property, value)
        if "hidden" in node.attributes:
            node.style["display"] = "none"

    for child in node.children:
        style(child, rules)

def set_property(node, property, value):
    if value == "inherit":
        if node.parent and node.parent.style:
            value = node.parent.style.get(property, CSS_PROPERTIES.get(property))
        else:
            value = INHERITED_PROPERTIES.get(property, CSS_PROPERTIES.get(property))
    node.style[property] = value

def has_layout_box(node):
    # unstyled nodes have never been rendered
    while node:
        if not node.style or node.style.get("display") == "none":
            return False
        node = node.parent
    return True

def is_visible(node):
    if not has_layout_box(node):
        return False
    return node.style.get("visibility") not in ["hidden", "collapse"]
