from a11ytoolbar.parser.html_parser import *

def tree_to_list(tree, list):
    list.append(tree)
    for child in tree.children:
        tree_to_list(child, list)
    return list

def text_content(node):
    if isinstance(node, Text):
        return node.text
    return "".join([text_content(child) for child in node.children])

def ancestors(node):
    while node:
        yield node
        node = node.parent

def closest(node, selectors):
    for ancestor in ancestors(node):
        for selector in selectors:
            if selector.matches(ancestor):
                return ancestor
    return None

def is_attached(node):
    parent = node.parent
    return parent is not None and any([child is node for child in parent.children])

def is_connected(node, root):
    while node is not root:
        if not is_attached(node):
            return False
        node = node.parent
    return True

def tree_position(node, root):
    # child indexes from root down to node, None when node is not under root
    path = []
    while node is not root:
        if node is None or not is_attached(node):
            return None
        path.append(index_of(node.parent.children, node))
        node = node.parent
    path.reverse()
    return tuple(path)

def index_of(children, node):
    for i, child in enumerate(children):
        if child is node:
            return i
    return -1
