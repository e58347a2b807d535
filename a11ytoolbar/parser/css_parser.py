from a11ytoolbar.parser.html_parser import *

def cascade_priority(rule):
    selector, body = rule
    return selector.priority

class TagSelector:
    def __init__(self, tag):
        self.tag = tag
        self.priority = 1

    def matches(self, node):
        return isinstance(node, Element) and self.tag == node.tag

    def __repr__(self):
        return "TagSelector({})".format(self.tag)

class ClassSelector:
    def __init__(self, name):
        self.name = name
        self.priority = 10

    def matches(self, node):
        return isinstance(node, Element) and self.name in node.class_list()

    def __repr__(self):
        return "ClassSelector({})".format(self.name)

class IdSelector:
    def __init__(self, id):
        self.id = id
        self.priority = 100

    def matches(self, node):
        return isinstance(node, Element) and node.attributes.get("id") == self.id

    def __repr__(self):
        return "IdSelector({})".format(self.id)

class CompoundSelector:
    def __init__(self, parts):
        self.parts = parts
        self.priority = sum([part.priority for part in parts])

    def matches(self, node):
        return all([part.matches(node) for part in self.parts])

    def __repr__(self):
        return "CompoundSelector({})".format(self.parts)

class DescendantSelector:
    def __init__(self, ancestor, descendant):
        self.ancestor = ancestor
        self.descendant = descendant
        self.priority = ancestor.priority + descendant.priority

    def matches(self, node):
        if not self.descendant.matches(node): return False
        while node.parent:
            if self.ancestor.matches(node.parent): return True
            node = node.parent
        return False

    def __repr__(self):
        return "DescendantSelector({}, {})".format(self.ancestor, self.descendant)

class CSSParser:
    def __init__(self, s):
        self.s = s
        self.i = 0

    def parse(self):
        rules = []
        self.whitespace()
        while self.i < len(self.s):
            try:
                if self.s[self.i] == "@":
                    # at-rules such as @media are not applied
                    self.at_rule()
                    self.whitespace()
                    continue
                selectors = self.selector_list()
                self.literal("{")
                self.whitespace()
                body = self.body()
                self.literal("}")
                self.whitespace()
                for selector in selectors:
                    rules.append((selector, body))
            except Exception:
                why = self.ignore_until(["}"])
                if why == "}":
                    self.literal("}")
                    self.whitespace()
                else:
                    break
        return rules

    def selector_list(self):
        out = [self.selector()]
        while self.i < len(self.s) and self.s[self.i] == ",":
            self.literal(",")
            self.whitespace()
            out.append(self.selector())
        return out

    def selector(self):
        out = self.simple_selector()
        self.whitespace()
        while self.i < len(self.s) and self.s[self.i] not in "{,":
            descendant = self.simple_selector()
            out = DescendantSelector(out, descendant)
            self.whitespace()
        return out

    def simple_selector(self):
        word = self.word()
        parts = []
        start = 0
        for j in range(1, len(word) + 1):
            if j == len(word) or word[j] in ".#":
                parts.append(self.selector_part(word[start:j]))
                start = j
        if len(parts) == 1:
            return parts[0]
        return CompoundSelector(parts)

    def selector_part(self, part):
        if part.startswith("."):
            if len(part) == 1: raise Exception("Parsing error")
            return ClassSelector(part[1:])
        elif part.startswith("#"):
            if len(part) == 1: raise Exception("Parsing error")
            return IdSelector(part[1:])
        return TagSelector(part.casefold())

    def body(self):
        pairs = {}
        while self.i < len(self.s) and self.s[self.i] != "}":
            try:
                prop, val = self.pair([";", "}"])
                pairs[prop.casefold()] = val
                self.whitespace()
                self.literal(";")
                self.whitespace()
            except Exception:
                why = self.ignore_until([";", "}"])
                if why == ";":
                    self.literal(";")
                    self.whitespace()
                else:
                    break
        return pairs

    def until_chars(self, chars):
        start = self.i
        while self.i < len(self.s) and self.s[self.i] not in chars:
            self.i += 1
        return self.s[start:self.i]

    def pair(self, until):
        prop = self.word()
        self.whitespace()
        self.literal(":")
        self.whitespace()
        val = self.until_chars(until)
        return prop.casefold(), val.strip()

    def at_rule(self):
        depth = 0
        while self.i < len(self.s):
            c = self.s[self.i]
            self.i += 1
            if c == ";" and depth == 0:
                return
            elif c == "{":
                depth += 1
            elif c == "}":
                depth -= 1
                if depth == 0:
                    return

    def ignore_until(self, chars):
        while self.i < len(self.s):
            if self.s[self.i] in chars:
                return self.s[self.i]
            else:
                self.i += 1
        return None

    def whitespace(self):
        while self.i < len(self.s) and self.s[self.i].isspace():
            self.i += 1

    def word(self):
        start = self.i
        while self.i < len(self.s):
            cur = self.s[self.i]
            if cur.isalnum() or cur in "#-_.%":
                self.i += 1
            else:
                break
        if not (self.i > start):
            raise Exception("Parsing error")
        return self.s[start:self.i]

    def literal(self, literal):
        if not (self.i < len(self.s) and self.s[self.i] == literal):
            raise Exception("Parsing error")
        self.i += 1

def parse_selector(s):
    parser = CSSParser(s.strip())
    selectors = parser.selector_list()
    if parser.i < len(parser.s):
        raise Exception("Parsing error")
    return selectors

def matches_any(selectors, node):
    return any([selector.matches(node) for selector in selectors])

def serialize_style(pairs):
    return "; ".join(["{}: {}".format(prop, val) for prop, val in pairs.items()])
