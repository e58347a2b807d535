import html

class Text:
    def __init__(self, text, parent):
        self.text = text
        self.children = []
        self.parent = parent

        self.style = None

    def __repr__(self):
        return repr(self.text)

class Element:
    def __init__(self, tag, attributes, parent):
        self.tag = tag
        self.attributes = attributes
        self.children = []
        self.parent = parent

        self.style = None

    def class_list(self):
        return self.attributes.get("class", "").split()

    def __repr__(self):
        return "<" + self.tag + ">"

def remove_child(parent, node):
    if node in parent.children:
        parent.children.remove(node)
    node.parent = None

class AttributeParser:
    def __init__(self, s):
        self.s = s
        self.i = 0

    def whitespace(self):
        while self.i < len(self.s) and self.s[self.i].isspace():
            self.i += 1

    def literal(self, literal):
        if self.i < len(self.s) and self.s[self.i] == literal:
            self.i += 1
            return True
        return False

    def word(self, allow_quotes=False):
        start = self.i
        in_quote = False
        quoted = False
        while self.i < len(self.s):
            cur = self.s[self.i]
            if not cur.isspace() and cur not in "=\"\'":
                self.i += 1
            elif allow_quotes and cur in "\"\'":
                in_quote = not in_quote
                quoted = True
                self.i += 1
            elif in_quote and (cur.isspace() or cur == "="):
                self.i += 1
            else:
                break
        if self.i == start:
            self.i = len(self.s)
            return ""
        if quoted:
            return self.s[start+1:self.i-1]
        return self.s[start:self.i]

    def parse(self):
        attributes = {}
        tag = None

        tag = self.word().casefold()
        while self.i < len(self.s):
            self.whitespace()
            key = self.word()
            if not key: continue
            if self.literal("="):
                value = self.word(allow_quotes=True)
                attributes[key.casefold()] = html.unescape(value)
            else:
                attributes[key.casefold()] = ""
        if tag.endswith("/"):
            tag = tag[:-1]
        return (tag, attributes)

class HTMLParser:

    SELF_CLOSING_TAGS = [
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "param", "source", "track", "wbr",
    ]

    HEAD_TAGS = [
        "base", "basefont", "bgsound", "noscript",
        "link", "meta", "title", "style", "script",
    ]

    # contents are kept verbatim up to the matching close tag
    RAW_TEXT_TAGS = ["script", "style", "textarea", "title"]

    def __init__(self, body):
        self.body = body
        self.unfinished = []

    def parse(self):
        text = ""
        in_tag = False
        i = 0
        while i < len(self.body):
            c = self.body[i]
            if not in_tag and self.body.startswith("<!--", i):
                if text: self.add_text(text)
                text = ""
                end = self.body.find("-->", i + 4)
                i = len(self.body) if end < 0 else end + 3
                continue
            if c == "<":
                in_tag = True
                if text: self.add_text(text)
                text = ""
            elif c == ">" and in_tag:
                in_tag = False
                if text: self.add_tag(text)
                text = ""
                i = self.raw_text(i + 1)
                continue
            else:
                text += c
            i += 1
        if not in_tag and text:
            self.add_text(text)
        return self.finish()

    def raw_text(self, i):
        if not self.unfinished: return i
        tag = self.unfinished[-1].tag
        if tag not in self.RAW_TEXT_TAGS: return i
        end = self.body.lower().find("</" + tag, i)
        if end < 0: end = len(self.body)
        if self.body[i:end]:
            self.add_text(self.body[i:end], raw=True)
        return end

    def add_text(self, text, raw=False):
        if text.isspace(): return
        self.implicit_tags(None)

        parent = self.unfinished[-1]
        if not raw:
            text = html.unescape(text)
        node = Text(text, parent)
        parent.children.append(node)

    def add_tag(self, tag):
        self_closing = tag.endswith("/")
        tag, attributes = self.get_attributes(tag.rstrip("/"))

        if tag.startswith("!") or tag.startswith("?"): return
        self.implicit_tags(tag)

        if tag.startswith("/"):
            if len(self.unfinished) == 1: return
            if tag[1:] not in [node.tag for node in self.unfinished]: return

            while True:
                node = self.unfinished.pop()
                parent = self.unfinished[-1]
                parent.children.append(node)
                if node.tag == tag[1:] or len(self.unfinished) == 1:
                    break
        elif tag in self.SELF_CLOSING_TAGS or self_closing:
            parent = self.unfinished[-1]
            node = Element(tag, attributes, parent)
            parent.children.append(node)
        else:
            parent = self.unfinished[-1] if self.unfinished else None
            node = Element(tag, attributes, parent)
            self.unfinished.append(node)

    def get_attributes(self, text):
        (tag, attributes) = AttributeParser(text).parse()
        return tag, attributes

    def implicit_tags(self, tag):
        while True:
            open_tags = [node.tag for node in self.unfinished]

            if open_tags == [] and tag != "html":
                self.add_tag("html")
            elif open_tags == ["html"] and tag not in ["head", "body", "/html"]:
                if tag in self.HEAD_TAGS:
                    self.add_tag("head")
                else:
                    self.add_tag("body")
            elif open_tags == ["html", "head"] and tag not in ["/head"] + self.HEAD_TAGS:
                self.add_tag("/head")
            else:
                break

    def finish(self):
        if not self.unfinished:
            self.implicit_tags(None)

        while len(self.unfinished) > 1:
            node = self.unfinished.pop()
            parent = self.unfinished[-1]
            parent.children.append(node)

        return self.unfinished.pop()
