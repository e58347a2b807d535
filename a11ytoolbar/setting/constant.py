# Debounce delays, in seconds
POINT_READ_DELAY_SEC = .3
CONTINUOUS_DELAY_SEC = .5

MAX_DIRECT_TEXT = 100
MAX_EXTRACT_LENGTH = 5000
MIN_SUBSTANTIAL_TEXT = 20
TRUNCATION_MARKER = " ... (content truncated)"
SENTENCE_ENDINGS = ".!?。！？"

MIN_ZOOM, MAX_ZOOM, ZOOM_STEP = .5, 3, .1

INHERITED_PROPERTIES = {
    "visibility": "visible",
}

CSS_PROPERTIES = {
    "display": "inline",
}

NON_CONTENT_TAGS = ["script", "style", "noscript"]

CONTAINER_TAGS = [
    "div", "section", "article", "main", "header", "footer", "aside",
    "nav", "ul", "ol", "table", "form", "fieldset", "details",
]

CONTENT_CONTAINER_TAGS = [
    "article", "section", "main", "div", "p", "li", "blockquote",
]

INTERACTIVE_TAGS = ["a", "button", "input", "select", "textarea"]

ROLE_NAMES = {
    "link": "link",
    "button": "button",
    "textbox": "input",
    "image": "image",
    "video": "video",
    "audio": "audio",
    "combobox": "select",
}

INPUT_TYPE_PREFIXES = {
    "text": "text input",
    "password": "password input",
    "email": "email input",
    "tel": "phone input",
    "number": "number input",
    "search": "search box",
    "url": "URL input",
}

BUTTON_INPUT_TYPES = ["button", "submit", "reset"]

NO_CONTENT_MESSAGE = "No readable content found"
FINISHED_MESSAGE = "Finished reading"
STOPPED_MESSAGE = "Reading stopped"
