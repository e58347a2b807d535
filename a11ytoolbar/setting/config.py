import copy
import os
from a11ytoolbar.parser.css_parser import CSSParser

SETTING_DIR = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(SETTING_DIR, "browser.css"), encoding="utf8") as f:
    DEFAULT_STYLE_SHEET = CSSParser(f.read()).parse()

DEFAULT_OPTIONS = {
    "selectors": {
        # Regions that belong to the toolbar itself and are never narrated
        "chrome": [
            ".accessibility-toolbar",
            "#accessibility-toolbar",
            "#accessibility-trigger",
        ],
        "toolbar": "#accessibility-toolbar",
        "toolbar_toggle": "#accessibility-trigger",
        "reading_guide_horizontal": ".reading-guide-line.horizontal",
        "reading_guide_vertical": ".reading-guide-line.vertical",
        "large_tooltip_display": "#large-tooltip-display",
    },
    "classes": {
        "high_contrast": "high-contrast",
        "text_only": "text-only",
        "large_cursor": "large-cursor",
        "active": "active",
        "show": "show",
    },
    "defaults": {
        "zoom": 1,
        "speech_volume": .7,
        "speech_rate": 1,
        "speech_mode": "off",
    },
    "hotkeys": {
        "toggle_toolbar": "Alt+KeyA",
        "zoom_in": "Alt+Equal",
        "zoom_out": "Alt+Minus",
        "toggle_speech_single": "Alt+KeyS",
        "toggle_speech_continuous": "Alt+KeyM",
        "toggle_high_contrast": "Alt+KeyC",
        "toggle_text_only": "Alt+KeyT",
        "toggle_reading_guide": "Alt+KeyR",
        "toggle_large_tooltip": "Alt+KeyL",
        "toggle_large_cursor": "Alt+KeyU",
        "reset_all": "Alt+Digit0",
        "stop_speech": "Escape",
    },
    "speech": {
        "lang": "en",
        "pitch": 1,
        "voice_index": -1,
    },
    "targets": {
        "zoom_target": "body",
        "contrast_target": "body",
        "text_only_target": "body",
        "large_cursor_target": "body",
        "main_content": None,
    },
    "callbacks": {
        "on_state_change": None,
        "on_zoom_change": None,
        "on_speech_toggle": None,
        "on_feature_toggle": None,
    },
}

def deep_merge(target, source):
    result = dict(target)
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            result[key] = deep_merge(target[key], value)
        else:
            result[key] = value
    return result

class Config:
    def __init__(self, options=None):
        self.options = deep_merge(copy.deepcopy(DEFAULT_OPTIONS), options or {})

    def update(self, options):
        self.options = deep_merge(self.options, options)

    @property
    def selectors(self):
        return self.options["selectors"]

    @property
    def classes(self):
        return self.options["classes"]

    @property
    def defaults(self):
        return self.options["defaults"]

    @property
    def hotkeys(self):
        return self.options["hotkeys"]

    @property
    def speech(self):
        return self.options["speech"]

    @property
    def targets(self):
        return self.options["targets"]

    @property
    def callbacks(self):
        return self.options["callbacks"]
