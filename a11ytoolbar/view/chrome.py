import logging
from a11ytoolbar.parser.css_parser import *
from a11ytoolbar.setting.constant import *
from a11ytoolbar.utils.util import *
from a11ytoolbar.view.accessibility import *

logger = logging.getLogger(__name__)

FEATURE_NAMES = {
    "high_contrast": "High contrast mode",
    "text_only": "Text-only mode",
    "reading_guide": "Reading guide",
    "large_tooltip": "Large tooltip",
    "large_cursor": "Large cursor",
}

# feature -> (class name key, target key); features without a target only
# change the toolbar's own elements
FEATURE_TARGETS = {
    "high_contrast": ("high_contrast", "contrast_target"),
    "text_only": ("text_only", "text_only_target"),
    "large_cursor": ("large_cursor", "large_cursor_target"),
}

class Chrome:
    def __init__(self, document, config, announce, trigger_callback):
        self.document = document
        self.config = config
        self.announce = announce
        self.trigger_callback = trigger_callback

        self.exclude = []
        self.bind_selectors()

        self.collapsed = True
        self.zoom = config.defaults["zoom"]
        self.features = dict([(feature, False) for feature in FEATURE_NAMES])
        # Reading guide line position
        self.guide_x = 0
        self.guide_y = 0
        # Large tooltip
        self.tooltip_text = ""
        self.tooltip_visible = False

    def bind_selectors(self):
        # updated in place, the hover dispatcher shares this list
        self.exclude.clear()
        for selector in self.config.selectors["chrome"]:
            try:
                self.exclude.extend(parse_selector(selector))
            except Exception:
                logger.warning("Ignoring invalid toolbar selector %r", selector)

    def contains(self, node):
        return node is not None and closest(node, self.exclude) is not None

    def element(self, key):
        return self.document.query_selector(self.config.selectors[key])

    def target(self, key):
        selector = self.config.targets.get(key)
        node = self.document.query_selector(selector) if selector else None
        return node or self.document.body

    ##########################
    # Toolbar
    ##########################
    def toggle_toolbar(self, force=None):
        if force is None:
            self.collapsed = not self.collapsed
        else:
            self.collapsed = bool(force)

        toolbar = self.element("toolbar")
        if toolbar:
            self.document.toggle_class(toolbar, self.config.classes["show"], not self.collapsed)
        trigger = self.element("toolbar_toggle")
        if trigger:
            self.document.toggle_class(trigger, self.config.classes["active"], not self.collapsed)

        self.trigger_callback("on_feature_toggle",
            {"feature": "toolbar", "enabled": not self.collapsed})
        self.announce("Toolbar " + ("closed" if self.collapsed else "opened"))

    ##########################
    # Zoom
    ##########################
    def zoom_in(self):
        self.apply_zoom(self.zoom + ZOOM_STEP, "Zoomed in")

    def zoom_out(self):
        self.apply_zoom(self.zoom - ZOOM_STEP, "Zoomed out")

    def reset_zoom(self):
        self.apply_zoom(1)

    def set_zoom(self, zoom):
        self.apply_zoom(zoom)

    def apply_zoom(self, zoom, message=None):
        self.zoom = round(max(MIN_ZOOM, min(MAX_ZOOM, zoom)), 2)

        target = self.target("zoom_target")
        if self.zoom == 1:
            self.document.set_inline_style(target, "transform", None)
            self.document.set_inline_style(target, "transform-origin", None)
        else:
            self.document.set_inline_style(target, "transform", "scale({})".format(self.zoom))
            self.document.set_inline_style(target, "transform-origin", "top left")

        self.trigger_callback("on_zoom_change", {"zoom": self.zoom})
        if not message:
            return
        if self.zoom == MAX_ZOOM:
            self.announce("Page is at maximum zoom")
        elif self.zoom == MIN_ZOOM:
            self.announce("Page is at minimum zoom")
        else:
            self.announce("{} to {}%".format(message, round(self.zoom * 100)))

    ##########################
    # Visual aids
    ##########################
    def toggle_feature(self, feature, force=None):
        if force is None:
            enabled = not self.features[feature]
        else:
            enabled = bool(force)
        self.features[feature] = enabled

        if feature in FEATURE_TARGETS:
            class_key, target_key = FEATURE_TARGETS[feature]
            self.document.toggle_class(
                self.target(target_key), self.config.classes[class_key], enabled)
        elif feature == "reading_guide":
            for key in ["reading_guide_horizontal", "reading_guide_vertical"]:
                line = self.element(key)
                if line:
                    self.document.toggle_class(line, self.config.classes["active"], enabled)
        elif feature == "large_tooltip" and not enabled:
            self.hide_tooltip()

        self.announce(FEATURE_NAMES[feature] + (" on" if enabled else " off"))
        self.trigger_callback("on_feature_toggle", {"feature": feature, "enabled": enabled})

    def enable_feature(self, feature):
        if feature in self.features and not self.features[feature]:
            self.toggle_feature(feature, True)

    def disable_feature(self, feature):
        if feature in self.features and self.features[feature]:
            self.toggle_feature(feature, False)

    def handle_pointer_move(self, x, y):
        if self.features["reading_guide"]:
            self.guide_x = x
            self.guide_y = y

    def update_tooltip(self, node):
        if not self.features["large_tooltip"]:
            return
        if node is None or is_document_root(node) or should_skip(node):
            text = ""
        else:
            text = describe(node)
        self.tooltip_text = text
        self.tooltip_visible = bool(text)

    def hide_tooltip(self):
        self.tooltip_visible = False

    def reset(self):
        self.reset_zoom()
        for feature, enabled in self.features.items():
            if enabled:
                self.toggle_feature(feature, False)

    def __repr__(self):
        return "Chrome(collapsed={} zoom={} features={})".format(
            self.collapsed, self.zoom, self.features)
