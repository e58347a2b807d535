import logging
from a11ytoolbar.setting.config import *
from a11ytoolbar.view.chrome import *
from a11ytoolbar.view.hotkeys import *
from a11ytoolbar.view.hover import *
from a11ytoolbar.view.speech import *

logger = logging.getLogger(__name__)

class AccessibilityToolbar:
    """Accessibility toolbar attached to one document.

    Every method is meant to be called on the task runner's thread, the same
    one that runs debounce timers and speech completion callbacks.
    """
    def __init__(self, document, synthesizer, task_runner, options=None):
        self.document = document
        self.task_runner = task_runner
        self.config = Config(options)
        self.attached = True

        speech = self.config.speech
        defaults = self.config.defaults
        self.hover_session = HoverSession()
        self.narration = NarrationSession(
            synthesizer, self.hover_session,
            volume=float(defaults["speech_volume"]),
            rate=float(defaults["speech_rate"]),
            pitch=speech["pitch"], lang=speech["lang"],
            voice_index=speech["voice_index"])
        self.chrome = Chrome(document, self.config, self.speak, self.trigger_callback)
        self.dispatcher = HoverDispatcher(
            document, self.narration, task_runner, self.hover_session,
            exclude=self.chrome.exclude,
            main_content=self.config.targets["main_content"])
        self.dispatcher.mode = NarrationMode.parse(defaults["speech_mode"])

        self.bind_hotkeys()

        self.trigger_callback("on_state_change", {"type": "initialized", "state": self.get_state()})
        logger.info("Accessibility toolbar attached to %s", document)

    def bind_hotkeys(self):
        self.hotkeys = HotkeyMap(self.config.hotkeys, {
            "toggle_toolbar": self.toggle_toolbar,
            "zoom_in": self.chrome.zoom_in,
            "zoom_out": self.chrome.zoom_out,
            "toggle_speech_single": self.toggle_speech_single,
            "toggle_speech_continuous": self.toggle_speech_continuous,
            "toggle_high_contrast": lambda: self.chrome.toggle_feature("high_contrast"),
            "toggle_text_only": lambda: self.chrome.toggle_feature("text_only"),
            "toggle_reading_guide": lambda: self.chrome.toggle_feature("reading_guide"),
            "toggle_large_tooltip": lambda: self.chrome.toggle_feature("large_tooltip"),
            "toggle_large_cursor": lambda: self.chrome.toggle_feature("large_cursor"),
            "reset_all": self.reset_all,
            "stop_speech": self.handle_escape,
        })

    def update_config(self, options):
        self.config.update(options)
        self.chrome.bind_selectors()
        self.bind_hotkeys()
        speech = self.config.speech
        self.narration.lang = speech["lang"]
        self.narration.pitch = speech["pitch"]
        self.narration.voice_index = speech["voice_index"]
        self.dispatcher.main_content = self.config.targets["main_content"]
        logger.debug("Toolbar options updated: %s", sorted(options))

    def speak(self, text, on_complete=None):
        self.narration.speak(text, on_complete)

    def trigger_callback(self, name, data):
        callback = self.config.callbacks.get(name)
        if callable(callback):
            callback(data)

    ##########################
    # Narration
    ##########################
    @property
    def mode(self):
        return self.dispatcher.mode

    def set_mode(self, mode):
        self.dispatcher.set_mode(mode)
        self.trigger_callback("on_speech_toggle", {"mode": self.mode.value})
        if self.mode == NarrationMode.POINT_READ:
            self.speak("Point-read mode on")
        elif self.mode == NarrationMode.CONTINUOUS:
            self.speak("Continuous reading mode on, hover over content to start reading")
        else:
            self.speak("Speech reading off")

    def toggle_speech_single(self):
        if self.mode == NarrationMode.POINT_READ:
            self.set_mode(NarrationMode.OFF)
        else:
            self.set_mode(NarrationMode.POINT_READ)

    def toggle_speech_continuous(self):
        if self.mode == NarrationMode.CONTINUOUS:
            self.set_mode(NarrationMode.OFF)
        else:
            self.set_mode(NarrationMode.CONTINUOUS)

    def set_speech_volume(self, volume):
        self.narration.volume = max(0.0, min(1.0, float(volume)))

    def set_speech_rate(self, rate):
        self.narration.rate = float(rate)

    def read_page(self):
        self.dispatcher.read_page()

    def stop(self):
        self.dispatcher.stop()

    def is_reading(self):
        return self.narration.is_reading

    ##############################
    # Pointer and keyboard events
    ##############################
    def handle_pointer_over(self, node):
        if not self.attached: return
        if not self.chrome.contains(node):
            self.chrome.update_tooltip(node)
        self.dispatcher.handle_pointer_over(node)

    def handle_pointer_out(self):
        if not self.attached: return
        self.chrome.hide_tooltip()
        self.dispatcher.handle_pointer_out()

    def handle_pointer_click(self, node):
        if not self.attached: return
        self.dispatcher.handle_pointer_click(node)

    def handle_pointer_move(self, x, y):
        if not self.attached: return
        self.chrome.handle_pointer_move(x, y)

    def handle_key(self, event):
        if not self.attached: return False
        return self.hotkeys.dispatch(event)

    def handle_escape(self):
        if self.narration.is_reading:
            self.stop()
            return True
        if not self.chrome.collapsed:
            self.toggle_toolbar()
            return True
        return False

    ##########################
    # Toolbar
    ##########################
    def toggle_toolbar(self, force=None):
        self.chrome.toggle_toolbar(force)

    def reset_all(self):
        self.chrome.reset()
        if self.mode != NarrationMode.OFF:
            self.dispatcher.set_mode(NarrationMode.OFF)
        self.set_speech_volume(.7)
        self.set_speech_rate(1)
        self.speak("All accessibility features reset")

    def get_state(self):
        return {
            "collapsed": self.chrome.collapsed,
            "zoom": self.chrome.zoom,
            "features": dict(self.chrome.features),
            "speech_mode": self.mode.value,
            "speech_volume": self.narration.volume,
            "speech_rate": self.narration.rate,
            "is_reading": self.narration.is_reading,
        }

    def detach(self):
        self.dispatcher.detach()
        self.chrome.reset_zoom()
        for feature in ["high_contrast", "text_only", "large_cursor"]:
            class_key, target_key = FEATURE_TARGETS[feature]
            self.document.remove_class(
                self.chrome.target(target_key), self.config.classes[class_key])
        self.attached = False
        self.trigger_callback("on_state_change", {"type": "destroyed", "state": self.get_state()})
        logger.info("Accessibility toolbar detached")
