import enum
import logging
import weakref
from a11ytoolbar.setting.constant import *
from a11ytoolbar.utils.util import *
from a11ytoolbar.view.accessibility import *
from a11ytoolbar.view.extractor import *

logger = logging.getLogger(__name__)

class NarrationMode(enum.Enum):
    OFF = "off"
    POINT_READ = "point-read"
    CONTINUOUS = "continuous"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        aliases = {"none": cls.OFF, "single": cls.POINT_READ}
        if isinstance(value, str):
            name = value.strip().casefold()
            if name in aliases:
                return aliases[name]
            for mode in cls:
                if mode.value == name:
                    return mode
        logger.warning("Unrecognized narration mode %r, using off", value)
        return cls.OFF

class HoverSession:
    def __init__(self):
        self.last_hovered_ref = None
        self.pending_timer = None
        self.target_ref = None
        self.text = ""

    @property
    def last_hovered(self):
        return self.last_hovered_ref() if self.last_hovered_ref else None

    @last_hovered.setter
    def last_hovered(self, node):
        self.last_hovered_ref = weakref.ref(node) if node is not None else None

    def cancel_timer(self):
        if self.pending_timer:
            self.pending_timer.cancel()
        self.pending_timer = None
        self.target_ref = None

    def reset(self):
        self.cancel_timer()
        self.last_hovered = None

    @property
    def state(self):
        if self.pending_timer and self.pending_timer.pending:
            return "pending"
        return "idle"

class HoverDispatcher:
    def __init__(self, document, narration, task_runner, hover_session,
                 exclude=None, main_content=None):
        self.document = document
        self.narration = narration
        self.task_runner = task_runner
        self.session = hover_session
        self.exclude = exclude if exclude is not None else []
        self.main_content = main_content
        self.mode = NarrationMode.OFF

    def set_mode(self, mode):
        self.mode = NarrationMode.parse(mode)
        self.narration.stop()
        self.session.reset()

    def in_chrome(self, node):
        return closest(node, self.exclude) is not None

    def handle_pointer_over(self, target):
        if self.mode == NarrationMode.OFF:
            return
        if target is None or self.in_chrome(target):
            return
        if self.session.last_hovered is target:
            return

        self.session.cancel_timer()
        if self.mode == NarrationMode.POINT_READ:
            delay = POINT_READ_DELAY_SEC
        else:
            delay = CONTINUOUS_DELAY_SEC
        self.session.pending_timer = self.task_runner.call_later(
            delay, self.handle_timer, weakref.ref(target), self.mode)
        self.session.target_ref = weakref.ref(target)

    def handle_timer(self, target_ref, mode):
        self.session.pending_timer = None
        self.session.target_ref = None
        target = target_ref()
        if target is None or mode != self.mode:
            return
        if not self.document.is_connected(target):
            logger.debug("Hovered node %s was detached", target)
            return
        if should_skip(target):
            return
        self.session.last_hovered = target

        if mode == NarrationMode.POINT_READ:
            text = describe_with_type(target)
            if text:
                self.narration.speak(text)
        else:
            if self.narration.is_reading:
                self.stop()
                self.session.last_hovered = target
            self.read_from(target)

    def read_from(self, target):
        self.document.render()
        text = extract_from(self.document.body, target, self.exclude)
        self.session.text = text
        if not text:
            self.narration.speak(NO_CONTENT_MESSAGE)
            return
        self.narration.speak(text, lambda: self.narration.speak(FINISHED_MESSAGE))

    def handle_pointer_out(self):
        self.session.reset()

    def handle_pointer_click(self, target):
        if self.mode == NarrationMode.OFF:
            return
        if target is not None and self.in_chrome(target):
            return
        if self.mode == NarrationMode.CONTINUOUS and self.narration.is_reading:
            self.stop()
            self.narration.speak(STOPPED_MESSAGE)

    def read_page(self):
        if self.mode == NarrationMode.OFF or self.narration.is_reading:
            return
        root = find_main_content(self.document, self.main_content)
        text = extract_all(root, self.exclude)
        self.session.text = text
        if not text:
            self.narration.speak(NO_CONTENT_MESSAGE)
            return
        self.narration.speak(text)

    def stop(self):
        self.narration.stop()
        self.session.reset()

    def is_reading(self):
        return self.narration.is_reading

    def detach(self):
        self.stop()
        self.mode = NarrationMode.OFF
