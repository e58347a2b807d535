import logging

logger = logging.getLogger(__name__)

MODIFIERS = ["alt", "ctrl", "shift", "meta"]

class KeyEvent:
    def __init__(self, code, alt=False, ctrl=False, shift=False, meta=False):
        self.code = code
        self.alt = alt
        self.ctrl = ctrl
        self.shift = shift
        self.meta = meta
        self.default_prevented = False

    def modifiers(self):
        return frozenset([name for name in MODIFIERS if getattr(self, name)])

    def prevent_default(self):
        self.default_prevented = True

    def __repr__(self):
        return "KeyEvent({} {})".format(self.code, sorted(self.modifiers()))

def parse_hotkey(hotkey):
    # "Alt+KeyH" -> ({"alt"}, "KeyH")
    if not hotkey or not isinstance(hotkey, str):
        return None
    parts = hotkey.split("+")
    modifiers = frozenset([part.strip().casefold() for part in parts[:-1]])
    return modifiers, parts[-1].strip()

class HotkeyMap:
    def __init__(self, hotkeys, actions):
        self.bindings = {}
        for name, hotkey in hotkeys.items():
            parsed = parse_hotkey(hotkey)
            if not parsed:
                continue
            if name not in actions:
                logger.debug("No action for hotkey %s", name)
                continue
            self.bindings[parsed] = (name, actions[name])

    def dispatch(self, event):
        binding = self.bindings.get((event.modifiers(), event.code))
        if not binding:
            return False
        name, action = binding
        try:
            handled = action()
        except Exception:
            logger.exception("Hotkey %s failed", name)
            return True
        if handled is not False:
            event.prevent_default()
        return handled is not False
