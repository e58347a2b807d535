class ToolbarError(Exception):
    pass

class SpeechError(ToolbarError):
    """Raised by a speech synthesizer that cannot start an utterance."""
    pass
