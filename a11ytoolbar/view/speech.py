import itertools
import logging
from a11ytoolbar.common.errors import *

logger = logging.getLogger(__name__)

class SpeechRequest:
    def __init__(self, text, volume=.7, rate=1, pitch=1, lang="en", voice_index=-1):
        self.text = text
        self.volume = volume
        self.rate = rate
        self.pitch = pitch
        self.lang = lang
        self.voice_index = voice_index

    def __repr__(self):
        return "SpeechRequest(text={!r} volume={} rate={} lang={})".format(
            self.text, self.volume, self.rate, self.lang)

class SpeechSynthesizer:
    """The speech service narration is sent to.

    speak() starts one request and calls on_end on the toolbar thread once it
    has finished playing. cancel() stops whatever is playing; a cancelled
    request may or may not still signal on_end.
    """
    def speak(self, request, on_end):
        raise NotImplementedError

    def cancel(self):
        raise NotImplementedError

class PrintSynthesizer(SpeechSynthesizer):
    def __init__(self, task_runner):
        self.task_runner = task_runner

    def speak(self, request, on_end):
        print("SPEAK:", request.text)
        self.task_runner.call_soon(on_end)

    def cancel(self):
        pass

class Utterance:
    ids = itertools.count(1)

    def __init__(self, request, on_complete):
        self.id = next(Utterance.ids)
        self.request = request
        self.on_complete = on_complete

    def __repr__(self):
        return "Utterance(id={} text={!r})".format(self.id, self.request.text[:40])

class NarrationSession:
    def __init__(self, synthesizer, hover_session=None, volume=.7, rate=1,
                 pitch=1, lang="en", voice_index=-1):
        self.synthesizer = synthesizer
        self.hover_session = hover_session
        self.volume = volume
        self.rate = rate
        self.pitch = pitch
        self.lang = lang
        self.voice_index = voice_index

        self.is_reading = False
        self.current = None

    def speak(self, text, on_complete=None):
        if not self.synthesizer:
            logger.warning("Speech synthesis unavailable, dropping %r", text[:40])
            return
        self.cancel()
        if not text:
            return

        request = SpeechRequest(text, self.volume, self.rate, self.pitch,
                                self.lang, self.voice_index)
        utterance = Utterance(request, on_complete)
        self.current = utterance
        self.is_reading = True
        try:
            self.synthesizer.speak(request, lambda: self.handle_end(utterance))
        except SpeechError as e:
            logger.warning("Could not start speech: %s", e)
            self.current = None
            self.is_reading = False

    def handle_end(self, utterance):
        # a cancelled utterance never completes
        if utterance is not self.current:
            return
        self.current = None
        self.is_reading = False
        if utterance.on_complete:
            utterance.on_complete()

    def cancel(self):
        if self.current:
            logger.debug("Cancelling %s", self.current)
        self.current = None
        self.is_reading = False
        try:
            self.synthesizer.cancel()
        except SpeechError as e:
            logger.warning("Could not cancel speech: %s", e)

    def stop(self):
        if self.synthesizer:
            self.cancel()
        self.is_reading = False
        if self.hover_session:
            self.hover_session.reset()
