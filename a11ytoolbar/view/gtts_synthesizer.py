import logging
import os
import re
import tempfile
import threading
import gtts
import playsound
from a11ytoolbar.view.speech import *

logger = logging.getLogger(__name__)

SENTENCE_PATTERN = re.compile(r"[^.!?。！？]+[.!?。！？]*")

def split_sentences(text):
    return [s.strip() for s in SENTENCE_PATTERN.findall(text) if s.strip()]

class GTTSSynthesizer(SpeechSynthesizer):
    """Speaks through Google Translate's TTS and plays the mp3 locally.

    Text is synthesized one sentence at a time so that cancel() takes effect
    at the next sentence boundary; playsound itself cannot be interrupted.

    Only the language and rate (as gTTS slow mode below 0.75) reach the
    audio. Volume, pitch and voice index have no gTTS or playsound
    counterpart and are ignored; the first request says so in the debug log.
    """
    def __init__(self, task_runner):
        self.task_runner = task_runner
        self.lock = threading.Lock()
        self.cancel_event = None
        self.logged_ignored_settings = False

    def speak(self, request, on_end):
        if not self.logged_ignored_settings:
            logger.debug("Ignoring volume=%s pitch=%s voice_index=%s, gTTS cannot apply them",
                         request.volume, request.pitch, request.voice_index)
            self.logged_ignored_settings = True
        self.cancel_event = threading.Event()
        thread = threading.Thread(
            target=self.play, args=(request, on_end, self.cancel_event),
            name="Speech thread", daemon=True)
        thread.start()

    def cancel(self):
        if self.cancel_event:
            self.cancel_event.set()

    def play(self, request, on_end, cancel_event):
        # at most one utterance plays at a time
        with self.lock:
            for sentence in split_sentences(request.text):
                if cancel_event.is_set():
                    return
                try:
                    self.play_sentence(sentence, request)
                except (gtts.gTTSError, playsound.PlaysoundException, OSError) as e:
                    logger.warning("Speech playback failed: %s", e)
                    break
        if not cancel_event.is_set():
            self.task_runner.call_soon(on_end)

    def play_sentence(self, sentence, request):
        tts = gtts.gTTS(sentence, lang=request.lang, slow=request.rate < .75)
        fd, path = tempfile.mkstemp(prefix="speech-fragment-", suffix=".mp3")
        os.close(fd)
        try:
            tts.save(path)
            playsound.playsound(path)
        finally:
            os.remove(path)
