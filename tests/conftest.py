import pytest

from a11ytoolbar.common.task import Task, TimerHandle
from a11ytoolbar.view.document import Document
from a11ytoolbar.view.speech import SpeechSynthesizer


class FakeTaskRunner:
    """Runs tasks inline and fires delayed tasks on a virtual clock."""

    def __init__(self):
        self.now = 0.0
        self.timers = []
        self.tasks = []

    def schedule_task(self, task):
        self.tasks.append(task)

    def call_soon(self, task_code, *args):
        self.schedule_task(Task(task_code, *args))

    def call_later(self, delay, task_code, *args):
        handle = TimerHandle(delay, task_code, *args)
        self.timers.append((self.now + delay, handle))
        return handle

    def run_pending(self):
        while self.tasks:
            self.tasks.pop(0).run()

    def advance(self, seconds):
        deadline = self.now + seconds
        while True:
            self.run_pending()
            due = [(when, handle) for when, handle in self.timers if when <= deadline]
            if not due:
                break
            when, handle = min(due, key=lambda entry: entry[0])
            self.timers.remove((when, handle))
            self.now = when
            handle.fire()
        self.now = deadline
        self.run_pending()

    def pending_timers(self):
        return [handle for when, handle in self.timers if handle.pending]


class FakeSynthesizer(SpeechSynthesizer):
    """Records requests; an utterance ends only when a test calls finish()."""

    def __init__(self):
        self.spoken = []
        self.requests = []
        self.active = None
        self.cancels = 0

    def speak(self, request, on_end):
        self.spoken.append(request.text)
        self.requests.append((request, on_end))
        self.active = (request, on_end)

    def cancel(self):
        self.cancels += 1
        self.active = None

    def finish(self):
        request, on_end = self.active
        self.active = None
        on_end()

    @property
    def texts(self):
        return list(self.spoken)


@pytest.fixture
def task_runner():
    return FakeTaskRunner()


@pytest.fixture
def synthesizer():
    return FakeSynthesizer()


@pytest.fixture
def make_document():
    def _make(html):
        document = Document(html)
        document.render()
        return document

    return _make
