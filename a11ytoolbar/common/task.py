import logging
import threading

logger = logging.getLogger(__name__)

class Task:
    def __init__(self, task_code, *args):
        self.task_code = task_code
        self.args = args

    def run(self):
        self.task_code(*self.args)
        self.task_code = None
        self.args = None

    def __repr__(self):
        return "Task({})".format(getattr(self.task_code, "__name__", self.task_code))

class TimerHandle:
    """A delayed task that can be cancelled until the moment it runs."""
    def __init__(self, delay, task_code, *args):
        self.delay = delay
        self.task_code = task_code
        self.args = args
        self.cancelled = False
        self.fired = False
        self.timer = None

    def cancel(self):
        self.cancelled = True
        if self.timer:
            self.timer.cancel()

    def fire(self):
        if self.cancelled or self.fired:
            return
        self.fired = True
        self.task_code(*self.args)

    @property
    def pending(self):
        return not self.cancelled and not self.fired

    def __repr__(self):
        return "TimerHandle(delay={} pending={})".format(self.delay, self.pending)

# Every handler and timer callback runs on the runner's single thread.
class TaskRunner:
    def __init__(self, name="Toolbar thread"):
        self.tasks = []
        self.condition = threading.Condition()
        self.main_thread = threading.Thread(target=self.run, name=name, daemon=True)
        self.needs_quit = False

    def schedule_task(self, task):
        self.condition.acquire(blocking=True)
        self.tasks.append(task)
        self.condition.notify_all()
        self.condition.release()

    def call_soon(self, task_code, *args):
        self.schedule_task(Task(task_code, *args))

    def call_later(self, delay, task_code, *args):
        handle = TimerHandle(delay, task_code, *args)
        # the thread timer only posts; cancellation is checked on this thread
        handle.timer = threading.Timer(delay, self.schedule_task, [Task(handle.fire)])
        handle.timer.daemon = True
        handle.timer.start()
        return handle

    def set_needs_quit(self):
        self.condition.acquire(blocking=True)
        self.needs_quit = True
        self.condition.notify_all()
        self.condition.release()

    def start_thread(self):
        self.main_thread.start()

    def join(self, timeout=None):
        self.main_thread.join(timeout)

    def run(self):
        while True:
            self.condition.acquire(blocking=True)
            needs_quit = self.needs_quit
            self.condition.release()
            if needs_quit:
                return

            task = None
            self.condition.acquire(blocking=True)
            if len(self.tasks) > 0:
                task = self.tasks.pop(0)
            self.condition.release()
            if task:
                try:
                    task.run()
                except Exception:
                    logger.exception("Task %s failed", task)

            self.condition.acquire(blocking=True)
            if len(self.tasks) == 0 and not self.needs_quit:
                self.condition.wait()
            self.condition.release()
