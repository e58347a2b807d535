import threading

import pytest

from a11ytoolbar.common.task import Task, TaskRunner, TimerHandle


@pytest.fixture
def runner():
    runner = TaskRunner("Test thread")
    runner.start_thread()
    yield runner
    runner.set_needs_quit()
    runner.join(1)


def test_task_runs_once():
    calls = []
    task = Task(calls.append, "x")
    task.run()
    assert calls == ["x"]
    assert task.task_code is None


def test_timer_handle_cancel():
    calls = []
    handle = TimerHandle(1, calls.append, "late")
    assert handle.pending
    handle.cancel()
    handle.fire()
    assert calls == []
    assert not handle.pending


def test_timer_handle_fires_once():
    calls = []
    handle = TimerHandle(1, calls.append, "x")
    handle.fire()
    handle.fire()
    assert calls == ["x"]


def test_tasks_run_in_order_on_runner_thread(runner):
    seen = []
    done = threading.Event()
    runner.call_soon(lambda: seen.append(threading.current_thread().name))
    runner.call_soon(seen.append, "second")
    runner.call_soon(done.set)
    assert done.wait(2)
    assert seen == ["Test thread", "second"]


def test_failing_task_does_not_stop_runner(runner, caplog):
    done = threading.Event()
    runner.call_soon(lambda: 1 / 0)
    runner.call_soon(done.set)
    assert done.wait(2)
    assert "failed" in caplog.text


def test_call_later_and_cancel(runner):
    fired = threading.Event()
    cancelled = []
    handle = runner.call_later(5, cancelled.append, "never")
    runner.call_later(.05, fired.set)
    handle.cancel()
    assert fired.wait(2)
    assert cancelled == []
