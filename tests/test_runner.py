import logging
import signal
import time

import pytest

from patternkit.runner import (
    Runner,
    RunnerInterrupted,
    RunnerTimeout,
    create_task,
    main,
)


def test_tasks_run_in_order_with_their_ids():
    seen = []
    runner = Runner(5)
    runner.add(seen.append, seen.append)
    runner.add(seen.append)
    runner.start()
    assert seen == list(range(3))


def test_slow_task_times_out():
    runner = Runner(0.05)
    runner.add(lambda task_id: time.sleep(0.5))
    with pytest.raises(RunnerTimeout, match="received timeout"):
        runner.start()


def test_interrupt_before_start_runs_nothing():
    seen = []
    runner = Runner(5)
    runner.add(seen.append, seen.append)
    runner.interrupt()
    with pytest.raises(RunnerInterrupted, match="received interrupt"):
        runner.start()
    assert seen == []


def test_interrupt_is_consumed_by_one_run():
    seen = []
    runner = Runner(5)
    runner.add(seen.append, seen.append)
    runner.interrupt()
    with pytest.raises(RunnerInterrupted):
        runner.start()
    runner.start()
    assert seen == list(range(2))


def test_interrupt_during_run_stops_later_tasks():
    seen = []
    runner = Runner(5)

    def first(task_id):
        seen.append(task_id)
        runner.interrupt()

    runner.add(first, seen.append, seen.append)
    with pytest.raises(RunnerInterrupted):
        runner.start()
    assert seen == [0]


def test_sigint_handler_interrupts_and_is_restored():
    previous = signal.getsignal(signal.SIGINT)
    seen = []
    runner = Runner(5)

    def first(task_id):
        seen.append(task_id)
        handler = signal.getsignal(signal.SIGINT)
        handler(signal.SIGINT, None)

    runner.add(first, seen.append)
    with pytest.raises(RunnerInterrupted):
        runner.start()
    assert seen == [0]
    assert signal.getsignal(signal.SIGINT) is previous


def test_task_error_propagates():
    runner = Runner(5)

    def broken(task_id):
        raise ValueError("broken task")

    runner.add(broken)
    with pytest.raises(ValueError, match="broken task"):
        runner.start()


def test_create_task_logs_its_id(caplog):
    caplog.set_level(logging.INFO)
    create_task(0)(2)
    assert caplog.messages == ["Processor - Task #2."]


def test_main_completes_in_time(caplog):
    caplog.set_level(logging.INFO)
    assert main(["--timeout", "5", "--task-seconds", "0"]) == 0
    assert "Process ended." in caplog.messages


def test_main_reports_timeout(caplog):
    caplog.set_level(logging.INFO)
    assert main(["--timeout", "0.05", "--task-seconds", "0.2"]) == 1
    assert "Terminating due to timeout." in caplog.messages