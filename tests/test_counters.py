import threading

import pytest

from patternkit.counters import SafeCounter, run_incrementers


@pytest.mark.parametrize("workers,rounds", [(2, 2), (1, 5), (8, 50), (0, 3)])
def test_total_is_workers_times_rounds(workers, rounds):
    assert run_incrementers(workers, rounds) == workers * rounds


def test_increments_return_distinct_values():
    counter = SafeCounter()
    seen = []
    lock = threading.Lock()

    def work():
        for _ in range(100):
            value = counter.increment()
            with lock:
                seen.append(value)

    threads = [threading.Thread(target=work) for _ in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(seen) == list(range(1, 501))
    assert counter.value == 500


def test_start_value():
    counter = SafeCounter(10)
    assert counter.increment() == 11
    assert counter.value == 11


def test_negative_arguments_rejected():
    with pytest.raises(ValueError):
        run_incrementers(-1, 2)
    with pytest.raises(ValueError):
        run_incrementers(2, -1)