import threading

import pytest

from sitecrawl.services.termination import CrawlState, TerminationDetector


def test_starts_running_with_seed_outstanding():
    detector = TerminationDetector()
    assert detector.state is CrawlState.RUNNING
    assert detector.outstanding == 1
    assert not detector.is_done()


def test_initial_outstanding_must_be_positive():
    with pytest.raises(ValueError):
        TerminationDetector(initial_outstanding=0)


def test_seed_completion_finishes_crawl():
    detector = TerminationDetector()
    assert detector.task_completed() is True
    assert detector.state is CrawlState.DONE
    assert detector.await_done(timeout=0) is True


def test_children_counted_before_parent_completes():
    detector = TerminationDetector()
    detector.task_dispatched()
    detector.task_dispatched()
    assert detector.task_completed() is False  # seed
    assert detector.task_completed() is False
    assert not detector.is_done()
    assert detector.task_completed() is True
    assert detector.is_done()


def test_underflow_raises():
    detector = TerminationDetector()
    detector.task_completed()
    with pytest.raises(RuntimeError):
        detector.task_completed()
    assert detector.outstanding == 0


def test_dispatch_after_done_raises():
    detector = TerminationDetector()
    detector.task_completed()
    with pytest.raises(RuntimeError):
        detector.task_dispatched()


def test_await_done_times_out_while_running():
    detector = TerminationDetector()
    assert detector.await_done(timeout=0.05) is False


def test_await_done_wakes_when_last_task_completes():
    detector = TerminationDetector()
    detector.task_dispatched()
    woke = threading.Event()

    def waiter():
        if detector.await_done(timeout=5):
            woke.set()

    t = threading.Thread(target=waiter)
    t.start()
    detector.task_completed()
    assert not woke.wait(0.05)
    detector.task_completed()
    t.join(5)
    assert woke.is_set()


def test_transition_to_done_observed_exactly_once_under_contention():
    tasks = 500
    detector = TerminationDetector()
    for _ in range(tasks - 1):
        detector.task_dispatched()

    workers = 10
    barrier = threading.Barrier(workers)
    finishers = []
    lock = threading.Lock()

    def complete(share):
        barrier.wait()
        for _ in range(share):
            if detector.task_completed():
                with lock:
                    finishers.append(threading.current_thread().name)

    threads = [threading.Thread(target=complete, args=(tasks // workers,)) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(finishers) == 1
    assert detector.outstanding == 0
    assert detector.is_done()
