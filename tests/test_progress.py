from __future__ import annotations

import logging
import re
import threading

import pytest

from gdscaffold.progress import ProgressLog


def test_append_terminates_entries_with_newline():
    log = ProgressLog()
    log.append("first")
    log.append("second\n")
    assert log.snapshot() == "first\nsecond\n"
    assert log.lines() == ("first", "second")
    assert len(log) == 2


def test_multi_line_entry_counts_once():
    log = ProgressLog()
    log.append("one\ntwo")
    assert len(log) == 1
    assert log.lines() == ("one", "two")


def test_appends_are_mirrored_to_logging(caplog: pytest.LogCaptureFixture):
    log = ProgressLog()
    with caplog.at_level(logging.INFO, logger="gdscaffold.progress"):
        log.append("hello")
    assert "hello" in caplog.messages


def test_concurrent_appends_are_never_interleaved():
    log = ProgressLog()
    workers, per_worker = 8, 200

    def write(worker: int) -> None:
        for index in range(per_worker):
            log.append(f"worker-{worker} line-{index}")

    threads = [threading.Thread(target=write, args=(worker,)) for worker in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = log.lines()
    assert len(lines) == workers * per_worker
    pattern = re.compile(r"^worker-\d+ line-\d+$")
    assert all(pattern.match(line) for line in lines)
