"""Tests for the reader/writer lock."""

import threading
import time

from quicklog.rwlock import ReadWriteLock


class TestReadWriteLock:
    def test_readers_share(self):
        lock = ReadWriteLock()
        inside = threading.Barrier(3, timeout=2)

        def reader():
            with lock.read_locked():
                inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)
        assert not any(t.is_alive() for t in threads)

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock()
        events = []
        lock.acquire_write()

        def reader():
            with lock.read_locked():
                events.append("read")

        t = threading.Thread(target=reader)
        t.start()
        time.sleep(0.05)
        assert events == []

        events.append("write-done")
        lock.release_write()
        t.join(timeout=2)
        assert events == ["write-done", "read"]

    def test_writers_serialized(self):
        lock = ReadWriteLock()
        counter = [0]

        def writer():
            for _ in range(1000):
                with lock.write_locked():
                    value = counter[0]
                    counter[0] = value + 1

        threads = [threading.Thread(target=writer) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert counter[0] == 4000

    def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        order = []
        lock.acquire_read()

        def writer():
            with lock.write_locked():
                order.append("write")

        def late_reader():
            with lock.read_locked():
                order.append("read")

        w = threading.Thread(target=writer)
        w.start()
        time.sleep(0.05)
        r = threading.Thread(target=late_reader)
        r.start()
        time.sleep(0.05)
        assert order == []

        lock.release_read()
        w.join(timeout=2)
        r.join(timeout=2)
        assert order == ["write", "read"]

    def test_released_on_exception(self):
        lock = ReadWriteLock()
        try:
            with lock.write_locked():
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        with lock.read_locked():
            pass
