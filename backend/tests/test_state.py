"""
Hello Server — Request Counter Tests
======================================

What:  RequestCounter must never lose an increment, even across threads.
"""

from concurrent.futures import ThreadPoolExecutor

from hello_server.state import RequestCounter


class TestRequestCounter:

    def test_starts_at_zero(self):
        assert RequestCounter().value == 0

    def test_increment_returns_new_value(self):
        counter = RequestCounter()
        assert counter.increment() == 1
        assert counter.increment() == 2
        assert counter.value == 2

    def test_custom_start(self):
        counter = RequestCounter(start=41)
        assert counter.increment() == 42

    def test_threads_do_not_lose_updates(self):
        counter = RequestCounter()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: counter.increment(), range(2000)))

        assert counter.value == 2000
        # every value handed out exactly once
        assert sorted(results) == list(range(1, 2001))
