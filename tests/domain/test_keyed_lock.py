import threading
import time

from shop.order.locking import KeyedLock


class TestKeyedLock:
    def test_lock_is_released_and_forgotten(self):
        locks = KeyedLock()

        with locks.hold("order-1"):
            assert len(locks) == 1

        assert len(locks) == 0

    def test_lock_is_released_on_error(self):
        locks = KeyedLock()

        try:
            with locks.hold("order-1"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        assert len(locks) == 0

    def test_same_key_is_serialized(self):
        locks = KeyedLock()
        events = []

        def worker(name):
            with locks.hold("order-1"):
                events.append(f"{name}-start")
                time.sleep(0.05)
                events.append(f"{name}-end")

        threads = [threading.Thread(target=worker, args=(name,)) for name in ("a", "b")]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # No interleaving: every start is immediately followed by its own end.
        assert events[0][0] == events[1][0]
        assert events[2][0] == events[3][0]

    def test_different_keys_do_not_block(self):
        locks = KeyedLock()
        inner_acquired = threading.Event()

        def other():
            with locks.hold("order-2"):
                inner_acquired.set()

        with locks.hold("order-1"):
            thread = threading.Thread(target=other)
            thread.start()
            assert inner_acquired.wait(timeout=1)
            thread.join()
