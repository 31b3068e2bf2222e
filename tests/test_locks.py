from __future__ import annotations

import threading

from src.timeclock_payroll.timeclock_payroll.common.locks import KeyedLock


def test_same_key_is_exclusive():
    locks = KeyedLock()
    acquired = threading.Event()

    def other():
        with locks.hold("U1"):
            acquired.set()

    with locks.hold("U1"):
        t = threading.Thread(target=other)
        t.start()
        assert not acquired.wait(timeout=0.2)
    t.join(timeout=5)
    assert acquired.is_set()


def test_different_keys_do_not_block():
    locks = KeyedLock()
    acquired = threading.Event()

    def other():
        with locks.hold("U2"):
            acquired.set()

    with locks.hold("U1"):
        t = threading.Thread(target=other)
        t.start()
        assert acquired.wait(timeout=5)
    t.join(timeout=5)


def test_entries_are_dropped_after_release():
    locks = KeyedLock()
    for n in range(100):
        with locks.hold(f"U{n}"):
            assert len(locks) == 1
    assert len(locks) == 0


def test_waiter_gets_the_lock_and_table_empties():
    locks = KeyedLock()
    waiting = threading.Event()
    released = threading.Event()

    def waiter():
        waiting.set()
        with locks.hold("U1"):
            released.set()

    with locks.hold("U1"):
        t = threading.Thread(target=waiter)
        t.start()
        waiting.wait(timeout=5)
    t.join(timeout=5)

    assert released.is_set()
    assert len(locks) == 0

    with locks.hold("U1"):
        with locks.hold("U2"):
            assert len(locks) == 2
    assert len(locks) == 0
