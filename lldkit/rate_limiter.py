"""Leaky-bucket and token-bucket rate limiters, with per-user front ends."""

from __future__ import annotations

import argparse
import threading
import time
from collections import deque
from collections.abc import Callable


class BlockingQueue:
    """A bounded queue guarded by a lock; adds beyond capacity are dropped."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._items: deque[int] = deque()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def add(self, item: int) -> None:
        with self._lock:
            if len(self._items) < self.capacity:
                self._items.append(item)

    def remaining_capacity(self) -> int:
        with self._lock:
            return self.capacity - len(self._items)

    def remove(self) -> None:
        """Drop the oldest item, if there is one."""
        with self._lock:
            if self._items:
                self._items.popleft()


class LeakyBucket:
    """Grants access while the bucket has room; :meth:`leak` makes room."""

    def __init__(self, capacity: int) -> None:
        self._queue = BlockingQueue(capacity)

    def grant_access(self) -> bool:
        if self._queue.remaining_capacity() > 0:
            self._queue.add(1)
            return True
        return False

    def leak(self) -> None:
        self._queue.remove()


class UserBucketCreator:
    """Keeps a leaky bucket of capacity 10 for a user."""

    CAPACITY = 10

    def __init__(self, user_id: int) -> None:
        self._buckets: dict[int, LeakyBucket] = {user_id: LeakyBucket(self.CAPACITY)}

    def _bucket(self, user_id: int) -> LeakyBucket:
        try:
            return self._buckets[user_id]
        except KeyError:
            raise KeyError(f"no bucket for user {user_id}") from None

    def access_application(self, user_id: int) -> bool:
        """Try one request for ``user_id``; print and return whether it was let through."""
        granted = self._bucket(user_id).grant_access()
        outcome = "Accessed" if granted else "Too many requests"
        print(f"[Leaky] User Id {user_id} [Thread {threading.get_ident()}] {outcome}")
        return granted

    def leak(self, user_id: int) -> None:
        self._bucket(user_id).leak()


class TokenBucket:
    """Hands out tokens, refilled at ``refresh_rate`` per whole elapsed second."""

    def __init__(
        self,
        capacity: int,
        refresh_rate: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.capacity = capacity
        self.refresh_rate = refresh_rate
        self._tokens = capacity
        self._clock = clock
        self._last_refill = clock()
        self._lock = threading.Lock()

    def _refill_locked(self) -> None:
        now = self._clock()
        elapsed = int(now - self._last_refill)
        if elapsed > 0:
            self._tokens = min(self._tokens + elapsed * self.refresh_rate, self.capacity)
            self._last_refill = now

    def grant_access(self) -> bool:
        with self._lock:
            self._refill_locked()
            if self._tokens > 0:
                self._tokens -= 1
                return True
            return False

    def refill_tokens(self) -> None:
        with self._lock:
            self._refill_locked()

    def remaining_tokens(self) -> int:
        with self._lock:
            self._refill_locked()
            return self._tokens


class UserTokenCreator:
    """Keeps a token bucket of capacity 10 for a user."""

    CAPACITY = 10

    def __init__(
        self,
        user_id: int,
        refresh_rate: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._buckets: dict[int, TokenBucket] = {
            user_id: TokenBucket(self.CAPACITY, refresh_rate, clock)
        }

    def access_application(self, user_id: int) -> bool:
        """Try one request for ``user_id``; print and return whether it was let through."""
        try:
            bucket = self._buckets[user_id]
        except KeyError:
            raise KeyError(f"no bucket for user {user_id}") from None
        granted = bucket.grant_access()
        outcome = "Accessed" if granted else "Too many requests"
        print(f"[Token] User Id {user_id} [Thread {threading.get_ident()}] {outcome}")
        return granted


class ProcessingLeakyBucket:
    """A bucket of queued requests that :meth:`leak` processes one per interval."""

    def __init__(self, capacity: int, interval: float = 1.0) -> None:
        self.capacity = capacity
        self.interval = interval
        self._queue: deque[int] = deque()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._queue)

    def add(self, user_id: int) -> bool:
        """Queue a request from ``user_id``; return False if the bucket is full."""
        with self._lock:
            if len(self._queue) >= self.capacity:
                full = True
            else:
                self._queue.append(user_id)
                full = False
        if full:
            print(f"Too many requests{self.capacity}")
        return not full

    def leak(self) -> list[int]:
        """Process queued requests until none are left; return their user ids."""
        processed = []
        while True:
            with self._lock:
                if not self._queue:
                    return processed
            time.sleep(self.interval)
            with self._lock:
                if not self._queue:
                    return processed
                user_id = self._queue.popleft()
            print(f" request of user {user_id} processed")
            processed.append(user_id)


def _simulate(access: Callable[[], bool], requests: int, pause: float) -> list[bool]:
    results = []
    for _ in range(requests):
        results.append(access())
        time.sleep(pause)
    return results


def simulate_leaky_user(user: UserBucketCreator, user_id: int) -> list[bool]:
    """Send 30 requests, 100 ms apart; return whether each was granted."""
    return _simulate(lambda: user.access_application(user_id), 30, 0.1)


def simulate_token_user(user: UserTokenCreator, user_id: int) -> list[bool]:
    """Send 30 requests, 100 ms apart; return whether each was granted."""
    return _simulate(lambda: user.access_application(user_id), 30, 0.1)


def _leak_continuously(user: UserBucketCreator, user_id: int, stop: threading.Event) -> None:
    while not stop.is_set():
        user.leak(user_id)
        stop.wait(1.0)


class _UserBucketCreate:
    """A user whose processing bucket is drained by a thread started at creation."""

    def __init__(self, user_id: int, ip: str, capacity: int = 1) -> None:
        self.user_id = user_id
        self.ip = ip
        self._buckets = {(user_id, ip): ProcessingLeakyBucket(capacity)}
        threading.Thread(target=self._buckets[(user_id, ip)].leak, daemon=True).start()

    def simulate(self) -> None:
        bucket = self._buckets[(self.user_id, self.ip)]
        for _ in range(20):
            bucket.add(self.user_id)
            time.sleep(1)


def main(argv: list[str] | None = None) -> int:
    """Run the leaky and token bucket simulations side by side."""
    parser = argparse.ArgumentParser(description="Rate limiter demonstration.")
    parser.add_argument(
        "--processing",
        action="store_true",
        help="run the request-processing leaky bucket instead",
    )
    args = parser.parse_args(argv)

    if args.processing:
        _UserBucketCreate(1, "192.0.2.1").simulate()
        return 0

    leaky_user = UserBucketCreator(1)
    stop = threading.Event()
    leaky = threading.Thread(target=simulate_leaky_user, args=(leaky_user, 1))
    leaker = threading.Thread(
        target=_leak_continuously, args=(leaky_user, 1, stop), daemon=True
    )
    token_user = UserTokenCreator(2, 1)
    token = threading.Thread(target=simulate_token_user, args=(token_user, 2))

    leaky.start()
    leaker.start()
    token.start()
    leaky.join()
    token.join()
    stop.set()
    return 0