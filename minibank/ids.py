"""
Transaction identifier generators

Any zero-argument callable returning a str can be passed to the processor.
TimestampIdGenerator reproduces the historical format and is only
probabilistically unique; SequentialIdGenerator is unique per instance.
"""

import secrets
import string
import threading
import time
import uuid
from itertools import count
from typing import Callable

TransactionIdGenerator = Callable[[], str]

BASE36_ALPHABET = string.digits + string.ascii_lowercase


class TimestampIdGenerator:
    """Builds ids like tx_1700000000000_k3j9x0a1b2c3d"""

    def __init__(
        self,
        prefix: str = "tx_",
        suffix_length: int = 13,
        clock: Callable[[], float] = time.time
    ):
        if suffix_length < 1:
            raise ValueError("Suffix length must be at least 1")
        self.prefix = prefix
        self.suffix_length = suffix_length
        self._clock = clock

    def __call__(self) -> str:
        millis = int(self._clock() * 1000)
        suffix = "".join(
            secrets.choice(BASE36_ALPHABET) for _ in range(self.suffix_length)
        )
        return f"{self.prefix}{millis}_{suffix}"


class SequentialIdGenerator:
    """Monotonic counter ids: tx_1, tx_2, ..."""

    def __init__(self, prefix: str = "tx_", start: int = 1):
        self.prefix = prefix
        self._counter = count(start)
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            value = next(self._counter)
        return f"{self.prefix}{value}"


def uuid_transaction_id() -> str:
    """Random UUID4-based id"""
    return f"tx_{uuid.uuid4().hex}"
