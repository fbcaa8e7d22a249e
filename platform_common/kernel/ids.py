from __future__ import annotations

import hashlib
import itertools
import random
import threading
import time
from uuid import UUID, uuid4


# Process-wide sequence appended to timestamp ids.
_sequence = itertools.count()
_sequence_lock = threading.Lock()


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


def _next_sequence() -> int:
    with _sequence_lock:
        return next(_sequence)


def generate_unique_id() -> str:
    """Random UUID4 in its canonical 36-char string form."""
    return str(uuid4())


def name_based_uuid(data: bytes) -> UUID:
    """Version 3 (MD5) UUID computed from raw bytes, without a namespace."""
    return UUID(bytes=hashlib.md5(data).digest(), version=3)


def create_user_auth_token(user_name: str, source: str) -> str:
    """Build an auth token from user name, source and the current epoch millis.

    Two calls in the same millisecond with the same inputs yield the same token.
    """
    data = f"{user_name}{source}{_epoch_millis()}"
    return str(name_based_uuid(data.encode("utf-8")))


def get_unique_id_from_timestamp(environment_id: int | None = None) -> str:
    """Numeric id built from environment, a salted timestamp and a sequence.

    Format: `{environment_id // 10_000_000}{(millis + rand) << 13}{sequence}`,
    with `rand` drawn from `[0, 999_998]`. Without an explicit id the
    configured deployment environment is used.
    """
    if environment_id is None:
        from platform_common.settings import get_settings

        environment_id = get_settings().environment_id
    env = environment_id // 10_000_000
    uid = (_epoch_millis() + random.randrange(999_999)) << 13
    return f"{env}{uid}{_next_sequence()}"
