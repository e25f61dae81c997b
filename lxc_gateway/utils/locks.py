# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import os
import threading
from pathlib import Path

_LOCKS: dict[str, threading.RLock] = {}
_GUARD = threading.Lock()


def path_lock_for(path: str | Path) -> threading.RLock:
    key = os.path.abspath(path or "")
    with _GUARD:
        lk = _LOCKS.get(key)
        if lk is None:
            lk = threading.RLock()
            _LOCKS[key] = lk
        return lk
