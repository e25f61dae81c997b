# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import os
from pathlib import Path


def check_credential_store(path: Path) -> str:
    if not path.exists():
        return "empty"
    if not os.access(path, os.R_OK | os.W_OK):
        raise PermissionError(f"credential store {path} is not readable and writable")
    return "ok"


__all__ = ["check_credential_store"]
