# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .fs import read_json_list_of_dicts, write_json_atomic
from .locks import path_lock_for

__all__ = ["path_lock_for", "read_json_list_of_dicts", "write_json_atomic"]
