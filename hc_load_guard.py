# hc_load_guard.py - v 1.0.0 2025.10.19
#  
#  Copyright (c) 2025 Kanbara Tomonori
#  All rights reserved.
#  
#  x https://x.com/tomo1230
#  
#  This source code is proprietary and confidential.
#  Unauthorized copying, modification, distribution, or use is strictly prohibited.
#  
#  Author: Kanbara Tomonori
# 

import os
import threading

# --- Globals ---
_loaded_files = set()
_lock = threading.Lock()


def _file_key(path: str) -> str:
    path = os.path.normcase(os.path.abspath(path))
    if path.endswith(('.pyc', '.pyo')):
        path = path[:-1]
    return path

def is_file_loaded(path: str) -> bool:
    return _file_key(path) in _loaded_files

def file_loaded(path: str):
    _loaded_files.add(_file_key(path))

def file_unloaded(path: str):
    _loaded_files.discard(_file_key(path))

def run_once(path: str, func, *args, **kwargs) -> bool:
    """
    Call func(*args, **kwargs) unless `path` is already marked loaded.
    The mark is taken before func runs and dropped again if func raises,
    so a failed setup can be retried. func runs outside the lock and may
    itself call run_once for another file. Returns True if func ran.
    """
    key = _file_key(path)
    with _lock:
        if key in _loaded_files:
            return False
        _loaded_files.add(key)
    try:
        func(*args, **kwargs)
    except Exception:
        _loaded_files.discard(key)
        raise
    return True
