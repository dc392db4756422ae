from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


# Resolve installation dir (crisp package directory)
_CRISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _CRISP_DIR / 'prelude'


def get_prelude_root() -> Path:
    raw = os.environ.get('CRISP_PRELUDE_PATH', '').strip()
    p = Path(raw) if raw else _DEFAULT_PRELUDE_DIR
    # treat as a directory; if a file path is set, use its parent
    return p if p.is_dir() else p.parent


def get_prelude_file() -> Path:
    return get_prelude_root() / 'std' / 'core.crisp'


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('CRISP_RECURSION_LIMIT', '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"CRISP_RECURSION_LIMIT must be an integer, got {raw!r}") from None
