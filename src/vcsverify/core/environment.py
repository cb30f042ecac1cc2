"""Scoped environment variable pinning.

git localises its diagnostics, so the locale used by child processes is
pinned for the duration of a verification run and restored afterwards,
on success and on every error path.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

DETERMINISTIC_LOCALE_VARIABLE: str = "LANGUAGE"
DETERMINISTIC_LOCALE_VALUE: str = "en_US"


@contextmanager
def pinned_environment(name: str, value: str) -> Iterator[None]:
    """Set ``name`` to ``value`` in ``os.environ`` for the ``with`` block.

    A variable that was unset before the block is removed again
    afterwards rather than left behind as an empty string.
    """
    previous = os.environ.get(name)
    os.environ[name] = value
    try:
        yield
    finally:
        if previous is None:
            os.environ.pop(name, None)
        else:
            os.environ[name] = previous
