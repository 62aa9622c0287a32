"""ScriptStore — opaque handles for edit scripts held on behalf of a host.

The host never sees an EditScript directly.  It gets an integer handle and
asks for the length and per-entry fields through it, the same shape as a
foreign-function binding would expose.

Design goals:
  - Lookups never raise: an unknown handle or index yields None
  - Handles are never reused within a store
  - Nothing is persisted; releasing a handle drops the script
"""

from __future__ import annotations
from itertools import count

from .types import EditScript


class ScriptStore:
    """Arena of edit scripts addressed by integer handles."""

    __slots__ = ("_scripts", "_ids")

    def __init__(self) -> None:
        self._scripts: dict[int, EditScript] = {}
        self._ids = count(1)

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def put(self, script: EditScript) -> int:
        """Store a script and return its handle."""
        handle = next(self._ids)
        self._scripts[handle] = script
        return handle

    def get(self, handle: int) -> EditScript | None:
        return self._scripts.get(handle)

    def release(self, handle: int) -> bool:
        """Drop a script.  Returns False if the handle was unknown."""
        return self._scripts.pop(handle, None) is not None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def length(self, handle: int) -> int | None:
        script = self._scripts.get(handle)
        return len(script) if script is not None else None

    def start(self, handle: int, index: int) -> int | None:
        script = self._scripts.get(handle)
        return script.start(index) if script is not None else None

    def end(self, handle: int, index: int) -> int | None:
        script = self._scripts.get(handle)
        return script.end(index) if script is not None else None

    def data(self, handle: int, index: int) -> str | None:
        script = self._scripts.get(handle)
        return script.data(index) if script is not None else None

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self._scripts)

    def clear(self) -> None:
        self._scripts.clear()
