"""Process-wide string interning."""

from __future__ import annotations


class Strings:
    """Pool that hands back one shared object for equal strings."""

    _instance: Strings | None = None

    def __init__(self) -> None:
        self._pool: dict[str, str] = {}

    @staticmethod
    def instance() -> Strings:
        """Return the shared pool."""
        if Strings._instance is None:
            Strings._instance = Strings()
        return Strings._instance

    def get_string(self, data: str | bytes) -> str:
        """Return the pooled string equal to ``data``."""
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode()
        return self._pool.setdefault(data, data)