import asyncio


class SeenSet:
    """Append-only record of planet names already handed out by discovery."""

    def __init__(self) -> None:
        self._names: set[str] = set()
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._names)

    async def mark_seen(self, name: str) -> bool:
        """Insert ``name``; True only for the caller that inserted it first."""
        async with self._lock:
            if name in self._names:
                return False
            self._names.add(name)
            return True

    async def has_seen(self, name: str) -> bool:
        async with self._lock:
            return name in self._names
