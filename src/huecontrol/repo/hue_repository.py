from typing import Any, Iterable, Iterator, Mapping

from huecontrol.models.light import TrackedLight


class LightRepository:
    """Ordered registry of the lights a controller broadcasts to."""

    def __init__(self, lights: Iterable[TrackedLight] = ()):
        self._lights: dict[str, TrackedLight] = {light.name: light for light in lights}

    @classmethod
    def from_bridge(cls, payload: Mapping[str, Any]) -> "LightRepository":
        # /lights: {"1": {"name": "...", "state": {...}}, "2": {...}}
        return cls(TrackedLight.from_bridge(name, data) for name, data in payload.items())

    def __len__(self) -> int:
        return len(self._lights)

    def __iter__(self) -> Iterator[TrackedLight]:
        return iter(list(self._lights.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._lights

    def get(self, name: str) -> TrackedLight | None:
        return self._lights.get(name)

    def names(self) -> set[str]:
        return set(self._lights)

    def remove(self, names: Iterable[str]) -> list[str]:
        """Drops every known name, ignoring the rest. Returns what was removed."""
        return [name for name in names if self._lights.pop(name, None) is not None]
