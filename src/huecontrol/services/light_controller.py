import json
import math
import threading
from typing import Any, Iterable, Mapping, Optional

from huecontrol.api.http_client import DEFAULT_TIMEOUT, HttpClient
from huecontrol.commands.base import (
    DEFAULT_TRANSITION,
    MAX_DEVICE_BRIGHTNESS,
    BrightnessCommand,
    ColorCommand,
    EffectCommand,
    OnCommand,
)
from huecontrol.config import load_settings
from huecontrol.errors import BridgeConnectionError
from huecontrol.models.color import COLOR_TABLE, WHITE, ColorRule, matching_rules
from huecontrol.models.light import TrackedLight
from huecontrol.repo.hue_repository import LightRepository
from huecontrol.utils.logging_mixin import LoggingMixin

DEFAULT_STEP = 25


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(float(value), high))


class LightController(LoggingMixin):
    """Drives every light a bridge reports, always all of them at once.

    On construction the light list is fetched once; afterwards the controller
    only remembers what it sent (the shadow state of each light) and never
    reads the device state back. Brightness is kept on the 0-100 scale and
    converted to the device's 0-254 scale on the way out.

    All state changes go through :meth:`broadcast`, which holds a re-entrant
    lock so two broadcasts never interleave on the same light.
    """

    def __init__(
        self,
        address: str,
        credential: str,
        *,
        client: Optional[HttpClient] = None,
        colors: tuple[ColorRule, ...] = COLOR_TABLE,
        timeout: Optional[float] = None,
    ):
        self.url = f"http://{address}/api/{credential}/lights/"
        self.colors = tuple(colors)
        # a client we create is ours to close, an injected one belongs to the caller
        self._owns_client = client is None
        self._client = client or HttpClient(timeout=timeout or DEFAULT_TIMEOUT)
        self._lock = threading.RLock()
        self._brightness = 0.0
        self._lights = LightRepository()

        try:
            payload = self._client.get(self.url)
            # an unknown user gets [{"error": {...}}] instead of a mapping
            if not isinstance(payload, Mapping) or not payload:
                raise BridgeConnectionError(f"No bridge or lights found at {address}")

            self._lights = LightRepository.from_bridge(payload)
            self.logger.info("Found %d lights at %s: %s", len(self._lights), address, sorted(self._lights.names()))

            self.set_brightness(100)
            self.change_color(WHITE)
        except Exception:
            self.close()
            raise

    def __enter__(self) -> "LightController":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __repr__(self) -> str:
        return f"<LightController {self.url} lights={len(self._lights)}>"

    @classmethod
    def connect(cls, address: str, credential: str, **kwargs) -> "LightController":
        return cls(address, credential, **kwargs)

    @classmethod
    def from_env(cls, **kwargs) -> "LightController":
        settings = load_settings()
        kwargs.setdefault("timeout", settings.timeout)
        return cls(settings.bridge_ip, settings.user_id, **kwargs)

    # ---- registry
    def list_light_names(self) -> set[str]:
        with self._lock:
            return self._lights.names()

    def light(self, name: str) -> Optional[TrackedLight]:
        return self._lights.get(name)

    def unregister(self, names: Iterable[str] | str) -> None:
        if isinstance(names, str):
            names = [names]
        with self._lock:
            removed = self._lights.remove(names)
        if removed:
            self.logger.info("No longer controlling %s", removed)

    # ---- power
    def set_power(self, on: bool) -> None:
        self.broadcast(OnCommand(on=on).attributes())

    def turn_on(self) -> None:
        self.set_power(True)

    def turn_off(self) -> None:
        self.set_power(False)

    # ---- brightness
    def get_brightness(self) -> float:
        return self._brightness

    def set_brightness(self, value: float) -> None:
        """Sets every light to ``value`` percent, clamped to 0..100.

        The stored value is the clamped percentage, not the one recomputed from
        the device scale, so a get after a set returns exactly what was set.
        """
        value = _clamp(value)
        bri = math.floor(value * MAX_DEVICE_BRIGHTNESS / 100)
        with self._lock:
            self.broadcast(BrightnessCommand(bri=bri).attributes(), with_transition=True)
            self._brightness = value

    def add_brightness(self, delta: float) -> None:
        with self._lock:
            self.set_brightness(self._brightness + delta)

    def increase_brightness(self, percentage: float = DEFAULT_STEP) -> None:
        self.add_brightness(_clamp(percentage))

    def decrease_brightness(self, percentage: float = DEFAULT_STEP) -> None:
        # only the step is clamped here, set_brightness clamps the result
        self.add_brightness(-_clamp(percentage))

    # ---- color
    def change_color(self, name: str) -> int:
        """Sends one xy command per matching color rule; unknown names send nothing."""
        rules = matching_rules(name, self.colors)
        if not rules:
            self.logger.debug("No color matches %r", name)
        for rule in rules:
            self.broadcast(ColorCommand(xy=rule.xy).attributes(), with_transition=True)
        return len(rules)

    def color_loop(self) -> None:
        self.broadcast(EffectCommand(effect="colorloop").attributes())

    # ---- broadcast
    def broadcast(self, attributes: Mapping[str, Any], with_transition: bool = False) -> None:
        """PUTs the same attribute set to every tracked light, in registry order.

        The first transport error propagates. Lights updated before it keep
        their new shadow state.
        """
        attributes = dict(attributes)
        if with_transition:
            attributes["transition"] = DEFAULT_TRANSITION
        body = json.dumps(attributes)

        with self._lock:
            self.logger.info("Setting: %s", body)
            for light in self._lights:
                self._client.put(f"{self.url}{light.name}/state", body)
                light.apply(attributes)
