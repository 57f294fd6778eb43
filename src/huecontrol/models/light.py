import copy
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field


class TrackedLight(BaseModel):
    name: str
    label: Optional[str] = None  # e.g. "Kitchen ceiling", as reported by the bridge
    # what we last told the light, never read back from the device
    state: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_bridge(cls, name: str, data: Mapping[str, Any]) -> "TrackedLight":
        if not isinstance(data, Mapping):
            return cls(name=name)
        return cls(name=name, label=data.get("name"), state=dict(data.get("state") or {}))

    def apply(self, attributes: Mapping[str, Any]) -> None:
        self.state.update(copy.deepcopy(dict(attributes)))
