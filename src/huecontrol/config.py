import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from huecontrol.errors import ConfigurationError


class HueSettings(BaseModel):
    bridge_ip: str
    user_id: str
    timeout: float = Field(5.0, gt=0)


def load_settings() -> HueSettings:
    """Reads HUE_BRIDGE_IP, HUE_USER_ID and HUE_TIMEOUT from the environment or a .env file."""
    load_dotenv(find_dotenv(usecwd=True))

    bridge_ip = os.getenv("HUE_BRIDGE_IP")
    user_id = os.getenv("HUE_USER_ID")
    if not bridge_ip or not user_id:
        raise ConfigurationError("HUE_BRIDGE_IP or HUE_USER_ID is missing.")

    timeout = os.getenv("HUE_TIMEOUT")
    if timeout is None:
        return HueSettings(bridge_ip=bridge_ip, user_id=user_id)
    try:
        return HueSettings(bridge_ip=bridge_ip, user_id=user_id, timeout=timeout)
    except ValueError as e:
        raise ConfigurationError(f"Invalid HUE_TIMEOUT: {timeout!r}") from e
