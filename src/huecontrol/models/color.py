import re

from pydantic import BaseModel, ConfigDict

from huecontrol.commands.base import Coordinate


class ColorRule(BaseModel):
    """Maps every color name that fully matches ``pattern`` to a CIE xy point."""

    model_config = ConfigDict(frozen=True)

    pattern: str
    xy: tuple[Coordinate, Coordinate]

    def matches(self, name: str) -> bool:
        return re.fullmatch(self.pattern, name, re.IGNORECASE) is not None


# Italian color names, in lookup order
COLOR_TABLE: tuple[ColorRule, ...] = (
    ColorRule(pattern="giall[oae]", xy=(0.45, 0.45)),
    ColorRule(pattern="ross[oae]", xy=(0.7, 0.25)),
    ColorRule(pattern="verd[ei]", xy=(0.1, 0.55)),
    ColorRule(pattern="blu", xy=(0.12, 0.125)),
    ColorRule(pattern="rosa", xy=(0.45, 0.275)),
    ColorRule(pattern="viola", xy=(0.25, 0.1)),
    ColorRule(pattern="azzurr[oae]", xy=(0.15, 0.25)),
    ColorRule(pattern="arancio(ne|ni)?", xy=(0.55, 0.4)),
    ColorRule(pattern="bianc(o|a|he)", xy=(0.275, 0.3)),
)

WHITE = "bianco"


def matching_rules(name: str, rules: tuple[ColorRule, ...] = COLOR_TABLE) -> list[ColorRule]:
    return [rule for rule in rules if rule.matches(name)]
