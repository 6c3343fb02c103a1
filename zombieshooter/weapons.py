"""Weapon definitions and their ammunition shells."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import NamedTuple, Union


class FireType(Enum):
    SINGLE = "single"
    BURST = "burst"
    AUTO = "auto"


class WeaponID(IntEnum):
    KNIFE = 0
    PISTOL = 1
    RIFLE = 2
    BURST_RIFLE = 3
    SINGLE_RIFLE = 4
    SHOTGUN = 5
    PLASMA_PISTOL = 6
    PLASMA_RIFLE = 7
    PLASMA_SHOTGUN = 8


class ShellKind(IntEnum):
    LIGHT = 0
    MEDIUM = 1
    HEAVY = 2
    PLASMA = 3


class _Spec(NamedTuple):
    name: str
    clip_size: int
    damage: float
    bullet_delay: float
    fire_type: FireType
    sprite_index: int
    is_plasma: bool = False


_SPECS = {
    WeaponID.KNIFE: _Spec("Knife", 0, 35.0, 0.4, FireType.SINGLE, 0),
    WeaponID.PISTOL: _Spec("Pistol", 17, 50.0, 0.45, FireType.SINGLE, 1),
    WeaponID.RIFLE: _Spec("Rifle (Auto)", 30, 75.0, 0.1, FireType.AUTO, 2),
    WeaponID.BURST_RIFLE: _Spec("Rifle (Burst)", 24, 75.0, 1.0, FireType.BURST, 2),
    WeaponID.SINGLE_RIFLE: _Spec("Rifle (Single)", 20, 100.0, 0.5, FireType.SINGLE, 2),
    WeaponID.SHOTGUN: _Spec("Shotgun", 7, 50.0, 0.65, FireType.SINGLE, 3),
    WeaponID.PLASMA_PISTOL: _Spec("Plasma Pistol", 17, 100.0, 0.45, FireType.SINGLE, 1, True),
    WeaponID.PLASMA_RIFLE: _Spec("Plasma Rifle", 30, 100.0, 0.1, FireType.AUTO, 2, True),
    WeaponID.PLASMA_SHOTGUN: _Spec("Plasma Shotgun", 7, 50.0, 0.65, FireType.SINGLE, 3, True),
}

_UNKNOWN = _Spec("Unknown", 0, 0.0, 1.0, FireType.SINGLE, 0)

_SHOTGUNS = frozenset({WeaponID.SHOTGUN, WeaponID.PLASMA_SHOTGUN})


def _as_weapon_id(value: Union[WeaponID, int]) -> Union[WeaponID, int]:
    try:
        return WeaponID(value)
    except ValueError:
        return value


@dataclass
class Weapon:
    """A weapon built from its id; unknown ids get inert "Unknown" stats."""

    id: Union[WeaponID, int]
    name: str = field(init=False)
    clip_size: int = field(init=False)
    current_clip: int = field(init=False)
    damage: float = field(init=False)
    bullet_delay: float = field(init=False)
    fire_type: FireType = field(init=False)
    sprite_index: int = field(init=False)
    is_plasma: bool = field(init=False)

    def __post_init__(self) -> None:
        self.id = _as_weapon_id(self.id)
        spec = _SPECS.get(self.id, _UNKNOWN)
        self.name = spec.name
        self.clip_size = spec.clip_size
        self.damage = spec.damage
        self.bullet_delay = spec.bullet_delay
        self.fire_type = spec.fire_type
        self.sprite_index = spec.sprite_index
        self.is_plasma = spec.is_plasma
        self.current_clip = self.clip_size

    @property
    def is_full(self) -> bool:
        return self.current_clip == self.clip_size

    @property
    def is_shotgun(self) -> bool:
        return self.id in _SHOTGUNS

    def reload(self) -> None:
        """Refill the clip."""
        self.current_clip = self.clip_size


def shell_for(weapon_id: Union[WeaponID, int]) -> ShellKind:
    """The shell a weapon fires; anything not listed fires plasma."""
    if weapon_id in (WeaponID.PISTOL, WeaponID.SHOTGUN):
        return ShellKind.LIGHT
    if weapon_id in (WeaponID.RIFLE, WeaponID.BURST_RIFLE):
        return ShellKind.MEDIUM
    if weapon_id == WeaponID.SINGLE_RIFLE:
        return ShellKind.HEAVY
    return ShellKind.PLASMA