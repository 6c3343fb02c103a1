"""Projectiles: creation, flight and expiry."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from .geometry import Vec2, get_direction, rotate_vector
from .sprite import Sprite
from .weapons import Weapon, shell_for

BULLET_SPEED = 800.0
BULLET_LIFETIME = 2.0
MUZZLE_OFFSET = Vec2(20.0, 18.5)
SHELL_SCALE = Vec2(0.5, 0.5)


@dataclass
class Bullet:
    """A flying shell."""

    sprite: Sprite
    velocity: Vec2
    damage: float
    age: float = 0.0
    lifetime: float = BULLET_LIFETIME

    @property
    def expired(self) -> bool:
        return self.age >= self.lifetime

    def step(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return whether the bullet is still alive."""
        self.sprite.move(self.velocity.x * dt, self.velocity.y * dt)
        self.age += dt
        return not self.expired


def create_bullet(player_pos: Vec2, rotation_deg: float, weapon: Weapon, target: Vec2) -> Bullet:
    """Spawn a bullet at the player's muzzle, flying towards ``target``."""
    position = player_pos + rotate_vector(MUZZLE_OFFSET, rotation_deg)
    direction = get_direction(position, target)
    angle = math.degrees(math.atan2(direction.y, direction.x))
    sprite = Sprite(
        position,
        texture=shell_for(weapon.id),
        scale=SHELL_SCALE,
        rotation=angle + 90.0,
    )
    return Bullet(sprite=sprite, velocity=direction * BULLET_SPEED, damage=weapon.damage)


def update_bullets(bullets: List[Bullet], dt: float) -> None:
    """Advance every bullet in place, dropping the ones that have expired."""
    bullets[:] = [bullet for bullet in bullets if bullet.step(dt)]