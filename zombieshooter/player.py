"""The player character: movement, animation, reloading, melee and shooting."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Collection, List, Optional, Tuple, Union

from .bullets import Bullet, create_bullet
from .geometry import Vec2, rotate_vector
from .sprite import Sprite
from .weapons import Weapon, WeaponID

FRAME_WIDTH = 280.0
FRAME_HEIGHT = 220.0
ANIMATION_DELAY = 0.025
BASE_SPEED = 5.0
BUSY_SPEED = 2.0
DEFAULT_SCALE = 0.35
MELEE_SCALE_BONUS = 0.15
SHOTGUN_PELLETS = 5
SHOTGUN_SPREAD = 9.5
BURST_SHOTS = 3
BURST_DELAY = 0.1
CROSSHAIR_SCALE = Vec2(0.2, 0.2)

_LOOP_FRAMES = 19
_RELOAD_FRAMES = 20
_MELEE_FRAMES = 15

# Key combinations checked in order; the first match wins.
_MOVES: Tuple[Tuple[frozenset, Tuple[float, float], float], ...] = (
    (frozenset("wd"), (1.0, -1.0), -45.0),
    (frozenset("wa"), (-1.0, -1.0), -135.0),
    (frozenset("sd"), (1.0, 1.0), 45.0),
    (frozenset("sa"), (-1.0, 1.0), 135.0),
    (frozenset("w"), (0.0, -1.0), -90.0),
    (frozenset("s"), (0.0, 1.0), 90.0),
    (frozenset("a"), (-1.0, 0.0), 180.0),
    (frozenset("d"), (1.0, 0.0), 0.0),
)


class PlayerState(IntEnum):
    """Animation state; the value is also the sprite-sheet row."""

    MOVING = 0
    IDLE = 1
    RELOADING = 2
    MELEE = 3


@dataclass
class Controls:
    """Input for one frame: held keys, fire button and mouse world position."""

    keys: frozenset = field(default_factory=frozenset)
    fire: bool = False
    mouse: Vec2 = field(default_factory=Vec2)


def _diagonal(speed: float) -> float:
    return abs(speed) / math.sqrt(2)


class Player:
    """A player-controlled character.

    All timing is driven by ``now``, a monotonically increasing time in seconds.
    """

    def __init__(
        self,
        position: Vec2,
        weapon_id: Union[WeaponID, int] = WeaponID.PISTOL,
        *,
        scale: Tuple[float, float] = (DEFAULT_SCALE, DEFAULT_SCALE),
        crosshair: Optional[Vec2] = None,
        now: float = 0.0,
    ) -> None:
        self.health = 100.0
        self.weapon = Weapon(weapon_id)
        self.current_sprite = self.weapon.sprite_index
        self.speed = BASE_SPEED
        self.diagonal_speed = _diagonal(self.speed)
        self.scale_x, self.scale_y = scale
        self.sprite = Sprite(
            position,
            texture=("player", self.current_sprite),
            frame_size=(FRAME_WIDTH, FRAME_HEIGHT),
            scale=Vec2(self.scale_x, -self.scale_y),
        )
        self.crosshair = Sprite(
            crosshair if crosshair is not None else position,
            texture="crosshair",
            scale=CROSSHAIR_SCALE,
        )
        self.animation_delay = ANIMATION_DELAY
        self.state = PlayerState.IDLE
        self.moving_index = 0
        self.idle_index = 0
        self.reload_index = 0
        self.melee_index = 0
        self.moving_direction = 1
        self.idle_direction = 1
        self.last_fire_time = now
        self._last_frame_time = now
        self.is_bursting = False
        self.burst_shots_fired = 0
        self.burst_delay = BURST_DELAY
        self.next_burst_time = 0.0

    @property
    def is_busy(self) -> bool:
        """Whether the player is reloading or in a melee attack."""
        return self.state in (PlayerState.RELOADING, PlayerState.MELEE)

    def _set_speed(self, speed: float) -> None:
        self.speed = speed
        self.diagonal_speed = _diagonal(speed)

    def change_state(self, state: PlayerState, now: float) -> None:
        """Switch animation state and adjust the sprite scale for it."""
        self.state = PlayerState(state)
        if self.state is PlayerState.MELEE:
            self.sprite.scale = Vec2(
                self.scale_x + MELEE_SCALE_BONUS, self.scale_y + MELEE_SCALE_BONUS
            )
        else:
            self.sprite.scale = Vec2(self.scale_x, self.scale_y)
        self.advance_animation(now)

    @staticmethod
    def _ping_pong(index: int, direction: int) -> Tuple[int, int]:
        index += direction
        if index >= _LOOP_FRAMES:
            return _LOOP_FRAMES - 1, -1
        if index <= 0:
            return 1, 1
        return index, direction

    def advance_animation(self, now: float) -> None:
        """Step to the next frame of the current animation once the delay has passed."""
        if now - self._last_frame_time < self.animation_delay:
            return
        self._last_frame_time = now
        row = int(self.state)
        if self.state is PlayerState.MOVING:
            self.moving_index, self.moving_direction = self._ping_pong(
                self.moving_index, self.moving_direction
            )
            column = self.moving_index
        elif self.state is PlayerState.IDLE:
            self.idle_index, self.idle_direction = self._ping_pong(
                self.idle_index, self.idle_direction
            )
            column = self.idle_index
        elif self.state is PlayerState.RELOADING:
            self.reload_index = (self.reload_index + 1) % _RELOAD_FRAMES
            column = self.reload_index
        else:
            self.melee_index = (self.melee_index + 1) % _MELEE_FRAMES
            column = self.melee_index
            if self.current_sprite == 0:
                row -= 1
        self.sprite.set_frame(column, row)

    def move(self, keys: Collection[str], now: float) -> None:
        """Move according to the held WASD keys."""
        if self.is_busy:
            self._set_speed(BUSY_SPEED)
        held = {key.lower() for key in keys}
        for combo, (dx, dy), rotation in _MOVES:
            if combo <= held:
                if not self.is_busy:
                    self.change_state(PlayerState.MOVING, now)
                step = self.diagonal_speed if dx and dy else self.speed
                self.sprite.move(dx * step, dy * step)
                self.sprite.rotation = rotation
                return
        if not self.is_busy:
            self.change_state(PlayerState.IDLE, now)

    def aim_at(self, target: Vec2) -> None:
        """Turn to face ``target``."""
        aim = target - self.sprite.position
        self.sprite.rotation = math.degrees(math.atan2(aim.y, aim.x))

    def handle_key(self, key: str, now: float) -> None:
        """React to a key press: ``r`` reloads, ``f`` starts a melee attack."""
        key = key.lower()
        if key == "r" and not self.is_busy and self.current_sprite != 0:
            self.change_state(PlayerState.RELOADING, now)
        if key == "f" and not self.is_busy:
            self.change_state(PlayerState.MELEE, now)

    def shoot(self, now: float, fire_pressed: bool, target: Vec2, bullets: List[Bullet]) -> None:
        """Fire the current weapon towards ``target``, appending to ``bullets``."""
        if self.is_busy or not fire_pressed:
            return
        weapon = self.weapon
        if not (weapon.is_full or now - self.last_fire_time >= weapon.bullet_delay):
            return
        position = self.sprite.position
        if weapon.current_clip > 0:
            if weapon.is_shotgun:
                half = SHOTGUN_PELLETS // 2
                for step in range(-half, half + 1):
                    spread = step * SHOTGUN_SPREAD
                    bullet = create_bullet(position, self.sprite.rotation, weapon, target)
                    bullet.sprite.rotate(spread)
                    bullet.velocity = rotate_vector(bullet.velocity, spread)
                    bullets.append(bullet)
                weapon.current_clip -= 1
            elif weapon.id == WeaponID.BURST_RIFLE:
                if not self.is_bursting and weapon.current_clip >= BURST_SHOTS:
                    self.is_bursting = True
                    self.burst_shots_fired = 0
                    self.next_burst_time = now
                    weapon.current_clip -= BURST_SHOTS
            else:
                bullets.append(create_bullet(position, self.sprite.rotation, weapon, target))
                weapon.current_clip -= 1
        self.last_fire_time = now

    def end_state(self, now: float) -> None:
        """Finish a completed reload or melee animation."""
        if self.reload_index == _RELOAD_FRAMES - 1:
            self.weapon.reload()
            self.change_state(PlayerState.IDLE, now)
            self.reload_index = 0
            self._set_speed(BASE_SPEED)
        if self.melee_index == _MELEE_FRAMES - 1:
            self.change_state(PlayerState.IDLE, now)
            self.sprite.scale = Vec2(self.scale_x, self.scale_y)
            self.melee_index = 0
            self._set_speed(BASE_SPEED)

    def update(self, controls: Controls, now: float, bullets: List[Bullet]) -> None:
        """Run one frame of player logic."""
        self.shoot(now, controls.fire, controls.mouse, bullets)
        self.move(controls.keys, now)
        self.advance_animation(now)
        self.end_state(now)
        self.crosshair.position = controls.mouse
        self.aim_at(controls.mouse)

        if self.is_bursting:
            if now >= self.next_burst_time and self.burst_shots_fired < BURST_SHOTS:
                bullets.append(
                    create_bullet(
                        self.sprite.position, self.sprite.rotation, self.weapon, controls.mouse
                    )
                )
                self.burst_shots_fired += 1
                self.next_burst_time = now + self.burst_delay
            if self.burst_shots_fired >= BURST_SHOTS:
                self.is_bursting = False