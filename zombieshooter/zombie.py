"""Zombies: chasing the nearest player, attacking, dying and keeping apart."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import TYPE_CHECKING, NamedTuple, Optional, Sequence, Tuple, Union

from .geometry import Vec2, distance
from .sprite import Sprite

if TYPE_CHECKING:
    from .player import Player

ZOMBIE_SPEED = 3.0
ANIMATION_DELAY = 0.05
DEFAULT_SCALE = 0.35
MIN_CHASE_DISTANCE = 50.0
SEPARATION_STEP = 1.5
CORPSE_LIFETIME = 10.0
DEATH_SHRINK = 0.10
_ATTACK_COMMIT_FRAMES = 8


class ZombieState(IntEnum):
    """Animation state; the value is also the sprite-sheet row."""

    MOVING = 0
    IDLE = 1
    ATTACKING = 2
    DYING = 3


class ZombieKind(IntEnum):
    CRAWLER = 0
    WALKER = 1


class _KindSpec(NamedTuple):
    frame_size: Tuple[float, float]
    fixed_scale: Optional[float]
    health: float
    attack_distance: float
    avoid_distance: float
    loop_frames: int
    attack_frames: int
    dying_frames: int


_KINDS = {
    ZombieKind.CRAWLER: _KindSpec((256.0, 256.0), 1.15, 100.0, 100.0, 85.0, 31, 20, 16),
    ZombieKind.WALKER: _KindSpec((318.0, 311.0), None, 200.0, 50.0, 45.0, 16, 9, 4),
}


def _ping_pong(index: int, direction: int, frames: int) -> Tuple[int, int]:
    index += direction
    if index >= frames:
        return frames - 1, -1
    if index <= 0:
        return 1, 1
    return index, direction


class Zombie:
    """A zombie that hunts the nearest player.

    All timing is driven by ``now``, a monotonically increasing time in seconds.
    """

    def __init__(
        self,
        position: Vec2,
        kind: Union[ZombieKind, int] = ZombieKind.WALKER,
        *,
        scale: Tuple[float, float] = (DEFAULT_SCALE, DEFAULT_SCALE),
        now: float = 0.0,
    ) -> None:
        self.kind = ZombieKind(kind)
        spec = _KINDS[self.kind]
        self._spec = spec
        if spec.fixed_scale is not None:
            self.scale_x = self.scale_y = spec.fixed_scale
        else:
            self.scale_x, self.scale_y = scale
        self.frame_size = spec.frame_size
        self.health = spec.health
        self.attack_distance = spec.attack_distance
        self.avoid_distance = spec.avoid_distance
        self.speed = ZOMBIE_SPEED
        self.diagonal_speed = abs(self.speed) / math.sqrt(2)
        self.animation_delay = ANIMATION_DELAY
        self.sprite = Sprite(
            position,
            texture=("zombie", int(self.kind)),
            frame_size=self.frame_size,
            scale=Vec2(self.scale_x, -self.scale_y),
        )
        self.state = ZombieState.IDLE
        self.moving_index = 0
        self.idle_index = 0
        self.attack_index = 0
        self.dying_index = 0
        self.moving_direction = 1
        self.idle_direction = 1
        self.is_far = True
        self.is_dead = False
        self.should_be_erased = False
        self._death_time: Optional[float] = None
        self._last_frame_time = now

    @property
    def position(self) -> Vec2:
        return self.sprite.position

    def change_state(self, state: ZombieState, now: float) -> None:
        """Switch animation state and try to advance its animation."""
        self.state = ZombieState(state)
        self.advance_animation(now)

    def advance_animation(self, now: float) -> None:
        """Step to the next frame once the animation delay has passed."""
        if now - self._last_frame_time < self.animation_delay:
            return
        self._last_frame_time = now
        spec = self._spec
        row = int(self.state)
        if self.state is ZombieState.MOVING:
            self.moving_index, self.moving_direction = _ping_pong(
                self.moving_index, self.moving_direction, spec.loop_frames
            )
            column = self.moving_index
        elif self.state is ZombieState.IDLE:
            self.idle_index, self.idle_direction = _ping_pong(
                self.idle_index, self.idle_direction, spec.loop_frames
            )
            column = self.idle_index
        elif self.state is ZombieState.ATTACKING:
            self.attack_index = (self.attack_index + 1) % spec.attack_frames
            column = self.attack_index
        else:
            if self.dying_index >= spec.dying_frames:
                self.is_dead = True
                return
            self.dying_index += 1
            column = self.dying_index
        self.sprite.set_frame(column, row)

    def move_towards(self, target: Vec2, distance: float, now: float) -> None:
        """Walk one step towards ``target``, which is ``distance`` away."""
        if distance < MIN_CHASE_DISTANCE or self.state is ZombieState.DYING:
            return
        if self.state is ZombieState.ATTACKING and self.attack_index < _ATTACK_COMMIT_FRAMES:
            self.is_far = True
            return
        self.change_state(ZombieState.MOVING, now)
        direction = (target - self.sprite.position).normalized()
        self.sprite.move(direction.x * self.speed, direction.y * self.speed)
        self.sprite.rotation = math.degrees(math.atan2(direction.y, direction.x))
        self.change_state(ZombieState.MOVING, now)

    def nearest_player_position(self, players: Sequence[Player], now: float) -> Vec2:
        """Position of the closest player; own position (and idle) if there are none."""
        here = self.sprite.position
        if not players:
            self.change_state(ZombieState.IDLE, now)
            return here
        nearest = min(players, key=lambda player: distance(player.sprite.position, here))
        return nearest.sprite.position

    def avoid_others(self, zombies: Sequence[Zombie]) -> None:
        """Step away from living zombies that are too close."""
        for other in zombies:
            if other is self or other.is_dead:
                continue
            gap = distance(self.sprite.position, other.sprite.position)
            if 0.0 < gap < other.avoid_distance:
                away = (self.sprite.position - other.sprite.position).normalized()
                self.sprite.move(away.x * SEPARATION_STEP, away.y * SEPARATION_STEP)

    def update(self, players: Sequence[Player], zombies: Sequence[Zombie], now: float) -> None:
        """Run one frame of zombie logic."""
        if self.is_dead and self._death_time is None:
            self._death_time = now
        if self.is_dead:
            if self._death_time is not None and now - self._death_time >= CORPSE_LIFETIME:
                self.should_be_erased = True
            return

        if self.health <= 0.0:
            if self.kind is not ZombieKind.CRAWLER:
                self.sprite.scale = Vec2(self.scale_x - DEATH_SHRINK, self.scale_y - DEATH_SHRINK)
            self.change_state(ZombieState.DYING, now)
        else:
            if not players:
                self.change_state(ZombieState.IDLE, now)
                self.advance_animation(now)
                return
            target = self.nearest_player_position(players, now)
            gap = distance(self.sprite.position, target)
            if gap < self.attack_distance:
                self.is_far = False
                self.change_state(ZombieState.ATTACKING, now)
            else:
                self.move_towards(target, gap, now)

        self.avoid_others(zombies)
        self.advance_animation(now)