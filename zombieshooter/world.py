"""The game world: players, zombies and bullets updated together."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Sequence

from .bullets import Bullet, update_bullets
from .geometry import distance
from .player import Controls, Player
from .sprite import Sprite
from .weapons import WeaponID
from .zombie import Zombie, ZombieKind

PLAYER_PUSH = 10.5
HIT_RADIUS = 30.0
CRAWLER_COUNT = 18
WALKER_COUNT = 24


def players_avoid_zombies(players: Sequence[Player], zombies: Sequence[Zombie]) -> None:
    """Push players away from living zombies that are too close."""
    for player in players:
        start = player.sprite.position
        for zombie in zombies:
            if zombie.is_dead:
                continue
            gap = distance(start, zombie.sprite.position)
            if 0.0 < gap < zombie.avoid_distance:
                away = (start - zombie.sprite.position).normalized()
                player.sprite.move(away.x * PLAYER_PUSH, away.y * PLAYER_PUSH)


def bullet_intersection(bullets: List[Bullet], zombies: Sequence[Zombie]) -> None:
    """Apply bullet hits to living zombies and remove the bullets that hit."""
    survivors = []
    for bullet in bullets:
        position = bullet.sprite.position
        for zombie in zombies:
            if zombie.is_dead:
                continue
            if 0.0 < distance(position, zombie.sprite.position) < HIT_RADIUS:
                zombie.health -= bullet.damage
                break
        else:
            survivors.append(bullet)
    bullets[:] = survivors


@dataclass
class World:
    """Everything that lives in one game session."""

    players: List[Player] = field(default_factory=list)
    zombies: List[Zombie] = field(default_factory=list)
    bullets: List[Bullet] = field(default_factory=list)

    def update(self, controls: Controls, now: float, dt: float) -> None:
        """Advance the whole world by one frame."""
        for player in self.players:
            player.update(controls, now, self.bullets)
        for zombie in self.zombies:
            zombie.update(self.players, self.zombies, now)
        players_avoid_zombies(self.players, self.zombies)
        bullet_intersection(self.bullets, self.zombies)
        self.zombies[:] = [zombie for zombie in self.zombies if not zombie.should_be_erased]
        update_bullets(self.bullets, dt)

    def draw_order(self) -> List[Sprite]:
        """Sprites back to front: corpses, bullets, living zombies, players and crosshairs."""
        sprites = [zombie.sprite for zombie in self.zombies if zombie.is_dead]
        sprites.extend(bullet.sprite for bullet in self.bullets)
        sprites.extend(zombie.sprite for zombie in self.zombies if not zombie.is_dead)
        for player in self.players:
            sprites.append(player.sprite)
            sprites.append(player.crosshair)
        return sprites


def spawn_world(width: int, height: int, rng: random.Random) -> World:
    """A world with one pistol-armed player and a horde placed at random."""

    def spot():
        from .geometry import Vec2

        return Vec2(float(rng.randrange(width)), float(rng.randrange(height)))

    players = [Player(spot(), WeaponID.PISTOL)]
    kinds = [ZombieKind.CRAWLER] * CRAWLER_COUNT + [ZombieKind.WALKER] * WALKER_COUNT
    zombies = [Zombie(spot(), kind) for kind in kinds]
    return World(players=players, zombies=zombies)