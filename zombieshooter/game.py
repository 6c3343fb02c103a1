"""Asset loading, rendering and the interactive game loop."""

from __future__ import annotations

import argparse
import os
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Hashable, List, Optional, Sequence, Tuple, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .geometry import Vec2  # noqa: E402
from .player import Controls  # noqa: E402
from .sprite import Sprite  # noqa: E402
from .weapons import ShellKind  # noqa: E402
from .world import World, spawn_world  # noqa: E402
from .zombie import ZombieKind  # noqa: E402

FRAME_RATE = 60
SPAWN_WIDTH = 1920
SPAWN_HEIGHT = 1080
WINDOW_TITLE = "My Game"

CROSSHAIR_FILE = ("imgs/crosshair.png", "crosshair")
PLAYER_FILES: Tuple[Tuple[int, str, str], ...] = (
    (0, "imgs/sprite/sprite_sheet_knife.png", "knife"),
    (1, "imgs/sprite/sprite_sheet_handgun.png", "handgun"),
    (2, "imgs/sprite/sprite_sheet_rifle.png", "rifle"),
    (3, "imgs/sprite/sprite_sheet_shotgun.png", "shotgun"),
)
ZOMBIE_FILES: Tuple[Tuple[ZombieKind, str, str], ...] = (
    (ZombieKind.WALKER, "imgs/sprite/zombie3.png", "Zombie2"),
    (ZombieKind.CRAWLER, "imgs/sprite/zombie2.png", "Zombie2"),
)
SHELL_FILES: Tuple[Tuple[ShellKind, str, str], ...] = (
    (ShellKind.LIGHT, "imgs/sprite/lig-shell.png", "light shell"),
    (ShellKind.MEDIUM, "imgs/sprite/med-shell.png", "medium shell"),
    (ShellKind.HEAVY, "imgs/sprite/hev-shell.png", "heavy shell"),
    (ShellKind.PLASMA, "imgs/sprite/plasma.png", "plasma shell"),
)


@dataclass
class Assets:
    """Loaded textures; anything that failed to load is absent and listed in ``missing``."""

    crosshair: Optional[pygame.Surface] = None
    player_sheets: Dict[int, pygame.Surface] = field(default_factory=dict)
    zombie_sheets: Dict[ZombieKind, pygame.Surface] = field(default_factory=dict)
    shells: Dict[ShellKind, pygame.Surface] = field(default_factory=dict)
    missing: List[Path] = field(default_factory=list)


def _load_texture(path: Path, label: str, missing: List[Path]) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError, FileNotFoundError):
        print(f"Failed to load texture: {path}")
        print(f"Error loading {label} texture")
        missing.append(path)
        return None


def load_assets(root: Union[str, Path] = ".") -> Assets:
    """Load every texture the game uses from below ``root``.

    A texture that cannot be loaded is reported and left out; the game runs without it.
    """
    base = Path(root)
    assets = Assets()
    relative, label = CROSSHAIR_FILE
    assets.crosshair = _load_texture(base / relative, label, assets.missing)
    for index, relative, label in PLAYER_FILES:
        surface = _load_texture(base / relative, label, assets.missing)
        if surface is not None:
            assets.player_sheets[index] = surface
    for kind, relative, label in ZOMBIE_FILES:
        surface = _load_texture(base / relative, label, assets.missing)
        if surface is not None:
            assets.zombie_sheets[kind] = surface
    for shell, relative, label in SHELL_FILES:
        surface = _load_texture(base / relative, label, assets.missing)
        if surface is not None:
            assets.shells[shell] = surface
    return assets


def _texture_for(assets: Assets, key: Hashable) -> Optional[pygame.Surface]:
    if key == "crosshair":
        return assets.crosshair
    if isinstance(key, ShellKind):
        return assets.shells.get(key)
    if isinstance(key, tuple) and len(key) == 2:
        group, index = key
        if group == "player":
            return assets.player_sheets.get(index)
        if group == "zombie":
            return assets.zombie_sheets.get(ZombieKind(index))
    return None


def _optimise(assets: Assets) -> None:
    """Convert loaded surfaces to the display format once a display exists."""
    if assets.crosshair is not None:
        assets.crosshair = assets.crosshair.convert_alpha()
    for sheets in (assets.player_sheets, assets.zombie_sheets, assets.shells):
        for key, surface in sheets.items():
            sheets[key] = surface.convert_alpha()


def _render(screen: pygame.Surface, sprite: Sprite, assets: Assets) -> None:
    texture = _texture_for(assets, sprite.texture)
    if texture is None:
        return
    image = texture
    if sprite.texture_rect is not None:
        area = pygame.Rect(sprite.texture_rect).clip(texture.get_rect())
        if area.width == 0 or area.height == 0:
            return
        image = texture.subsurface(area)
    sx, sy = sprite.scale.x, sprite.scale.y
    width = int(image.get_width() * abs(sx))
    height = int(image.get_height() * abs(sy))
    if width <= 0 or height <= 0:
        return
    image = pygame.transform.scale(image, (width, height))
    if sx < 0 or sy < 0:
        image = pygame.transform.flip(image, sx < 0, sy < 0)
    image = pygame.transform.rotate(image, -sprite.rotation)
    rect = image.get_rect(center=(round(sprite.position.x), round(sprite.position.y)))
    screen.blit(image, rect)


_MOVE_KEYS = {pygame.K_w: "w", pygame.K_a: "a", pygame.K_s: "s", pygame.K_d: "d"}
_ACTION_KEYS = {pygame.K_r: "r", pygame.K_f: "f"}


def _read_controls() -> Controls:
    pressed = pygame.key.get_pressed()
    keys = frozenset(name for code, name in _MOVE_KEYS.items() if pressed[code])
    x, y = pygame.mouse.get_pos()
    return Controls(keys=keys, fire=bool(pygame.mouse.get_pressed()[0]), mouse=Vec2(float(x), float(y)))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="zombieshooter", description="Top-down zombie shooter.")
    parser.add_argument("--assets", default=".", help="directory that holds the imgs/ folder")
    parser.add_argument("--seed", type=int, default=None, help="seed for spawn positions")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open a full-screen window and run the game until it is closed."""
    args = _parse_args(argv)
    assets = load_assets(args.assets)
    rng = random.Random(args.seed)

    pygame.init()
    try:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.mouse.set_visible(False)
        _optimise(assets)

        world: World = spawn_world(SPAWN_WIDTH, SPAWN_HEIGHT, rng)
        clock = pygame.time.Clock()
        start = time.monotonic()
        running = True
        while running:
            dt = clock.tick(FRAME_RATE) / 1000.0
            now = time.monotonic() - start
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in _ACTION_KEYS:
                    for player in world.players:
                        player.handle_key(_ACTION_KEYS[event.key], now)
            if not running:
                break

            world.update(_read_controls(), now, dt)

            screen.fill((0, 0, 0))
            for sprite in world.draw_order():
                _render(screen, sprite, assets)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())