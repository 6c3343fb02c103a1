import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from zombieshooter.game import Assets, load_assets, main
from zombieshooter.weapons import ShellKind
from zombieshooter.zombie import ZombieKind

ALL_FILES = [
    "imgs/crosshair.png",
    "imgs/sprite/sprite_sheet_knife.png",
    "imgs/sprite/sprite_sheet_handgun.png",
    "imgs/sprite/sprite_sheet_rifle.png",
    "imgs/sprite/sprite_sheet_shotgun.png",
    "imgs/sprite/zombie3.png",
    "imgs/sprite/zombie2.png",
    "imgs/sprite/lig-shell.png",
    "imgs/sprite/med-shell.png",
    "imgs/sprite/hev-shell.png",
    "imgs/sprite/plasma.png",
]


def _write_png(path, size):
    path.parent.mkdir(parents=True, exist_ok=True)
    surface = pygame.Surface(size)
    surface.fill((200, 10, 10))
    pygame.image.save(surface, str(path))


@pytest.fixture
def full_assets(tmp_path):
    for number, relative in enumerate(ALL_FILES, start=1):
        _write_png(tmp_path / relative, (number, number + 1))
    return tmp_path


def test_load_all_assets(full_assets):
    assets = load_assets(full_assets)
    assert assets.missing == []
    assert assets.crosshair.get_size() == (1, 2)
    assert sorted(assets.player_sheets) == [0, 1, 2, 3]
    assert assets.player_sheets[0].get_size() == (2, 3)
    assert assets.player_sheets[3].get_size() == (5, 6)


def test_zombie_files_map_to_kinds(full_assets):
    assets = load_assets(full_assets)
    assert assets.zombie_sheets[ZombieKind.WALKER].get_size() == (6, 7)
    assert assets.zombie_sheets[ZombieKind.CRAWLER].get_size() == (7, 8)


def test_shell_files_map_to_kinds(full_assets):
    assets = load_assets(full_assets)
    assert set(assets.shells) == set(ShellKind)
    assert assets.shells[ShellKind.LIGHT].get_size() == (8, 9)
    assert assets.shells[ShellKind.PLASMA].get_size() == (11, 12)


def test_missing_assets_are_reported(tmp_path, capsys):
    assets = load_assets(tmp_path)
    assert assets.crosshair is None
    assert assets.player_sheets == {}
    assert assets.zombie_sheets == {}
    assert assets.shells == {}
    assert len(assets.missing) == len(ALL_FILES)
    out = capsys.readouterr().out
    assert f"Failed to load texture: {tmp_path / 'imgs/crosshair.png'}" in out
    assert "Error loading crosshair texture" in out
    assert "Error loading plasma shell texture" in out


def test_partial_and_corrupt_assets(tmp_path, capsys):
    _write_png(tmp_path / "imgs/crosshair.png", (4, 4))
    broken = tmp_path / "imgs/sprite/sprite_sheet_knife.png"
    broken.parent.mkdir(parents=True, exist_ok=True)
    broken.write_bytes(b"not an image")
    assets = load_assets(str(tmp_path))
    assert assets.crosshair.get_size() == (4, 4)
    assert 0 not in assets.player_sheets
    assert broken in assets.missing
    assert tmp_path / "imgs/crosshair.png" not in assets.missing
    assert "Error loading knife texture" in capsys.readouterr().out


def test_assets_defaults_are_independent():
    first = Assets()
    second = Assets()
    first.missing.append("x")
    assert second.missing == []


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "--assets" in capsys.readouterr().out


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit) as info:
        main(["--seed", "abc"])
    assert info.value.code == 2