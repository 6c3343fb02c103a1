# zombieshooter

A top-down arcade shooter. You control a survivor, aim with the mouse and
fight off a horde of zombies that walk towards the nearest player, push
each other aside and attack when they get close.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
zombieshooter
```

The game opens a full-screen window with one pistol-armed player and a horde
of 18 crawlers and 24 walkers placed at random in a 1920×1080 area. Close the
window to quit.

Options:

- `--assets DIR` — directory that holds the `imgs/` folder (default: the
  current directory)
- `--seed N` — seed for the random spawn positions

The images looked for are `imgs/crosshair.png` and the sprite sheets and
shells under `imgs/sprite/`. An image that cannot be loaded is reported and
the game carries on without drawing it.

Controls:

- `W`, `A`, `S`, `D` move, diagonals included; movement slows while
  reloading or in a melee attack
- the mouse aims, and the left button fires
- `R` reloads (not with the knife)
- `F` makes a melee attack

## Weapons

`zombieshooter.weapons.Weapon` is built from a `WeaponID`: the knife,
pistol, automatic, burst and single-shot rifles, shotgun, and the plasma
pistol, rifle and shotgun. Each has its own clip size, damage, delay between
shots and fire type (`FireType.SINGLE`, `FireType.BURST`, `FireType.AUTO`);
an unknown id gives an inert "Unknown" weapon. Shotguns fire a fan of five
shells; the burst rifle fires three shots in quick succession.
`shell_for(weapon_id)` gives the `ShellKind` a weapon fires.

## Using the pieces

The game logic needs no window and is driven by explicit times in seconds,
so it can be run and tested on its own:

- `zombieshooter.geometry` — `Vec2`, `get_direction`, `rotate_vector`, `distance`
- `zombieshooter.sprite` — `Sprite` with position, rotation, scale and
  sprite-sheet frame
- `zombieshooter.bullets` — `Bullet`, `create_bullet`, `update_bullets`
- `zombieshooter.player` — `Player`, `PlayerState`, `Controls`
- `zombieshooter.zombie` — `Zombie`, `ZombieState`, `ZombieKind`
- `zombieshooter.world` — `World`, `spawn_world`, `players_avoid_zombies`,
  `bullet_intersection`
- `zombieshooter.game` — `Assets`, `load_assets`, `main`

A `World` is advanced with `World.update(controls, now, dt)`, where
`controls` is a `Controls` holding the held movement keys, the fire button
and the mouse position. `World.draw_order()` gives the sprites in the order
they are drawn: dead zombies first, then bullets, living zombies, and
finally players with their crosshairs.

## What it does not do

Zombies play their attack animation but do not hurt players: a player's
`health` never goes down, so there is no game over. There is no score, no
sound, no level layout or obstacles, and no menu; dead zombies are removed
ten seconds after they die and are not replaced.