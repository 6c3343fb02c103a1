import pytest

from zombieshooter.geometry import Vec2, distance
from zombieshooter.player import Player
from zombieshooter.zombie import Zombie, ZombieKind, ZombieState


def test_crawler_stats():
    z = Zombie(Vec2(0.0, 0.0), ZombieKind.CRAWLER)
    assert z.health == 100.0
    assert z.attack_distance == 100.0
    assert z.avoid_distance == 85.0
    assert z.frame_size == (256.0, 256.0)
    assert z.scale_x == 1.15


def test_walker_stats_use_given_scale():
    z = Zombie(Vec2(0.0, 0.0), ZombieKind.WALKER, scale=(0.5, 0.6))
    assert z.health == 200.0
    assert z.attack_distance == 50.0
    assert z.sprite.scale == Vec2(0.5, -0.6)


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        Zombie(Vec2(0.0, 0.0), 7)


def test_move_towards_steps_by_speed():
    z = Zombie(Vec2(0.0, 0.0))
    z.move_towards(Vec2(100.0, 0.0), 100.0, 1.0)
    assert z.sprite.position == Vec2(z.speed, 0.0)
    assert z.state is ZombieState.MOVING
    assert z.sprite.rotation == 0.0


def test_move_towards_close_target_does_nothing():
    z = Zombie(Vec2(0.0, 0.0))
    z.move_towards(Vec2(10.0, 0.0), 10.0, 1.0)
    assert z.sprite.position == Vec2(0.0, 0.0)
    assert z.state is ZombieState.IDLE


def test_move_towards_while_attack_in_progress():
    z = Zombie(Vec2(0.0, 0.0))
    z.change_state(ZombieState.ATTACKING, 1.0)
    z.is_far = False
    z.move_towards(Vec2(100.0, 0.0), 100.0, 2.0)
    assert z.is_far is True
    assert z.state is ZombieState.ATTACKING
    assert z.sprite.position == Vec2(0.0, 0.0)


def test_nearest_player_position():
    z = Zombie(Vec2(0.0, 0.0))
    players = [Player(Vec2(100.0, 0.0)), Player(Vec2(30.0, 40.0)), Player(Vec2(-60.0, 0.0))]
    assert z.nearest_player_position(players, 1.0) == Vec2(30.0, 40.0)


def test_nearest_player_without_players_idles():
    z = Zombie(Vec2(5.0, 6.0))
    z.state = ZombieState.MOVING
    assert z.nearest_player_position([], 1.0) == Vec2(5.0, 6.0)
    assert z.state is ZombieState.IDLE


def test_avoid_others_pushes_apart():
    a = Zombie(Vec2(0.0, 0.0))
    b = Zombie(Vec2(10.0, 0.0))
    before = distance(a.sprite.position, b.sprite.position)
    a.avoid_others([a, b])
    assert a.sprite.position.x < 0.0
    assert distance(a.sprite.position, b.sprite.position) > before


def test_avoid_others_ignores_dead():
    a = Zombie(Vec2(0.0, 0.0))
    b = Zombie(Vec2(10.0, 0.0))
    b.is_dead = True
    a.avoid_others([a, b])
    assert a.sprite.position == Vec2(0.0, 0.0)


def test_update_attacks_player_in_range():
    z = Zombie(Vec2(0.0, 0.0))
    z.update([Player(Vec2(20.0, 0.0))], [z], 1.0)
    assert z.state is ZombieState.ATTACKING
    assert z.is_far is False


def test_update_chases_far_player():
    z = Zombie(Vec2(0.0, 0.0))
    player = Player(Vec2(300.0, 0.0))
    before = distance(z.sprite.position, player.sprite.position)
    z.update([player], [z], 1.0)
    assert z.state is ZombieState.MOVING
    assert distance(z.sprite.position, player.sprite.position) < before


def test_update_without_players_idles():
    z = Zombie(Vec2(0.0, 0.0))
    z.update([], [z], 1.0)
    assert z.state is ZombieState.IDLE


def test_death_then_erasure_after_corpse_lifetime():
    z = Zombie(Vec2(0.0, 0.0), ZombieKind.WALKER)
    z.health = 0.0
    for step in range(1, 50):
        z.update([], [z], step * 0.1)
        if z.is_dead:
            break
    assert z.is_dead
    assert z.dying_index == 4
    z.update([], [z], 5.0)
    assert not z.should_be_erased
    z.update([], [z], 14.0)
    assert not z.should_be_erased
    z.update([], [z], 15.0)
    assert z.should_be_erased


def test_animation_respects_delay():
    z = Zombie(Vec2(0.0, 0.0))
    z.change_state(ZombieState.MOVING, 1.0)
    z.change_state(ZombieState.MOVING, 1.0)
    assert z.moving_index == 1


def test_moving_animation_ping_pongs_within_bounds():
    z = Zombie(Vec2(0.0, 0.0), ZombieKind.WALKER)
    seen = []
    for step in range(1, 41):
        z.change_state(ZombieState.MOVING, step * 0.1)
        seen.append(z.moving_index)
    assert max(seen) == 15
    assert min(seen) == 1
    assert z.sprite.texture_rect[1] == 0