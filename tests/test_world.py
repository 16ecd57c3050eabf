import numpy as np
import pytest

from particle_sim import constants
from particle_sim.Body import Body
from particle_sim.Vec2 import Vec2
from particle_sim.world import World


def _make_world(**kwargs):
    kwargs.setdefault('seed', 7)
    return World(800, 600, **kwargs)


def test_populate_defaults():
    world = _make_world()
    world.populate()
    assert len(world.bodies) == constants.PARTICLE_COUNT == 50
    assert len(world.colors) == len(world.bodies)
    assert all(b.radius == 10.0 for b in world.bodies)


def test_spawned_bodies_start_inside_inset_viewport():
    world = _make_world()
    world.populate(200, 10.0)
    for b in world.bodies:
        assert 10.0 <= b.pos.x < 790.0
        assert 10.0 <= b.pos.y < 590.0
        assert -2.0 <= b.vel.x <= 1.98
        assert -2.0 <= b.vel.y <= 1.98
    for color in world.colors:
        assert len(color) == 3
        assert all(0 <= c <= 255 for c in color)


def test_same_seed_same_world():
    a = _make_world(seed=42)
    b = _make_world(seed=42)
    a.populate(30)
    b.populate(30)
    assert np.array_equal(a.get_state(), b.get_state())
    assert a.colors == b.colors

    for _ in range(120):
        a.update()
        b.update()
    assert np.array_equal(a.get_state(), b.get_state())


def test_different_seeds_differ():
    a = _make_world(seed=1)
    b = _make_world(seed=2)
    a.populate(10)
    b.populate(10)
    assert not np.array_equal(a.get_state(), b.get_state())


def test_invalid_construction():
    with pytest.raises(ValueError):
        World(0, 600)
    with pytest.raises(ValueError):
        _make_world().populate(-1)
    with pytest.raises(ValueError):
        World(15, 15).spawn_body(10)


def test_update_resolves_head_on_pair():
    world = _make_world(gravity=0.0)
    world.add_body(Body(Vec2(100, 100), Vec2(1, 0), radius=10), (255, 0, 0))
    world.add_body(Body(Vec2(115, 100), Vec2(-1, 0), radius=10), (0, 0, 255))

    resolved = world.update()

    a, b = world.bodies
    assert resolved == 1
    assert world.frame == 1
    assert world.collision_count == 1
    assert (b.pos - a.pos).length() == pytest.approx(20)
    assert a.vel.x == pytest.approx(-1)
    assert b.vel.x == pytest.approx(1)


def test_update_applies_gravity_and_counts_frames():
    world = _make_world()
    world.add_body(Body(Vec2(400, 100), Vec2(0, 0), radius=10), (1, 2, 3))
    world.update()
    world.update()
    body = world.bodies[0]
    assert world.frame == 2
    assert world.collision_count == 0
    assert body.vel.y == pytest.approx(0.4)
    assert body.pos.y == pytest.approx(100.6)


def test_body_count_and_colors_never_change():
    world = _make_world()
    world.populate()
    colors = list(world.colors)
    for _ in range(300):
        world.update()
    assert len(world.bodies) == 50
    assert world.colors == colors


def test_long_run_stays_near_viewport():
    world = _make_world()
    world.populate()
    for _ in range(600):
        world.update()
        state = world.get_state()
        assert np.all(np.isfinite(state))
    # collisions may push a body past a wall for a frame; the next step snaps it back
    xs, ys = state[:, 0], state[:, 1]
    assert np.all(xs > -100) and np.all(xs < 900)
    assert np.all(ys > -100) and np.all(ys < 700)


def test_diagnostics():
    world = _make_world()
    world.add_body(Body(Vec2(100, 100), Vec2(3, 4), radius=10), (0, 0, 0))
    world.add_body(Body(Vec2(300, 100), Vec2(-1, 0), radius=5), (9, 9, 9))

    state = world.get_state()
    assert state.shape == (2, 4)
    assert state[0].tolist() == [100, 100, 3, 4]
    assert world.total_momentum().tolist() == [2, 4]
    assert world.kinetic_energy() == pytest.approx(0.5 * 25 + 0.5 * 1)
    assert world.snapshot() == [((100.0, 100.0), 10.0, (0, 0, 0)), ((300.0, 100.0), 5.0, (9, 9, 9))]


def test_empty_world_diagnostics():
    world = _make_world()
    assert world.get_state().shape == (0, 4)
    assert world.total_momentum().tolist() == [0, 0]
    assert world.kinetic_energy() == 0.0
    assert world.update() == 0
