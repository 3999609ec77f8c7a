"""Tests for the interaction models."""

import math
import numpy as np
import pytest
from galaxy_dynamics import constants
from galaxy_dynamics.errors import ValidationError
from galaxy_dynamics.interactions import (
    INTERACTION_KINDS,
    Collision,
    Harassment,
    InteractionEngine,
    InteractionParams,
    Merger,
    Stripping,
    Tidal,
    create_interaction,
    list_interaction_kinds,
)
from galaxy_dynamics.presets import build_galaxy


class FixedRng:
    """Stand-in generator returning a constant from random()."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_factory_covers_every_kind():
    assert list_interaction_kinds() == list(INTERACTION_KINDS)
    expected = {
        "merger": Merger,
        "collision": Collision,
        "tidal": Tidal,
        "stripping": Stripping,
        "harassment": Harassment,
    }
    for kind, model_class in expected.items():
        model = create_interaction(InteractionParams(kind))
        assert isinstance(model, model_class)
        assert model.kind == kind
    assert Merger(InteractionParams("merger")).requires_partner
    assert Tidal(InteractionParams("tidal")).requires_partner
    assert not Collision(InteractionParams("collision")).requires_partner


@pytest.mark.parametrize("kwargs", [
    {"kind": "explosion"},
    {"kind": "merger", "strength": -1.0},
    {"kind": "merger", "duration": 0.0},
    {"kind": "merger", "duration": float("inf")},
    {"kind": "tidal", "distance": 0.0},
    {"kind": "stripping", "ram_direction": (0.0, 0.0, 0.0)},
    {"kind": "stripping", "ram_direction": (1.0, 0.0)},
])
def test_interaction_params_validation(kwargs):
    with pytest.raises(ValidationError):
        InteractionParams(**kwargs)


def test_interaction_params_from_dict():
    params = InteractionParams.from_dict({"kind": "stripping", "ram_direction": [0, 0, 2]})
    assert params.ram_direction == (0.0, 0.0, 2.0)
    with pytest.raises(ValidationError):
        InteractionParams.from_dict({"kind": "merger", "speed": 3})


def test_merger_pulls_galaxies_together(make_galaxy):
    a = make_galaxy([[-6.0, 0.0, 0.0], [-4.0, 0.0, 0.0]])
    b = make_galaxy([[4.0, 0.0, 0.0], [6.0, 0.0, 0.0]])
    engine = InteractionEngine(a, InteractionParams("merger", strength=2.0, duration=10.0), galaxy_b=b)

    engine.update(1.0)

    # strength * progress = 2 * 0.1 along +x for A, -x for B
    assert np.allclose(a.field.acceleration, [[0.2, 0.0, 0.0]] * 2)
    assert np.allclose(b.field.acceleration, [[-0.2, 0.0, 0.0]] * 2)


def test_merger_absorbs_partner_particles(make_galaxy):
    rng = np.random.default_rng(5)
    a = make_galaxy(rng.uniform(-1, 1, (10, 3)) + [-3.0, 0.0, 0.0])
    b = make_galaxy(rng.uniform(-1, 1, (40, 3)) + [3.0, 0.0, 0.0])
    engine = InteractionEngine(a, InteractionParams("merger", strength=0.0, duration=1.0), galaxy_b=b)

    counts = []
    for _ in range(4):
        engine.update(0.25)
        counts.append((a.count, b.count))

    # Absorbed share of B: (p - 0.5) / 2 * 0.5 -> 0, 0, 1/16, 1/8 of 40
    assert counts == [(10, 40), (10, 40), (12, 38), (15, 35)]
    assert engine.model.absorbed == 5
    assert engine.is_complete()


def test_merger_absorbs_nearest_particles(make_galaxy):
    a = make_galaxy([[-1.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
    b_positions = [[10.0 + i, 0.0, 0.0] for i in range(16)]
    b = make_galaxy(b_positions)
    model = Merger(InteractionParams("merger", strength=0.0, duration=1.0))

    model.apply(a, b, 1.0, 1.0, 0.0, np.random.default_rng(0))

    # 1/8 of 16 = 2 particles, the two closest to A's centroid
    assert a.count == 4
    assert np.allclose(a.field.position[2:, 0], [10.0, 11.0])
    assert b.count == 14
    assert b.field.position[:, 0].min() == 12.0


def test_merger_is_deterministic():
    def run():
        a = build_galaxy("milky-way-like", n_particles=200, seed=1, offset=[-20.0, 0.0, 0.0])
        b = build_galaxy("milky-way-like", n_particles=200, seed=2, offset=[20.0, 0.0, 0.0])
        engine = InteractionEngine(a, InteractionParams("merger", strength=3.0, duration=2.0), galaxy_b=b, seed=9)
        for dt in [1.0 / 60.0, 1.0 / 30.0] * 60:
            a.update(dt)
            b.update(dt)
            engine.update(dt)
        return a, b

    a1, b1 = run()
    a2, b2 = run()

    assert a1.count == a2.count and b1.count == b2.count
    assert a1.count > 200
    assert np.allclose(a1.field.position, a2.field.position)
    assert np.allclose(a1.field.color, a2.field.color)
    assert np.allclose(b1.field.position, b2.field.position)


def test_collision_heating_matches_schedule(make_galaxy):
    """Accumulated heating equals sum of strength * (1 - p) * dt * heating."""
    galaxy = make_galaxy([[1.0, 0.0, 0.0], [0.0, 0.0, 2.0], [-3.0, 0.0, 0.0]])
    engine = InteractionEngine(galaxy, InteractionParams("collision", strength=1.0, duration=1.0), seed=4)
    t0 = galaxy.field.temperature.copy()
    schedule = [0.25, 0.125, 0.125, 0.25, 0.25]

    expected = 0.0
    elapsed = 0.0
    for dt in schedule:
        engine.update(dt)
        elapsed += dt
        p = min(elapsed / 1.0, 1.0)
        expected += 1.0 * (1.0 - p) * dt * constants.COLLISION_HEATING

    assert engine.is_complete()
    assert np.allclose(galaxy.field.temperature - t0, expected)


def test_collision_scatters_and_shocks(make_galaxy):
    galaxy = make_galaxy([[1.0, 0.0, 0.0], [-1.0, 0.0, 0.0]])
    v0 = galaxy.field.velocity.copy()
    engine = InteractionEngine(galaxy, InteractionParams("collision", strength=1.0, duration=10.0), seed=0)

    engine.update(0.1)

    shock = math.sin(0.1 * constants.SHOCKWAVE_FREQUENCY) * 0.99
    # Radial acceleration away from the centroid
    assert np.allclose(galaxy.field.acceleration[:, 0], [shock, -shock])
    assert not np.allclose(galaxy.field.velocity, v0)


def test_tidal_noop_out_of_range(make_galaxy):
    """Centroids 10 apart with threshold 5: A is untouched."""
    a = make_galaxy([[-1.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
    b = make_galaxy([[10.0, 0.0, 0.0]])
    engine = InteractionEngine(a, InteractionParams("tidal", strength=1.0, duration=5.0, distance=5.0), galaxy_b=b)
    acceleration = a.field.acceleration.copy()
    velocity = a.field.velocity.copy()

    engine.update(0.1)

    assert np.array_equal(a.field.acceleration, acceleration)
    assert np.array_equal(a.field.velocity, velocity)


def test_tidal_pulls_toward_partner(make_galaxy):
    a = make_galaxy([[-1.0, 0.0, 0.0], [0.5, 0.0, 0.0], [1.0, 0.0, 0.0]])
    b = make_galaxy([[2.0, 0.0, 0.0]])
    b_acceleration = b.field.acceleration.copy()
    v0 = a.field.velocity.copy()
    engine = InteractionEngine(a, InteractionParams("tidal", strength=1.0, duration=5.0, distance=5.0), galaxy_b=b)

    engine.update(0.1)

    # Centroids 11/6 apart: strength * (1 - (11 / 6) / 5) for every particle
    expected = 1.0 - (11.0 / 6.0) / 5.0
    assert np.allclose(a.field.acceleration[:, 0], [expected] * 3)
    assert np.allclose(a.field.acceleration[:, 1:], 0.0)
    assert np.allclose(a.field.velocity - v0, [[expected * 0.1, 0.0, 0.0]] * 3)
    assert np.array_equal(b.field.acceleration, b_acceleration)


def test_stripping_removes_outer_particles(make_galaxy):
    galaxy = make_galaxy([[-1.0, 0.0, 0.0], [1.0, 0.0, 0.0], [-10.0, 0.0, 0.0], [10.0, 0.0, 0.0]], size=10.0)
    model = Stripping(InteractionParams("stripping", strength=1.0, duration=10.0))

    # strength 1 at p = 0: removal radius 10 / 2 = 5
    model.apply(galaxy, None, 0.0, 0.0, 0.1, FixedRng(0.0))

    assert galaxy.count == 2
    assert model.removed == 2
    assert np.allclose(np.abs(galaxy.field.position[:, 0]), 1.0)


def test_stripping_removal_is_random(make_galaxy):
    galaxy = make_galaxy([[-1.0, 0.0, 0.0], [10.0, 0.0, 0.0]], size=10.0)
    model = Stripping(InteractionParams("stripping", strength=1.0, duration=10.0))

    # Probability strength * 0.1 = 0.1; a draw of 0.5 removes nothing
    model.apply(galaxy, None, 0.0, 0.0, 0.1, FixedRng(0.5))

    assert galaxy.count == 2


def test_stripping_applies_ram_drag(make_galaxy):
    galaxy = make_galaxy([[1.0, 0.0, 0.0]])
    model = Stripping(InteractionParams("stripping", strength=2.0, duration=10.0, ram_direction=(0.0, 0.0, 3.0)))

    model.apply(galaxy, None, 5.0, 0.5, 0.1, FixedRng(1.0))

    assert np.allclose(galaxy.field.acceleration[0], [0.0, 0.0, 1.0])


def test_stripping_count_non_increasing():
    galaxy = build_galaxy("flocculent-spiral", n_particles=300, seed=3)
    engine = InteractionEngine(galaxy, InteractionParams("stripping", strength=5.0, duration=2.0), seed=21)

    counts = [galaxy.count]
    while not engine.is_complete():
        galaxy.update(0.05)
        engine.update(0.05)
        counts.append(galaxy.count)

    assert all(later <= earlier for earlier, later in zip(counts, counts[1:]))
    assert counts[-1] < counts[0]


def test_harassment_perturbation(make_galaxy):
    galaxy = make_galaxy([[1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
    v0 = galaxy.field.velocity.copy()
    engine = InteractionEngine(galaxy, InteractionParams("harassment", strength=2.0, duration=10.0))

    engine.update(0.2)

    tau = 0.2 * 5.0
    expected = np.array([math.sin(tau), math.cos(1.3 * tau), math.sin(0.7 * tau)]) * 2.0
    assert np.allclose(galaxy.field.acceleration, [expected, expected])
    assert np.allclose(galaxy.field.velocity - v0, [expected * 0.2] * 2)
