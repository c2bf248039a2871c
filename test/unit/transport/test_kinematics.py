import math
import pytest

####

import dexcite.transport.rng as rng

from dexcite.error import KinematicallyForbidden
from dexcite.object_.particle import Particle
from dexcite.transport.kinematics import (
    sample_isotropic_direction,
    two_body_decay,
    two_body_momentum,
)


def test_two_body_momentum():
    assert two_body_momentum(10.0, 0.0, 6.0) == pytest.approx(3.2)
    assert two_body_momentum(10.0, 4.0, 6.0) == 0.0


def test_direction_is_a_unit_vector():
    rng_state = rng.rng_state(5)
    for i in range(100):
        x, y, z = sample_isotropic_direction(rng_state)
        assert x**2 + y**2 + z**2 == pytest.approx(1.0)


def test_direction_is_isotropic_on_average():
    rng_state = rng.rng_state(6)
    N = 20000
    sums = [0.0, 0.0, 0.0]
    for i in range(N):
        for k, u in enumerate(sample_isotropic_direction(rng_state)):
            sums[k] += u
    for s in sums:
        # Each component has variance 1/3
        assert abs(s / N) < 5.0 * math.sqrt(1.0 / 3.0 / N)


def test_four_momentum_is_conserved():
    rng_state = rng.rng_state(8)
    parent_mass = 37000.0 + 939.56542052 + 3.0
    emitted = Particle(pdg=2112, mass=939.56542052)
    residue = Particle(pdg=1000180370, mass=37000.0)
    two_body_decay(parent_mass, emitted, residue, rng_state)

    assert emitted.total_energy + residue.total_energy == pytest.approx(
        parent_mass, rel=1e-14
    )
    assert emitted.px + residue.px == pytest.approx(0.0, abs=1e-12)
    assert emitted.py + residue.py == pytest.approx(0.0, abs=1e-12)
    assert emitted.pz + residue.pz == pytest.approx(0.0, abs=1e-12)
    assert emitted.kinetic_energy + residue.kinetic_energy == pytest.approx(
        3.0, rel=1e-8
    )


def test_photon_is_massless():
    rng_state = rng.rng_state(9)
    photon = Particle(pdg=22)
    residue = Particle(pdg=1000190400, mass=37200.0)
    two_body_decay(37202.0, photon, residue, rng_state)
    assert photon.total_energy == pytest.approx(photon.momentum_magnitude)
    assert photon.total_energy == pytest.approx(2.0, rel=1e-4)


def test_forbidden_decay_raises():
    rng_state = rng.rng_state(10)
    emitted = Particle(pdg=2112, mass=939.56542052)
    residue = Particle(pdg=1000180370, mass=37000.0)
    with pytest.raises(KinematicallyForbidden):
        two_body_decay(37000.0 + 939.0, emitted, residue, rng_state)


def test_boost_recovers_lab_frame():
    particle = Particle(pdg=22, total_energy=1.0, px=0.0, py=0.0, pz=1.0)
    particle.boost(0.0, 0.0, 0.6)
    # Doppler factor sqrt((1 + 0.6) / (1 - 0.6)) = 2
    assert particle.total_energy == pytest.approx(2.0)
    assert particle.pz == pytest.approx(2.0)
