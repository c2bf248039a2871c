import math

from dataclasses import dataclass

####

from dexcite.object_.base import ObjectBase


@dataclass
class Particle(ObjectBase):
    label: str = "particle"
    pdg: int = 0
    total_energy: float = 0.0
    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    mass: float = 0.0
    charge: int = 0

    @property
    def momentum_magnitude(self):
        return math.sqrt(self.px**2 + self.py**2 + self.pz**2)

    @property
    def kinetic_energy(self):
        return max(0.0, self.total_energy - self.mass)

    def copy(self):
        return Particle(
            pdg=self.pdg,
            total_energy=self.total_energy,
            px=self.px,
            py=self.py,
            pz=self.pz,
            mass=self.mass,
            charge=self.charge,
        )

    def boost(self, bx, by, bz):
        """Lorentz boost (in place) by the velocity (bx, by, bz)."""
        beta2 = bx * bx + by * by + bz * bz
        if beta2 == 0.0:
            return
        gamma = 1.0 / math.sqrt(1.0 - beta2)
        bp = bx * self.px + by * self.py + bz * self.pz
        factor = (gamma - 1.0) * bp / beta2 + gamma * self.total_energy

        self.px = self.px + factor * bx
        self.py = self.py + factor * by
        self.pz = self.pz + factor * bz
        self.total_energy = gamma * (self.total_energy + bp)

    def velocity(self):
        """Velocity (bx, by, bz) of the particle; the boost out of its rest frame."""
        return (
            self.px / self.total_energy,
            self.py / self.total_energy,
            self.pz / self.total_energy,
        )


def nucleus(pdg, mass, charge=0):
    """A nucleus at rest."""
    return Particle(
        pdg=int(pdg), total_energy=float(mass), mass=float(mass), charge=int(charge)
    )
