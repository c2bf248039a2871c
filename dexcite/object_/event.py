from dexcite.object_.base import ObjectBase
from dexcite.object_.particle import Particle

# Positions of the two-body reaction participants
PROJECTILE_INDEX = 0
TARGET_INDEX = 1
EJECTILE_INDEX = 0
RESIDUE_INDEX = 1


# ======================================================================================
# Event
# ======================================================================================


class Event(ObjectBase):
    """
    Particles of one generated event.

    The initial particles start with the projectile and the target, the final
    particles with the ejectile and the residue; particles emitted during
    de-excitation are appended after them. The residue is replaced after
    every emission. Particles are stored as copies.
    """

    # Annotations for type checking
    label: str = "event"
    #
    initial_particles: list[Particle]
    final_particles: list[Particle]
    Ex: float

    def __init__(self, projectile, target, ejectile, residue, Ex):
        super().__init__(register=False)
        self.initial_particles = [projectile.copy(), target.copy()]
        self.final_particles = [ejectile.copy(), residue.copy()]
        self.Ex = float(Ex)

    @property
    def projectile(self):
        return self.initial_particles[PROJECTILE_INDEX]

    @property
    def target(self):
        return self.initial_particles[TARGET_INDEX]

    @property
    def ejectile(self):
        return self.final_particles[EJECTILE_INDEX]

    @property
    def residue(self):
        return self.final_particles[RESIDUE_INDEX]

    @residue.setter
    def residue(self, particle):
        self.final_particles[RESIDUE_INDEX] = particle.copy()

    @property
    def emitted_particles(self):
        return self.final_particles[RESIDUE_INDEX + 1 :]

    def add_initial_particle(self, particle):
        self.initial_particles.append(particle.copy())

    def add_final_particle(self, particle):
        self.final_particles.append(particle.copy())

    def write_hepevt(self, event_num, stream):
        """
        Write the event in HEPEvt format.

        The projectile is listed untracked (status 0), followed by every final
        particle (status 1). Energies and momenta are in GeV; all particles
        start at the spacetime origin.
        """
        stream.write(f"{event_num} {len(self.final_particles) + 1}\n")
        write_hepevt_particle(self.projectile, stream, False)
        for particle in self.final_particles:
            write_hepevt_particle(particle, stream, True)

    def __repr__(self):
        text = "\n"
        text += "Event\n"
        text += f"  - Ex: {self.Ex} MeV\n"
        text += f"  - Projectile: {self.projectile}\n"
        for particle in self.final_particles:
            text += f"  - {particle}\n"
        return text


def write_hepevt_particle(particle, stream, track):
    status = 1 if track else 0
    stream.write(
        f"{status} {particle.pdg} 0 0 0 0"
        f" {particle.px / 1000.0:.16e}"
        f" {particle.py / 1000.0:.16e}"
        f" {particle.pz / 1000.0:.16e}"
        f" {particle.total_energy / 1000.0:.16e}"
        f" {particle.mass / 1000.0:.16e}"
        " 0. 0. 0. 0.\n"
    )
