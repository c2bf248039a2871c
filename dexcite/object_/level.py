import math

####

from dexcite.constant import PARITY_NEGATIVE, PARITY_POSITIVE
from dexcite.object_.base import ObjectNonSingleton
from dexcite.print_ import print_error


def decode_parity(parity):
    if parity == PARITY_POSITIVE:
        return "+"
    elif parity == PARITY_NEGATIVE:
        return "-"


def decode_spin_parity(two_J, parity):
    if two_J % 2 == 0:
        return f"{two_J // 2}{decode_parity(parity)}"
    return f"{two_J}/2{decode_parity(parity)}"


def check_parity(parity):
    if parity not in (PARITY_POSITIVE, PARITY_NEGATIVE):
        print_error(f"Parity must be +1 or -1, got {parity}")
    return int(parity)


# ======================================================================================
# Nuclear level
# ======================================================================================


class Level(ObjectNonSingleton):
    # Annotations for type checking
    label: str = "level"
    #
    energy: float
    two_J: int
    parity: int

    def __init__(self, energy, two_J, parity):
        super().__init__()

        if not math.isfinite(energy) or energy < 0.0:
            print_error(f"Level energy must be finite and non-negative, got {energy}")
        if two_J < 0:
            print_error(f"Level spin must be non-negative, got two_J = {two_J}")

        self.energy = float(energy)
        self.two_J = int(two_J)
        self.parity = check_parity(parity)

    @property
    def spin_parity(self):
        return decode_spin_parity(self.two_J, self.parity)

    def __repr__(self):
        text = "\n"
        text += "Level\n"
        text += f"  - ID: {self.ID}\n"
        text += f"  - Energy: {self.energy} MeV\n"
        text += f"  - Spin-parity: {self.spin_parity}\n"
        return text
