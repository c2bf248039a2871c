import h5py
import numpy as np
import pytest

####

from dexcite.constant import PARITY_POSITIVE, PHOTON
from dexcite.object_.decay_scheme import DecayScheme
from dexcite.object_.source import Source
from dexcite.object_.structure import structure
from dexcite.output import create_runtime_datasets, generate_output
from dexcite.transport.simulation import simulate_events


@pytest.fixture
def events():
    scheme = DecayScheme("40Ar", 1000180400, 37211.0, 18)
    ground = scheme.add_level(0.0, 0, PARITY_POSITIVE)
    first = scheme.add_level(1.46, 4, PARITY_POSITIVE)
    scheme.add_gamma(first, ground, 1.0)
    Source(scheme, 1.46, 4)

    structure.settings.N_event = 3
    events, _ = simulate_events()
    return events


def test_hdf5_output(events, tmp_path):
    settings = structure.settings
    settings.output_name = str(tmp_path / "output")
    generate_output(events, settings)

    with h5py.File(tmp_path / "output.h5", "r") as f:
        assert f["N_event"][()] == 3
        assert f["settings/N_event"][()] == 3
        assert f["settings/rng_seed"][()] == settings.rng_seed

        group = f["events/1"]
        assert group["Ex"][()] == 1.46
        assert list(group["initial/pdg"][()]) == [0, 1000180400]
        assert list(group["final/pdg"][()]) == [0, 1000180400, PHOTON]
        assert group["final/momentum"].shape == (3, 3)

        # Photon and recoil balance
        momentum = group["final/momentum"][()]
        assert np.allclose(momentum.sum(axis=0), 0.0, atol=1e-9)
        assert group["final/energy"][2] == pytest.approx(1.46, rel=1e-4)

    assert not (tmp_path / "output.hepevt").exists()


def test_hepevt_output(events, tmp_path):
    settings = structure.settings
    settings.output_name = str(tmp_path / "output")
    settings.save_hepevt = True
    generate_output(events, settings)

    lines = (tmp_path / "output.hepevt").read_text().splitlines()
    # Header and four particles per event
    assert len(lines) == 3 * 5
    assert lines[0] == "0 4"
    assert lines[5] == "1 4"
    assert lines[14].split()[:2] == ["1", str(PHOTON)]


def test_runtime_output(events, tmp_path):
    settings = structure.settings
    settings.output_name = str(tmp_path / "output")
    generate_output(events, settings)

    runtime = {"total": 3.0, "preparation": 1.0, "simulation": 1.5, "output": 0.5}
    create_runtime_datasets(runtime, settings)
    with h5py.File(tmp_path / "output.h5", "r") as f:
        assert f["runtime/simulation"][0] == 1.5
