import h5py
import importlib.metadata
import numpy as np

####

import dexcite.print_ as print_module


# ======================================================================================
# Main output
# ======================================================================================


def generate_output(events, settings):
    if settings.use_progress_bar:
        print_module.print_msg("")
    print_module.print_msg(" Generating output files...")

    with h5py.File(settings.output_name + ".h5", "w") as file:
        # Version
        file["version"] = importlib.metadata.version("dexcite")

        # Settings
        create_object_dataset(file, "settings", settings)

        # Events
        create_event_datasets(file, events)

    if settings.save_hepevt:
        with open(settings.output_name + ".hepevt", "w") as stream:
            for event_num, event in enumerate(events):
                event.write_hepevt(event_num, stream)


# ======================================================================================
# Input objects
# ======================================================================================


def create_object_dataset(file, group_name, object_):
    for name in [
        x
        for x in dir(object_)
        if (not x.startswith("_") and not callable(getattr(object_, x)))
    ]:
        file[f"{group_name}/{name}"] = getattr(object_, name)


# ======================================================================================
# Events
# ======================================================================================


def create_event_datasets(file, events):
    file.create_dataset("N_event", data=len(events))
    for i, event in enumerate(events):
        group = file.create_group(f"events/{i}")
        group.create_dataset("Ex", data=event.Ex)
        create_particle_datasets(group, "initial", event.initial_particles)
        create_particle_datasets(group, "final", event.final_particles)


def create_particle_datasets(group, name, particles):
    group.create_dataset(
        f"{name}/pdg", data=np.array([p.pdg for p in particles], dtype=np.int64)
    )
    group.create_dataset(
        f"{name}/energy", data=np.array([p.total_energy for p in particles])
    )
    group.create_dataset(
        f"{name}/momentum", data=np.array([[p.px, p.py, p.pz] for p in particles])
    )
    group.create_dataset(f"{name}/mass", data=np.array([p.mass for p in particles]))
    group.create_dataset(
        f"{name}/charge", data=np.array([p.charge for p in particles], dtype=np.int64)
    )


# ======================================================================================
# Runtimes
# ======================================================================================


def create_runtime_datasets(runtime, settings):
    with h5py.File(f"{settings.output_name}.h5", "a") as file:
        for name in ["total", "preparation", "simulation", "output"]:
            file.create_dataset(f"runtime/{name}", data=np.array([runtime[name]]))
