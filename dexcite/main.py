# ======================================================================================
# Run
# ======================================================================================


def run():
    import time

    import dexcite.print_ as print_module

    # Timer: total
    time_total_start = time.perf_counter()

    from dexcite.object_.structure import structure

    settings = structure.settings

    # Override settings with command-line arguments
    import dexcite.config as config

    config.apply(settings)

    # ==================================================================================
    # Preparation
    # ==================================================================================

    # Timer: preparation
    time_prep_start = time.perf_counter()

    preparation()

    # Print headers
    print_module.print_banner()
    print_module.print_configuration(settings)
    print(" Now generating events...")

    # Timer: preparation
    time_prep_end = time.perf_counter()

    # ==================================================================================
    # Running the simulation
    # ==================================================================================

    # Timer: simulation
    time_simulation_start = time.perf_counter()

    import dexcite.transport.simulation as simulation_module

    events, N_failed = simulation_module.simulate_events()

    # Timer: simulation
    time_simulation_end = time.perf_counter()

    N_emitted = sum(len(event.emitted_particles) for event in events)
    if settings.use_progress_bar:
        print_module.print_msg("")
    print_module.print_event_summary(settings.N_event, N_failed, N_emitted)

    # ==================================================================================
    # Working on the output
    # ==================================================================================

    import dexcite.output as output_module

    # Timer: output
    time_output_start = time.perf_counter()

    output_module.generate_output(events, settings)

    # Timer: output
    time_output_end = time.perf_counter()

    # Timer: total
    time_total_end = time.perf_counter()

    # Manage timers
    runtime = {
        "total": time_total_end - time_total_start,
        "preparation": time_prep_end - time_prep_start,
        "simulation": time_simulation_end - time_simulation_start,
        "output": time_output_end - time_output_start,
    }
    output_module.create_runtime_datasets(runtime, settings)
    print_module.print_runtime(runtime)

    return events


# ======================================================================================
# Preparation
# ======================================================================================


def preparation():
    from dexcite.object_.structure import structure
    from dexcite.print_ import print_error

    settings = structure.settings

    if settings.N_event < 1:
        print_error("Number of events has to be positive.")
    if len(structure.sources) == 0:
        print_error("No source is defined.")

    # Normalize source probability
    norm = 0.0
    for source in structure.sources:
        norm += source.probability
    for source in structure.sources:
        source.probability /= norm
