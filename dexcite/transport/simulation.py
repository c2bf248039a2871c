from operator import attrgetter

####

import dexcite.transport.rng as rng

from dexcite.error import DecayError
from dexcite.object_.structure import structure
from dexcite.print_ import print_progress, print_warning
from dexcite.transport.cascade import deexcite
from dexcite.transport.util import sample_weighted


# ======================================================================================
# Multi-event simulation
# ======================================================================================


def simulate_events():
    """
    Generate `settings.N_event` events.

    Returns the generated events and the number of failed events. A failed
    event (any `DecayError`) is reported and dropped if
    `settings.discard_failed_events`, and re-raised otherwise.
    """
    settings = structure.settings
    N_event = settings.N_event

    events = []
    N_failed = 0
    for idx_event in range(N_event):
        try:
            events.append(simulate_event(idx_event))
        except DecayError as error:
            if not settings.discard_failed_events:
                raise
            N_failed += 1
            print_warning(f"Event {idx_event} is discarded: {error!r}")

        if settings.use_progress_bar:
            print_progress((idx_event + 1) / N_event)

    return events, N_failed


def simulate_event(idx_event):
    """
    Generate event `idx_event` from its own random stream.

    Events do not share random numbers or channel objects, so each one is
    reproducible on its own.
    """
    settings = structure.settings
    rng_state = rng.rng_state(rng.event_seed(idx_event, settings.rng_seed))

    source = sample_weighted(
        structure.sources, rng_state, weight=attrgetter("probability")
    )
    state = source.initial_state()
    event = source.initial_event()
    deexcite(event, state, source.builder, rng_state)
    return event
