from dexcite.constant import SAMPLING_MODE_FULL
from dexcite.error import CascadeError
from dexcite.object_.structure import structure
from dexcite.transport.channel import decay, sample_channel


# ======================================================================================
# De-excitation cascade
# ======================================================================================


def deexcite(event, state, builder, rng_state, mode=SAMPLING_MODE_FULL):
    """
    De-excite the event's residue until no decay is accessible.

    At every step the candidate channels of the current `state` are taken from
    `builder`, one is picked by width, and its emitted particle is appended to
    the event while the event's residue is replaced by the new residue. Both
    are boosted from the rest frame of the decaying nucleus to the event frame.

    Returns the number of emitted particles. Any `DecayError` aborts the
    cascade and propagates.
    """
    max_steps = structure.settings.max_cascade_steps

    for step in range(max_steps):
        channels = builder(state)
        if not any(channel.width > 0.0 for channel in channels):
            return step

        channel = sample_channel(channels, rng_state)
        emitted, residue = decay(channel, state, rng_state, mode)

        bx, by, bz = event.residue.velocity()
        emitted.boost(bx, by, bz)
        residue.boost(bx, by, bz)

        event.add_final_particle(emitted)
        event.residue = residue

    raise CascadeError(f"De-excitation did not end within {max_steps} steps")
