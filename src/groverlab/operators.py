from __future__ import annotations

from dataclasses import replace

import numpy as np

from .state import GroverState, Phase


def apply_oracle(state: GroverState) -> GroverState:
    """
    Phase-flip the marked basis states: O|x> = -|x> if x is marked.

    The iteration counter is left alone; a Grover iteration is counted
    when the diffusion step completes it.
    """
    amps = np.array(state.amplitudes)
    if state.marked_states:
        idx = np.asarray(state.marked_states, dtype=np.int64)
        amps[idx] = -amps[idx]
    return replace(state, amplitudes=amps, phase=Phase.ORACLE)


def apply_diffusion(state: GroverState) -> GroverState:
    """
    Grover diffuser D = 2|s><s| - I, i.e. reflect every amplitude about the mean.
    """
    mean = float(np.mean(state.amplitudes))
    amps = (2.0 * mean) - state.amplitudes
    return replace(
        state,
        amplitudes=amps,
        iteration=state.iteration + 1,
        phase=Phase.DIFFUSION,
    )
