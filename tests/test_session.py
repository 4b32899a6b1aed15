import numpy as np

from groverlab.session import MAX_QUBITS, MIN_QUBITS, GroverSession
from groverlab.state import DEFAULT_CONFIG, GroverConfig, Phase


def test_session_starts_empty():
    session = GroverSession()
    assert session.config == DEFAULT_CONFIG
    assert session.state is None
    assert session.geometric_state is None
    assert session.step_oracle() is None
    assert session.step_diffusion() is None
    assert session.step_full() is None
    assert session.run_to_optimal() is None
    assert session.measure() is None


def test_session_stepping():
    session = GroverSession(GroverConfig(4, (7,)))
    session.initialize()
    assert session.step_oracle().phase is Phase.ORACLE
    after = session.step_diffusion()
    assert after.iteration == 1
    assert session.step_full().iteration == 2
    assert session.run_to_optimal().iteration == 3
    assert session.geometric_state.theta0 > 0


def test_session_config_edits_discard_state():
    session = GroverSession(GroverConfig(4, (7, 12)), seed=3)
    session.initialize()
    session.measure()
    session.set_num_qubits(1)
    assert session.config.num_qubits == MIN_QUBITS
    assert session.config.marked_states == ()
    assert session.state is None
    assert session.measurement is None
    session.set_num_qubits(20)
    assert session.config.num_qubits == MAX_QUBITS


def test_session_marked_state_edits():
    session = GroverSession(GroverConfig(3, ()))
    session.set_marked_states([1, 9, -1, 4])
    assert session.config.marked_states == (1, 4)
    session.toggle_marked_state(2)
    assert session.config.marked_states == (1, 2, 4)
    session.toggle_marked_state(1)
    assert session.config.marked_states == (2, 4)
    session.toggle_marked_state(8)
    assert session.config.marked_states == (2, 4)


def test_session_measure_relabels_state():
    session = GroverSession(GroverConfig(2, (3,)), seed=11)
    session.initialize()
    session.step_full()
    outcome = session.measure()
    # N = 4 with one target is certain after one iteration
    assert outcome.result == 3
    assert outcome.is_marked
    assert session.measurement == outcome
    assert session.state.phase is Phase.MEASURED
    assert session.step_full().iteration == 2


def test_session_animate_runs_to_optimal():
    session = GroverSession(GroverConfig(4, (7,)))
    frames = list(session.animate())
    assert [f.iteration for f in frames] == [1, 2, 3]
    assert session.state is frames[-1]
    assert list(session.animate()) == []


def test_session_animate_can_pause():
    session = GroverSession(GroverConfig(6, (5,)))
    frames = session.animate()
    next(frames)
    next(frames)
    assert session.state.iteration == 2
    session.step_full()
    assert session.state.iteration == 3


def test_session_history_and_reset():
    session = GroverSession(GroverConfig(4, (7,)))
    history = session.history
    assert len(history) == 7
    session.initialize()
    session.reset()
    assert session.state is None
    assert np.allclose(history[0].amplitudes, 0.25)
