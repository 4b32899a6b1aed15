from __future__ import annotations

from typing import Sequence

import numpy as np


def _oracle_matrix(num_qubits: int, marked_states: Sequence[int]) -> np.ndarray:
    diag = np.ones(1 << num_qubits)
    for idx in marked_states:
        diag[idx] = -1.0
    return np.diag(diag)


def _zero_reflection_matrix(num_qubits: int) -> np.ndarray:
    # 2|0><0| - I
    diag = -np.ones(1 << num_qubits)
    diag[0] = 1.0
    return np.diag(diag)


def grover_circuit(num_qubits: int, marked_states: Sequence[int], iterations: int, name: str = "Grover"):
    """
    Build a Qiskit circuit for `iterations` Grover steps on `num_qubits`.

    The oracle and the reflection about |0> are appended as opaque unitary
    gates; the diffuser is H (2|0><0| - I) H.
    """
    from qiskit import QuantumCircuit
    from qiskit.circuit.library import UnitaryGate

    if num_qubits < 1:
        raise ValueError("num_qubits must be >= 1")
    if iterations < 0:
        raise ValueError("iterations must be non-negative")
    if any(idx < 0 or idx >= (1 << num_qubits) for idx in marked_states):
        raise ValueError("marked states must fit within num_qubits")

    qubits = list(range(num_qubits))
    oracle = UnitaryGate(_oracle_matrix(num_qubits, marked_states), label="Oracle")
    reflect = UnitaryGate(_zero_reflection_matrix(num_qubits), label="Reflect0")

    qc = QuantumCircuit(num_qubits, name=name)
    qc.h(qubits)
    for _ in range(iterations):
        qc.append(oracle, qubits)
        qc.h(qubits)
        qc.append(reflect, qubits)
        qc.h(qubits)
    return qc


def reference_amplitudes(num_qubits: int, marked_states: Sequence[int], iterations: int) -> np.ndarray:
    """
    Amplitudes of grover_circuit evaluated with qiskit's Statevector.

    Qiskit indexes basis states little-endian, which matches the integer
    indices used by the numpy engine.
    """
    from qiskit.quantum_info import Statevector

    qc = grover_circuit(num_qubits, marked_states, iterations)
    vec = np.asarray(Statevector(qc).data)
    if not np.allclose(vec.imag, 0.0, atol=1e-9):
        raise ValueError("reference state picked up an imaginary component")
    return vec.real
