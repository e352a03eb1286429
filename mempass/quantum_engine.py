from __future__ import annotations

"""
Quantum random source: puts qubits in superposition, measures them in
alternating bases, and turns the measured bits into random numbers.
"""
import math
from typing import List

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .errors import RandomSourceError
from .mapping import BITS_PER_FLOAT, amplify_blocks, bits_to_unit_floats, xor_streams
from .random_source import RandomSource


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, num_qubits: int = 20, backend=None) -> None:
        if num_qubits < 1:
            raise ValueError("num_qubits must be at least 1")
        self.num_qubits = num_qubits
        # Local simulator backend unless told otherwise.
        self.backend = backend if backend is not None else AerSimulator()

        # Ensure requested num_qubits does not exceed backend capability.
        max_qubits = getattr(self.backend, "num_qubits", None)
        if max_qubits is not None and num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={num_qubits} exceeds "
                f"backend limit ({max_qubits})."
            )

        self._circuit: QuantumCircuit | None = None
        self.measurement_basis: list[str] = []

    def _build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        Prepare N qubits, put them in superposition, then measure
        in alternating bases (Z, X, Z, X, ...).
        """
        n = self.num_qubits
        measurement_basis: list[str] = []
        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        # Odd indices get a second H, i.e. are measured in the X basis.
        for i in range(n):
            if i % 2 == 1:
                measurement_basis.append("X")
                qc.h(i)
            else:
                measurement_basis.append("Z")
            qc.measure(i, i)

        return qc, measurement_basis

    def sample_bits(self, shots: int) -> List[int]:
        """
        Run the circuit `shots` times and return every measured bit,
        shot after shot, qubit 0 first.
        """
        if self._circuit is None:
            qc, self.measurement_basis = self._build_circuit()
            self._circuit = transpile(qc, self.backend)

        result = self.backend.run(self._circuit, shots=shots, memory=True).result()
        memory = result.get_memory()

        bits: List[int] = []
        # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
        for bitstring in memory:
            bits.extend(int(b) for b in bitstring[::-1])
        return bits


class QuantumRandomSource(RandomSource):
    """
    Random numbers from simulated qubit measurements.

    Several independent streams are XOR-combined, optionally whitened with
    SHA-256, and every 32 bits become one float.
    """

    def __init__(
        self,
        num_qubits: int = 20,
        streams: int = 2,
        entropy_rounds: int = 1,
        engine: QuantumEngine | None = None,
    ) -> None:
        self.engine = engine or QuantumEngine(num_qubits)
        self.streams = max(1, streams)
        self.entropy_rounds = entropy_rounds

    def draw(self, n: int) -> list[float]:
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError(f"the number of random numbers requested must be a positive integer, not {n!r}")

        bits_needed = n * BITS_PER_FLOAT
        shots = math.ceil(bits_needed / self.engine.num_qubits)

        streams = []
        for _ in range(self.streams):
            bits = self.engine.sample_bits(shots)
            if len(bits) < bits_needed:
                raise RandomSourceError(
                    f"quantum engine returned {len(bits)} bits, {bits_needed} were needed"
                )
            streams.append(bits[:bits_needed])

        combined = xor_streams(streams)
        amplified = amplify_blocks(combined, self.entropy_rounds)
        return bits_to_unit_floats(amplified)
