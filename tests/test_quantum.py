import pytest

pytest.importorskip("qiskit")
pytest.importorskip("qiskit_aer")

from mempass.quantum_engine import QuantumEngine, QuantumRandomSource  # noqa: E402


class PatternEngine:
    """Stands in for the simulator: the same bit pattern on every run."""

    num_qubits = 8

    def __init__(self, pattern):
        self.pattern = pattern
        self.shots = []

    def sample_bits(self, shots):
        self.shots.append(shots)
        bits = []
        while len(bits) < shots * self.num_qubits:
            bits.extend(self.pattern)
        return bits[: shots * self.num_qubits]


class TestQuantumRandomSource:
    def test_identical_streams_cancel(self):
        engine = PatternEngine([1, 0, 1, 1])
        source = QuantumRandomSource(streams=2, entropy_rounds=0, engine=engine)
        assert source.draw(3) == [0.0, 0.0, 0.0]
        # 3 floats x 32 bits over 8 qubits
        assert engine.shots == [12, 12]

    def test_single_stream_without_amplification(self):
        engine = PatternEngine([1] + [0] * 31)
        source = QuantumRandomSource(streams=1, entropy_rounds=0, engine=engine)
        assert source.draw(2) == [0.5, 0.5]

    def test_amplified_values_in_range(self):
        source = QuantumRandomSource(streams=1, entropy_rounds=1, engine=PatternEngine([1, 0, 0]))
        values = source.draw(10)
        assert len(values) == 10
        assert all(0 <= v < 1 for v in values)

    def test_simulator(self):
        source = QuantumRandomSource(num_qubits=8)
        values = source.draw(4)
        assert len(values) == 4
        assert all(0 <= v < 1 for v in values)


class TestQuantumEngine:
    def test_sample_bits(self):
        engine = QuantumEngine(num_qubits=4)
        bits = engine.sample_bits(3)
        assert len(bits) == 12
        assert set(bits) <= {0, 1}
        assert engine.measurement_basis == ["Z", "X", "Z", "X"]

    def test_qubit_count_checked(self):
        with pytest.raises(ValueError):
            QuantumEngine(num_qubits=0)
