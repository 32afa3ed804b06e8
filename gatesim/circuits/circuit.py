import logging
from typing import Iterable, List, Set, Tuple

from gatesim.config import CIRCUIT_CONFIG
from .basic_gates import Gate
from .errors import ConfigurationError, MissingNetName

logger = logging.getLogger(__name__)


def validate_port_count(kind: str, count: int):
    if count <= 0:
        raise ConfigurationError(f"Circuit must have at least one {kind}")


def validate_port_counts(n_inputs: int, n_outputs: int):
    """A circuit needs at least one primary input and one primary output"""
    validate_port_count("input", n_inputs)
    validate_port_count("output", n_outputs)


class Circuit:
    def __init__(self, name: str = None):
        self.name = name or CIRCUIT_CONFIG["default_name"]
        self._gates: List[Gate] = []
        self._primary_inputs: Set[str] = set()
        self._primary_outputs: Set[str] = set()

    @staticmethod
    def _net_name(name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise MissingNetName("Net name must not be empty")
        return name

    def add_primary_input(self, name: str):
        self._primary_inputs.add(self._net_name(name))

    def add_primary_output(self, name: str):
        self._primary_outputs.add(self._net_name(name))

    def add_gate(self, gate_type, output: str, inputs: Iterable[str]):
        if not self._primary_inputs or not self._primary_outputs:
            raise ConfigurationError(
                "Primary inputs and outputs must be declared before gates"
            )
        gate = Gate.create(gate_type, output, inputs)
        if gate.output in self._primary_inputs:
            logger.warning(f"Gate output '{gate.output}' overrides a primary input")
        self._gates.append(gate)
        logger.debug(f"Added gate {len(self._gates)}: {gate}")

    @property
    def primary_inputs(self) -> Tuple[str, ...]:
        return tuple(sorted(self._primary_inputs))

    @property
    def primary_outputs(self) -> Tuple[str, ...]:
        return tuple(sorted(self._primary_outputs))

    @property
    def gates(self) -> Tuple[Gate, ...]:
        return tuple(self._gates)

    def nets(self) -> Tuple[str, ...]:
        """Every net name mentioned by the ports or by a gate"""
        names = self._primary_inputs | self._primary_outputs
        for gate in self._gates:
            names.add(gate.output)
            names.update(gate.inputs)
        return tuple(sorted(names))

    def __len__(self):
        return len(self._gates)


def create_circuit(name: str, inputs: Iterable[str], outputs: Iterable[str],
                   gates: Iterable[Tuple[str, str, Iterable[str]]]) -> Circuit:
    """
    Build a circuit in one call from port names and (type, output, inputs)
    gate definitions.
    """
    inputs, outputs = list(inputs), list(outputs)
    validate_port_counts(len(inputs), len(outputs))
    circuit = Circuit(name)
    for net in inputs:
        circuit.add_primary_input(net)
    for net in outputs:
        circuit.add_primary_output(net)
    for gate_type, output, gate_inputs in gates:
        circuit.add_gate(gate_type, output, gate_inputs)
    return circuit
