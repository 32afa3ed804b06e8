import logging
from typing import Dict, List, Mapping, Optional

from .circuit import Circuit
from .errors import UndefinedNetRead

logger = logging.getLogger(__name__)


class Evaluator:
    """
    Single forward pass over the gates of a circuit.

    Gates are evaluated strictly in the order they were added, so every
    gate input has to be a primary input or the output of an earlier gate.
    By default a net that has no value yet reads as 0; with `strict` set
    such a read raises `UndefinedNetRead` instead.
    """

    def __init__(self, circuit: Circuit, strict: bool = False):
        self.circuit = circuit
        self.strict = strict

    def evaluate(self, assignment: Mapping[str, bool]) -> Dict[str, bool]:
        values: Dict[str, bool] = {name: bool(value) for name, value in assignment.items()}
        for index, gate in enumerate(self.circuit.gates):
            for name in gate.inputs:
                if name in values:
                    continue
                if self.strict:
                    raise UndefinedNetRead(name, index)
                logger.debug(f"Gate {index} ({gate}) reads undefined net '{name}' as 0")
            values[gate.output] = gate.evaluate(values)
        return values

    def evaluate_outputs(self, assignment: Mapping[str, bool]) -> Dict[str, Optional[bool]]:
        """Primary output values only, None for outputs no gate drives"""
        values = self.evaluate(assignment)
        return {name: values.get(name) for name in self.circuit.primary_outputs}


def check_order(circuit: Circuit) -> List[UndefinedNetRead]:
    """
    Find gate inputs that are neither a primary input nor driven by an
    earlier gate. Returns one error per offending read, in gate order.
    """
    defined = set(circuit.primary_inputs)
    problems = []
    for index, gate in enumerate(circuit.gates):
        for name in gate.inputs:
            if name not in defined:
                problems.append(UndefinedNetRead(name, index))
        defined.add(gate.output)
    return problems
