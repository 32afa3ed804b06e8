import operator
from enum import Enum
from typing import Callable, Mapping, Tuple

from pydantic import BaseModel, ConfigDict

from .errors import ArityMismatch, InvalidGateType, MissingOutputName


class GateType(str, Enum):
    AND = "AND"
    OR = "OR"
    NAND = "NAND"
    NOR = "NOR"
    XOR = "XOR"
    XNOR = "XNOR"
    NOT = "NOT"

    @classmethod
    def parse(cls, token: str) -> "GateType":
        """Case-insensitive lookup of a gate type token"""
        normalized = (token or "").strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidGateType(normalized) from None

    @property
    def arity(self) -> int:
        return 1 if self is GateType.NOT else 2

    def apply(self, *values: bool) -> bool:
        if len(values) != self.arity:
            raise ArityMismatch(self.value, self.arity, len(values))
        return bool(_TRUTH[self](*values))


_TRUTH: Mapping[GateType, Callable[..., bool]] = {
    GateType.AND: operator.and_,
    GateType.OR: operator.or_,
    GateType.NAND: lambda a, b: not (a and b),
    GateType.NOR: lambda a, b: not (a or b),
    GateType.XOR: operator.xor,
    GateType.XNOR: lambda a, b: a == b,
    GateType.NOT: operator.not_,
}


class Gate(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: GateType
    output: str
    inputs: Tuple[str, ...]

    @classmethod
    def create(cls, gate_type, output: str, inputs) -> "Gate":
        """
        Build a gate record, checking the type token, the output name and
        the number of inputs before anything is constructed.
        """
        if not isinstance(gate_type, GateType):
            gate_type = GateType.parse(gate_type)
        output = (output or "").strip()
        if not output:
            raise MissingOutputName()
        inputs = tuple(inputs)
        if len(inputs) != gate_type.arity:
            raise ArityMismatch(gate_type.value, gate_type.arity, len(inputs))
        return cls(type=gate_type, output=output, inputs=inputs)

    def evaluate(self, values: Mapping[str, bool]) -> bool:
        # nets with no value read as 0
        return self.type.apply(*(bool(values.get(name, False)) for name in self.inputs))

    def __str__(self):
        return " ".join((self.type.value, self.output) + self.inputs)
