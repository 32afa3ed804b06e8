class CircuitError(ValueError):
    """Base class for every error raised while building or simulating a circuit."""


class ConfigurationError(CircuitError):
    pass


class MissingNetName(CircuitError):
    pass


class InvalidGateType(CircuitError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown gate type '{token}'")


class MissingOutputName(CircuitError):
    def __init__(self):
        super().__init__("Output name required")


class ArityMismatch(CircuitError):
    def __init__(self, gate_type: str, expected: int, actual: int):
        self.gate_type = gate_type
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{gate_type} gate requires exactly {expected} input(s), got {actual}"
        )


class UndefinedNetRead(CircuitError):
    """A gate read a net that had no value when the gate was evaluated."""

    def __init__(self, net: str, gate_index: int):
        self.net = net
        self.gate_index = gate_index
        super().__init__(f"Gate {gate_index} reads undefined net '{net}'")


class InvalidInputValue(CircuitError):
    def __init__(self, token: str, message: str = None):
        self.token = token
        super().__init__(message or f"Invalid input value '{token}'")


class IncompleteAssignment(CircuitError):
    def __init__(self, missing: list):
        self.missing = missing
        super().__init__("Not enough input values provided")


class RenderError(CircuitError):
    pass
