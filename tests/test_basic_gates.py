import pytest
from pydantic import ValidationError

from gatesim.circuits.basic_gates import Gate, GateType
from gatesim.circuits.errors import ArityMismatch, InvalidGateType, MissingOutputName

def test_two_input_truth_tables():
    """Test all input pairs for every two-input gate"""
    test_cases = {
        GateType.AND: [False, False, False, True],
        GateType.OR: [False, True, True, True],
        GateType.NAND: [True, True, True, False],
        GateType.NOR: [True, False, False, False],
        GateType.XOR: [False, True, True, False],
        GateType.XNOR: [True, False, False, True],
    }
    pairs = [(False, False), (False, True), (True, False), (True, True)]

    for gate_type, expected_outputs in test_cases.items():
        for (a, b), expected in zip(pairs, expected_outputs):
            assert gate_type.apply(a, b) is expected, f"{gate_type.value} failed for {a}, {b}"

def test_not_truth_table():
    assert GateType.NOT.apply(False) is True
    assert GateType.NOT.apply(True) is False

def test_arity():
    assert GateType.NOT.arity == 1
    for gate_type in GateType:
        if gate_type is not GateType.NOT:
            assert gate_type.arity == 2

def test_parse_is_case_insensitive():
    assert GateType.parse("xnor") is GateType.XNOR
    assert GateType.parse(" Nand ") is GateType.NAND

def test_parse_unknown_type():
    with pytest.raises(InvalidGateType) as excinfo:
        GateType.parse("buf")
    assert excinfo.value.token == "BUF"

def test_apply_wrong_arity():
    with pytest.raises(ArityMismatch):
        GateType.AND.apply(True)

def test_gate_create():
    gate = Gate.create("or", "W", ["C", "D"])
    assert gate.type is GateType.OR
    assert gate.output == "W"
    assert gate.inputs == ("C", "D")
    assert str(gate) == "OR W C D"

def test_gate_create_errors():
    with pytest.raises(MissingOutputName):
        Gate.create("AND", "", ["A", "B"])

    with pytest.raises(ArityMismatch) as excinfo:
        Gate.create("NOT", "Y", ["A", "B"])
    assert excinfo.value.expected == 1
    assert excinfo.value.actual == 2

def test_gate_is_immutable():
    gate = Gate.create("AND", "Z", ["A", "B"])
    with pytest.raises(ValidationError):
        gate.output = "Q"

def test_gate_evaluate_reads_missing_net_as_zero():
    gate = Gate.create("NOR", "Z", ["A", "missing"])
    assert gate.evaluate({"A": False}) is True
    assert gate.evaluate({"A": True}) is False
