import sys
import os
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from itertools import product

from gatesim.circuits.circuit import Circuit, create_circuit
from gatesim.circuits.evaluator import Evaluator
from gatesim.render.dot import to_dot
from gatesim.utils.conversion import bit_to_str

def create_half_adder() -> Circuit:
    return create_circuit(
        "HalfAdder", ["A", "B"], ["Sum", "Carry"],
        [("XOR", "Sum", ["A", "B"]),
         ("AND", "Carry", ["A", "B"])],
    )

def create_full_adder() -> Circuit:
    """
    Sum = A XOR B XOR Cin
    Cout = (A AND B) OR ((A XOR B) AND Cin)
    """
    return create_circuit(
        "FullAdder", ["A", "B", "Cin"], ["Sum", "Cout"],
        [("XOR", "t1", ["A", "B"]),
         ("XOR", "Sum", ["t1", "Cin"]),
         ("AND", "t2", ["A", "B"]),
         ("AND", "t3", ["t1", "Cin"]),
         ("OR", "Cout", ["t2", "t3"])],
    )

def print_truth_table(circuit: Circuit):
    evaluator = Evaluator(circuit)
    print(" ".join(circuit.primary_inputs) + " | " + " ".join(circuit.primary_outputs))
    for bits in product([False, True], repeat=len(circuit.primary_inputs)):
        outputs = evaluator.evaluate_outputs(dict(zip(circuit.primary_inputs, bits)))
        print(" ".join(bit_to_str(b) for b in bits) + " | "
              + " ".join(bit_to_str(outputs[name]) for name in circuit.primary_outputs))

def main():
    for circuit in (create_half_adder(), create_full_adder()):
        print(f"Circuit: {circuit.name}")
        print_truth_table(circuit)
        print()
    print(to_dot(create_half_adder()))

if __name__ == "__main__":
    main()
