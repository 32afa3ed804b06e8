import logging
from pathlib import Path
from typing import Callable, List, Optional

from gatesim.circuits.basic_gates import GateType
from gatesim.circuits.circuit import Circuit, validate_port_count
from gatesim.circuits.errors import CircuitError, ConfigurationError, InvalidGateType, RenderError
from gatesim.circuits.evaluator import Evaluator, check_order
from gatesim.config import CIRCUIT_CONFIG, RENDER_CONFIG
from gatesim.render.dot import render_image, write_dot
from gatesim.utils.conversion import bit_to_str, parse_assignment, parse_gate_line

logger = logging.getLogger(__name__)

RULE = "=" * 50
THIN_RULE = "-" * 40


class Session:
    """
    Interactive circuit definition followed by a simulation loop.

    `read` is called with a prompt and returns one line (raising EOFError at
    end of input); `write` receives every line of output.
    """

    def __init__(self, read: Callable[[str], str] = input, write: Callable[[str], None] = print,
                 output_dir: str = None, render: bool = True, strict: bool = None,
                 order_check: bool = None, name: str = None):
        self.read = read
        self.write = write
        self.output_dir = output_dir or RENDER_CONFIG["output_dir"]
        self.render = render
        self.strict = CIRCUIT_CONFIG["strict"] if strict is None else strict
        self.order_check = CIRCUIT_CONFIG["check_order"] if order_check is None else order_check
        self.name = name
        self.circuit: Optional[Circuit] = None

    def _ask(self, prompt: str) -> Optional[str]:
        try:
            return self.read(prompt)
        except EOFError:
            return None

    def print_header(self):
        self.write("=========================================")
        self.write("    Digital Circuit Simulator")
        self.write("=========================================")
        self.write("")
        self.write("Supported Gates:")
        for gate_type in GateType:
            self.write(f"  * {gate_type.value:<4} ({gate_type.arity} input{'s' if gate_type.arity > 1 else ''})")
        self.write("")

    def _read_count(self, prompt: str) -> int:
        line = self._ask(prompt)
        try:
            return int((line or "").strip())
        except ValueError:
            return 0

    def _read_names(self, kind: str, count: int) -> List[str]:
        names = []
        while len(names) < count:
            line = self._ask(f"  {kind} {len(names) + 1}: ")
            if line is None:
                raise ConfigurationError(f"Expected {count} {kind.lower()} names")
            tokens = line.split()
            if tokens:
                names.append(tokens[0])
        return names

    def define_ports(self):
        name = self.name
        if name is None:
            name = (self._ask("Enter circuit name: ") or "").strip()
        if not name:
            name = CIRCUIT_CONFIG["default_name"]
            self.write(f"Using default name: {name}")
        circuit = Circuit(name)

        n_inputs = self._read_count("\nEnter number of primary inputs: ")
        validate_port_count("input", n_inputs)
        self.write("Enter names of primary inputs:")
        for net in self._read_names("Input", n_inputs):
            circuit.add_primary_input(net)

        n_outputs = self._read_count("\nEnter number of primary outputs: ")
        validate_port_count("output", n_outputs)
        self.write("Enter names of primary outputs:")
        for net in self._read_names("Output", n_outputs):
            circuit.add_primary_output(net)

        self.circuit = circuit
        return circuit

    def define_gates(self):
        self.write("")
        self.write(RULE)
        self.write("GATE DEFINITION PHASE")
        self.write(RULE)
        self.write("Enter gates one by one. Format: TYPE OUTPUT INPUT1 [INPUT2]")
        self.write("Examples:")
        self.write("  AND Z A B    (Z = A AND B)")
        self.write("  NOT Y X      (Y = NOT X)")
        self.write("  OR W C D     (W = C OR D)")
        self.write("")
        self.write("Type 'END' to finish gate definition.")
        self.write("")

        while True:
            line = self._ask(f"Gate {len(self.circuit) + 1}: ")
            if line is None:
                break
            parsed = parse_gate_line(line)
            if parsed is None:
                continue
            gate_type, output, inputs = parsed
            if gate_type == "END":
                break
            try:
                self.circuit.add_gate(gate_type, output, inputs)
            except InvalidGateType as e:
                self.write(f"Error: {e}.")
                self.write("   Supported types: " + ", ".join(t.value for t in GateType))
                continue
            except ConfigurationError:
                raise
            except CircuitError as e:
                self.write(f"Error: {e}.")
                continue
            self.write(f"Added gate: {self.circuit.gates[-1]}")

    def print_summary(self):
        circuit = self.circuit
        self.write("")
        self.write(RULE)
        self.write("CIRCUIT SUMMARY")
        self.write(RULE)
        self.write(f"Circuit Name: {circuit.name}")
        self.write(f"Total Gates: {len(circuit)}")
        self.write(f"Primary Inputs ({len(circuit.primary_inputs)}): " + " ".join(circuit.primary_inputs))
        self.write(f"Primary Outputs ({len(circuit.primary_outputs)}): " + " ".join(circuit.primary_outputs))
        self.write("")
        if self.order_check:
            for problem in check_order(circuit):
                self.write(f"Warning: {problem}")

    def export(self) -> Optional[Path]:
        self.write("Generating circuit visualization...")
        try:
            dot_file = write_dot(self.circuit, self.output_dir)
        except OSError as e:
            self.write(f"Error: Could not create DOT file: {e}")
            return None
        self.write(f"DOT file saved as '{dot_file}'")
        if not self.render:
            return dot_file
        self.write("Attempting to generate circuit diagram...")
        try:
            image = render_image(dot_file)
        except FileNotFoundError:
            self.write("Graphviz 'dot' command not found.")
            self.write("  Install Graphviz (https://graphviz.org/) to generate circuit diagrams.")
            self.write("  You can still use the .dot file for manual visualization.")
        except RenderError as e:
            self.write(f"Error: {e}")
        else:
            self.write(f"Circuit diagram saved as '{image}'")
        return dot_file

    def simulate(self):
        circuit = self.circuit
        evaluator = Evaluator(circuit, strict=self.strict)
        self.write("")
        self.write(RULE)
        self.write("CIRCUIT SIMULATION")
        self.write(RULE)

        while True:
            self.write("")
            self.write("Enter values for primary inputs (space-separated):")
            self.write("Format: " + " ".join(circuit.primary_inputs))
            line = self._ask("Input (or 'EXIT' to quit): ")
            if line is None or line.strip().upper() == "EXIT":
                break
            try:
                assignment = parse_assignment(line, circuit.primary_inputs)
                values = evaluator.evaluate(assignment)
            except CircuitError as e:
                self.write(f"Error: {e}.")
                self.write("Please try again.")
                continue
            self.print_results(values)

    def print_results(self, values):
        circuit = self.circuit
        self.write("")
        self.write(THIN_RULE)
        self.write("SIMULATION RESULTS")
        self.write(THIN_RULE)
        self.write("Inputs:")
        for name in circuit.primary_inputs:
            self.write(f"  {name} = {bit_to_str(values.get(name))}")
        self.write("")
        self.write("Outputs:")
        for name in circuit.primary_outputs:
            self.write(f"  {name} = {bit_to_str(values.get(name))}")
        self.write("")
        self.write("All Nets:")
        for name in sorted(values):
            self.write(f"  {name} = {bit_to_str(values[name])}")

    def run(self) -> int:
        self.print_header()
        try:
            self.define_ports()
            self.define_gates()
        except ConfigurationError as e:
            logger.debug(f"Configuration rejected: {e}")
            self.write(f"Error: {e}.")
            return 1

        if not len(self.circuit):
            self.write("No gates defined. Cannot simulate empty circuit.")
            return 1

        self.print_summary()
        self.export()
        self.simulate()

        self.write("")
        self.write(RULE)
        self.write("Thank you for using Digital Circuit Simulator!")
        self.write(RULE)
        return 0
