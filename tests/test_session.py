import io

from gatesim.frontend.main import main
from gatesim.frontend.session import Session

def scripted(lines):
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read

def run_session(lines, tmp_path, **kwargs):
    output = []
    session = Session(read=scripted(lines), write=output.append,
                      output_dir=str(tmp_path), render=False, **kwargs)
    status = session.run()
    return status, output, session

HALF_ADDER_DEFINITION = [
    "HalfAdder",
    "2", "A", "B",
    "2", "Sum", "Carry",
    "XOR Sum A B",
    "",
    "FOO x y",
    "AND Carry A",
    "and Carry A B",
    "END",
]

def test_half_adder_session(tmp_path):
    status, output, session = run_session(HALF_ADDER_DEFINITION + ["1 1", "1 0", "EXIT"], tmp_path)

    assert status == 0
    assert len(session.circuit) == 2
    assert "Error: Unknown gate type 'FOO'." in output
    assert "Error: AND gate requires exactly 2 input(s), got 1." in output
    assert "Added gate: AND Carry A B" in output
    assert "Total Gates: 2" in output
    assert (tmp_path / "HalfAdder.dot").exists()

    first = output.index("SIMULATION RESULTS")
    second = output.index("SIMULATION RESULTS", first + 1)
    assert "  Sum = 0" in output[first:second]
    assert "  Carry = 1" in output[first:second]
    assert "  Sum = 1" in output[second:]
    assert "  Carry = 0" in output[second:]
    assert output[-2] == "Thank you for using Digital Circuit Simulator!"

def test_invalid_values_reprompt(tmp_path):
    status, output, _ = run_session(HALF_ADDER_DEFINITION + ["1 2", "1", "a b", "exit"], tmp_path)

    assert status == 0
    assert "Error: Input values must be 0 or 1." in output
    assert "Error: Not enough input values provided." in output
    assert "Error: Invalid input value 'a'." in output
    assert output.count("Please try again.") == 3
    assert "SIMULATION RESULTS" not in output

def test_end_of_input_finishes_session(tmp_path):
    status, output, _ = run_session(HALF_ADDER_DEFINITION, tmp_path)
    assert status == 0
    assert "CIRCUIT SIMULATION" in output

def test_zero_inputs_is_configuration_error(tmp_path):
    status, output, _ = run_session(["Bad", "0"], tmp_path)
    assert status == 1
    assert "Error: Circuit must have at least one input." in output

def test_zero_outputs_is_configuration_error(tmp_path):
    status, output, _ = run_session(["Bad", "1", "A", "0"], tmp_path)
    assert status == 1
    assert "Error: Circuit must have at least one output." in output

def test_empty_circuit(tmp_path):
    status, output, _ = run_session(["Empty", "1", "A", "1", "Y", "END"], tmp_path)
    assert status == 1
    assert "No gates defined. Cannot simulate empty circuit." in output

def test_default_name(tmp_path):
    status, output, _ = run_session(["", "1", "A", "1", "Y", "NOT Y A", "END", "0"], tmp_path)
    assert status == 0
    assert "Using default name: MyCircuit" in output
    assert "  Y = 1" in output
    assert (tmp_path / "MyCircuit.dot").exists()

def test_undefined_outputs_reported(tmp_path):
    lines = ["Partial", "1", "A", "2", "Y", "Z", "NOT Y A", "END", "1"]
    status, output, _ = run_session(lines, tmp_path)
    assert status == 0
    assert "  Z = undefined" in output

def test_strict_session(tmp_path):
    lines = ["Strict", "1", "A", "1", "Z", "OR Z A t", "NOT t A", "END", "0", "EXIT"]
    status, output, _ = run_session(lines, tmp_path, strict=True, order_check=True)
    assert status == 0
    assert "Warning: Gate 0 reads undefined net 't'" in output
    assert "Error: Gate 0 reads undefined net 't'." in output

def test_main(tmp_path, monkeypatch, capsys):
    script = "\n".join(["1", "A", "1", "Y", "NOT Y A", "END", "1", "EXIT"]) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))

    status = main(["--name", "Inverter", "--no-render", "-o", str(tmp_path)])

    assert status == 0
    assert (tmp_path / "Inverter.dot").exists()
    assert "  Y = 0" in capsys.readouterr().out

def test_all_nets_lists_only_assigned_nets(tmp_path):
    lines = ["Typo", "1", "A", "1", "Z", "AND Z A b", "END", "1"]
    status, output, _ = run_session(lines, tmp_path)

    assert status == 0
    all_nets = output[output.index("All Nets:") + 1:]
    assert "  A = 1" in all_nets
    assert "  Z = 0" in all_nets
    assert not any(line.startswith("  b = ") for line in all_nets)
