"""
Graphviz export of the circuit structure.

Only the port names and the gate list are used; evaluated values never
appear in the graph.
"""

import logging
import re
import subprocess
from pathlib import Path
from typing import List, Union

from gatesim.circuits.circuit import Circuit
from gatesim.circuits.errors import RenderError
from gatesim.config import RENDER_CONFIG

logger = logging.getLogger(__name__)

_PLAIN_ID = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_KEYWORDS = {"node", "edge", "graph", "digraph", "subgraph", "strict"}
_PATH_SEPARATORS = re.compile(r"[\\/]")


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def dot_id(name: str) -> str:
    """Quote a name unless it is already a valid DOT identifier"""
    if _PLAIN_ID.match(name) and name.lower() not in _KEYWORDS:
        return name
    return f'"{_escape(name)}"'


def gate_node(index: int, gate) -> str:
    return f"gate_{index}_{gate.type.value}"


def to_dot(circuit: Circuit) -> str:
    lines: List[str] = [
        f"digraph {dot_id(circuit.name)} {{",
        "    rankdir=LR;",
        "    node [shape=box, style=filled, color=lightblue];",
        "",
        "    // Primary inputs",
    ]
    for name in circuit.primary_inputs:
        lines.append(f'    {dot_id(name)} [color=lightgreen, label="{_escape(name)}\\nIN"];')
    lines.append("")
    lines.append("    // Primary outputs")
    for name in circuit.primary_outputs:
        lines.append(f'    {dot_id(name)} [color=lightcoral, label="{_escape(name)}\\nOUT"];')
    lines.append("")
    lines.append("    // Gates and connections")
    for index, gate in enumerate(circuit.gates):
        node = gate_node(index, gate)
        lines.append(f'    {node} [label="{gate.type.value}", color=lightyellow];')
        for name in gate.inputs:
            lines.append(f"    {dot_id(name)} -> {node};")
        lines.append(f"    {node} -> {dot_id(gate.output)};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(circuit: Circuit, directory: Union[str, Path] = None) -> Path:
    directory = Path(directory or RENDER_CONFIG["output_dir"])
    directory.mkdir(parents=True, exist_ok=True)
    # the file always lands directly in `directory`
    stem = _PATH_SEPARATORS.sub("_", circuit.name)
    path = directory / f"{stem}.dot"
    path.write_text(to_dot(circuit))
    logger.info(f"DOT file written: {path}")
    return path


def render_image(dot_file: Union[str, Path], image_file: Union[str, Path] = None,
                 executable: str = None, fmt: str = None) -> Path:
    """
    Invoke Graphviz on `dot_file`.
    :return: Path of the generated image.
    """
    executable = executable or RENDER_CONFIG["dot_executable"]
    fmt = fmt or RENDER_CONFIG["image_format"]
    dot_file = Path(dot_file)
    image_file = Path(image_file) if image_file else dot_file.with_suffix(f".{fmt}")
    logger.debug(f"Run {executable} on {dot_file}")
    try:
        ret = subprocess.run([executable, f"-T{fmt}", str(dot_file), "-o", str(image_file)],
                             capture_output=True)
    except FileNotFoundError:
        msg = f"Graphviz executable not found. Make sure it is in the current path: {executable}"
        logger.error(msg)
        raise FileNotFoundError(msg)
    if ret.returncode != 0:
        err = ret.stderr.decode("utf-8", errors="replace")
        logger.error(f"Graphviz failed: {err}")
        raise RenderError(f"Graphviz failed: {err}")
    return image_file
