from typing import Dict, List, Optional, Sequence, Tuple

from gatesim.circuits.errors import IncompleteAssignment, InvalidInputValue


def bit_to_str(value: Optional[bool]) -> str:
    """Format a net value as 0/1, 'undefined' for None"""
    if value is None:
        return "undefined"
    return "1" if value else "0"


def parse_bit(token: str) -> bool:
    try:
        value = int(token)
    except ValueError:
        raise InvalidInputValue(token) from None
    if value not in (0, 1):
        raise InvalidInputValue(token, "Input values must be 0 or 1")
    return bool(value)


def parse_assignment(line: str, names: Sequence[str]) -> Dict[str, bool]:
    """
    Map space separated 0/1 tokens onto `names` in order.
    Tokens beyond the last name are ignored.
    """
    tokens = line.split()
    assignment = {}
    for name, token in zip(names, tokens):
        assignment[name] = parse_bit(token)
    if len(assignment) < len(names):
        raise IncompleteAssignment(list(names[len(assignment):]))
    return assignment


def parse_gate_line(line: str) -> Optional[Tuple[str, str, List[str]]]:
    """Split `TYPE OUTPUT IN1 [IN2]` into its parts, None for a blank line"""
    parts = line.split()
    if not parts:
        return None
    gate_type = parts[0].upper()
    output = parts[1] if len(parts) > 1 else ""
    return gate_type, output, parts[2:]
