from dfa_recognizers.automata.automaton import DFA
from .dfa_util import dfa_from_arcs

OPERATORS = ('+', '-', '*')

def _apply(op: str, x: int, y: int) -> int:
    match op:
        case '+':
            return x + y
        case '-':
            return x - y
        case '*':
            return x * y
        case _:
            raise ValueError

def modular_arithmetic_simple_dfa(modulus: int=5) -> DFA:
    """Expressions like ``3,+,4,*,2,=,4`` evaluated left to right modulo
    ``modulus``, where the digit after ``=`` must be the result."""
    digits = [str(i) for i in range(modulus)]
    values = [f'n{i}' for i in range(modulus)]
    checks = [f'={i}' for i in range(modulus)]
    pending = { (i, op) : f'{i}{op}' for i in range(modulus) for op in OPERATORS }
    arcs = []
    # Read the first number.
    for i in range(modulus):
        arcs.append(('q0', digits[i], values[i]))
    for (i, op), state in pending.items():
        arcs.append((values[i], op, state))
        for x in range(modulus):
            arcs.append((state, digits[x], values[_apply(op, i, x) % modulus]))
    for i in range(modulus):
        arcs.append((values[i], '=', checks[i]))
        arcs.append((checks[i], digits[i], 'q_final'))
    return dfa_from_arcs(
        states=['q0', *values, *pending.values(), *checks, 'q_final'],
        alphabet=[*digits, *OPERATORS, '='],
        arcs=arcs,
        initial_state='q0',
        final_states=['q_final']
    )
