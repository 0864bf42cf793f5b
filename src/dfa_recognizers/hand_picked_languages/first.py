from dfa_recognizers.automata.automaton import DFA
from .dfa_util import dfa_from_arcs

def first_dfa() -> DFA:
    """Binary strings that start with 1."""
    return dfa_from_arcs(
        states=['q0', 'q1'],
        alphabet=['0', '1'],
        arcs=[('q0', '1', 'q1'), ('q1', '0', 'q1'), ('q1', '1', 'q1')],
        initial_state='q0',
        final_states=['q1']
    )
