from dfa_recognizers.automata.automaton import DFA
from .dfa_util import dfa_from_arcs

def repeat_01_dfa() -> DFA:
    """The language (01)*."""
    return dfa_from_arcs(
        states=['q0', 'q1'],
        alphabet=['0', '1'],
        arcs=[('q0', '0', 'q1'), ('q1', '1', 'q0')],
        initial_state='q0',
        final_states=['q0']
    )
