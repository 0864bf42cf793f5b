from dfa_recognizers.automata.automaton import DFA
from .dfa_util import dfa_from_arcs

def all_strings_dfa() -> DFA:
    return dfa_from_arcs(
        states=['q0'],
        alphabet=['0', '1'],
        arcs=[('q0', '0', 'q0'), ('q0', '1', 'q0')],
        initial_state='q0',
        final_states=['q0']
    )
