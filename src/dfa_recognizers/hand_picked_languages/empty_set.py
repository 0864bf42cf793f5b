from dfa_recognizers.automata.automaton import DFA
from .dfa_util import dfa_from_arcs

def empty_set_dfa() -> DFA:
    return dfa_from_arcs(
        states=['q0'],
        alphabet=['0', '1'],
        arcs=[],
        initial_state='q0',
        final_states=[]
    )
