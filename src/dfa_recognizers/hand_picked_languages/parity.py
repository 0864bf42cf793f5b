from dfa_recognizers.automata.automaton import DFA
from .dfa_util import dfa_from_arcs

def parity_dfa() -> DFA:
    """The language of binary strings with an odd number of 1s."""
    return dfa_from_arcs(
        states=['even', 'odd'],
        alphabet=['0', '1'],
        arcs=[
            ('even', '0', 'even'),
            ('even', '1', 'odd'),
            ('odd', '0', 'odd'),
            ('odd', '1', 'even')
        ],
        initial_state='even',
        final_states=['odd']
    )
