from dfa_recognizers.automata.automaton import DFA
from .dfa_util import dfa_from_arcs

def even_pairs_dfa() -> DFA:
    """Binary strings whose first and last symbols are the same, which is the
    same as having an even number of 01 and 10 pairs."""
    return dfa_from_arcs(
        states=['q0', 'a', 'b', 'ar', 'br'],
        alphabet=['0', '1'],
        arcs=[
            ('q0', '0', 'a'),
            ('q0', '1', 'b'),
            ('a', '0', 'a'),
            ('a', '1', 'ar'),
            ('ar', '0', 'a'),
            ('ar', '1', 'ar'),
            ('b', '1', 'b'),
            ('b', '0', 'br'),
            ('br', '1', 'b'),
            ('br', '0', 'br')
        ],
        initial_state='q0',
        final_states=['q0', 'a', 'b']
    )
