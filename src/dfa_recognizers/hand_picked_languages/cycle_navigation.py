from dfa_recognizers.automata.automaton import DFA
from .dfa_util import dfa_from_arcs

def cycle_navigation_dfa(size: int=5) -> DFA:
    """Moves around a cycle of ``size`` positions with ``>``, ``<``, and
    ``=``, followed by the digit of the position that was reached."""
    positions = [f'p{i}' for i in range(size)]
    digits = [str(i) for i in range(size)]
    arcs = []
    for i in range(size):
        arcs.append((positions[i - 1], '>', positions[i]))
        arcs.append((positions[i], '<', positions[i - 1]))
        arcs.append((positions[i], '=', positions[i]))
        arcs.append((positions[i], digits[i], 'qf'))
    return dfa_from_arcs(
        states=[*positions, 'qf'],
        alphabet=['<', '>', '=', *digits],
        arcs=arcs,
        initial_state=positions[0],
        final_states=['qf']
    )
