import argparse
import logging
import pathlib
import re
import sys
from collections.abc import Callable

from dfa_recognizers.automata.automaton import DFA
from dfa_recognizers.loading.candidate import write_automaton
from dfa_recognizers.hand_picked_languages.all_strings import all_strings_dfa
from dfa_recognizers.hand_picked_languages.empty_set import empty_set_dfa
from dfa_recognizers.hand_picked_languages.repeat_01 import repeat_01_dfa
from dfa_recognizers.hand_picked_languages.even_pairs import even_pairs_dfa
from dfa_recognizers.hand_picked_languages.modular_arithmetic_simple import (
    modular_arithmetic_simple_dfa
)
from dfa_recognizers.hand_picked_languages.parity import parity_dfa
from dfa_recognizers.hand_picked_languages.cycle_navigation import cycle_navigation_dfa
from dfa_recognizers.hand_picked_languages.first import first_dfa
from dfa_recognizers.hand_picked_languages.dyck_k_m import dyck_k_m_dfa

FIXED_LANGUAGES: dict[str, Callable[[], DFA]] = {
    'all-strings' : all_strings_dfa,
    'empty-set' : empty_set_dfa,
    'repeat-01' : repeat_01_dfa,
    'even-pairs' : even_pairs_dfa,
    'modular-arithmetic-simple' : modular_arithmetic_simple_dfa,
    'parity' : parity_dfa,
    'cycle-navigation' : cycle_navigation_dfa,
    'first' : first_dfa
}

DYCK_PATTERN = re.compile(r'^dyck-(\d+)-(\d+)$')

LANGUAGE_NAMES = (*FIXED_LANGUAGES, 'dyck-<k>-<m>')

def get_automaton(name: str) -> DFA:
    """Build the hand-picked language called ``name``. Dyck languages are
    named ``dyck-<k>-<m>`` for ``k`` bracket types and depth at most ``m``."""
    constructor = FIXED_LANGUAGES.get(name)
    if constructor is not None:
        return constructor()
    if (match := DYCK_PATTERN.match(name)):
        return dyck_k_m_dfa(int(match.group(1)), int(match.group(2)))
    raise ValueError(f'invalid language name: {name}')

def get_console_logger() -> logging.Logger:
    # Data may be written to stdout, so log to stderr.
    console_logger = logging.getLogger('main')
    if not console_logger.handlers:
        console_logger.addHandler(logging.StreamHandler(sys.stderr))
    console_logger.setLevel(logging.INFO)
    return console_logger

def main(argv=None):

    console_logger = get_console_logger()

    parser = argparse.ArgumentParser(
        description=
        'Write one of the hand-picked languages to a JSON file as a DFA.'
    )
    parser.add_argument('--name', required=True,
        help=f'Name of the language. One of: {", ".join(LANGUAGE_NAMES)}.')
    parser.add_argument('--output', type=pathlib.Path, required=True,
        help='Path of the JSON file to write.')
    args = parser.parse_args(argv)

    automaton = get_automaton(args.name)
    console_logger.info(
        f'{args.name}: {automaton.num_states()} states, '
        f'{automaton.alphabet_size()} symbols'
    )
    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open('w') as fout:
        write_automaton(automaton, fout)
    console_logger.info(f'wrote {args.output}')

if __name__ == '__main__':
    main()
