import argparse
import contextlib
import pathlib
import sys

import torch

from dfa_recognizers.automata.alphabet import DEFAULT_DELIMITER, decode_word
from dfa_recognizers.automata.automaton import DFA
from dfa_recognizers.automata.batched import TensorAutomaton
from dfa_recognizers.automata.runner import Accepted
from dfa_recognizers.loading.candidate import load_automaton
from dfa_recognizers.hand_picked_languages.save_automaton import (
    LANGUAGE_NAMES,
    get_automaton,
    get_console_logger
)
from dfa_recognizers.tools.jsonl import read_lines, write_json_line

def add_automaton_arguments(parser):
    group = parser.add_argument_group('Automaton options')
    source = group.add_mutually_exclusive_group(required=True)
    source.add_argument('--automaton', type=pathlib.Path,
        help='A JSON file with the keys states, alphabet, delta, '
             'initialState, and finalStates.')
    source.add_argument('--language',
        help='Name of a hand-picked language to use instead of a file. One '
             f'of: {", ".join(LANGUAGE_NAMES)}.')

def add_input_output_arguments(parser):
    group = parser.add_argument_group('Input/output options')
    group.add_argument('--input', type=pathlib.Path,
        help='File with one word per line. A blank line is the empty word. '
             'Standard input is used by default.')
    group.add_argument('--output', type=pathlib.Path,
        help='File where one JSON object per word will be written. Standard '
             'output is used by default.')
    group.add_argument('--delimiter', default=DEFAULT_DELIMITER,
        help='The string separating the symbols of a word. The default is '
             f'{DEFAULT_DELIMITER!r}.')

def add_batching_arguments(parser):
    group = parser.add_argument_group('Batching options')
    group.add_argument('--batched', action='store_true', default=False,
        help='Label words in batches using tensors. Only acceptance is '
             'reported in this mode.')
    group.add_argument('--batch-size', type=int, default=256,
        help='Number of words per batch when --batched is used.')
    group.add_argument('--device', default='cpu',
        help='The torch device to use when --batched is used.')

def get_automaton_from_args(args) -> DFA:
    if args.automaton is not None:
        return load_automaton(args.automaton)
    else:
        return get_automaton(args.language)

def recognize_one(automaton: DFA, line: str, word: tuple[str, ...]) -> dict:
    result = automaton.run(word)
    if isinstance(result, Accepted):
        return {
            'word' : line,
            'accepted' : True,
            'outcome' : 'accepted',
            'reason' : None,
            'position' : len(word)
        }
    else:
        return {
            'word' : line,
            'accepted' : False,
            'outcome' : 'invalid-word' if result.invalid_word else 'rejected',
            'reason' : result.reason.value,
            'position' : result.position
        }

def recognize_batch(tensor_automaton: TensorAutomaton, lines, words) -> list[dict]:
    labels = tensor_automaton.accepts(words).tolist()
    return [
        { 'word' : line, 'accepted' : label }
        for line, label in zip(lines, labels, strict=True)
    ]

def recognize(automaton, lines, delimiter, batched, batch_size, device):
    # Arguments are checked before any line is read.
    if batched:
        if batch_size < 1:
            raise ValueError(f'batch size must be positive, got {batch_size}')
        return recognize_batched(
            TensorAutomaton.from_automaton(automaton, device),
            lines,
            delimiter,
            batch_size
        )
    else:
        return (
            recognize_one(automaton, line, decode_word(line, delimiter))
            for line in lines
        )

def recognize_batched(tensor_automaton, lines, delimiter, batch_size):
    batch = []
    for line in lines:
        batch.append(line)
        if len(batch) == batch_size:
            yield from recognize_batch(
                tensor_automaton,
                batch,
                [decode_word(x, delimiter) for x in batch]
            )
            batch = []
    if batch:
        yield from recognize_batch(
            tensor_automaton,
            batch,
            [decode_word(x, delimiter) for x in batch]
        )

def main(argv=None):

    console_logger = get_console_logger()

    parser = argparse.ArgumentParser(
        description=
        'Decide which words are accepted by a deterministic finite '
        'automaton.'
    )
    add_automaton_arguments(parser)
    add_input_output_arguments(parser)
    add_batching_arguments(parser)
    args = parser.parse_args(argv)
    if args.batch_size < 1:
        parser.error(f'--batch-size must be positive, got {args.batch_size}')
    console_logger.info(f'parsed arguments: {args}')

    try:
        automaton = get_automaton_from_args(args)
    except ValueError as e:
        console_logger.error(f'could not load automaton: {e}')
        raise
    console_logger.info(
        f'automaton: {automaton.num_states()} states, '
        f'{automaton.alphabet_size()} symbols'
    )
    device = torch.device(args.device)

    num_words = 0
    num_accepted = 0
    with contextlib.ExitStack() as stack:
        if args.input is not None:
            fin = stack.enter_context(args.input.open())
        else:
            fin = sys.stdin
        if args.output is not None:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            fout = stack.enter_context(args.output.open('w'))
        else:
            fout = sys.stdout
        results = recognize(
            automaton,
            read_lines(fin),
            args.delimiter,
            args.batched,
            args.batch_size,
            device
        )
        for result in results:
            write_json_line(result, fout)
            num_words += 1
            num_accepted += int(result['accepted'])
    console_logger.info(f'words: {num_words}')
    console_logger.info(f'accepted: {num_accepted}')

if __name__ == '__main__':
    main()
