"""A commandline tool to run an election from a script of commands.

Reads commands one per line and executes them against a single election
registry. Recognized commands are register-voter <id>, add-candidate <name>,
cast-vote <voter-id> <candidate-name> and results. Arguments containing
spaces can be quoted as in the shell; empty lines and lines starting with #
are skipped.
"""

import argparse
import io
import json
import logging
import shlex
import sys
import warnings
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

import votereg.report
from votereg.candidate import IdentifierError
from votereg.registry import ElectionRegistry

argparser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
input_group = argparser.add_mutually_exclusive_group()
input_group.add_argument(
    '-i', '--input-file',
    type=argparse.FileType('r', encoding='utf8'),
    help='file to load the commands from',
)
input_group.add_argument(
    '-I', '--use-stdin',
    action='store_true',
    help='load the commands from standard input',
)
input_group.add_argument(
    '-D', '--demo',
    action='store_true',
    help='run a demonstration election instead of reading commands',
)
argparser.add_argument(
    '-n', '--election-name',
    help='name of the election, shown in JSON results',
)
argparser.add_argument(
    '-j', '--json',
    action='store_true',
    dest='json_output',
    help='print results as JSON instead of text',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all registry log messages',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any registry log messages',
)

DEMO_SCRIPT = [
    '# voter registration',
    'register-voter VOTER123',
    'register-voter VOTER456',
    'register-voter VOTER789',
    'register-voter VOTER101',
    'register-voter VOTER102',
    '# adding candidates',
    'add-candidate "John Doe"',
    'add-candidate "Jane Smith"',
    'add-candidate "Alice Johnson"',
    '# casting votes',
    'cast-vote VOTER123 "John Doe"',
    'cast-vote VOTER456 "Jane Smith"',
    'cast-vote VOTER789 "John Doe"',
    'cast-vote VOTER101 "Alice Johnson"',
    'cast-vote VOTER102 "Jane Smith"',
    'results',
]


class CommandError(Exception):
    """A line of the command script is invalid.

    :param line: The offending line.
    :param reason: What is wrong with it.
    """
    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f'invalid command {line!r}: {reason}')


def register_voter(registry: ElectionRegistry,
                   voter_id: str,
                   ) -> List[str]:
    result = registry.register_voter(voter_id)
    return [votereg.report.describe_voter_registration(result, voter_id)]


def add_candidate(registry: ElectionRegistry,
                  candidate_name: str,
                  ) -> List[str]:
    result = registry.add_candidate(candidate_name)
    return [
        votereg.report.describe_candidate_registration(result, candidate_name)
    ]


def cast_vote(registry: ElectionRegistry,
              voter_id: str,
              candidate_name: str,
              ) -> List[str]:
    result = registry.cast_vote(voter_id, candidate_name)
    return [votereg.report.describe_vote(result, voter_id, candidate_name)]


def results(registry: ElectionRegistry,
            json_output: bool = False,
            ) -> List[str]:
    if json_output:
        return [json.dumps(
            votereg.report.results_to_dict(registry), ensure_ascii=False
        )]
    else:
        return registry.display_results()


# command name: (function, number of arguments, whether output format applies)
COMMANDS: Dict[str, Tuple[Callable[..., List[str]], int, bool]] = {
    'register-voter': (register_voter, 1, False),
    'add-candidate': (add_candidate, 1, False),
    'cast-vote': (cast_vote, 2, False),
    'results': (results, 0, True),
}


def parse_command(line: str) -> Optional[Tuple[str, List[str]]]:
    """Split a script line into a command name and its arguments.

    :returns: None for empty and comment lines.
    :raises CommandError: If the command is unknown, has a wrong number of
        arguments or cannot be tokenized.
    """
    try:
        tokens = shlex.split(line, comments=True)
    except ValueError as e:
        raise CommandError(line, str(e)) from e
    if not tokens:
        return None
    command, args = tokens[0], tokens[1:]
    if command not in COMMANDS:
        raise CommandError(
            line, 'unknown command, supported: ' + ', '.join(COMMANDS.keys())
        )
    n_args = COMMANDS[command][1]
    if len(args) != n_args:
        raise CommandError(
            line, f'{command} takes {n_args} arguments, got {len(args)}'
        )
    return command, args


def run_script(registry: ElectionRegistry,
               lines: Iterable[str],
               json_output: bool = False,
               ) -> Iterator[str]:
    """Execute the commands against the registry, yielding output lines.

    Invalid lines are skipped with a warning.
    """
    for line in lines:
        line = line.rstrip('\n')
        try:
            parsed = parse_command(line)
            if parsed is None:
                continue
            command, args = parsed
            function, _, formats_output = COMMANDS[command]
            if formats_output:
                yield from function(registry, *args, json_output=json_output)
            else:
                yield from function(registry, *args)
        except (CommandError, IdentifierError) as e:
            warnings.warn(f'skipping line: {e}')


def main(input_file: Optional[io.TextIOBase] = None,
         use_stdin: bool = False,
         demo: bool = False,
         election_name: Optional[str] = None,
         json_output: bool = False,
         verbose: bool = False,
         quiet: bool = False,
         ) -> None:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    if sum([demo, use_stdin, input_file is not None]) > 1:
        raise ValueError(
            'conflicting inputs: give only one of input file, stdin or demo'
        )
    if demo:
        lines = DEMO_SCRIPT
    elif use_stdin:
        lines = sys.stdin
    elif input_file is not None:
        lines = input_file
    else:
        raise ValueError('no input: give an input file, stdin or demo')
    registry = ElectionRegistry(election_name)
    n_output = 0
    for output_line in run_script(registry, lines, json_output=json_output):
        print(output_line)
        n_output += 1
    if not n_output:
        warnings.warn('no commands executed, empty input')


def cli() -> None:
    args = argparser.parse_args()
    if not args.input_file and not args.use_stdin and not args.demo:
        argparser.print_usage()
    else:
        main(**vars(args))


if __name__ == '__main__':
    cli()
