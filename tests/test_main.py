import sys
import os
import io
import json
import inspect

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votereg.__main__
from votereg.__main__ import CommandError
from votereg.registry import ElectionRegistry

DEMO_OUTPUT = [
    'Voter with ID VOTER123 has been registered successfully.',
    'Voter with ID VOTER456 has been registered successfully.',
    'Voter with ID VOTER789 has been registered successfully.',
    'Voter with ID VOTER101 has been registered successfully.',
    'Voter with ID VOTER102 has been registered successfully.',
    'Candidate John Doe has been added to the election.',
    'Candidate Jane Smith has been added to the election.',
    'Candidate Alice Johnson has been added to the election.',
    'Voter with ID VOTER123 has voted for John Doe.',
    'Voter with ID VOTER456 has voted for Jane Smith.',
    'Voter with ID VOTER789 has voted for John Doe.',
    'Voter with ID VOTER101 has voted for Alice Johnson.',
    'Voter with ID VOTER102 has voted for Jane Smith.',
    'Election Results:',
    'John Doe: 2 votes',
    'Jane Smith: 2 votes',
    'Alice Johnson: 1 votes',
    'Winner: John Doe with 2 votes.',
    'Total Voter Turnout: 5 out of 5 registered voters.',
]


def run(lines, **kwargs):
    return list(votereg.__main__.run_script(ElectionRegistry(), lines, **kwargs))


@pytest.mark.parametrize(('line', 'parsed'), [
    ('register-voter A', ('register-voter', ['A'])),
    ('add-candidate "John Doe"', ('add-candidate', ['John Doe'])),
    ("cast-vote A 'John Doe'", ('cast-vote', ['A', 'John Doe'])),
    ('results', ('results', [])),
    ('results  # show them', ('results', [])),
    ('', None),
    ('   ', None),
    ('# comment', None),
])
def test_parse_command(line, parsed):
    assert votereg.__main__.parse_command(line) == parsed


@pytest.mark.parametrize('line', [
    'vote A X',
    'register-voter',
    'register-voter A B',
    'cast-vote A',
    'results now',
    'add-candidate "John',
])
def test_parse_command_invalid(line):
    with pytest.raises(CommandError):
        votereg.__main__.parse_command(line)


def test_demo_script():
    assert run(votereg.__main__.DEMO_SCRIPT) == DEMO_OUTPUT


def test_rejections():
    assert run([
        'register-voter A',
        'register-voter A',
        'add-candidate X',
        'add-candidate X',
        'cast-vote Z X',
        'cast-vote A Y',
        'cast-vote A X',
        'cast-vote A X',
    ]) == [
        'Voter with ID A has been registered successfully.',
        'Voter with ID A is already registered.',
        'Candidate X has been added to the election.',
        'Candidate X is already in the election.',
        'Voter with ID Z is not registered.',
        'Candidate Y is not in the election.',
        'Voter with ID A has voted for X.',
        'Voter with ID A has already voted.',
    ]


def test_no_votes_results():
    assert run(['add-candidate X', 'add-candidate Y', 'results']) == [
        'Candidate X has been added to the election.',
        'Candidate Y has been added to the election.',
        'Election Results:',
        'X: 0 votes',
        'Y: 0 votes',
        'No votes have been cast.',
    ]


def test_invalid_lines_skipped():
    with pytest.warns(UserWarning):
        output = run(['bogus', 'register-voter ""', 'register-voter A\n'])
    assert output == ['Voter with ID A has been registered successfully.']


def test_json_results():
    output = run([
        'register-voter A',
        'add-candidate X',
        'cast-vote A X',
        'results',
    ], json_output=True)
    summary = json.loads(output[-1])
    assert summary['winner'] == 'X'
    assert summary['vote_count'] == {'X': 1}
    assert summary['turnout'] == {'type': 'Fraction', 'arguments': [1, 1]}


def test_main_demo(capsys):
    votereg.__main__.main(demo=True, quiet=True)
    assert capsys.readouterr().out.splitlines() == DEMO_OUTPUT


def test_main_input_file(capsys):
    script = io.StringIO('register-voter A\nadd-candidate X\ncast-vote A X\n')
    votereg.__main__.main(input_file=script, election_name='Test', quiet=True)
    assert capsys.readouterr().out.splitlines() == [
        'Voter with ID A has been registered successfully.',
        'Candidate X has been added to the election.',
        'Voter with ID A has voted for X.',
    ]


def test_main_empty_input():
    with pytest.warns(UserWarning):
        votereg.__main__.main(input_file=io.StringIO(''), quiet=True)


def test_main_no_input():
    with pytest.raises(ValueError):
        votereg.__main__.main()


def test_commands_without_output_format():
    for command, (function, n_args, formats_output) in (
            votereg.__main__.COMMANDS.items()):
        has_param = 'json_output' in inspect.signature(function).parameters
        assert has_param == formats_output
    output = run(['register-voter A', 'add-candidate X', 'cast-vote A X'],
                 json_output=True)
    assert output == [
        'Voter with ID A has been registered successfully.',
        'Candidate X has been added to the election.',
        'Voter with ID A has voted for X.',
    ]


@pytest.mark.parametrize('args', [
    ['-D', '-I'],
    ['-I', '-D'],
])
def test_argparser_exclusive_inputs(args):
    with pytest.raises(SystemExit):
        votereg.__main__.argparser.parse_args(args)


def test_main_conflicting_inputs():
    with pytest.raises(ValueError):
        votereg.__main__.main(demo=True, use_stdin=True, quiet=True)
    with pytest.raises(ValueError):
        votereg.__main__.main(
            input_file=io.StringIO('results\n'), demo=True, quiet=True
        )
