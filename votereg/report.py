'''Presentation of registry outcomes and election results.

The registry returns structured results only; this module renders them into
human-readable lines (for the commandline tool or any other front end) and
into JSON-ready result summaries.
'''

from typing import Any, Dict, List

import votereg.persist
import votereg.util
from votereg.candidate import VoterId, CandidateName
from votereg.result import RegistrationResult, VoteResult

VOTER_REGISTRATION_MESSAGES = {
    RegistrationResult.REGISTERED:
        'Voter with ID {voter_id} has been registered successfully.',
    RegistrationResult.ALREADY_REGISTERED:
        'Voter with ID {voter_id} is already registered.',
}
CANDIDATE_REGISTRATION_MESSAGES = {
    RegistrationResult.ADDED:
        'Candidate {candidate_name} has been added to the election.',
    RegistrationResult.ALREADY_PRESENT:
        'Candidate {candidate_name} is already in the election.',
}
VOTE_MESSAGES = {
    VoteResult.VOTER_NOT_REGISTERED:
        'Voter with ID {voter_id} is not registered.',
    VoteResult.CANDIDATE_NOT_FOUND:
        'Candidate {candidate_name} is not in the election.',
    VoteResult.ALREADY_VOTED:
        'Voter with ID {voter_id} has already voted.',
    VoteResult.VOTE_CAST:
        'Voter with ID {voter_id} has voted for {candidate_name}.',
}
NO_VOTES_MESSAGE = 'No votes have been cast.'


def describe_voter_registration(result: RegistrationResult,
                                voter_id: VoterId,
                                ) -> str:
    try:
        template = VOTER_REGISTRATION_MESSAGES[result]
    except KeyError as e:
        raise ValueError(f'not a voter registration result: {result}') from e
    return template.format(voter_id=voter_id)


def describe_candidate_registration(result: RegistrationResult,
                                    candidate_name: CandidateName,
                                    ) -> str:
    try:
        template = CANDIDATE_REGISTRATION_MESSAGES[result]
    except KeyError as e:
        raise ValueError(
            f'not a candidate registration result: {result}'
        ) from e
    return template.format(candidate_name=candidate_name)


def describe_vote(result: VoteResult,
                  voter_id: VoterId,
                  candidate_name: CandidateName,
                  ) -> str:
    try:
        template = VOTE_MESSAGES[result]
    except KeyError as e:
        raise ValueError(f'not a vote result: {result}') from e
    return template.format(voter_id=voter_id, candidate_name=candidate_name)


def display_results(registry) -> List[str]:
    '''Render the election results as lines of text.

    Every candidate is listed in the order of registration with their number
    of votes, including those with no votes. If any votes have been cast, the
    winner and the voter turnout follow; otherwise, only a notice that no
    votes have been cast.

    :param registry: An :class:`votereg.registry.ElectionRegistry`.
    '''
    tally = registry.tally_votes()
    lines = []
    if registry.candidates:
        lines.append('Election Results:')
        for cand in registry.candidates:
            lines.append(f'{cand}: {tally.votes_for(cand)} votes')
    if tally.no_votes_cast:
        lines.append(NO_VOTES_MESSAGE)
    else:
        lines.append(
            f'Winner: {tally.winner} with {tally.winner_votes} votes.'
        )
        lines.append(
            f'Total Voter Turnout: {registry.n_ballots} out of'
            f' {registry.n_voters} registered voters.'
        )
    return lines


def results_to_dict(registry) -> Dict[str, Any]:
    '''Summarize the election results as a JSON-ready dictionary.

    Unlike the tally itself, the vote counts include all candidates (with
    zero for those without votes), in the order of registration.

    :param registry: An :class:`votereg.registry.ElectionRegistry`.
    '''
    tally = registry.tally_votes()
    vote_count = {
        cand: tally.votes_for(cand) for cand in registry.candidates
    }
    # ties keep the ballot order of the tally, so the winner ranks first
    ranking = list(votereg.util.descending_dict(tally.vote_count).keys())
    ranking.extend(
        cand for cand in registry.candidates if cand not in tally.vote_count
    )
    return votereg.persist.serialize_value({
        'election': registry.name,
        'status': tally.status,
        'winner': tally.winner,
        'tied': tally.tied,
        'vote_count': vote_count,
        'ranking': ranking,
        'ballots_cast': registry.n_ballots,
        'registered_voters': registry.n_voters,
        'turnout': registry.turnout,
    })
