'''Counting ballots and determining the winner.

The winner is the candidate with the strictly highest number of votes. Ties
are broken by the order in which the candidates were first voted for: the
counts are folded from left to right, replacing the best candidate only when
a later one has strictly more votes, so the earliest of the tied candidates
prevails.
'''

import logging
from typing import Dict, Iterable, List, Optional

import votereg.util
from votereg.ballot import Ballot
from votereg.candidate import CandidateName
from votereg.result import TallyResult, TallyStatus

logger = logging.getLogger(__name__)


def count_ballots(ballots: Iterable[Ballot]) -> Dict[CandidateName, int]:
    '''Count ballots for each candidate.

    :param ballots: Ballots in the order they were cast.
    :returns: Numbers of ballots per candidate, keyed in the order of the
        first ballot for each candidate. Candidates with no ballots are
        absent.
    '''
    return votereg.util.count_occurrences(
        ballot.candidate_name for ballot in ballots
    )


def first_best(vote_count: Dict[CandidateName, int]
               ) -> Optional[CandidateName]:
    '''Return the candidate with the most votes, the earliest one on ties.

    :param vote_count: Numbers of votes per candidate, in encounter order.
    :returns: The winning candidate, or None if there are no candidates.
    '''
    best = None
    for cand, n_votes in vote_count.items():
        if best is None or n_votes > vote_count[best]:
            best = cand
    return best


def tied_best(vote_count: Dict[CandidateName, int]) -> List[CandidateName]:
    '''Return all candidates sharing the highest number of votes.'''
    if not vote_count:
        return []
    top = max(vote_count.values())
    return [cand for cand, n_votes in vote_count.items() if n_votes == top]


def tally_ballots(ballots: Iterable[Ballot]) -> TallyResult:
    '''Count the ballots and determine the winner.

    :param ballots: Ballots in the order they were cast.
    :returns: A result with :attr:`TallyStatus.NO_VOTES_CAST` status and no
        winner if there are no ballots.
    '''
    vote_count = count_ballots(ballots)
    if not vote_count:
        logger.info('no votes cast, no winner can be determined')
        return TallyResult(TallyStatus.NO_VOTES_CAST)
    winner = first_best(vote_count)
    tied = tied_best(vote_count)
    if len(tied) > 1:
        logger.info('%s are tied with %d votes, %s encountered first',
                    tied, vote_count[winner], winner)
    else:
        logger.info('%s wins with %d votes', winner, vote_count[winner])
    return TallyResult(
        TallyStatus.WINNER_DETERMINED,
        winner=winner,
        vote_count=vote_count,
        tied=tied,
    )
