'''Result variants returned by the registry operations.

None of the registry operations raises an exception for an expected
outcome such as a double registration or a repeated vote; they return one
of the variants defined here and leave it to the caller to present it.
Apart from the success variants, every variant means the registry state was
left unchanged.
'''

import enum
import dataclasses
from typing import Dict, List, Optional

from votereg.candidate import CandidateName
from votereg.persist import simple_serialization


class RegistrationResult(enum.Enum):
    '''Outcome of registering a voter or adding a candidate.'''
    REGISTERED = 'registered'
    ALREADY_REGISTERED = 'already_registered'
    ADDED = 'added'
    ALREADY_PRESENT = 'already_present'

    @property
    def ok(self) -> bool:
        '''True if the registration changed the registry.'''
        return self in (RegistrationResult.REGISTERED, RegistrationResult.ADDED)


class VoteResult(enum.Enum):
    '''Outcome of casting a vote.

    The failure variants are listed in the order the preconditions are
    checked.
    '''
    VOTER_NOT_REGISTERED = 'voter_not_registered'
    CANDIDATE_NOT_FOUND = 'candidate_not_found'
    ALREADY_VOTED = 'already_voted'
    VOTE_CAST = 'vote_cast'

    @property
    def ok(self) -> bool:
        '''True if a ballot was recorded.'''
        return self is VoteResult.VOTE_CAST


class TallyStatus(enum.Enum):
    WINNER_DETERMINED = 'winner_determined'
    NO_VOTES_CAST = 'no_votes_cast'


@simple_serialization
@dataclasses.dataclass(frozen=True)
class TallyResult:
    '''Counted votes of an election.

    :param status: Whether a winner could be determined at all.
    :param winner: The candidate with the most votes; on ties, the tied
        candidate encountered first in the ballot sequence. None if no votes
        have been cast.
    :param vote_count: Numbers of votes for the candidates, ordered by the
        first ballot cast for each of them. Candidates without votes do not
        appear.
    :param tied: All candidates sharing the highest number of votes, in the
        same order; contains only the winner if there is no tie.
    '''
    status: TallyStatus
    winner: Optional[CandidateName] = None
    vote_count: Dict[CandidateName, int] = dataclasses.field(
        default_factory=dict
    )
    tied: List[CandidateName] = dataclasses.field(default_factory=list)

    @property
    def no_votes_cast(self) -> bool:
        return self.status is TallyStatus.NO_VOTES_CAST

    @property
    def is_tie(self) -> bool:
        return len(self.tied) > 1

    @property
    def winner_votes(self) -> int:
        '''Number of votes of the winner, zero if there is none.'''
        if self.winner is None:
            return 0
        return self.vote_count[self.winner]

    def votes_for(self, candidate_name: CandidateName) -> int:
        '''Return the number of votes for the candidate, zero if absent.'''
        return self.vote_count.get(candidate_name, 0)
