'''The election registry holding voters, candidates and ballots.

The :class:`ElectionRegistry` is the core of Votereg. It guarantees that

-   every voter and every candidate is registered only once,
-   every ballot references a registered voter and an existing candidate,
-   no voter casts more than one ballot,

so the number of ballots can never exceed the number of registered voters.
Each instance represents one election; instances share no state.
'''

import logging
from fractions import Fraction
from typing import Dict, List, Optional, Tuple

import votereg.report
import votereg.tally
from votereg.ballot import Ballot
from votereg.candidate import (
    VoterId, CandidateName, validate_voter_id, validate_candidate_name
)
from votereg.persist import simple_serialization
from votereg.result import RegistrationResult, VoteResult, TallyResult

logger = logging.getLogger(__name__)


@simple_serialization
class ElectionRegistry:
    '''A single election with its voters, candidates and cast ballots.

    Voters and candidates are kept in the order of their registration, which
    is also the order used for displaying results. Ballots are kept in the
    order they were cast; this order determines the tiebreaking when tallying.

    The registry performs no locking. If it is shared among threads, the
    callers must serialize all calls to its methods.

    :param name: Name of the election, for display purposes only.
    '''
    serialize_params = ['name', 'voters', 'candidates', 'ballots']

    def __init__(self, name: Optional[str] = None):
        self.name = name
        # dicts used as insertion-ordered sets
        self._voters: Dict[VoterId, None] = {}
        self._candidates: Dict[CandidateName, None] = {}
        self._ballots: List[Ballot] = []
        self._ballots_by_voter: Dict[VoterId, Ballot] = {}

    def register_voter(self, voter_id: VoterId) -> RegistrationResult:
        '''Register a voter so that they can cast a vote.

        :param voter_id: Unique identifier of the voter.
        :returns: ``REGISTERED``, or ``ALREADY_REGISTERED`` if the voter
            was registered before (the registry is left unchanged then).
        :raises IdentifierError: If the voter ID is not a non-empty string.
        '''
        validate_voter_id(voter_id)
        if voter_id in self._voters:
            logger.info('voter %s already registered', voter_id)
            return RegistrationResult.ALREADY_REGISTERED
        self._voters[voter_id] = None
        logger.debug('registered voter %s', voter_id)
        return RegistrationResult.REGISTERED

    def add_candidate(self, candidate_name: CandidateName
                      ) -> RegistrationResult:
        '''Add a candidate standing in the election.

        :param candidate_name: Name of the candidate, which also serves as
            its identity.
        :returns: ``ADDED``, or ``ALREADY_PRESENT`` if a candidate with the
            same name stands already (the registry is left unchanged then).
        :raises IdentifierError: If the name is not a non-empty string.
        '''
        validate_candidate_name(candidate_name)
        if candidate_name in self._candidates:
            logger.info('candidate %s already in the election', candidate_name)
            return RegistrationResult.ALREADY_PRESENT
        self._candidates[candidate_name] = None
        logger.debug('added candidate %s', candidate_name)
        return RegistrationResult.ADDED

    def cast_vote(self,
                  voter_id: VoterId,
                  candidate_name: CandidateName,
                  ) -> VoteResult:
        '''Record a vote of a registered voter for an existing candidate.

        The conditions are checked in a fixed order and the first failing one
        determines the result: the voter must be registered, the candidate
        must stand in the election and the voter must not have voted yet.
        Nothing is recorded unless all of them pass.

        :param voter_id: ID of the voter casting the vote.
        :param candidate_name: Name of the candidate voted for.
        :returns: ``VOTE_CAST`` if the ballot was recorded, otherwise the
            variant of the first failed condition.
        :raises IdentifierError: If either identifier is not a non-empty
            string.
        '''
        validate_voter_id(voter_id)
        validate_candidate_name(candidate_name)
        if voter_id not in self._voters:
            result = VoteResult.VOTER_NOT_REGISTERED
        elif candidate_name not in self._candidates:
            result = VoteResult.CANDIDATE_NOT_FOUND
        elif voter_id in self._ballots_by_voter:
            result = VoteResult.ALREADY_VOTED
        else:
            ballot = Ballot(voter_id, candidate_name)
            self._ballots.append(ballot)
            self._ballots_by_voter[voter_id] = ballot
            logger.debug('voter %s voted for %s', voter_id, candidate_name)
            return VoteResult.VOTE_CAST
        logger.info('vote of %s for %s rejected: %s',
                    voter_id, candidate_name, result.value)
        return result

    def tally_votes(self) -> TallyResult:
        '''Count the votes and determine the winner.

        :returns: The tally; its status is ``NO_VOTES_CAST`` and it has no
            winner if nobody has voted yet.
        '''
        return votereg.tally.tally_ballots(self._ballots)

    def display_results(self) -> List[str]:
        '''Render the results of the election as human-readable lines.'''
        return votereg.report.display_results(self)

    @property
    def voters(self) -> Tuple[VoterId, ...]:
        '''Registered voters in the order of registration.'''
        return tuple(self._voters)

    @property
    def candidates(self) -> Tuple[CandidateName, ...]:
        '''Candidates in the order they were added.'''
        return tuple(self._candidates)

    @property
    def ballots(self) -> Tuple[Ballot, ...]:
        '''Cast ballots in the order of casting.'''
        return tuple(self._ballots)

    @property
    def n_voters(self) -> int:
        return len(self._voters)

    @property
    def n_ballots(self) -> int:
        return len(self._ballots)

    @property
    def turnout(self) -> Optional[Fraction]:
        '''Fraction of registered voters that have voted.

        None if there are no registered voters.
        '''
        if not self._voters:
            return None
        return Fraction(len(self._ballots), len(self._voters))

    def is_registered(self, voter_id: VoterId) -> bool:
        return voter_id in self._voters

    def has_candidate(self, candidate_name: CandidateName) -> bool:
        return candidate_name in self._candidates

    def has_voted(self, voter_id: VoterId) -> bool:
        return voter_id in self._ballots_by_voter

    def ballot_of(self, voter_id: VoterId) -> Optional[Ballot]:
        '''Return the ballot cast by the voter, None if they have not voted.'''
        return self._ballots_by_voter.get(voter_id)

    def __repr__(self) -> str:
        return (
            '<ElectionRegistry('
            + (f'{self.name},' if self.name is not None else '')
            + f'{len(self._voters)} voters,'
            + f'{len(self._candidates)} candidates,'
            + f'{len(self._ballots)} ballots)>'
        )
