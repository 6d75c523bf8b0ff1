'''The ballot record.

A ballot links one voter to the one candidate they voted for. Ballots are
only created by the registry once it has checked the voter and candidate,
so a ballot object by itself carries no guarantee of validity.
'''

import dataclasses

from votereg.candidate import VoterId, CandidateName
from votereg.persist import simple_serialization


@simple_serialization
@dataclasses.dataclass(frozen=True)
class Ballot:
    '''A vote cast by a single voter for a single candidate.

    :param voter_id: ID of the voter who cast the ballot.
    :param candidate_name: Name of the candidate voted for.
    '''
    voter_id: VoterId
    candidate_name: CandidateName
