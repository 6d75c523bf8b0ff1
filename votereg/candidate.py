'''Identifier types for voters and candidates and their validation.

Voters are identified by an opaque voter ID, candidates by their name. Both
are plain strings; the only requirement is that they are non-empty. The name
of a candidate doubles as its identity, so two distinct candidates cannot
stand in the same election under the same name.
'''

from typing import Any


VoterId = str
CandidateName = str


class IdentifierError(ValueError):
    '''An identifier of a voter or candidate is invalid.

    :param identifier: The identifier that was found to be invalid.
    :param role: What the identifier was supposed to identify (e.g. voter
        or candidate); included in the error message.
    '''
    def __init__(self, identifier: Any, role: str = 'identifier'):
        self.identifier = identifier
        self.role = role
        super().__init__(
            f'invalid {role}: {identifier!r}, must be a non-empty string'
        )


def validate_identifier(identifier: Any, role: str = 'identifier') -> str:
    '''Check that the identifier is a non-empty string and return it.

    No other format constraints are imposed; identifiers are compared exactly
    as given.

    :param identifier: Voter ID or candidate name to be checked.
    :param role: Role of the identifier for the error message.
    :raises IdentifierError: If the identifier is not a non-empty string.
    '''
    if not isinstance(identifier, str) or not identifier:
        raise IdentifierError(identifier, role)
    return identifier


def validate_voter_id(voter_id: Any) -> VoterId:
    return validate_identifier(voter_id, 'voter ID')


def validate_candidate_name(candidate_name: Any) -> CandidateName:
    return validate_identifier(candidate_name, 'candidate name')
