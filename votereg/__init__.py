"""Votereg - an in-memory election registry.

Votereg keeps track of a single-winner election where every voter casts one
simple vote:

-   Voters and candidates are registered with the
    :class:`registry.ElectionRegistry`, which keeps them unique.
-   Votes are cast through the registry, which records a :class:`ballot.Ballot`
    only for a registered voter voting for an existing candidate, and only
    once per voter.
-   The registry tallies the ballots using the functions of the :mod:`tally`
    module and picks the winner with the most votes, breaking ties by the
    order of the first vote for each candidate.

The registry operations never raise exceptions for expected outcomes such as
repeated registrations or votes; they return the result variants from the
:mod:`result` module. The :mod:`report` module renders these into
human-readable messages, and the commandline tool in :mod:`__main__` runs
an election from a script of commands.
"""
