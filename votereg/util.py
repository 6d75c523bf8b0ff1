'''Various utility functions for other modules of Votereg.

There should normally be no need to use these functions directly.
'''

import operator
from typing import Any, Dict, Hashable, Iterable, List, Tuple


def count_occurrences(items: Iterable[Hashable]) -> Dict[Any, int]:
    '''Count the items, keyed in the order of their first occurrence.'''
    counts = {}
    for item in items:
        counts[item] = counts.get(item, 0) + 1
    return counts


def sorted_votes(votes: Dict[Any, int],
                 descending: bool = True,
                 ) -> List[Tuple[Any, int]]:
    '''Return votes items sorted by value.

    The sort is stable, so items with equal values keep their input order.
    '''
    return list(sorted(
        votes.items(),
        key=operator.itemgetter(1),
        reverse=descending
    ))


def descending_dict(d: Dict[Any, int]) -> Dict[Any, int]:
    return dict(sorted_votes(d))
