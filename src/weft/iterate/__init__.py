"""Collection iteration engine: shape classification, traversal, iteratees."""

from weft.iterate.engine import BREAK, NO_SEED, IteratorOptions, make_iterator
from weft.iterate.iteratee import identity, matches, matches_property, prop, to_iteratee
from weft.iterate.shape import CollectionKind, CollectionView, classify, entries

__all__ = [
    'BREAK',
    'NO_SEED',
    'CollectionKind',
    'CollectionView',
    'IteratorOptions',
    'classify',
    'entries',
    'identity',
    'make_iterator',
    'matches',
    'matches_property',
    'prop',
    'to_iteratee',
]
