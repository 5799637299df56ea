"""Tests for the collection operations."""

import types
from collections import OrderedDict

import msgspec
import pytest
from hypothesis import given
from weft import (
    curry,
    every,
    filter_,
    find_key,
    find_last,
    for_each,
    for_each_right,
    map_values,
    omit,
    partial,
    pick,
    reduce_,
    reduce_right,
    some,
)

from tests.strategies import empty_inputs, int_dicts, int_lists

FALSY = [None, '', 0, False, float('nan')]

THINGS = [
    {'value': 1, 'name': 'a', 'foo': 'bar'},
    {'value': 2, 'name': 'b', 'foo': 'bar'},
    {'value': 2, 'name': 'c', 'foo': 'bar'},
    {'value': 2, 'name': 'd', 'foo': 'bar'},
]


def square(x):
    return x**2


def is_two(x):
    return x == 2


def is_even(x):
    return x % 2 == 0


class User(msgspec.Struct):
    name: str
    age: int


class TestFilter:
    """Tests for filter_()."""

    def test_list(self):
        assert filter_([1, 2, 3, 4], is_even) == [2, 4]

    def test_dict_returns_values(self):
        assert filter_({'a': 1, 'b': 2}, is_even) == [2]

    def test_iteratee_arguments(self):
        data = {'a': 1, 'b': 2}
        assert filter_(data, lambda value, key, collection: key == 'a' and collection is data) == [1]

    def test_shorthands(self):
        assert filter_(THINGS, {'value': 2, 'name': 'c'}) == [THINGS[2]]
        assert filter_(THINGS, ['name', 'a']) == [THINGS[0]]
        assert filter_([{'x': True}, {'x': False}], 'x') == [{'x': True}]

    def test_missing_iteratee_keeps_truthy(self):
        assert filter_([0, 1, '', 'a', None]) == [1, 'a']

    @pytest.mark.parametrize('value', FALSY)
    def test_falsy(self, value):
        assert filter_(value, is_even) == []

    @pytest.mark.parametrize('optimized', [True, False])
    def test_curried_iteratee(self, optimized):
        assert filter_([1, 2, 3], curry(lambda x: x > 1, optimized=optimized)) == [2, 3]

    def test_curried_iteratee_with_generic_config(self, fresh_config, monkeypatch):
        monkeypatch.setenv('WEFT_CURRY_OPTIMIZED', '0')
        assert filter_([1, 2, 3], curry(lambda x: x > 1)) == [2, 3]

    def test_partial_with_keyword_bound_parameter(self):
        assert filter_([1, 2], partial(lambda v, k: v * k, k=2)) == [1, 2]
        assert filter_([0, 1], partial(lambda v, k: v * k, k=2)) == [1]


class TestSomeEvery:
    """Tests for some() and every()."""

    def test_some(self):
        assert some([1, 2, 3], is_even) is True
        assert some([1, 3, 5], is_even) is False

    def test_every(self):
        assert every([2, 4], is_even) is True
        assert every([2, 3], is_even) is False

    def test_empty_collections(self):
        assert some([], is_even) is False
        assert every([], is_even) is True

    @pytest.mark.parametrize('value', FALSY)
    def test_falsy(self, value):
        assert some(value, is_even) is False
        assert every(value, is_even) is True

    def test_some_stops_at_first_match(self):
        seen = []

        def record(x):
            seen.append(x)
            return x == 2

        some([1, 2, 3, 4], record)
        assert seen == [1, 2]

    def test_every_stops_at_first_miss(self):
        seen = []

        def record(x):
            seen.append(x)
            return x < 2

        every([1, 2, 3], record)
        assert seen == [1, 2]

    def test_shorthands(self):
        assert some(THINGS, {'name': 'd'}) is True
        assert every(THINGS, ['foo', 'bar']) is True
        assert every(THINGS, 'value') is True

    def test_non_callable_iteratee(self):
        assert some([1, 2], 1.5) is False
        assert every([1, 2], 1.5) is True


class TestForEach:
    """Tests for for_each() and for_each_right()."""

    def test_for_each(self):
        seen = []
        assert for_each([1, 2, 3], seen.append) is None
        assert seen == [1, 2, 3]

    def test_for_each_right(self):
        seen = []
        assert for_each_right([1, 2, 3], seen.append) is None
        assert seen == [3, 2, 1]

    def test_receives_key_and_collection(self):
        data = {'a': 1, 'b': 2}
        seen = []
        for_each_right(data, lambda value, key, collection: seen.append((key, value, collection is data)))
        assert seen == [('b', 2, True), ('a', 1, True)]

    def test_false_does_not_stop(self):
        seen = []

        def record(x):
            seen.append(x)
            return False

        for_each([1, 2, 3], record)
        assert seen == [1, 2, 3]

    @pytest.mark.parametrize('value', FALSY)
    def test_falsy(self, value):
        seen = []
        assert for_each(value, seen.append) is None
        assert for_each_right(value, seen.append) is None
        assert seen == []

    def test_non_callable_iteratee(self):
        assert for_each([1, 2], 'name') is None


class TestReduce:
    """Tests for reduce_() and reduce_right()."""

    def test_reduce_with_seed(self):
        assert reduce_([1, 2, 3], lambda acc, x: acc + x * 2, 0) == 12

    def test_reduce_without_seed(self):
        assert reduce_([1, 2, 3], lambda acc, x: acc + x) == 6

    def test_reduce_right(self):
        assert reduce_right([1, 2, 3], lambda acc, x: [*acc, x], []) == [3, 2, 1]

    def test_reduce_right_without_seed(self):
        assert reduce_right(['a', 'b', 'c'], lambda acc, x: acc + x) == 'cba'

    def test_reduce_dict(self):
        data = {'a': 1, 'b': 2}
        assert reduce_(data, lambda acc, value, key: {**acc, key: value * 10}, {}) == {'a': 10, 'b': 20}

    def test_reduce_right_object_keys(self):
        data = OrderedDict([('a', 1), ('b', 2), ('c', 3)])
        assert reduce_right(data, lambda acc, value, key: acc + key, '') == 'cba'

    def test_iteratee_arguments(self):
        data = [5]
        seen = []
        reduce_(data, lambda acc, value, key, collection: seen.append((acc, value, key, collection is data)), 'seed')
        assert seen == [('seed', 5, 0, True)]

    @pytest.mark.parametrize('value', FALSY)
    def test_falsy_returns_seed(self, value):
        assert reduce_(value, lambda acc, x: acc + x, 10) == 10
        assert reduce_right(value, lambda acc, x: acc + x, 10) == 10

    @pytest.mark.parametrize('value', [*FALSY, []])
    def test_empty_without_seed(self, value):
        assert reduce_(value, lambda acc, x: acc + x) is None

    @pytest.mark.parametrize('optimized', [True, False])
    def test_curried_iteratee(self, optimized):
        assert reduce_([1, 2, 3], curry(lambda a, b: a + b, optimized=optimized), 0) == 6

    def test_curried_iteratee_with_generic_config(self, fresh_config, monkeypatch):
        monkeypatch.setenv('WEFT_CURRY_OPTIMIZED', '0')
        assert reduce_([1, 2, 3], curry(lambda a, b: a + b), 0) == 6

    def test_five_argument_curried_iteratee_with_bound_head(self):
        fold = curry(lambda scale, offset, acc, value, key: acc + value * scale + offset, optimized=False)
        assert reduce_([1, 2], fold(10, 1), 0) == 32

    def test_non_callable_iteratee_returns_seed(self):
        assert reduce_([1, 2], 'name', 'seed') == 'seed'
        assert reduce_([1, 2], None) is None

    def test_none_seed_is_a_seed(self):
        assert reduce_([1], lambda acc, x: (acc, x), None) == (None, 1)

    @given(values=int_lists)
    def test_matches_sum(self, values):
        assert reduce_(values, lambda acc, x: acc + x, 0) == sum(values)
        assert reduce_right(values, lambda acc, x: [*acc, x], []) == values[::-1]


class TestFindKey:
    """Tests for find_key()."""

    def test_list(self):
        assert find_key([1, 2, 3, 4], is_two) == 1

    def test_shorthands(self):
        assert find_key([{'x': True}, {'x': False}], 'x') == 0
        assert find_key([{'value': 1}, {'value': 2}, {'value': 3}], ['value', 2]) == 1
        assert find_key(THINGS, {'value': 2, 'name': 'c'}) == 2

    def test_dict(self):
        assert find_key({'foo': 1, 'bar': 2, 'baz': 3, 'quxx': 4}, is_two) == 'bar'

    def test_ordered_dict(self):
        assert find_key(OrderedDict([('a', 1), ('b', 2), ('c', 3)]), is_two) == 'b'

    def test_set_key_is_position(self):
        assert find_key(frozenset({2}), is_two) == 0

    def test_record(self):
        assert find_key(User(name='ann', age=2), is_two) == 'age'

    def test_not_found(self):
        assert find_key([1, 3], is_two) is None

    @pytest.mark.parametrize('value', FALSY)
    def test_falsy(self, value):
        assert find_key(value, is_two) is None


class TestFindLast:
    """Tests for find_last()."""

    def test_list(self):
        assert find_last([1, 2, 3], is_two) == 2
        assert find_last([1, 2, 3, 4], lambda x: x % 2) == 3

    def test_not_found(self):
        assert find_last(['a', 'b', 'c'], is_two) is None

    def test_predicate_over_records(self):
        people = [
            {'name': 'bar', 'age': 30, 'x': 'y'},
            {'name': 'foo', 'age': 30, 'x': 'z'},
            {'name': 'foo', 'age': 20, 'x': 'w'},
        ]
        found = find_last(people, lambda person: person['age'] == 30)
        assert found == {'name': 'foo', 'age': 30, 'x': 'z'}

    def test_matches_shorthand(self):
        people = [
            {'name': 'foo', 'age': 30, 'x': 'y'},
            {'name': 'foo', 'age': 30, 'x': 'z'},
            {'name': 'bar', 'age': 30, 'x': 'w'},
        ]
        expected = {'name': 'foo', 'age': 30, 'x': 'z'}
        assert find_last(people, {'name': 'foo', 'age': 30}) == expected
        keyed = dict(enumerate(people))
        assert find_last(keyed, {'name': 'foo', 'age': 30}) == expected

    def test_dict_walks_from_the_end(self):
        assert find_last({'a': 1, 'b': 2, 'c': 3}, lambda value: value < 3) == 2

    @pytest.mark.parametrize('value', FALSY)
    def test_falsy(self, value):
        assert find_last(value, is_two) is None


class TestPickOmit:
    """Tests for pick() and omit()."""

    data = {'foo': 'foo', 'bar': 'bar', 'baz': 'baz'}

    def test_pick_keys(self):
        assert pick(self.data, ['foo', 'baz']) == {'foo': 'foo', 'baz': 'baz'}

    def test_pick_function(self):
        assert pick(self.data, lambda value, key: value[0] == 'b') == {'bar': 'bar', 'baz': 'baz'}

    def test_omit_keys(self):
        assert omit(self.data, ['foo', 'baz']) == {'bar': 'bar'}

    def test_omit_function(self):
        assert omit(self.data, lambda value: value.startswith('b')) == {'foo': 'foo'}

    def test_key_collections(self):
        assert pick(self.data, ('foo',)) == {'foo': 'foo'}
        assert pick(self.data, {'bar'}) == {'bar': 'bar'}

    def test_pick_without_iteratee_keeps_truthy(self):
        assert pick({'a': 0, 'b': 1}) == {'b': 1}
        assert omit({'a': 0, 'b': 1}) == {'a': 0}

    def test_list_keys_are_indices(self):
        assert pick(['a', 'b', 'c'], [0, 2]) == {0: 'a', 2: 'c'}

    def test_record(self):
        assert pick(types.SimpleNamespace(a=1, b=2), ['b']) == {'b': 2}
        assert omit(User(name='ann', age=30), ['age']) == {'name': 'ann'}

    def test_returns_new_dict(self):
        assert pick(self.data, ['foo', 'bar', 'baz']) is not self.data

    @pytest.mark.parametrize('value', FALSY)
    def test_falsy(self, value):
        assert pick(value, ['a']) == {}
        assert omit(value, ['a']) == {}

    @given(data=int_dicts)
    def test_pick_and_omit_partition(self, data):
        keys = sorted(data)[::2]
        assert {**pick(data, keys), **omit(data, keys)} == data
        assert not set(pick(data, keys)) & set(omit(data, keys))


class TestMapValues:
    """Tests for map_values()."""

    def test_list(self):
        assert map_values([1, 2, 3, 4], square) == {0: 1, 1: 4, 2: 9, 3: 16}

    def test_dict(self):
        assert map_values({}, square) == {}
        assert map_values({'foo': 1, 'bar': 2}, square) == {'foo': 1, 'bar': 4}

    def test_string_shorthand(self):
        assert map_values(THINGS, 'name') == {0: 'a', 1: 'b', 2: 'c', 3: 'd'}
        keyed = {thing['name']: thing for thing in THINGS}
        assert map_values(keyed, 'name') == {'a': 'a', 'b': 'b', 'c': 'c', 'd': 'd'}

    def test_ordered_dict(self):
        assert map_values(OrderedDict([('a', 1), ('b', 2), ('c', 3)]), square) == {'a': 1, 'b': 4, 'c': 9}

    def test_set(self):
        assert map_values(frozenset({3}), square) == {0: 9}

    def test_record(self):
        assert map_values(User(name='ann', age=30), lambda value: f'{value}!') == {'name': 'ann!', 'age': '30!'}

    def test_partial_with_keyword_bound_parameter(self):
        assert map_values([1, 2], partial(lambda v, k: v * k, k=2)) == {0: 2, 1: 4}

    @pytest.mark.parametrize('value', FALSY)
    def test_falsy(self, value):
        assert map_values(value, square) == {}

    @given(value=empty_inputs)
    def test_empty_inputs(self, value):
        assert map_values(value, square) == {}
