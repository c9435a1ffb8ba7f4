"""
Tests for the `Args` store itself: construction, mutation and copying.
"""

import copy
import pickle

import pytest

from argstore import Args, MalformedConstructionError, Value, ValueType


class TestConstruction:

    def test_empty(self):
        args = Args()
        assert len(args) == 0
        assert list(args) == []

    def test_pairs(self):
        args = Args('Cutoff', 1e-10, 'Maxm', 500, 'Quiet', True, 'Name', 'psi')
        assert args.get('Cutoff') == Value(ValueType.REAL, 1e-10)
        assert args.get('Maxm') == Value(ValueType.INTEGER, 500)
        assert args.get('Quiet') == Value(ValueType.BOOLEAN, True)
        assert args.get('Name') == Value(ValueType.STRING, 'psi')
        assert list(args) == ['Cutoff', 'Maxm', 'Quiet', 'Name']

    def test_later_pairs_overwrite(self):
        args = Args('Maxm', 1, 'Other', 2, 'Maxm', 3)
        assert len(args) == 2
        assert args.get_int('Maxm') == 3

    def test_odd_number_of_items(self):
        with pytest.raises(MalformedConstructionError, match='alternating'):
            Args('Cutoff', 1e-10, 'Maxm')

    def test_non_string_key(self):
        with pytest.raises(MalformedConstructionError, match='must be strings'):
            Args(1, 2)

    def test_unsupported_value(self):
        with pytest.raises(MalformedConstructionError, match='"Sites"'):
            Args('Sites', [1, 2, 3])

    def test_grammar_string(self):
        args = Args('Name=some_string,Size=200,Threshold=1E-10')
        assert args.get_string('Name') == 'some_string'
        assert args.get_int('Size') == 200
        assert args.get_real('Threshold') == 1e-10

    def test_grammar_string_later_entries_win(self):
        assert Args('A=1,A=2').get_int('A') == 2

    def test_grammar_string_errors(self):
        with pytest.raises(MalformedConstructionError):
            Args('Name')
        with pytest.raises(MalformedConstructionError):
            Args('=5')
        with pytest.raises(MalformedConstructionError):
            Args('')

    def test_grammar_string_keeps_raw_string_value(self):
        args = Args('Name= padded ,Maxm= 5 ')
        assert args.get_string('Name') == ' padded '
        assert args.get_int('Maxm') == 5

    def test_mapping(self):
        args = Args({'Maxm': 10, 'Cutoff': 1e-8})
        assert args.to_dict() == {'Maxm': 10, 'Cutoff': 1e-8}

    def test_mapping_with_non_string_key(self):
        with pytest.raises(MalformedConstructionError):
            Args({1: 'x'})

    def test_keywords_applied_last(self):
        args = Args('Maxm', 10, Maxm=20, Quiet=True)
        assert args.get_int('Maxm') == 20
        assert args.get_bool('Quiet') is True

    def test_copy_constructor_is_independent(self):
        original = Args('Maxm', 10)
        other = Args(original)
        other.add('Maxm', 20)
        assert original.get_int('Maxm') == 10


class TestMutation:

    def test_add_then_read_back(self):
        args = Args()
        args.add('Cutoff', 1e-12)
        assert args.defined('Cutoff')
        assert 'Cutoff' in args
        assert args.get_real('Cutoff') == 1e-12

    def test_add_is_idempotent(self):
        once = Args().add('Maxm', 5)
        twice = Args().add('Maxm', 5).add('Maxm', 5)
        assert once == twice
        assert len(twice) == 1

    def test_add_overwrites(self):
        args = Args('First', 0, 'Maxm', 5, 'Last', 0)
        args.add('Maxm', 6)
        assert args.get_int('Maxm') == 6
        assert len(args) == 3
        # an overwritten key keeps its position
        assert list(args) == ['First', 'Maxm', 'Last']

    def test_add_can_change_type(self):
        args = Args('Maxm', 5)
        args.add('Maxm', 'lots')
        assert args.get_string('Maxm') == 'lots'

    def test_add_unsupported_value(self):
        with pytest.raises(TypeError):
            Args().add('Sites', None)

    def test_add_non_string_key(self):
        args = Args()
        with pytest.raises(TypeError, match='must be strings'):
            args.add(1, 2)
        assert len(args) == 0

    def test_add_mistagged_value(self):
        with pytest.raises(TypeError):
            Args().add('Maxm', Value(ValueType.INTEGER, 'abc'))

    def test_keys_are_case_sensitive(self):
        args = Args('maxm', 1)
        assert not args.defined('Maxm')
        assert args.get('Maxm') is None

    def test_get_missing_is_none(self):
        assert Args().get('Anything') is None

    def test_remove(self):
        args = Args('A', 1, 'B', 2)
        args.remove('A')
        args.remove('NotThere')
        assert list(args) == ['B']

    def test_update(self):
        args = Args('A', 1, 'B', 2)
        args.update(Args('B', 3, 'C', 4))
        args.update({'D': 'x'})
        args.update('E=true')
        assert args.to_dict() == {'A': 1, 'B': 3, 'C': 4, 'D': 'x', 'E': True}

    def test_clear(self):
        args = Args('A', 1)
        args.clear()
        assert len(args) == 0


class TestValueSemantics:

    def test_copy_is_independent(self):
        original = Args('A', 1)
        for other in (original.copy(), copy.copy(original), copy.deepcopy(original)):
            other.add('A', 2).add('B', 3)
            assert original.to_dict() == {'A': 1}

    def test_equality_ignores_order(self):
        assert Args('A', 1, 'B', 2) == Args('B', 2, 'A', 1)
        assert Args('A', 1) != Args('A', 1.0)
        assert Args('A', 1) != {'A': 1}

    def test_items(self):
        assert Args('A', 'x').items() == [('A', Value(ValueType.STRING, 'x'))]

    def test_repr(self):
        assert repr(Args('Name', 'psi', 'Maxm', 5)) == "Args(Name='psi', Maxm=5)"

    def test_pickle(self):
        args = Args('Name', 'psi', 'Maxm', 5, 'Cutoff', 1e-10, 'Quiet', True)
        restored = pickle.loads(pickle.dumps(args))
        assert restored == args
        assert list(restored) == list(args)
