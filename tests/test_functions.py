"""Tests for the free-function combinators in optres.functions."""

import asyncio
import gc
import warnings

import msgspec
import pytest
from hypothesis import given

from optres import (
    Err,
    ExpectError,
    Nothing,
    Ok,
    Some,
    UnwrapError,
    filter,
    filter_to_awaitable,
    flat_map,
    for_each,
    from_nullable,
    from_predicate,
    from_result,
    from_unset,
    get_or_else,
    get_or_else_lazy,
    is_err,
    is_none,
    is_ok,
    is_some,
    is_some_and,
    map,
    map_err,
    match,
    match_result,
    or_else,
    or_else_lazy,
    to_awaitable,
    to_list,
    to_nullable,
    to_result,
    to_unset,
    unwrap,
    unwrap_expect,
    unwrap_or,
)
from tests.strategies import int_functions, int_predicates, integers, non_null_options, options, texts


class TestTagPredicates:
    """Tests for is_some, is_none, is_ok, is_err."""

    def test_option_tags(self):
        """is_some and is_none read the Option tag."""
        assert is_some(Some(1)) is True
        assert is_none(Some(1)) is False
        assert is_some(Nothing) is False
        assert is_none(Nothing) is True

    def test_some_none_is_some(self):
        """Some(None) is still Some."""
        assert is_some(Some(None)) is True

    def test_result_tags(self):
        """is_ok and is_err read the Result tag."""
        assert is_ok(Ok(1)) is True
        assert is_err(Ok(1)) is False
        assert is_ok(Err('e')) is False
        assert is_err(Err('e')) is True

    def test_is_some_and(self):
        """is_some_and combines the tag check with a predicate."""
        assert is_some_and(Some(4), lambda n: n > 2) is True
        assert is_some_and(Some(1), lambda n: n > 2) is False
        assert is_some_and(Nothing, lambda _: pytest.fail('called')) is False


class TestMap:
    """Tests for map and flat_map."""

    def test_map_some(self):
        """map applies f to a Some value."""
        assert map(Some(3), lambda n: n + 1) == Some(4)

    def test_map_nothing_skips_function(self):
        """map leaves Nothing alone and never calls f."""
        assert map(Nothing, lambda _: pytest.fail('called')) is Nothing

    def test_map_propagates_exception(self):
        """Exceptions from f reach the caller."""
        with pytest.raises(KeyError):
            map(Some({}), lambda d: d['missing'])

    def test_flat_map(self):
        """flat_map flattens one level."""
        assert flat_map(Some(2), lambda n: Some(n * 10)) == Some(20)
        assert flat_map(Some(2), lambda n: Nothing) is Nothing
        assert flat_map(Nothing, lambda n: Some(n)) is Nothing

    def test_map_err(self):
        """map_err transforms only the error side."""
        assert map_err(Err('e'), str.upper) == Err('E')
        assert map_err(Ok(1), lambda _: pytest.fail('called')) == Ok(1)

    @given(integers, int_functions)
    def test_map_law(self, value, f):
        """map(Some(x), f) == Some(f(x))."""
        assert map(Some(value), f) == Some(f(value))

    @given(integers)
    def test_flat_map_law(self, value):
        """flat_map(Some(x), f) == f(x)."""

        def f(x):
            return Some(x) if x % 3 else Nothing

        assert flat_map(Some(value), f) == f(value)


class TestDefaults:
    """Tests for get_or_else, or_else and their lazy forms."""

    def test_get_or_else(self):
        """get_or_else returns the value or the default."""
        assert get_or_else(Some(1), 99) == 1
        assert get_or_else(Nothing, 99) == 99

    def test_get_or_else_keeps_falsy_values(self):
        """A falsy value inside Some is still returned."""
        assert get_or_else(Some(0), 99) == 0

    def test_get_or_else_lazy(self):
        """The factory only runs for Nothing."""
        assert get_or_else_lazy(Some(1), lambda: pytest.fail('called')) == 1
        assert get_or_else_lazy(Nothing, lambda: 7) == 7

    def test_or_else(self):
        """or_else returns the option or the fallback option."""
        assert or_else(Some(1), Some(2)) == Some(1)
        assert or_else(Nothing, Some(2)) == Some(2)
        assert or_else(Nothing, Nothing) is Nothing

    def test_or_else_lazy(self):
        """The fallback factory only runs for Nothing."""
        assert or_else_lazy(Some(1), lambda: pytest.fail('called')) == Some(1)
        assert or_else_lazy(Nothing, lambda: Some(3)) == Some(3)

    @given(options, integers)
    def test_get_or_else_law(self, option, default):
        """get_or_else(Some(x), d) == x and get_or_else(Nothing, d) == d."""
        expected = option.value if is_some(option) else default
        assert get_or_else(option, default) == expected


class TestFilter:
    """Tests for filter."""

    def test_filter_keeps(self):
        """filter(Some(4), n > 2) is Some(4)."""
        assert filter(Some(4), lambda n: n > 2) == Some(4)

    def test_filter_drops(self):
        """filter(Some(1), n > 2) is Nothing."""
        assert filter(Some(1), lambda n: n > 2) is Nothing

    def test_filter_nothing_skips_predicate(self):
        """filter(Nothing, p) is Nothing and p is not called."""
        assert filter(Nothing, lambda _: pytest.fail('called')) is Nothing

    def test_filter_calls_predicate_once(self):
        """The predicate runs exactly once for Some."""
        calls = []

        def predicate(n):
            calls.append(n)
            return True

        filter(Some(5), predicate)
        assert calls == [5]

    @given(integers, int_predicates)
    def test_filter_law(self, value, predicate):
        """filter(Some(x), p) == Some(x) iff p(x)."""
        expected = Some(value) if predicate(value) else Nothing
        assert filter(Some(value), predicate) == expected


class TestDestructuring:
    """Tests for for_each, match and match_result."""

    def test_for_each_some(self):
        """for_each calls f once with the value and returns None."""
        seen = []
        assert for_each(Some('x'), seen.append) is None
        assert seen == ['x']

    def test_for_each_nothing(self):
        """for_each does nothing for Nothing."""
        seen = []
        for_each(Nothing, seen.append)
        assert seen == []

    def test_match(self):
        """Exactly one branch of match runs."""
        assert match(Some(2), lambda n: n * 10, lambda: 0) == 20
        assert match(Nothing, lambda n: pytest.fail('called'), lambda: 0) == 0

    @given(options)
    def test_match_law(self, option):
        """match(Some(x), f, g) == f(x); match(Nothing, f, g) == g()."""
        result = match(option, lambda v: ('some', v), lambda: ('none',))
        if is_some(option):
            assert result == ('some', option.value)
        else:
            assert result == ('none',)

    def test_match_result(self):
        """match_result dispatches on Ok and Err."""
        assert match_result(Ok(2), lambda v: v + 1, len) == 3
        assert match_result(Err('abc'), lambda v: v + 1, len) == 3

    def test_match_rejects_other_types(self):
        """match raises TypeError for non-Option values instead of taking the Nothing branch."""
        with pytest.raises(TypeError, match='Expected Some or Nothing'):
            match(Ok(1), lambda v: v, lambda: pytest.fail('on_none called'))

    def test_match_result_rejects_other_types(self):
        """match_result raises TypeError for non-Result values."""
        with pytest.raises(TypeError, match='Expected Ok or Err'):
            match_result(Some(1), lambda v: v, lambda e: e)


class TestConversionsOut:
    """Tests for to_list, to_nullable, to_unset, to_result, to_awaitable."""

    def test_to_list(self):
        """to_list gives zero or one elements."""
        assert to_list(Some(1)) == [1]
        assert to_list(Nothing) == []

    def test_to_nullable(self):
        """to_nullable gives the value or None."""
        assert to_nullable(Some(1)) == 1
        assert to_nullable(Nothing) is None

    def test_to_unset(self):
        """to_unset gives the value or msgspec.UNSET."""
        assert to_unset(Some(1)) == 1
        assert to_unset(Nothing) is msgspec.UNSET

    def test_to_unset_omits_struct_field(self):
        """UNSET from Nothing drops the field when encoding a Struct."""

        class Patch(msgspec.Struct):
            name: str | msgspec.UnsetType = msgspec.UNSET

        assert msgspec.json.encode(Patch(name=to_unset(Nothing))) == b'{}'
        assert msgspec.json.encode(Patch(name=to_unset(Some('x')))) == b'{"name":"x"}'

    def test_to_result(self):
        """to_result(Some(x), e) is Ok(x); to_result(Nothing, e) is Err(e)."""
        assert to_result(Some(1), 'missing') == Ok(1)
        assert to_result(Nothing, 'missing') == Err('missing')

    @pytest.mark.asyncio
    async def test_to_awaitable_some(self):
        """Awaiting to_awaitable(Some(x)) gives x."""
        assert await to_awaitable(Some(42)) == 42

    @pytest.mark.asyncio
    async def test_to_awaitable_nothing_raises(self):
        """Awaiting to_awaitable(Nothing) raises UnwrapError."""
        with pytest.raises(UnwrapError, match='Awaited Nothing'):
            await to_awaitable(Nothing)

    @pytest.mark.asyncio
    async def test_to_awaitable_as_task(self):
        """The awaitable can be scheduled as a task."""
        task = asyncio.ensure_future(to_awaitable(Some('v')))
        assert await task == 'v'

    @pytest.mark.asyncio
    async def test_to_awaitable_reawaitable(self):
        """The same awaitable can be awaited more than once."""
        settled = to_awaitable(Some(3))
        assert await settled == 3
        assert await settled == 3

    def test_dropped_awaitable_does_not_warn(self):
        """An awaitable that is never awaited emits no RuntimeWarning."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            to_awaitable(Nothing)
            filter_to_awaitable(Some(1), lambda n: n > 5)
            gc.collect()
        assert [w for w in caught if issubclass(w.category, RuntimeWarning)] == []


class TestConstructors:
    """Tests for from_nullable, from_unset, from_result, from_predicate."""

    def test_from_nullable(self):
        """Only None becomes Nothing."""
        assert from_nullable(None) is Nothing
        assert from_nullable(0) == Some(0)
        assert from_nullable('') == Some('')
        assert from_nullable(False) == Some(False)

    def test_from_unset(self):
        """Only msgspec.UNSET becomes Nothing; None is a value."""
        assert from_unset(msgspec.UNSET) is Nothing
        assert from_unset(None) == Some(None)
        assert from_unset(3) == Some(3)

    def test_from_result(self):
        """Ok becomes Some, Err becomes Nothing."""
        assert from_result(Ok(1)) == Some(1)
        assert from_result(Err('e')) is Nothing

    def test_from_predicate(self):
        """from_predicate gates the value on the predicate."""
        assert from_predicate(4, lambda n: n > 2) == Some(4)
        assert from_predicate(1, lambda n: n > 2) is Nothing

    @given(non_null_options)
    def test_nullable_round_trip(self, option):
        """from_nullable(to_nullable(opt)) == opt for non-None payloads."""
        assert from_nullable(to_nullable(option)) == option

    @given(options, texts)
    def test_to_result_law(self, option, error):
        """to_result is Ok(x) for Some(x) and Err(e) for Nothing."""
        expected = Ok(option.value) if is_some(option) else Err(error)
        assert to_result(option, error) == expected


class TestUnwrapFunctions:
    """Tests for unwrap, unwrap_or, unwrap_expect."""

    def test_unwrap(self):
        """unwrap returns the value of Some and Ok."""
        assert unwrap(Some(1)) == 1
        assert unwrap(Ok(2)) == 2

    def test_unwrap_empty_raises(self):
        """unwrap raises UnwrapError for Nothing and Err."""
        with pytest.raises(UnwrapError):
            unwrap(Nothing)
        with pytest.raises(UnwrapError):
            unwrap(Err('e'))

    def test_unwrap_or(self):
        """unwrap_or falls back to the default."""
        assert unwrap_or(Some(1), 0) == 1
        assert unwrap_or(Nothing, 0) == 0
        assert unwrap_or(Err('e'), 0) == 0

    def test_unwrap_expect(self):
        """unwrap_expect raises ExpectError with the caller's message."""
        assert unwrap_expect(Some(1), 'needed') == 1
        with pytest.raises(ExpectError, match='config value required'):
            unwrap_expect(Nothing, 'config value required')
