"""Benchmarks for the free-function combinators.

Run with: uv run pytest benchmarks/ --benchmark-only -v
"""

from optres import Nothing, Some, filter_to_result, functions as F, optional_catch


# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        """Benchmark Some creation."""
        benchmark(Some, 42)

    def test_from_nullable(self, benchmark):
        """Benchmark from_nullable on a present value."""
        benchmark(F.from_nullable, 42)


# =============================================================================
# Combinator benchmarks
# =============================================================================


class TestOptionMap:
    """Benchmark map on both variants."""

    def test_some_map_function(self, benchmark):
        """Benchmark functions.map on Some."""
        benchmark(F.map, Some(5), lambda x: x * 2)

    def test_nothing_map_function(self, benchmark):
        """Benchmark functions.map on Nothing."""
        benchmark(F.map, Nothing, lambda x: x * 2)


class TestOptionConversions:
    """Benchmark conversions and gated conversions."""

    def test_to_result(self, benchmark):
        """Benchmark to_result on Nothing."""
        benchmark(F.to_result, Nothing, 'missing')

    def test_filter_to_result(self, benchmark):
        """Benchmark the gated filter-then-convert pipeline."""
        benchmark(filter_to_result, Some(4), lambda n: n > 2, 'too small')

    def test_optional_catch_failure(self, benchmark):
        """Benchmark optional_catch when the call raises."""
        benchmark(optional_catch, lambda: int('x'))
