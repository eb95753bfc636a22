"""Tests for block planning."""

from blocktable.models import block_width
from blocktable.planner import plan


def _names(blocks) -> list[list[str]]:
    return [[column.name for column in block] for block in blocks]


class TestPlan:
    """Tests for plan()."""

    def test_no_columns(self) -> None:
        """Nothing to plan yields no blocks."""
        assert plan([], [], 80) == []

    def test_everything_fits(self, make_column) -> None:
        """One block, and repeat columns are not injected."""
        a, b, c = make_column("a", 10), make_column("b", 10), make_column("c", 10)
        blocks = plan([a, b, c], [c], 80)
        assert _names(blocks) == [["a", "b", "c"]]

    def test_exact_fit(self, make_column) -> None:
        """A block exactly as wide as the limit is accepted."""
        a, b = make_column("a", 10), make_column("b", 10)
        assert _names(plan([a, b], [a], 23)) == [["a", "b"]]
        assert _names(plan([a, b], [a], 22)) == [["a"], ["b"]]

    def test_repeat_column_leads_later_blocks(self, make_column) -> None:
        """The repeat column starts every block after the first."""
        cols = [make_column(name, 10) for name in ("key", "b", "c", "d", "e")]
        blocks = plan(cols, [cols[0]], 34)
        assert _names(blocks) == [["key", "b", "c"], ["key", "d", "e"]]

    def test_repeat_columns_keep_given_order(self, make_column) -> None:
        """Several repeat columns are prepended in the order given."""
        cols = [make_column(name, 5) for name in ("a", "b", "c", "d")]
        blocks = plan(cols, [cols[1], cols[0]], 19)
        assert _names(blocks) == [["a", "b", "c"], ["b", "a", "d"]]

    def test_duplicate_repeat_columns_collapse(self, make_column) -> None:
        """A repeat column listed twice appears once per block."""
        cols = [make_column(name, 10) for name in ("a", "b", "c")]
        blocks = plan(cols, [cols[0], cols[0]], 23)
        assert _names(blocks) == [["a", "b"], ["a", "c"]]

    def test_stops_at_first_misfit(self, make_column) -> None:
        """Columns after a misfit are not pulled forward."""
        a, wide, c = make_column("a", 5), make_column("wide", 30), make_column("c", 5)
        blocks = plan([a, wide, c], [a], 20)
        assert _names(blocks) == [["a"], ["wide"], ["a", "c"]]

    def test_overwide_first_column(self, make_column) -> None:
        """A column wider than the limit still gets a block of its own."""
        wide, b = make_column("wide", 50), make_column("b", 5)
        blocks = plan([wide, b], [wide], 20)
        assert _names(blocks) == [["wide"], ["b"]]

    def test_overwide_repeat_set(self, make_column) -> None:
        """Repeat columns that fill the width do not stall planning."""
        a, b, c = make_column("a", 10), make_column("b", 30), make_column("c", 5)
        blocks = plan([a, b, c], [b], 20)
        assert _names(blocks) == [["a"], ["b"], ["c"]]

    def test_repeat_column_not_yet_shown(self, make_column) -> None:
        """A repeat column still remaining is consumed, not duplicated."""
        a, b, c = make_column("a", 10), make_column("b", 10), make_column("c", 10)
        blocks = plan([a, b, c], [c], 25)
        assert _names(blocks) == [["a", "b"], ["c"]]

    def test_every_column_placed_and_blocks_fit(self, make_column) -> None:
        """Each column lands in a block; multi-column blocks respect the limit."""
        cols = [make_column(f"c{i}", 4 + (i * 7) % 13) for i in range(20)]
        blocks = plan(cols, [cols[0]], 30)

        placed = {column.name for block in blocks for column in block}
        assert placed == {column.name for column in cols}
        for block in blocks:
            assert block
            assert len({column.name for column in block}) == len(block)
            if len(block) > 1:
                assert block_width(block) <= 30

    def test_deterministic(self, make_column) -> None:
        """Identical inputs give identical partitions."""
        cols = [make_column(f"c{i}", 3 + i % 5) for i in range(15)]
        first = _names(plan(cols, [cols[2]], 25))
        second = _names(plan(cols, [cols[2]], 25))
        assert first == second
