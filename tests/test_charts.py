"""Tests for the Plotly figure builders."""

from charts import comparison_figure, comparison_rows, frames_figure, performance_figure
from config import FRAME_COLORS
from engine import compare_policies, simulate_fifo

CLASSIC = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]


class TestFramesFigure:
    """Verify the per-step frames bar chart."""

    def test_labels_and_colors(self) -> None:
        """Each slot should show its page or 'Free' and its state colour."""
        step = simulate_fifo(CLASSIC, 3).steps[1]
        bar = frames_figure(step, 3).data[0]
        assert list(bar.text) == ["F0: P7", "F1: P0", "F2: Free"]
        assert list(bar.marker.color) == [
            FRAME_COLORS["filled"],
            FRAME_COLORS["fault"],
            FRAME_COLORS["empty"],
        ]

    def test_without_step(self) -> None:
        """No step should draw every frame as free."""
        bar = frames_figure(None, 2).data[0]
        assert list(bar.text) == ["F0: Free", "F1: Free"]


class TestPerformanceFigure:
    """Verify the cumulative faults and hits line chart."""

    def test_shows_steps_up_to_current(self) -> None:
        """Only steps up to the playback position should be plotted."""
        steps = simulate_fifo(CLASSIC, 3).steps
        faults, hits = performance_figure(steps, 4).data
        assert list(faults.x) == [1, 2, 3, 4, 5]
        assert list(faults.y) == [1, 2, 3, 4, 4]
        assert list(hits.y) == [0, 0, 0, 0, 1]


class TestComparison:
    """Verify the all-policy comparison figure and table."""

    def test_figure_groups_faults_and_hits(self) -> None:
        """One bar trace for faults and one for hits, per policy."""
        faults, hits = comparison_figure(compare_policies(CLASSIC, 3)).data
        assert list(faults.x) == ["FIFO", "LRU", "Optimal"]
        assert list(faults.y) == [10, 9, 7]
        assert list(hits.y) == [3, 4, 6]

    def test_rows(self) -> None:
        """Rows should carry counts and hit ratio percentage."""
        rows = comparison_rows(compare_policies(CLASSIC, 3))
        assert rows[2] == {"policy": "Optimal", "faults": 7, "hits": 6, "hit_ratio": 46.15}
