import math

import matplotlib
import matplotlib.pyplot as mplt
import numpy as np
import pytest

from segplot.transforms.segments import Segment, to_polyline
from segplot.viz.pyplot import Axes, Figure, PyPlot, plot_session


@pytest.fixture
def plt():
    return PyPlot()


def test_figure_and_gca(plt):
    fig = plt.figure()
    assert isinstance(fig, Figure)
    ax = fig.gca()
    assert isinstance(ax, Axes)
    assert ax.figure is fig
    assert ax.axes in fig.fig.axes


def test_gcf_returns_current_figure(plt):
    fig = plt.figure()
    assert plt.gcf().fig is fig.fig


def test_scatter_draws_point_markers(plt):
    ax = plt.figure().gca()
    assert ax.scatter([1, 2, 3], [4.0, 5.0, 6.0], 0.5) is ax
    (line,) = ax.axes.get_lines()
    assert line.get_marker() == "."
    assert line.get_alpha() == 0.5
    assert line.get_markersize() == 1.0
    assert list(line.get_xdata()) == [1, 2, 3]


def test_line_accepts_lazy_polyline(plt):
    ax = plt.figure().gca()
    xs, ys = to_polyline([Segment(0, 2, 4.0), Segment(2, 4, 1.0)], [10, 20, 30, 40])
    ax.line(xs, ys)
    (line,) = ax.axes.get_lines()
    assert list(line.get_xdata()) == [10.0, 20.0, 20.0, 30.0, 40.0, 40.0]
    y = list(line.get_ydata())
    assert y[:2] == [4.0, 4.0]
    assert math.isnan(y[2])


def test_line_accepts_generators(plt):
    ax = plt.figure().gca()
    ax.line((i for i in range(3)), (float(i) for i in range(3)))
    assert len(ax.axes.get_lines()[0].get_xdata()) == 3


def test_hist(plt):
    ax = plt.figure().gca()
    ax.hist([1, 2, 2, 3, 3, 3], bins=3)
    assert len(ax.axes.patches) == 3


def test_bar_vertical_uses_widths(plt):
    ax = plt.figure().gca()
    ax.bar([1, 3, 6, 10], [4, 3, 2, 1], widths=[1, 2, 3, 4])
    patches = ax.axes.patches
    assert [p.get_width() for p in patches] == [1, 2, 3, 4]
    assert [p.get_height() for p in patches] == [4, 3, 2, 1]


def test_bar_horizontal_uses_height_keyword(plt):
    ax = plt.figure().gca()
    ax.bar([1, 3], [5, 7], widths=[0.5, 0.25], horizontal=True)
    patches = ax.axes.patches
    assert [p.get_height() for p in patches] == [0.5, 0.25]
    assert [p.get_width() for p in patches] == [5, 7]


def test_bar_without_widths(plt):
    ax = plt.figure().gca()
    ax.bar([1, 2], [3, 4])
    assert len(ax.axes.patches) == 2


def test_heatmap(plt):
    ax = plt.figure().gca()
    z = np.arange(16, dtype=float).reshape(4, 4)
    ax.heatmap(z)
    (img,) = ax.axes.get_images()
    np.testing.assert_array_equal(np.asarray(img.get_array()), z)


def test_library_errors_propagate(plt):
    ax = plt.figure().gca()
    with pytest.raises(ValueError):
        ax.line([1, 2, 3], [1, 2])


def test_add_axes_with_sharing(plt):
    fig = plt.figure()
    a = fig.add_axes(0.1, 0.1, 0.8, 0.4)
    b = fig.add_axes(0.1, 0.55, 0.8, 0.4, share_x=a)
    assert b.axes.get_shared_x_axes().joined(a.axes, b.axes)
    assert not b.axes.get_shared_y_axes().joined(a.axes, b.axes)
    assert len(fig.fig.axes) == 2


def test_add_subplot(plt):
    fig = plt.figure()
    ax = fig.add_subplot(2, 1, 1)
    assert ax.axes in fig.fig.axes


def test_labels_are_forwarded(plt):
    ax = plt.figure().gca()
    ax.set_xlabel("position").set_ylabel("copy number").set_title("chr1")
    assert ax.axes.get_xlabel() == "position"
    assert ax.axes.get_ylabel() == "copy number"
    assert ax.axes.get_title() == "chr1"


def test_legend(plt):
    ax = plt.figure().gca()
    ax.line([0, 1], [0, 1], label="seg")
    ax.legend(loc="best")
    assert ax.axes.get_legend() is not None


def test_save_writes_each_format(plt, tmp_path):
    ax = plt.figure().gca()
    ax.line([0, 1], [0, 1])
    written = ax.save(tmp_path / "out" / "fig", formats=["png", ".svg"], dpi=50)
    assert [p.name for p in written] == ["fig.png", "fig.svg"]
    assert all(p.exists() for p in written)


def test_plot_session_closes_figures():
    with plot_session(backend="Agg") as plt:
        plt.figure()
        plt.figure()
        assert len(mplt.get_fignums()) >= 2
    assert mplt.get_fignums() == []
    assert matplotlib.get_backend().lower() == "agg"


def test_plot_session_closes_on_error():
    with pytest.raises(RuntimeError):
        with plot_session() as plt:
            plt.figure()
            raise RuntimeError("boom")
    assert mplt.get_fignums() == []


def test_save_replaces_dotted_suffix(plt, tmp_path):
    fig = plt.figure()
    (written,) = fig.savefig(tmp_path / "sample.chr1", formats=["png"], dpi=30)
    assert written == tmp_path / "sample.png"
    assert written.exists()
