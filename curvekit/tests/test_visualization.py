from curvekit.core.edges import CurvilinearEdges
from curvekit.core.point import Point
from curvekit.core.polyline import Polyline
from curvekit.core.visualization import plot_edges, plot_polyline

POLYLINE = Polyline([Point(0, 0), Point(10, 0), Point(10, -10), Point(20, -10)])


def test_plot_edges_writes_png(tmp_path):
    out = tmp_path / "rounded.png"
    plot_edges(POLYLINE.rounded_corners(3, 2), outname=str(out), polyline=POLYLINE)
    assert out.exists()
    assert out.stat().st_size > 0


def test_plot_edges_without_handles(tmp_path):
    out = tmp_path / "fillets.png"
    plot_edges(POLYLINE.bezier_corners(2, 1), outname=str(out), show_control_points=False, title="fillets")
    assert out.exists()


def test_plot_empty_edges(tmp_path):
    out = tmp_path / "empty.png"
    plot_edges(CurvilinearEdges(), outname=str(out))
    assert out.exists()


def test_plot_polyline(tmp_path):
    out = tmp_path / "polyline.png"
    plot_polyline(POLYLINE, outname=str(out), closed=True)
    assert out.exists()
