import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from orrery.algorithms.initializer import initialize_scene
from orrery.utils.plot import plot_lagrange_points, plot_scene
from orrery.utils.solar_system import solar_system_catalog


# --- Pytest Fixtures ---
@pytest.fixture(scope="module")
def scene():
    return initialize_scene(solar_system_catalog())


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


# --- Test Functions ---
def test_plot_scene_draws_paths_and_lagrange_points(scene):
    ax = plot_scene(scene, body_ids=["sun", "earth", "moon"], show=False)
    # one path per orbiting body
    assert len(ax.lines) == 2
    labels = {text.get_text() for text in ax.texts}
    assert {"sun", "earth", "moon"} <= labels
    legend_labels = [text.get_text() for text in ax.get_legend().get_texts()]
    assert legend_labels == ["L1", "L2", "L3", "L4", "L5"]
    assert ax.yaxis_inverted()


def test_plot_scene_ellipses_only(scene):
    ax = plot_scene(scene, show_paths=False, show_ellipses=True, show_lagrange=False, show=False)
    assert len(ax.lines) == 0
    assert len(ax.patches) == len(scene.catalog) - 1


def test_plot_lagrange_points(scene):
    ax = plot_lagrange_points(scene, "earth", show=False)
    assert ax.get_title() == "Lagrange Points of sun-earth"
    # two bodies and five Lagrange points
    assert len(ax.collections) == 7


def test_plot_lagrange_points_unknown_system(scene):
    with pytest.raises(KeyError):
        plot_lagrange_points(scene, "mars", show=False)
