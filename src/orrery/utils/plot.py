"""
Plotting functions for orrery scenes.

This module provides functions for visualizing the geometry computed by the
orrery: body positions, sampled orbit paths, orbit ellipses and Lagrange
points, all in display units.

The display frame has its y-axis pointing down, so every plot inverts the
matplotlib y-axis to match what an SVG renderer would show.
"""

import matplotlib.pyplot as plt
from matplotlib.patches import Ellipse as EllipsePatch
from tqdm import tqdm

from orrery.algorithms.core.geometry import orbit_ellipse, orbit_path_array
from orrery.config import ORBIT_SAMPLES
from orrery.models.body import BodyType

BODY_COLORS = {
    BodyType.STAR: 'gold',
    BodyType.PLANET: 'tab:blue',
    BodyType.DWARF_PLANET: 'tab:brown',
    BodyType.SATELLITE: 'gray',
}

LAGRANGE_STYLES = {
    'L1': ('red', 'o'),
    'L2': ('green', '^'),
    'L3': ('blue', 's'),
    'L4': ('purple', 'D'),
    'L5': ('orange', 'X'),
}


def plot_scene(scene, body_ids=None, show_paths=True, show_ellipses=False, show_lagrange=True,
               sample_count=ORBIT_SAMPLES, figsize=(10, 8), show=True, show_progress=False):
    """
    Plot bodies, their orbits and Lagrange points.

    Parameters
    ----------
    scene : Scene
        Initialized scene to draw.
    body_ids : iterable of str, optional
        Bodies to draw. Default is every body of the catalog.
    show_paths : bool, default=True
        Draw the sampled orbit path of every orbiting body.
    show_ellipses : bool, default=False
        Draw the orbit ellipse of every orbiting body.
    show_lagrange : bool, default=True
        Draw the Lagrange points of the drawn secondaries.
    sample_count : int, default=360
        Number of regular samples per orbit path.
    figsize : tuple, default=(10, 8)
        Figure size in inches (width, height).
    show : bool, default=True
        Call plt.show() once the plot is built.
    show_progress : bool, default=False
        Display a progress bar while sampling orbits.

    Returns
    -------
    matplotlib.axes.Axes
        The axes object containing the plot.
    """
    catalog = scene.catalog
    bodies = [catalog[body_id] for body_id in body_ids] if body_ids is not None else list(catalog)

    fig, ax = plt.subplots(figsize=figsize)

    orbiting = [body for body in bodies if not body.is_primary]
    for body in tqdm(orbiting, desc="Plotting orbits", disable=not show_progress):
        color = BODY_COLORS[body.body_type]
        if show_paths:
            path = orbit_path_array(body, scene.true_anomaly(body.id), scene.positions, sample_count)
            ax.plot(path[:, 1], path[:, 2], color=color, linewidth=0.8, alpha=0.6)
        if show_ellipses:
            ellipse = orbit_ellipse(body, scene.positions)
            ax.add_patch(EllipsePatch((ellipse.cx, ellipse.cy), 2 * ellipse.rx, 2 * ellipse.ry,
                                      fill=False, edgecolor=color, linestyle='--', linewidth=0.8))

    for body in bodies:
        _plot_body(ax, scene.position(body.id), BODY_COLORS[body.body_type], body.id)

    if show_lagrange:
        for body in bodies:
            points = scene.lagrange_points(body.id)
            if points is not None:
                _plot_lagrange_points(ax, points)

    ax.set_xlabel('X [px]')
    ax.set_ylabel('Y [px]')
    ax.set_title('Orbits')
    _set_axes_equal(ax)
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc='upper right', fontsize='small')
    if show:
        plt.show()
    return ax


def plot_lagrange_points(scene, secondary_id, figsize=(10, 8), show=True):
    """
    Plot the Lagrange points of one secondary body with its primary.

    Parameters
    ----------
    scene : Scene
        Initialized scene holding the Lagrange system of ``secondary_id``.
    secondary_id : str
        Secondary body of the Lagrange system.
    figsize : tuple, default=(10, 8)
        Figure size in inches (width, height).
    show : bool, default=True
        Call plt.show() once the plot is built.

    Returns
    -------
    matplotlib.axes.Axes
        The axes object containing the plot.

    Raises
    ------
    KeyError
        If ``secondary_id`` has no Lagrange system in the scene.
    """
    system = scene.lagrange_systems[secondary_id]
    catalog = scene.catalog

    fig, ax = plt.subplots(figsize=figsize)
    for body_id in (system.primary_id, system.secondary_id):
        body = catalog[body_id]
        _plot_body(ax, scene.position(body_id), BODY_COLORS[body.body_type], body_id)
    _plot_lagrange_points(ax, system.points)

    ax.set_xlabel('X [px]')
    ax.set_ylabel('Y [px]')
    ax.set_title(f'Lagrange Points of {system.primary_id}-{system.secondary_id}')
    _set_axes_equal(ax)
    ax.legend()
    if show:
        plt.show()
    return ax


def _plot_lagrange_points(ax, points):
    """
    Helper function to mark the five Lagrange points with distinct markers.
    """
    for point in points:
        color, marker = LAGRANGE_STYLES[point.type.name]
        ax.scatter(point.x, point.y, color=color, marker=marker, s=30, label=point.type.name)


def _plot_body(ax, position, color, label=None):
    """
    Helper function to plot a body as a labelled dot.
    """
    ax.scatter(position.x, position.y, color=color, s=20, zorder=3)
    if label:
        ax.annotate(label, (position.x, position.y), textcoords='offset points', xytext=(4, 4),
                    fontsize='small', color=color)


def _set_axes_equal(ax):
    """
    Make both axes share one scale and point y down as in the display frame.
    """
    ax.set_aspect('equal', adjustable='datalim')
    if not ax.yaxis_inverted():
        ax.invert_yaxis()
