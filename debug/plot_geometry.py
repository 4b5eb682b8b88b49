"""Plot helpers for inspecting splits."""

import matplotlib.pyplot as plt
from matplotlib.patches import PathPatch
from matplotlib.path import Path
from shapely.geometry import LineString

from polysplit import thin_blade, kerf_blades
from polysplit.repair import iter_rings

_FRAGMENT_COLORS = ['tab:blue', 'tab:orange', 'tab:green', 'tab:purple', 'tab:olive', 'tab:cyan']


def plot_split(original, line: LineString, result, config=None, title: str = "Split Result"):
    """Plot the original with its cutting line and blade next to the fragments.

    Args:
        original: Polygon or MultiPolygon that was split
        line: Cutting line
        result: MultiPolygon returned by split_polygon
        config: SplitConfig used for the split; the blade outline is drawn
            when given
        title: Plot title
    """
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    _fill_areal(ax1, original, color='tab:red', alpha=0.3)
    if config is not None:
        blades = kerf_blades(line, config) if config.is_kerf else (thin_blade(line, config),)
        for blade in blades:
            for ring in iter_rings(blade):
                ax1.plot(ring[:, 0], ring[:, 1], color='dimgray', linestyle='--', linewidth=1)
    x, y = line.xy
    ax1.plot(x, y, color='black', linewidth=2, marker='o', markersize=3)
    ax1.set_title("Original, cutting line and blade")

    for i, fragment in enumerate(result.geoms):
        color = _FRAGMENT_COLORS[i % len(_FRAGMENT_COLORS)]
        _fill_areal(ax2, fragment, color=color, alpha=0.6)
        point = fragment.representative_point()
        ax2.annotate(str(i), (point.x, point.y), ha='center', va='center')
    ax2.set_title(f"{len(result.geoms)} fragment(s)")

    for ax in (ax1, ax2):
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.3)

    fig.suptitle(title)
    plt.tight_layout()
    plt.show()


def _fill_areal(ax, geom, color, alpha):
    # One compound path per geometry so holes render as holes.
    vertices, codes = [], []
    for ring in iter_rings(geom):
        vertices.extend(ring[:, :2].tolist())
        codes.extend([Path.MOVETO] + [Path.LINETO] * (len(ring) - 2) + [Path.CLOSEPOLY])
    if not vertices:
        return
    patch = PathPatch(Path(vertices, codes), facecolor=color, alpha=alpha,
                      edgecolor='black', linewidth=1)
    ax.add_patch(patch)
    ax.autoscale_view()
