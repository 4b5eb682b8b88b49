import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))


import polysplit
from shapely.geometry import LineString, Polygon

from plot_geometry import plot_split

poly = Polygon(
    [(0, 0), (10, 0), (10, 10), (0, 10)],
    holes=[[(6, 6), (8, 6), (8, 8), (6, 8)]],
)
line = LineString([(-1, 2), (4, 5), (11, 6)])
config = polysplit.SplitConfig(width=0.3, coordinate_system=polysplit.CoordinateSystem.PLANAR)
result = polysplit.split_polygon(poly, line, config, verbose=True)
plot_split(poly, line, result, config, title="Kerf split")
