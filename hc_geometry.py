# hc_geometry.py - v 1.0.0 2025.10.19
#  
#  Copyright (c) 2025 Kanbara Tomonori
#  All rights reserved.
#  
#  x https://x.com/tomo1230
#  
#  This source code is proprietary and confidential.
#  Unauthorized copying, modification, distribution, or use is strictly prohibited.
#  
#  Author: Kanbara Tomonori
# 

# Fusion keeps all lengths in centimeters internally.
METER = 100.0

CUBE_POINTS = (
    (0.0, 0.0, 0.0),
    (1.0, 0.0, 0.0),
    (1.0, 1.0, 0.0),
    (0.0, 1.0, 0.0),
)
PUSHPULL_DISTANCE = -1.0


def to_internal(value_m: float) -> float:
    return value_m * METER

def to_internal_point(point):
    return tuple(to_internal(c) for c in point)

def face_normal(points):
    """Unit normal of a planar polygon (Newell's method). Counter-clockwise from +Z gives +Z."""
    nx = ny = nz = 0.0
    for (x1, y1, z1), (x2, y2, z2) in zip(points, list(points[1:]) + [points[0]]):
        nx += (y1 - y2) * (z1 + z2)
        ny += (z1 - z2) * (x1 + x2)
        nz += (x1 - x2) * (y1 + y2)
    length = (nx * nx + ny * ny + nz * nz) ** 0.5
    if length < 1e-12:
        raise ValueError('Degenerate polygon has no normal.')
    return (nx / length, ny / length, nz / length)

def pushpull_bounds(points, distance: float):
    """Bounding box ((min_x, min_y, min_z), (max_x, max_y, max_z)) of `points` swept `distance` along their normal."""
    normal = face_normal(points)
    swept = [tuple(c + n * distance for c, n in zip(p, normal)) for p in points]
    corners = list(points) + swept
    min_pt = tuple(min(p[i] for p in corners) for i in range(3))
    max_pt = tuple(max(p[i] for p in corners) for i in range(3))
    return min_pt, max_pt
