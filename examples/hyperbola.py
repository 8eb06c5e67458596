## hyperboloid example for hopoint
print("hyperbola.py -- hopoint composition example")

from math import pi

from hopoint import *
from hopoint.sampling import sample_surface, aabb
from hopoint.serialize import dumps

## two unit circles two units apart, the top one turned a quarter
## turn, joined by straight rulings.  No equation of the surface is
## written anywhere.

def geometry():
    bottom = circle(point(0, 0, 0), 1.0, zaxis)
    top = rotate(circle(point(0, 0, 2), 1.0, zaxis), zaxis, pi / 2)
    return connect(bottom, top)


if __name__ == "__main__":
    h = geometry()
    print_tree(h)

    print("\nwaist point: {}".format(evaluate(h, (0.5, 0.0))))

    grid = sample_surface(h, counts=(5, 24))
    lo, hi = aabb(grid)
    print("sampled {} points, bounds {} to {}".format(
        grid.shape[0] * grid.shape[1], lo.to_tuple(), hi.to_tuple()))

    print("\nserialized tree:\n")
    print(dumps(h))
