# zavrengine

The core of a small 3D engine in plain Python, with no third-party
dependencies:

- **Constants and colours** (`zavrengine.consts`): engine-wide constants such as
  `EPS`, `EPA_EPS`, `PI`, the network constants, and a frozen RGBA `Color` that
  rejects channels outside 0..255.
- **Linear algebra**: immutable `Vec2D`, `Vec3D`, `Vec4D` (`zavrengine.vec2d`,
  `zavrengine.vec3d`, `zavrengine.vec4d`) and `Matrix4x4`
  (`zavrengine.matrix4x4`). The matrix class can build translation, scale and
  rotation matrices (one per axis, combined, and around any axis). It can also
  build view, projection and screen-space matrices.
- **Collision**: `Simplex` and `SimplexType` (`zavrengine.simplex`), `HitBox`
  (`zavrengine.hitbox`), and GJK collision detection with EPA penetration
  solving (`zavrengine.gjk`).
- **Timing**: a `Timer` stopwatch (`zavrengine.timer`).
- **Wire format**: `MsgType`, `Packet` and `PacketError` (`zavrengine.protocol`).
  A `Packet` is a byte buffer with big-endian writers and a read cursor.

## Installing

```
pip install .
```

To also install the test tools:

```
pip install ".[test]"
```

## Vectors and matrices

```python
from zavrengine.vec3d import Vec3D
from zavrengine.vec4d import Vec4D
from zavrengine.matrix4x4 import Matrix4x4

v = Vec4D(4, 2, 3, 1)
moved = Matrix4x4.translation(Vec3D(5, 4, 3)) * v   # Vec4D(9, 6, 6, 1)

a, b = Vec3D(1, 2, 3), Vec3D(3, 4, 5)
a.dot(b)          # 26
a.cross(b)        # perpendicular to both
b.normalized()    # unit length

m = Matrix4x4.rotation(Vec3D(0.1, 0.2, 0.3))   # Rx * Ry * Rz
m[0, 3], m.w()                                  # entry access, translation column
```

Two vectors compare equal when the squared length of their difference is below
`EPS` (`1e-6`). Because of this, vectors are not hashable. Dividing by a number
whose magnitude is at most `EPS` raises `ZeroDivisionError`. Normalising a
vector shorter than `EPS` gives the zero vector.

Multiplying a `Matrix4x4` by a `Vec3D` uses only the upper-left 3x3 block, so
the translation part is ignored.

## Hit boxes and simplices

`HitBox(triangles, use_simple_box=True)` takes an iterable of triangles. Each
triangle is a sequence of three points, and a point may be a `Vec3D`, a `Vec4D`
or an `(x, y, z)` tuple. With `use_simple_box` set, the hit box holds the eight
corners of the axis-aligned bounding box. Otherwise it holds the distinct
vertices, sorted, with points that lie within `EPS` of each other merged.

A `Simplex` holds at most four points. Points given to the constructor are
appended and only the last four are kept. `push_front` inserts at the front
and drops the last point when the simplex is full. `type()` returns the
`SimplexType` that matches the number of points.

## Collision detection

The collision functions take support functions, so they work with any pair of
convex point sets:

```python
from zavrengine.gjk import gjk_collision, epa, minkowski_support
from zavrengine.vec3d import Vec3D

cube = [Vec3D(x, y, z) for x in (0, 1) for y in (0, 1) for z in (0, 1)]
other = [p + Vec3D(0.5, 0.5, 0.5) for p in cube]

def support(direction):
    return minkowski_support(cube, other, direction)

hit, simplex = gjk_collision(support, len(cube) + len(other))
if hit:
    info = epa(simplex, support, len(cube) + len(other))
    print(info.normal, info.depth)
```

`epa` needs a four-point simplex and raises `ValueError` otherwise. It returns
a `CollisionInfo`. If the polytope has not converged within `max_iterations`,
its `depth` is `0`. Otherwise the depth is the penetration depth plus
`EPA_EPS`. The individual steps are also public: `next_simplex`, `line_case`,
`triangle_case`, `tetrahedron_case`, `face_normals`, `add_if_unique_edge` and
`find_furthest_point`.

## Timer

```python
from zavrengine.timer import Timer

t = Timer()
t.start()
...
t.stop()
t.elapsed_seconds(), t.elapsed_milliseconds()
```

While the timer is running, the elapsed time is measured up to now. After
`stop()` it stays fixed.

## Packets

```python
from zavrengine.protocol import MsgType, Packet, PacketError

packet = Packet().write_msg_type(MsgType.CONNECT).write_uint32(3)
packet.data()            # b'\x00\x03\x00\x00\x00\x03'

incoming = Packet(packet.data())
incoming.read_msg_type() # MsgType.CONNECT
incoming.read_uint32()   # 3
incoming.end_of_packet() # True
```

Writers check that the value fits and raise `ValueError` if it does not. A
read past the end raises `PacketError`, and so does a message type number that
is not known. Booleans are one byte.

## What this package does not do

It draws nothing and opens no window. It has no frame clock, no log writer,
and no sockets: `Packet` and `MsgType` describe messages, but sending them,
reliable delivery, and any client or server are not part of this package.

## Running the tests

```
pytest
```