# patina

A small pure-Python toolkit for closed triangle meshes. It has no runtime
dependencies.

## What it offers

- Vector and matrix maths: `Vec2` (`patina.vec2`), `Vec3` and `vec3_sum`
  (`patina.vec3`), `Mat2` (`patina.mat2`) and closed intervals `Interval`
  (`patina.interval`). The vectors and matrices are immutable and support
  `+`, `-`, scalar `*` and `/`; `Mat2` also multiplies vectors and matrices.
- 2D and 3D primitives: `Ray2`, `Segment2`, `Ray3`, `Segment3`, `Plane`,
  `Triangle` and `AABB`, with ray/plane, ray/triangle, segment/triangle,
  ray/box and segment/segment queries.
- A separating-axis overlap test, `sat_intersects`, for any pair of
  `ConvexPoly` shapes (`Triangle` and `AABB` are both such shapes).
- Indexed meshes: `Mesh`, `MeshTriangle`, `MeshEdge`. `Mesh.check_manifold()`
  raises `ManifoldError` when the mesh is not closed; its `kind` attribute is a
  `ManifoldErrorKind` (`DUPLICATE_VERTEX`, `MISSING_VERTEX`, `BROKEN_FAN`,
  `SPLIT_FAN`, `DUPLICATE_FAN`, `BAD_VERTEX`). `Mesh.perturb(rng, factor)`
  moves every vertex by a random offset in `[0, factor)` per axis, using a
  `random.Random`.
- Mesh generators: `Sphere.as_mesh(detail)` (an icosphere built from
  `icosahedron()` and `icosphere(detail)`), `Cylinder.as_mesh(detail)`,
  `AABB.as_mesh()`, and midpoint `subdivide(mesh)`, which splits each triangle
  into four.
- A bounding-volume hierarchy, `Bvh` (`patina.bvh`), built with a
  surface-area heuristic. `Bvh.intersect_bvh` returns index pairs of crossing
  triangles of two meshes; `Bvh.intersect_ray` returns `RayMeshIntersection`
  records.
- `Bimesh` (`patina.bimesh`), which cuts two meshes along the curve where they
  cross and labels every resulting triangle as inside or outside the other
  mesh, by counting how many times a ray from its midpoint crosses the other
  mesh.
- Binary STL output: `write_stl(mesh, stream)` and `write_stl_file(mesh, path)`
  (`patina.stl`). The 80-byte header and the attribute fields are zero.
- Small helpers: `SortedPair` (`patina.sorted_pair`) and `scan_full`
  (`patina.scan`), a scan that yields the initial value and every running
  accumulation.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from patina.vec3 import Vec3
from patina.sphere import Sphere
from patina.bimesh import Bimesh
from patina.stl import write_stl_file

face = Sphere(Vec3(0.0, 0.0, 0.0), 10.0).as_mesh(0)
eye = Sphere(Vec3(9.0, 1.0, 1.0), 3.0).as_mesh(1)

face.check_manifold()   # raises ManifoldError if the mesh is not closed
eye.check_manifold()

bimesh = Bimesh(face, eye)
write_stl_file(bimesh.mesh_part(0, False), "face_outside.stl")
write_stl_file(bimesh.mesh_part(1, True), "eye_inside.stl")
```

`mesh_part(source, inside)` picks the triangles that came from the first
(`0`) or second (`1`) input mesh and lie inside or outside the other one;
`mesh_part_all(source)` returns every cut triangle of one input. Both return a
`Mesh` that shares the full vertex list of the `Bimesh`.

## Demo command

```
patina-face [OUTPUT] [--seed SEED]
```

builds a sphere of radius 10 at the origin and a sphere of radius 3 at
(9, 1, 1), perturbs both with the given seed (default 123), checks that both
are manifold, cuts them against each other and writes `mesh1_inside.stl`,
`mesh1_outside.stl`, `mesh2_inside.stl` and `mesh2_outside.stl` into OUTPUT
(default `examples/face/output`), creating the directory if needed.

## What it does not do

- It only writes STL; there is no reader for STL or any other mesh format.
- `Bimesh` produces the labelled pieces of both meshes, but does not combine
  them into a finished union, intersection or difference, nor weld or remove
  the unused vertices it keeps.
- There is no viewer or other graphical output.