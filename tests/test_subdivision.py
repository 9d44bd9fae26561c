from patina.mesh import Mesh
from patina.mesh_triangle import MeshTriangle
from patina.subdivision import subdivide
from patina.vec3 import Vec3


def tetrahedron():
    return Mesh(
        [Vec3.zero(), Vec3.axis_x(), Vec3.axis_y(), Vec3.axis_z()],
        [
            MeshTriangle(0, 2, 1),
            MeshTriangle(0, 3, 2),
            MeshTriangle(0, 1, 3),
            MeshTriangle(1, 2, 3),
        ],
    )


def single_triangle():
    return Mesh(
        [Vec3(0.0, 0.0, 0.0), Vec3(2.0, 0.0, 0.0), Vec3(0.0, 2.0, 0.0)],
        [MeshTriangle(0, 1, 2)],
    )


def test_single_triangle_counts():
    result = subdivide(single_triangle())
    assert len(result.vertices) == 6
    assert len(result.triangles) == 4


def test_original_vertices_kept_first():
    mesh = single_triangle()
    result = subdivide(mesh)
    assert result.vertices[:3] == mesh.vertices


def test_new_vertices_are_edge_midpoints():
    mesh = single_triangle()
    result = subdivide(mesh)
    edges = [(0, 1), (1, 2), (2, 0)]
    for index, (a, b) in zip(range(3, 6), edges):
        assert result.vertices[index] == (mesh.vertices[a] + mesh.vertices[b]) / 2.0


def test_triangle_layout():
    result = subdivide(single_triangle())
    assert [t.vertices for t in result.triangles] == [
        (0, 3, 5),
        (1, 4, 3),
        (2, 5, 4),
        (3, 4, 5),
    ]


def test_shared_edges_reuse_midpoints():
    mesh = tetrahedron()
    result = subdivide(mesh)
    # Four corners plus one midpoint for each of the six edges.
    assert len(result.vertices) == 4 + 6
    assert len(result.triangles) == 4 * len(mesh.triangles)


def test_manifold_is_preserved():
    result = subdivide(subdivide(tetrahedron()))
    assert len(result.vertices) == 34
    assert len(result.triangles) == 64
    assert result.check_manifold() is None


def test_input_is_not_modified():
    mesh = tetrahedron()
    subdivide(mesh)
    assert len(mesh.vertices) == 4
    assert len(mesh.triangles) == 4