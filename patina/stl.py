"""Binary STL output."""

from __future__ import annotations

import math
import struct
from os import PathLike
from typing import BinaryIO

from patina.mesh import Mesh
from patina.vec3 import Vec3

_F32_MAX = 3.4028234663852886e38
_HEADER = bytes(80)
_ATTRIBUTES = bytes(2)
_VEC3 = struct.Struct("<3f")
_COUNT = struct.Struct("<I")


def _to_f32(value: float) -> float:
    """Clamp values outside the single-precision range to a signed infinity."""
    if math.isfinite(value) and abs(value) > _F32_MAX:
        return math.copysign(math.inf, value)
    return value


def _pack_vec3(v: Vec3) -> bytes:
    return _VEC3.pack(*(_to_f32(c) for c in v))


def write_stl(mesh: Mesh, stream: BinaryIO) -> None:
    """Write the mesh as binary STL to a writable binary stream."""
    stream.write(_HEADER)
    stream.write(_COUNT.pack(len(mesh.triangles)))
    vs = mesh.vertices
    for t in mesh.triangles:
        a, b, c = (vs[i] for i in t)
        normal = (a - b).cross(a - c).normalize()
        stream.write(_pack_vec3(normal))
        stream.write(_pack_vec3(a))
        stream.write(_pack_vec3(b))
        stream.write(_pack_vec3(c))
        stream.write(_ATTRIBUTES)


def write_stl_file(mesh: Mesh, path: str | PathLike[str]) -> None:
    """Write the mesh as binary STL to the file at ``path``."""
    with open(path, "wb") as f:
        write_stl(mesh, f)