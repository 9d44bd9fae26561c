"""Cut a sphere with a smaller one and write the four resulting pieces as STL."""

from __future__ import annotations

import argparse
import contextlib
import random
from pathlib import Path
from typing import Sequence

from patina.bimesh import Bimesh
from patina.sphere import Sphere
from patina.stl import write_stl_file
from patina.vec3 import Vec3

DEFAULT_OUTPUT = Path("examples") / "face" / "output"
DEFAULT_SEED = 123
PERTURBATION = 0.1

PARTS = (
    ("mesh1_inside.stl", 0, True),
    ("mesh1_outside.stl", 0, False),
    ("mesh2_inside.stl", 1, True),
    ("mesh2_outside.stl", 1, False),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Build the face and eye meshes, split them, and write the pieces."""
    parser = argparse.ArgumentParser(
        description="Split a face sphere by an eye sphere and write STL pieces."
    )
    parser.add_argument(
        "output",
        nargs="?",
        type=Path,
        default=DEFAULT_OUTPUT,
        help="directory to write the STL files into",
    )
    parser.add_argument(
        "--seed", type=int, default=DEFAULT_SEED, help="seed for vertex jitter"
    )
    args = parser.parse_args(argv)

    face = Sphere(Vec3.zero(), 10.0).as_mesh(0)
    eye = Sphere(Vec3(9.0, 1.0, 1.0), 3.0).as_mesh(1)
    rng = random.Random(args.seed)
    face.perturb(rng, PERTURBATION)
    eye.perturb(rng, PERTURBATION)
    face.check_manifold()
    eye.check_manifold()

    bimesh = Bimesh(face, eye)
    output: Path = args.output
    with contextlib.suppress(OSError):
        output.mkdir(parents=True, exist_ok=True)
    for name, source, inside in PARTS:
        write_stl_file(bimesh.mesh_part(source, inside), output / name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())