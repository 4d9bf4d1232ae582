"""
Wavefront OBJ reader producing groups of triangles
"""
import logging
from pathlib import Path
from typing import Dict, List

from raytracer.core.tuples import Tuple, point
from raytracer.shapes import Group, Triangle

logger = logging.getLogger(__name__)


class ObjParser:
    """Reads vertices (``v``), faces (``f``) and named groups (``g``).

    Faces with more than three vertices are split into a fan of triangles.
    Every other statement is counted in ``ignored`` and skipped.
    Triangles land in sub-groups of about a tenth of the faces each so that
    bounding boxes can cull them; ``triangles()`` lists them flat.
    """

    def __init__(self):
        self.vertices: List[Tuple] = []
        self.default_group = Group()
        self.groups: Dict[str, Group] = {}
        self.ignored = 0

    @classmethod
    def from_file(cls, path) -> "ObjParser":
        parser = cls()
        parser.load(path)
        return parser

    def load(self, path) -> "ObjParser":
        return self.parse(Path(path).read_text())

    def vertex(self, index: int) -> Tuple:
        """Vertex by its 1-based OBJ index"""
        if not 1 <= index <= len(self.vertices):
            raise IndexError(f"Vertex {index} out of range 1..{len(self.vertices)}")
        return self.vertices[index - 1]

    def group(self, name: str) -> Group:
        if not name:
            return self.default_group
        return self.groups[name]

    def parse(self, text: str) -> "ObjParser":
        self.vertices = []
        self.default_group = Group()
        self.groups = {}
        self.ignored = 0

        lines = text.splitlines()
        face_lines = sum(1 for line in lines if line.split()[:1] == ['f'])
        chunk_size = max(1, face_lines // 10)

        current = self.default_group
        chunk = None
        in_chunk = 0
        faces = 0

        for line_number, line in enumerate(lines, 1):
            fields = line.split()
            if not fields:
                continue
            command, args = fields[0], fields[1:]

            try:
                if command == 'v' and len(args) >= 3:
                    self.vertices.append(point(*(float(value) for value in args[:3])))
                elif command == 'f' and len(args) >= 3:
                    indices = [int(arg.split('/')[0]) for arg in args]
                    for triangle in self._fan_triangulation(indices):
                        # faces are batched into sub-groups so bounding boxes can prune them
                        if chunk is None or in_chunk >= chunk_size:
                            chunk = current.add_child(Group())
                            in_chunk = 0
                        chunk.add_child(triangle)
                        in_chunk += 1
                        faces += 1
                elif command == 'g' and args:
                    name = " ".join(args)
                    current = self.groups.setdefault(name, Group())
                    chunk = None
                else:
                    self.ignored += 1
            except ValueError:
                logger.debug(f"Ignoring malformed line {line_number}: {line!r}")
                self.ignored += 1

        logger.info(f"OBJ model has {len(self.vertices)} vertices, {faces} triangles, "
                    f"{len(self.groups)} named groups ({self.ignored} lines ignored)")
        return self

    def triangles(self, name: str = "") -> List[Triangle]:
        """Every triangle of a group in file order, flattening its sub-groups"""
        found = []
        pending = [self.group(name)]
        while pending:
            shape = pending.pop()
            if isinstance(shape, Group):
                pending.extend(reversed(shape.children))
            else:
                found.append(shape)
        return found

    def _fan_triangulation(self, indices: List[int]) -> List[Triangle]:
        first = self.vertex(indices[0])
        return [Triangle(first, self.vertex(indices[i]), self.vertex(indices[i + 1]))
                for i in range(1, len(indices) - 1)]

    def to_group(self) -> Group:
        """Default group with every named group folded in"""
        model = self.default_group
        for group in self.groups.values():
            if len(group):
                model.add_child(group)
        return model
