# pickroute/warehouse/grid.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple, Any

import numpy as np

Coord = Tuple[int, int]  # (x, y) en la grilla

WALKABLE = 0
OBSTACLE = 1


@dataclass
class WarehouseGrid:
    """
    Grilla de caminabilidad del almacén construida a partir de un 'spec' estilo dict:

    spec = {
        "width": int,                                    # >= 3
        "height": int,                                   # >= 3
        "cell_size_m": float,                            # opcional, default 1.0
        "obstacles": List[List[int] | Tuple[int,int]],   # opcional, bloqueos extra
    }

    Las filas impares interiores (y = 1, 3, ... < height-1) son bloques de estantes
    en las columnas 1..width-2; el perímetro y las filas pares son pasillos.
    `cells[y, x]` vale 0 (caminable) o 1 (obstáculo) y no se modifica tras construirse.
    """
    spec: Dict[str, Any]
    cells: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        w, h = self.width, self.height
        if w < 3 or h < 3:
            raise ValueError(f"La grilla debe ser de al menos 3x3 (recibido {w}x{h}).")
        cells = np.zeros((h, w), dtype=np.int8)
        for y in range(1, h - 1, 2):
            cells[y, 1:w - 1] = OBSTACLE
        for x, y in self._extra_obstacles():
            if 0 <= x < w and 0 <= y < h:
                cells[y, x] = OBSTACLE
        cells.setflags(write=False)
        self.cells = cells

    # --------- constructores ---------
    @staticmethod
    def default_spec() -> Dict[str, Any]:
        # 7x7 cuando el almacén no tiene layout guardado
        return {
            "width": 7,
            "height": 7,
            "cell_size_m": 1.0,
            "obstacles": [],
        }

    @classmethod
    def from_dimensions(cls, width: int, height: int, cell_size_m: float = 1.0) -> "WarehouseGrid":
        spec = cls.default_spec()
        spec.update(width=width, height=height, cell_size_m=cell_size_m)
        return cls(spec)

    # --------- helpers básicos ---------
    @property
    def width(self) -> int:
        return int(self.spec.get("width", 0))

    @property
    def height(self) -> int:
        return int(self.spec.get("height", 0))

    @property
    def cell_size_m(self) -> float:
        return float(self.spec.get("cell_size_m", 1.0))

    @property
    def default_start(self) -> Coord:
        """Punto medio vertical del pasillo de la columna izquierda."""
        return (0, self.height // 2)

    @property
    def default_end(self) -> Coord:
        """Punto medio vertical del pasillo de la columna derecha."""
        return (self.width - 1, self.height // 2)

    def _extra_obstacles(self) -> Set[Coord]:
        raw = self.spec.get("obstacles", []) or []
        out: Set[Coord] = set()
        for p in raw:
            if isinstance(p, (list, tuple)) and len(p) == 2:
                out.add((int(p[0]), int(p[1])))
        return out

    # --------- API de grafo sobre la grilla ---------
    def in_bounds(self, xy: Coord) -> bool:
        x, y = xy
        return 0 <= x < self.width and 0 <= y < self.height

    def passable(self, xy: Coord) -> bool:
        x, y = xy
        return self.in_bounds(xy) and bool(self.cells[y, x] == WALKABLE)

    def neighbors(self, xy: Coord) -> Iterable[Coord]:
        x, y = xy
        # arriba, abajo, izquierda, derecha
        candidates = [(x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)]
        for n in candidates:
            if self.passable(n):
                yield n

    def nodes(self) -> Iterable[Coord]:
        for y in range(self.height):
            for x in range(self.width):
                if self.cells[y, x] == WALKABLE:
                    yield (x, y)

    def edges(self) -> Iterable[Tuple[Coord, Coord]]:
        seen = set()
        for u in self.nodes():
            for v in self.neighbors(u):
                e = tuple(sorted((u, v)))
                if e not in seen:
                    seen.add(e)
                    yield e

    def shelf_blocks(self) -> List[Coord]:
        """Celdas de bloques de estantes (filas impares interiores), en orden de lectura."""
        return [
            (x, y)
            for y in range(1, self.height - 1, 2)
            for x in range(1, self.width - 1)
        ]

    # --------- utilidades ---------
    def to_matrix(self) -> List[List[int]]:
        return self.cells.tolist()

    def render_ascii(self, marks: Optional[Dict[Coord, str]] = None) -> str:
        """'.' pasillo, '#' obstáculo; `marks` sobreescribe celdas puntuales (ej. E/X)."""
        marks = marks or {}
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if (x, y) in marks:
                    row.append(marks[(x, y)])
                else:
                    row.append("#" if self.cells[y, x] == OBSTACLE else ".")
            rows.append("".join(row))
        return "\n".join(rows)
