# pickroute/picking/matrix.py
"""
Matriz de distancias entre todos los nodos de un pedido.

Cada par ordenado (A, B), A != B, se resuelve con A* de forma independiente
(ambas direcciones) y se guarda camino + costo. La matriz vive solo durante
un cálculo de ruta; no hay caché compartida entre pedidos.
"""
import logging
import time
from concurrent import futures
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from pickroute.warehouse.grid import WarehouseGrid, Coord
from pickroute.warehouse.routing import PathResult, find_path, UNREACHABLE

logger = logging.getLogger(__name__)

Pair = Tuple[str, str]


def _solve_pair(job: Tuple[WarehouseGrid, Pair, Coord, Coord]) -> Tuple[Pair, PathResult]:
    grid, pair, a, b = job
    return pair, find_path(grid, a, b)


@dataclass
class DistanceMatrix:
    coords: Dict[str, Coord]
    entries: Dict[Pair, PathResult] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        grid: WarehouseGrid,
        coords: Mapping[str, Coord],
        workers: int = 1,
        timeout_s: Optional[float] = None,
    ) -> "DistanceMatrix":
        """
        O(n²) llamadas a A*. Con `workers > 1` los pares se reparten en un
        ProcessPoolExecutor; cada trabajo escribe exactamente una celda (A, B).
        Si se supera `timeout_s` se aborta todo el cálculo con TimeoutError.
        """
        matrix = cls(coords=dict(coords))
        ids = list(matrix.coords.keys())
        jobs = [
            (grid, (a, b), matrix.coords[a], matrix.coords[b])
            for a in ids
            for b in ids
            if a != b
        ]
        logger.debug("Matriz de distancias: %d nodos, %d llamadas A*", len(ids), len(jobs))

        if workers > 1 and len(jobs) > 1:
            executor = futures.ProcessPoolExecutor(max_workers=workers)
            try:
                for pair, res in executor.map(_solve_pair, jobs, timeout=timeout_s):
                    matrix.entries[pair] = res
            except futures.TimeoutError as exc:
                raise TimeoutError(f"Matriz de distancias excedió {timeout_s}s") from exc
            finally:
                executor.shutdown(wait=True, cancel_futures=True)
        else:
            t0 = time.monotonic()
            for job in jobs:
                if timeout_s is not None and time.monotonic() - t0 > timeout_s:
                    raise TimeoutError(f"Matriz de distancias excedió {timeout_s}s")
                pair, res = _solve_pair(job)
                matrix.entries[pair] = res
        return matrix

    # --------- consultas ---------
    def entry(self, a: str, b: str) -> PathResult:
        if a == b:
            c = self.coords[a]
            return PathResult(path=[c], cost=0)
        return self.entries[(a, b)]

    def cost(self, a: str, b: str) -> int:
        return self.entry(a, b).cost

    def path(self, a: str, b: str) -> List[Coord]:
        return list(self.entry(a, b).path)

    def reachable(self, a: str, b: str) -> bool:
        return self.cost(a, b) != UNREACHABLE

    @property
    def pairs(self) -> Iterator[Pair]:
        return iter(self.entries.keys())

    @property
    def astar_calls(self) -> int:
        return len(self.entries)

    @property
    def expanded_total(self) -> int:
        return sum(r.expanded for r in self.entries.values())

    def unreachable_pairs(self) -> List[Pair]:
        return [p for p, r in self.entries.items() if not r.found]
