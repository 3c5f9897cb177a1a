# pickroute/warehouse/routing.py
import heapq
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List

from .grid import WarehouseGrid, Coord

logger = logging.getLogger(__name__)

UNREACHABLE = -1


@dataclass
class PathResult:
    """Camino start→goal inclusive y su costo en pasos (UNREACHABLE si no hay ruta)."""
    path: List[Coord] = field(default_factory=list)
    cost: int = UNREACHABLE
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.cost != UNREACHABLE


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def find_path(grid: WarehouseGrid, start: Coord, goal: Coord) -> PathResult:
    """
    A* 4-conectado con costo unitario y heurística Manhattan (admisible y
    consistente, el camino devuelto es óptimo).

    - start == goal → [start], costo 0 (aunque la celda sea obstáculo).
    - start u goal obstáculo (y distintos) → sin ruta.
    - Fuera de la grilla → sin ruta, con aviso en el log.

    Empates en f se resuelven por orden de inserción en la cola.
    """
    if not grid.in_bounds(start) or not grid.in_bounds(goal):
        logger.warning("A*: start %s o goal %s fuera de la grilla %dx%d", start, goal, grid.width, grid.height)
        return PathResult()
    if start == goal:
        return PathResult(path=[start], cost=0)
    if not grid.passable(start) or not grid.passable(goal):
        return PathResult()

    counter = 0
    g_score: Dict[Coord, int] = {start: 0}
    came_from: Dict[Coord, Coord] = {}
    closed = set()
    # (f, contador, celda)
    open_heap = [(manhattan(start, goal), counter, start)]
    expanded = 0

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current in closed:
            continue  # entrada vieja tras una relajación
        expanded += 1

        if current == goal:
            path = [current]
            while current in came_from:
                current = came_from[current]
                path.append(current)
            path.reverse()
            return PathResult(path=path, cost=g_score[goal], expanded=expanded)

        closed.add(current)
        for nb in grid.neighbors(current):
            if nb in closed:
                continue
            tentative = g_score[current] + 1
            if tentative < g_score.get(nb, tentative + 1):
                g_score[nb] = tentative
                came_from[nb] = current
                counter += 1
                heapq.heappush(open_heap, (tentative + manhattan(nb, goal), counter, nb))

    logger.debug("A*: sin ruta de %s a %s (%d nodos expandidos)", start, goal, expanded)
    return PathResult(expanded=expanded)


def shortest_path_steps(grid: WarehouseGrid, start: Coord, goal: Coord) -> int:
    """Número de pasos (BFS 4-conectado) entre start y goal. Retorna -1 si no hay ruta."""
    if not grid.in_bounds(start) or not grid.in_bounds(goal):
        return UNREACHABLE
    if start == goal:
        return 0
    if not grid.passable(start) or not grid.passable(goal):
        return UNREACHABLE

    q = deque([start])
    dist = {start: 0}
    while q:
        u = q.popleft()
        for v in grid.neighbors(u):
            if v not in dist:
                dist[v] = dist[u] + 1
                if v == goal:
                    return dist[v]
                q.append(v)
    return UNREACHABLE
