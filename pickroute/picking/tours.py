# pickroute/picking/tours.py
import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from pickroute.errors import Diagnostic, RouteUnreachableError
from pickroute.picking.matrix import DistanceMatrix

logger = logging.getLogger(__name__)


@dataclass
class Tour:
    """Secuencia de nodos start → paradas → end y pasos efectivamente recorridos."""
    node_ids: List[str]
    end_id: str = "end"
    steps: int = 0
    skipped: List[str] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def stop_ids(self) -> List[str]:
        # sin start ni end
        return [n for n in self.node_ids[1:] if n != self.end_id]

    @property
    def reached_end(self) -> bool:
        return len(self.node_ids) > 1 and self.node_ids[-1] == self.end_id


def _leg_warning(tour: Tour, a: str, b: str, node_id: str) -> None:
    msg = f"Sin ruta de {a} a {b}; el tramo no suma distancia."
    logger.warning(msg)
    tour.diagnostics.append(Diagnostic("leg_unreachable", msg, node_id))


def _close_at_end(tour: Tour, matrix: DistanceMatrix, end_id: str) -> None:
    current = tour.node_ids[-1]
    if matrix.reachable(current, end_id):
        tour.steps += matrix.cost(current, end_id)
        tour.node_ids.append(end_id)
    else:
        _leg_warning(tour, current, end_id, end_id)


def nearest_neighbor_tour(
    matrix: DistanceMatrix,
    start_id: str,
    stop_ids: Sequence[str],
    end_id: str,
) -> Tour:
    """
    Heurística NN: desde start, siempre a la parada no visitada más cercana
    (empates: la primera en el orden de `stop_ids`). Si ninguna parada pendiente
    es alcanzable se aborta con RouteUnreachableError listando las pendientes.
    No llegar a end solo se reporta.
    """
    tour = Tour(node_ids=[start_id], end_id=end_id)
    remaining = list(stop_ids)
    current = start_id
    while remaining:
        best_id, best_cost = None, None
        for sid in remaining:
            if not matrix.reachable(current, sid):
                continue
            c = matrix.cost(current, sid)
            if best_cost is None or c < best_cost:
                best_id, best_cost = sid, c
        if best_id is None:
            logger.error("NN: ninguna parada alcanzable desde %s: %s", current, remaining)
            raise RouteUnreachableError(remaining)
        tour.node_ids.append(best_id)
        tour.steps += best_cost
        remaining.remove(best_id)
        current = best_id

    _close_at_end(tour, matrix, end_id)
    return tour


def baseline_tour(
    matrix: DistanceMatrix,
    start_id: str,
    stop_ids: Sequence[str],
    end_id: str,
) -> Tour:
    """
    Orden del pedido (sin optimizar). Las paradas inalcanzables desde la
    posición actual se saltan sin error y no suman distancia.
    """
    tour = Tour(node_ids=[start_id], end_id=end_id)
    current = start_id
    for sid in stop_ids:
        if not matrix.reachable(current, sid):
            _leg_warning(tour, current, sid, sid)
            tour.skipped.append(sid)
            continue
        tour.steps += matrix.cost(current, sid)
        tour.node_ids.append(sid)
        current = sid

    _close_at_end(tour, matrix, end_id)
    return tour
