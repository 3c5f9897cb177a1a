# pickroute/picking/assembly.py
import logging
from typing import List, Tuple

from pickroute.errors import Diagnostic
from pickroute.picking.matrix import DistanceMatrix
from pickroute.picking.tours import Tour
from pickroute.warehouse.grid import Coord

logger = logging.getLogger(__name__)


def assemble_path(tour: Tour, matrix: DistanceMatrix) -> Tuple[List[Coord], List[Diagnostic]]:
    """
    Une los caminos de cada tramo del tour en una sola secuencia de celdas.
    El primer punto de cada tramo repite el último del anterior y se descarta.
    Tramos sin ruta se omiten con aviso.
    """
    diagnostics: List[Diagnostic] = []
    if not tour.node_ids:
        return [], diagnostics

    path: List[Coord] = [matrix.coords[tour.node_ids[0]]]
    for a, b in zip(tour.node_ids, tour.node_ids[1:]):
        if not matrix.reachable(a, b):
            msg = f"Tramo {a} → {b} sin ruta; se omite del camino."
            logger.warning(msg)
            diagnostics.append(Diagnostic("leg_unreachable", msg, b))
            continue
        path += matrix.path(a, b)[1:]
    return path, diagnostics
