# pickroute/picking/planner.py
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from pickroute.errors import Diagnostic, InvalidInputError
from pickroute.experiments.kpis import RouteMetrics, compute_metrics
from pickroute.picking.assembly import assemble_path
from pickroute.picking.matrix import DistanceMatrix
from pickroute.picking.stops import NodeSet, PickRequestItem, build_node_set
from pickroute.picking.tours import Tour, baseline_tour, nearest_neighbor_tour
from pickroute.spec.engine_config import EngineConfig
from pickroute.warehouse.grid import WarehouseGrid, Coord

logger = logging.getLogger(__name__)


@dataclass
class RouteRequest:
    items: List[PickRequestItem]
    room_width: Optional[int] = None
    room_height: Optional[int] = None
    start: Optional[Coord] = None
    end: Optional[Coord] = None


@dataclass
class RouteResult:
    grid: WarehouseGrid
    nodes: NodeSet
    matrix: DistanceMatrix
    optimized: Tour
    baseline: Tour
    optimized_path: List[Coord]
    unoptimized_path: List[Coord]
    metrics: RouteMetrics
    diagnostics: List[Diagnostic] = field(default_factory=list)


def plan_route(request: RouteRequest, config: Optional[EngineConfig] = None) -> RouteResult:
    """
    Calcula la ruta optimizada (vecino más cercano) y la de referencia (orden
    del pedido) para un pedido. Función pura: todo lo que crea vive solo en
    esta llamada.
    """
    cfg = config or EngineConfig.default()
    if not request.items:
        raise InvalidInputError("itemsToPick está vacío.")

    width = request.room_width or cfg.default_width
    height = request.room_height or cfg.default_height
    grid = WarehouseGrid({"width": width, "height": height, "cell_size_m": cfg.cell_size_m})

    for name, point in (("startPoint", request.start), ("endPoint", request.end)):
        if point is not None and not grid.in_bounds(point):
            raise InvalidInputError(f"{name} {point} fuera de la grilla {width}x{height}.")

    nodes = build_node_set(grid, request.items, request.start, request.end)
    logger.info("Ruta: grilla %dx%d, %d líneas → %d paradas", width, height, len(request.items), len(nodes.stops))

    matrix = DistanceMatrix.build(grid, nodes.coords(), workers=cfg.workers, timeout_s=cfg.matrix_timeout_s)

    start_id, end_id = nodes.start.node_id, nodes.end.node_id
    optimized = nearest_neighbor_tour(matrix, start_id, nodes.stop_ids, end_id)
    baseline = baseline_tour(matrix, start_id, nodes.stop_ids, end_id)

    optimized_path, opt_diag = assemble_path(optimized, matrix)
    unoptimized_path, base_diag = assemble_path(baseline, matrix)

    metrics = compute_metrics(nodes, optimized, baseline, cfg)

    diagnostics = list(nodes.diagnostics) + optimized.diagnostics + baseline.diagnostics + opt_diag + base_diag
    return RouteResult(
        grid=grid,
        nodes=nodes,
        matrix=matrix,
        optimized=optimized,
        baseline=baseline,
        optimized_path=optimized_path,
        unoptimized_path=unoptimized_path,
        metrics=metrics,
        diagnostics=diagnostics,
    )
