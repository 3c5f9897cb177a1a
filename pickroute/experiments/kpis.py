import math
from dataclasses import dataclass, field
from typing import Any, Dict, List

from pickroute.picking.stops import NodeSet
from pickroute.picking.tours import Tour
from pickroute.spec.engine_config import EngineConfig
from pickroute.warehouse.grid import Coord


def _xy(c: Coord) -> Dict[str, int]:
    return {"x": int(c[0]), "y": int(c[1])}


def tour_time(steps: int, stop_count: int, cfg: EngineConfig) -> float:
    return steps * cfg.unit_time_per_step + stop_count * cfg.time_per_stop


def format_duration(seconds: float) -> str:
    """'<m>m <s>s' redondeando al segundo (medios hacia arriba)."""
    total = math.floor(max(0.0, seconds) + 0.5)
    m, s = divmod(total, 60)
    return f"{m}m {s}s"


@dataclass
class PickStep:
    step: int
    shelf_id: int
    facing: str
    grid_coords: Coord
    items: List[tuple]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step": self.step,
            "shelfId": self.shelf_id,
            "facing": self.facing,
            "gridCoords": _xy(self.grid_coords),
            "items": [{"masterItemId": mid, "quantityToPick": qty} for mid, qty in self.items],
        }


@dataclass
class RouteMetrics:
    unoptimized_distance: float
    optimized_distance: float
    distance_saved: float                 # puede ser negativo
    unoptimized_time: float
    optimized_time: float
    time_saved: float                     # max(0, ...)
    ordered_pick_locations: List[Coord] = field(default_factory=list)
    pick_sequence_steps: List[PickStep] = field(default_factory=list)
    entry_point: Coord = (0, 0)
    exit_point: Coord = (0, 0)

    @property
    def time_saved_estimate(self) -> str:
        return format_duration(self.time_saved)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "unoptimizedDistance": float(self.unoptimized_distance),
            "optimizedDistance": float(self.optimized_distance),
            "distanceSaved": float(self.distance_saved),
            "orderedPickLocations": [_xy(c) for c in self.ordered_pick_locations],
            "pickSequenceSteps": [s.to_dict() for s in self.pick_sequence_steps],
            "timeSavedEstimate": self.time_saved_estimate,
            "entryPointForPath": _xy(self.entry_point),
            "exitPointForPath": _xy(self.exit_point),
        }


def compute_metrics(
    nodes: NodeSet,
    optimized: Tour,
    baseline: Tour,
    cfg: EngineConfig,
) -> RouteMetrics:
    opt_stops = optimized.stop_ids
    base_stops = baseline.stop_ids

    opt_dist = optimized.steps * cfg.cell_size_m
    base_dist = baseline.steps * cfg.cell_size_m
    opt_time = tour_time(optimized.steps, len(opt_stops), cfg)
    base_time = tour_time(baseline.steps, len(base_stops), cfg)

    steps: List[PickStep] = []
    for i, sid in enumerate(opt_stops, start=1):
        stop = nodes.stops[sid]
        steps.append(PickStep(
            step=i,
            shelf_id=stop.key.shelf_id,
            facing=stop.key.facing,
            grid_coords=stop.access,
            items=list(stop.items),
        ))

    return RouteMetrics(
        unoptimized_distance=base_dist,
        optimized_distance=opt_dist,
        distance_saved=base_dist - opt_dist,
        unoptimized_time=base_time,
        optimized_time=opt_time,
        time_saved=max(0.0, base_time - opt_time),
        ordered_pick_locations=[nodes.stops[sid].access for sid in opt_stops],
        pick_sequence_steps=steps,
        entry_point=nodes.start.coord,
        exit_point=nodes.end.coord,
    )
