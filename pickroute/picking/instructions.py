# pickroute/picking/instructions.py
from typing import Callable, List, Optional

from pickroute.picking.planner import RouteResult
from pickroute.warehouse.grid import Coord


def _heading(frm: Optional[Coord], to: Coord) -> str:
    """Dirección general N/S y luego W/E (y crece hacia el sur)."""
    if frm is None or frm == to:
        return ""
    out = ""
    if to[1] < frm[1]:
        out += "Go North "
    elif to[1] > frm[1]:
        out += "Go South "
    if to[0] < frm[0]:
        out += "Go West "
    elif to[0] > frm[0]:
        out += "Go East "
    return out


def build_instructions(result: RouteResult, item_name: Callable[[str], str] = str) -> List[str]:
    """Lista de instrucciones para el operario a partir de la secuencia optimizada."""
    metrics = result.metrics
    start = metrics.entry_point
    lines = [f"Start at Entry (Grid: {start[0]},{start[1]})"]
    last: Coord = start
    for step in metrics.pick_sequence_steps:
        gx, gy = step.grid_coords
        lines.append(
            f"{step.step}. {_heading(last, step.grid_coords)}to Shelf {step.shelf_id} "
            f"(Face {step.facing}, Grid: {gx},{gy})"
        )
        picks = ", ".join(f"{qty} x {item_name(mid)}" for mid, qty in step.items)
        lines.append(f"   Pick: {picks}")
        last = step.grid_coords
    end = metrics.exit_point
    if result.optimized.reached_end:
        lines.append(f"{_heading(last, end)}Proceed to Exit (Grid: {end[0]},{end[1]})")
    else:
        lines.append("End of Pick Route (exit unreachable)")
    return lines
