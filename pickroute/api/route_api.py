# pickroute/api/route_api.py
from typing import Any, Dict, List, Optional

from pickroute.errors import InvalidInputError
from pickroute.picking.planner import RouteRequest, RouteResult, plan_route
from pickroute.picking.stops import PickRequestItem
from pickroute.spec.engine_config import EngineConfig
from pickroute.warehouse.access import FACINGS
from pickroute.warehouse.grid import Coord


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _point(raw: Any, name: str) -> Optional[Coord]:
    if raw is None:
        return None
    if not isinstance(raw, dict) or not _is_int(raw.get("x")) or not _is_int(raw.get("y")):
        raise InvalidInputError(f"{name} debe ser {{x:int, y:int}}.")
    return (raw["x"], raw["y"])


def _item(raw: Any, idx: int) -> PickRequestItem:
    where = f"itemsToPick[{idx}]"
    if not isinstance(raw, dict):
        raise InvalidInputError(f"{where} debe ser un objeto.")
    mid = raw.get("masterItemId")
    if not isinstance(mid, str) or not mid:
        raise InvalidInputError(f"{where}.masterItemId es obligatorio.")
    qty = raw.get("quantity")
    if not _is_int(qty) or qty <= 0:
        raise InvalidInputError(f"{where}.quantity debe ser un entero > 0.")
    loc = raw.get("location")
    if not isinstance(loc, dict):
        raise InvalidInputError(f"{where}.location es obligatorio.")
    for key in ("x", "y", "shelfId"):
        if not _is_int(loc.get(key)):
            raise InvalidInputError(f"{where}.location.{key} debe ser entero.")
    facing = loc.get("facing")
    if facing not in FACINGS:
        raise InvalidInputError(f"{where}.location.facing debe ser uno de {'/'.join(FACINGS)}.")
    return PickRequestItem(
        master_item_id=mid,
        quantity=qty,
        shelf_id=loc["shelfId"],
        location=(loc["x"], loc["y"]),
        facing=facing,
    )


def parse_route_request(payload: Dict[str, Any]) -> RouteRequest:
    """Valida el pedido {roomWidth, roomHeight, itemsToPick, startPoint?, endPoint?}."""
    if not isinstance(payload, dict):
        raise InvalidInputError("El pedido debe ser un objeto JSON.")
    raw_items = payload.get("itemsToPick")
    if not isinstance(raw_items, list) or not raw_items:
        raise InvalidInputError("itemsToPick debe ser una lista no vacía.")

    dims = {}
    for key in ("roomWidth", "roomHeight"):
        v = payload.get(key)
        if v is not None and (not _is_int(v) or v < 3):
            raise InvalidInputError(f"{key} debe ser un entero >= 3.")
        dims[key] = v

    items: List[PickRequestItem] = [_item(raw, i) for i, raw in enumerate(raw_items)]
    return RouteRequest(
        items=items,
        room_width=dims["roomWidth"],
        room_height=dims["roomHeight"],
        start=_point(payload.get("startPoint"), "startPoint"),
        end=_point(payload.get("endPoint"), "endPoint"),
    )


def result_to_dict(result: RouteResult) -> Dict[str, Any]:
    return {
        "optimizedPath": [{"x": x, "y": y} for x, y in result.optimized_path],
        "unoptimizedPath": [{"x": x, "y": y} for x, y in result.unoptimized_path],
        "metrics": result.metrics.to_dict(),
        "warnings": [d.to_dict() for d in result.diagnostics],
    }


def optimize_pick_route(payload: Dict[str, Any], config: Optional[EngineConfig] = None) -> Dict[str, Any]:
    """
    Punto de entrada con el contrato JSON del endpoint optimize-pick-route.
    InvalidInputError y RouteUnreachableError se propagan al llamador.
    """
    request = parse_route_request(payload)
    return result_to_dict(plan_route(request, config))
