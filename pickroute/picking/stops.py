# pickroute/picking/stops.py
from __future__ import annotations
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from pickroute.errors import Diagnostic
from pickroute.warehouse.access import resolve_access_point
from pickroute.warehouse.grid import WarehouseGrid, Coord

START_ID = "start"
END_ID = "end"


@dataclass(frozen=True)
class PickRequestItem:
    """Una línea del pedido: ítem, cantidad y bloque/cara donde está almacenado."""
    master_item_id: str
    quantity: int
    shelf_id: int
    location: Coord
    facing: str


@dataclass(frozen=True)
class StopKey:
    """Identidad de una parada: estante + bloque + cara (igualdad estructural)."""
    shelf_id: int
    location: Coord
    facing: str

    @property
    def node_id(self) -> str:
        x, y = self.location
        return f"shelf-{self.shelf_id}@{x},{y}:{self.facing}"


@dataclass
class PickStopNode:
    key: StopKey
    access: Coord
    items: List[Tuple[str, int]] = field(default_factory=list)

    @property
    def node_id(self) -> str:
        return self.key.node_id

    @property
    def coord(self) -> Coord:
        return self.access

    def add_item(self, master_item_id: str, quantity: int) -> None:
        # mismo ítem en la misma parada → se suman cantidades
        for i, (mid, qty) in enumerate(self.items):
            if mid == master_item_id:
                self.items[i] = (mid, qty + quantity)
                return
        self.items.append((master_item_id, quantity))


@dataclass(frozen=True)
class TerminalNode:
    node_id: str
    coord: Coord


@dataclass
class NodeSet:
    """{start} ∪ paradas ∪ {end}, paradas en orden de primera aparición en el pedido."""
    start: TerminalNode
    end: TerminalNode
    stops: "OrderedDict[str, PickStopNode]"
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def stop_ids(self) -> List[str]:
        return list(self.stops.keys())

    def coords(self) -> Dict[str, Coord]:
        out: Dict[str, Coord] = {self.start.node_id: self.start.coord}
        for sid, stop in self.stops.items():
            out[sid] = stop.access
        out[self.end.node_id] = self.end.coord
        return out


def build_node_set(
    grid: WarehouseGrid,
    items: Iterable[PickRequestItem],
    start: Optional[Coord] = None,
    end: Optional[Coord] = None,
) -> NodeSet:
    """Deduplica las líneas por (estante, bloque, cara) y resuelve el punto de acceso de cada parada."""
    stops: "OrderedDict[str, PickStopNode]" = OrderedDict()
    diagnostics: List[Diagnostic] = []
    for item in items:
        key = StopKey(item.shelf_id, tuple(item.location), item.facing)
        stop = stops.get(key.node_id)
        if stop is None:
            res = resolve_access_point(grid, key.location, key.facing)
            if res.degraded:
                diagnostics.append(Diagnostic("layout_resolution", res.warning, key.node_id))
            stop = PickStopNode(key=key, access=res.coord)
            stops[key.node_id] = stop
        stop.add_item(item.master_item_id, item.quantity)

    return NodeSet(
        start=TerminalNode(START_ID, tuple(start) if start is not None else grid.default_start),
        end=TerminalNode(END_ID, tuple(end) if end is not None else grid.default_end),
        stops=stops,
        diagnostics=diagnostics,
    )
