# pickroute/demand/requests.py
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pickroute.warehouse.grid import WarehouseGrid, Coord
from .rng import RNG


@dataclass
class Catalog:
    """Catálogo simple de SKUs enumerados como SKU001, SKU002, ..."""
    n_skus: int

    def ids(self) -> List[str]:
        return [f"SKU{idx:03d}" for idx in range(1, self.n_skus + 1)]


def shelf_slots(grid: WarehouseGrid, facings: Sequence[str] = ("N", "S")) -> List[Tuple[int, Coord, str]]:
    """
    Estantes lógicos del layout: cada bloque aporta una cara por `facing`.
    shelfId se numera desde 1 en orden de lectura (bloque, luego cara).
    """
    slots: List[Tuple[int, Coord, str]] = []
    for block in grid.shelf_blocks():
        for f in facings:
            slots.append((len(slots) + 1, block, f))
    return slots


def sample_route_request(
    grid: WarehouseGrid,
    n_items: int,
    rng: RNG,
    catalog: Optional[Catalog] = None,
    max_qty: int = 3,
) -> Dict[str, Any]:
    """
    Pedido aleatorio con el contrato JSON de optimize-pick-route: `n_items`
    líneas sobre estantes (bloque + cara N/S) elegidos al azar, con reemplazo.
    """
    assert n_items >= 1, "n_items debe ser >= 1"
    catalog = catalog or Catalog(n_skus=20)
    slots = shelf_slots(grid)
    skus = catalog.ids()
    picks = rng.integers(0, len(slots), size=n_items)
    items = []
    for idx in picks:
        shelf_id, (x, y), facing = slots[int(idx)]
        items.append({
            "masterItemId": str(rng.choice(skus)),
            "quantity": int(rng.integers(1, max_qty + 1)),
            "location": {"x": x, "y": y, "shelfId": shelf_id, "facing": facing},
        })
    return {
        "roomWidth": grid.width,
        "roomHeight": grid.height,
        "itemsToPick": items,
    }
