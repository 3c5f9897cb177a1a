# pickroute/warehouse/access.py
import logging
from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

from .grid import WarehouseGrid, Coord

logger = logging.getLogger(__name__)

Facing = Literal["N", "S", "E", "W"]
FACINGS: Tuple[str, ...] = ("N", "S", "E", "W")

# E/W no tienen convención de desplazamiento definida; caen al fallback
FACING_OFFSETS: Dict[str, Coord] = {
    "N": (0, -1),
    "S": (0, 1),
}


@dataclass(frozen=True)
class AccessResolution:
    coord: Coord
    warning: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.warning is not None


def resolve_access_point(grid: WarehouseGrid, block: Coord, facing: Facing) -> AccessResolution:
    """
    Celda de pasillo desde la que se pickea la cara `facing` del bloque `block`.
    Si la celda queda fuera de la grilla o sobre un obstáculo, se devuelve la
    coordenada del propio bloque (puede no ser caminable) junto con un aviso.
    """
    bx, by = block
    offset = FACING_OFFSETS.get(facing)
    if offset is None:
        warning = f"Cara '{facing}' sin punto de acceso definido para el bloque ({bx},{by}); se usa el bloque."
    else:
        access = (bx + offset[0], by + offset[1])
        if grid.passable(access):
            return AccessResolution(coord=access)
        warning = (
            f"Acceso ({access[0]},{access[1]}) del bloque ({bx},{by}) cara {facing} "
            f"fuera de la grilla u obstruido; se usa el bloque."
        )
    logger.warning(warning)
    return AccessResolution(coord=(bx, by), warning=warning)
