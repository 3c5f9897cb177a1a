# pickroute/errors.py
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, Literal, Optional, Tuple

DiagnosticKind = Literal["layout_resolution", "leg_unreachable"]


class RouteEngineError(Exception):
    """Base de los errores del motor de rutas."""


class InvalidInputError(RouteEngineError, ValueError):
    """Pedido mal formado; se rechaza antes de construir la grilla."""


class RouteUnreachableError(RouteEngineError, RuntimeError):
    """El vecino más cercano no encuentra ninguna parada alcanzable. Fatal para todo el pedido."""

    def __init__(self, unreachable_ids: Iterable[str]):
        self.unreachable_ids: Tuple[str, ...] = tuple(unreachable_ids)
        super().__init__(
            f"No hay ruta hacia las paradas: {', '.join(self.unreachable_ids)}"
        )


@dataclass(frozen=True)
class Diagnostic:
    """Aviso no fatal que acompaña al resultado (fallback de acceso o tramo sin ruta)."""
    kind: DiagnosticKind
    message: str
    node_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        d = asdict(self)
        return {"kind": d["kind"], "message": d["message"], "nodeId": d["node_id"]}
