# pickroute/__init__.py
from .errors import Diagnostic, InvalidInputError, RouteEngineError, RouteUnreachableError
from .api.route_api import optimize_pick_route, parse_route_request
from .picking.planner import RouteRequest, RouteResult, plan_route
from .spec.engine_config import EngineConfig

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "InvalidInputError",
    "RouteEngineError",
    "RouteUnreachableError",
    "optimize_pick_route",
    "parse_route_request",
    "RouteRequest",
    "RouteResult",
    "plan_route",
    "EngineConfig",
]
