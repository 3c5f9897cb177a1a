# pickroute/demand/__init__.py
from .rng import RNG
from .requests import Catalog, sample_route_request, shelf_slots

__all__ = [
    "RNG",
    "Catalog",
    "sample_route_request",
    "shelf_slots",
]
