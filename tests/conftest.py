import pytest

from pickroute.warehouse.grid import WarehouseGrid


@pytest.fixture
def grid7():
    return WarehouseGrid(WarehouseGrid.default_spec())


@pytest.fixture
def payload_two_sides():
    # el pedido lista primero la parada lejana (5,6) y luego la cercana (1,0)
    return {
        "roomWidth": 7,
        "roomHeight": 7,
        "itemsToPick": [
            {"masterItemId": "SKU-B", "quantity": 2,
             "location": {"x": 5, "y": 5, "shelfId": 2, "facing": "S"}},
            {"masterItemId": "SKU-A", "quantity": 1,
             "location": {"x": 1, "y": 1, "shelfId": 1, "facing": "N"}},
        ],
    }
