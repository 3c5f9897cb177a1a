from pickroute import parse_route_request, plan_route
from pickroute.picking.instructions import build_instructions


def test_instructions_follow_optimized_sequence(payload_two_sides):
    res = plan_route(parse_route_request(payload_two_sides))
    lines = build_instructions(res)
    assert lines[0] == "Start at Entry (Grid: 0,3)"
    assert lines[1] == "1. Go North Go East to Shelf 1 (Face N, Grid: 1,0)"
    assert lines[2] == "   Pick: 1 x SKU-A"
    assert lines[3] == "2. Go South Go East to Shelf 2 (Face S, Grid: 5,6)"
    assert lines[4] == "   Pick: 2 x SKU-B"
    assert lines[-1] == "Go North Go East Proceed to Exit (Grid: 6,3)"


def test_instructions_with_item_names_and_blocked_exit(payload_two_sides):
    payload_two_sides["endPoint"] = {"x": 3, "y": 3}
    res = plan_route(parse_route_request(payload_two_sides))
    names = {"SKU-A": "Tornillos", "SKU-B": "Tuercas"}
    lines = build_instructions(res, item_name=names.get)
    assert "   Pick: 1 x Tornillos" in lines
    assert lines[-1] == "End of Pick Route (exit unreachable)"
