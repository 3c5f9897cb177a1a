import pytest

from pickroute.picking.matrix import DistanceMatrix
from pickroute.picking.stops import PickRequestItem, build_node_set, START_ID, END_ID
from pickroute.warehouse.routing import UNREACHABLE


def _req(mid, shelf, loc, facing="N", qty=1):
    return PickRequestItem(master_item_id=mid, quantity=qty, shelf_id=shelf, location=loc, facing=facing)


def test_lines_on_same_shelf_face_collapse_into_one_stop(grid7):
    items = [
        _req("A", 3, (2, 3), "S", 1),
        _req("B", 1, (1, 1), "N", 4),
        _req("A", 3, (2, 3), "S", 2),
        _req("C", 3, (2, 3), "S", 1),
    ]
    nodes = build_node_set(grid7, items)
    assert nodes.stop_ids == ["shelf-3@2,3:S", "shelf-1@1,1:N"]
    stop = nodes.stops["shelf-3@2,3:S"]
    assert stop.access == (2, 4)
    # mismo ítem → cantidades sumadas
    assert stop.items == [("A", 3), ("C", 1)]
    assert nodes.diagnostics == []


def test_same_block_other_face_is_a_different_stop(grid7):
    nodes = build_node_set(grid7, [_req("A", 3, (2, 3), "S"), _req("A", 3, (2, 3), "N")])
    assert len(nodes.stops) == 2


def test_node_set_uses_default_terminals_and_keeps_order(grid7):
    nodes = build_node_set(grid7, [_req("A", 1, (1, 1), "N")])
    coords = nodes.coords()
    assert list(coords) == [START_ID, "shelf-1@1,1:N", END_ID]
    assert coords[START_ID] == (0, 3) and coords[END_ID] == (6, 3)


def test_degraded_access_adds_layout_diagnostic(grid7):
    nodes = build_node_set(grid7, [_req("A", 9, (3, 3), "E")], start=(0, 0), end=(6, 6))
    assert nodes.start.coord == (0, 0)
    assert [d.kind for d in nodes.diagnostics] == ["layout_resolution"]
    assert nodes.diagnostics[0].node_id == "shelf-9@3,3:E"


def test_matrix_covers_every_ordered_pair_and_is_symmetric(grid7):
    nodes = build_node_set(grid7, [_req("A", 1, (1, 1), "N"), _req("B", 2, (5, 5), "S")])
    m = DistanceMatrix.build(grid7, nodes.coords())
    ids = list(nodes.coords())
    assert m.astar_calls == len(ids) * (len(ids) - 1)
    for a in ids:
        assert m.cost(a, a) == 0
        for b in ids:
            assert m.cost(a, b) == m.cost(b, a)
            if a != b:
                path = m.path(a, b)
                assert path[0] == m.coords[a] and path[-1] == m.coords[b]
                assert len(path) == m.cost(a, b) + 1
    assert m.cost(START_ID, "shelf-1@1,1:N") == 4
    assert m.cost("shelf-1@1,1:N", "shelf-2@5,5:S") == 12
    assert m.unreachable_pairs() == []


def test_unreachable_pairs_are_recorded(grid7):
    nodes = build_node_set(grid7, [_req("A", 9, (3, 3), "E")])
    m = DistanceMatrix.build(grid7, nodes.coords())
    assert m.cost(START_ID, "shelf-9@3,3:E") == UNREACHABLE
    assert not m.reachable("shelf-9@3,3:E", END_ID)
    assert len(m.unreachable_pairs()) == 4


def test_parallel_build_matches_sequential(grid7):
    items = [_req("A", 1, (1, 1), "N"), _req("B", 2, (5, 5), "S"), _req("C", 3, (3, 3), "S")]
    coords = build_node_set(grid7, items).coords()
    seq = DistanceMatrix.build(grid7, coords)
    par = DistanceMatrix.build(grid7, coords, workers=2)
    assert set(seq.pairs) == set(par.pairs)
    for pair in seq.pairs:
        assert seq.entries[pair].path == par.entries[pair].path


def test_matrix_timeout_aborts(grid7):
    coords = build_node_set(grid7, [_req("A", 1, (1, 1), "N")]).coords()
    with pytest.raises(TimeoutError):
        DistanceMatrix.build(grid7, coords, timeout_s=-1.0)
