# pickroute/cli/show_layout.py
import argparse
import sys

from pickroute.warehouse.grid import WarehouseGrid


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Mostrar el layout de la grilla del almacén.")
    parser.add_argument("--width", type=int, default=7)
    parser.add_argument("--height", type=int, default=7)
    args = parser.parse_args(argv)

    grid = WarehouseGrid.from_dimensions(args.width, args.height)
    nodes = list(grid.nodes())
    edges = list(grid.edges())
    start, end = grid.default_start, grid.default_end
    print(grid.render_ascii({start: "E", end: "X"}))
    print(f"Nodos: {len(nodes)}  Aristas: {len(edges)}  Bloques de estantes: {len(grid.shelf_blocks())}")
    print(f"Entrada por defecto: {start}  Salida por defecto: {end}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
