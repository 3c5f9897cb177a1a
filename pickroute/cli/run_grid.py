# pickroute/cli/run_grid.py
import argparse
import sys
from pathlib import Path

from pickroute.experiments.runner import run_grid, summarize
from pickroute.spec.config_loader import configure_logging

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Comparar ruta optimizada vs orden del pedido sobre pedidos aleatorios.")
    parser.add_argument("--out", type=Path, default=Path("outputs/experiments/route_grid.csv"))
    parser.add_argument("--seeds", type=int, nargs="+", default=[7, 11, 23])
    args = parser.parse_args(argv)

    configure_logging("WARNING")
    csv_path = run_grid(
        out_csv=args.out,
        sizes=[(7, 7), (9, 9), (11, 11)],
        item_counts=[3, 5, 8],
        seeds=args.seeds,
    )
    print(f"CSV: {csv_path}")
    print(summarize(csv_path).to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
