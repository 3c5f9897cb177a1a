# pickroute/cli/plan_route.py
import argparse
import json
import logging
import sys
from pathlib import Path

from pickroute.api.route_api import parse_route_request, result_to_dict
from pickroute.errors import InvalidInputError, RouteUnreachableError
from pickroute.picking.instructions import build_instructions
from pickroute.picking.planner import plan_route
from pickroute.spec.config_loader import configure_logging, load_config
from pickroute.spec.engine_config import EngineConfig

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Calcular la ruta de picking optimizada para un pedido JSON.")
    parser.add_argument("request", type=Path, help="Ruta al JSON {roomWidth, roomHeight, itemsToPick, ...}")
    parser.add_argument("--config", type=Path, help="Ruta a JSON/YAML de EngineConfig (opcional)")
    parser.add_argument("--workers", type=int, help="Procesos para la matriz de distancias")
    parser.add_argument("--json", action="store_true", help="Imprimir el resultado completo en JSON")
    args = parser.parse_args(argv)

    cfg = EngineConfig.default() if not args.config else EngineConfig.from_dict(load_config(args.config))
    if args.workers is not None:
        cfg.workers = args.workers
    cfg.validate()
    configure_logging(cfg.log_level)

    try:
        payload = json.loads(args.request.read_text(encoding="utf-8"))
    except ValueError as exc:
        logger.error("El pedido %s no es JSON válido: %s", args.request, exc)
        return 2
    try:
        result = plan_route(parse_route_request(payload), cfg)
    except InvalidInputError as exc:
        logger.error("Pedido inválido: %s", exc)
        return 2
    except RouteUnreachableError as exc:
        logger.error("Paradas inalcanzables: %s", ", ".join(exc.unreachable_ids))
        return 3

    if args.json:
        print(json.dumps(result_to_dict(result), indent=2, ensure_ascii=False))
        return 0

    m = result.metrics
    print("\n".join(build_instructions(result)))
    print()
    print(f"Distancia optimizada: {m.optimized_distance:.1f}  sin optimizar: {m.unoptimized_distance:.1f}  "
          f"ahorro: {m.distance_saved:.1f}")
    print(f"Tiempo ahorrado estimado: {m.time_saved_estimate}")
    for d in result.diagnostics:
        print(f"[{d.kind}] {d.message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
