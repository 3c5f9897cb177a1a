# pickroute/cli/check_config.py
import argparse
import sys
from pathlib import Path

import yaml

from pickroute.spec.config_loader import load_config
from pickroute.spec.engine_config import EngineConfig


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validar e imprimir la configuración del motor de rutas.")
    parser.add_argument("--config", type=Path, help="Ruta a JSON/YAML de EngineConfig (opcional)")
    parser.add_argument("--dump", action="store_true", help="Imprimir la configuración efectiva como YAML")
    args = parser.parse_args(argv)

    try:
        cfg = EngineConfig.default() if not args.config else EngineConfig.from_dict(load_config(args.config))
        cfg.validate()
    except (ValueError, AssertionError) as exc:
        print(f"Configuración inválida: {exc}", file=sys.stderr)
        return 2

    if args.dump:
        # mismo formato que acepta --config
        print(yaml.safe_dump(cfg.to_dict(), sort_keys=False), end="")
    else:
        print(cfg.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
