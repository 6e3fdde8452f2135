#!/usr/bin/env python3
"""Parseia deep links e mostra rota, pilha reconstruída e view.

Uso:
    python scripts/parse_deep_link.py bankapp://accounts/ACC123/transactions
    python scripts/parse_deep_link.py --scheme bankapp-dev bankapp-dev://cards/C1/block

Saída: uma linha JSON por URI. Código de saída 1 se alguma falhar.
"""

from __future__ import annotations

import argparse
import json
from typing import Any

from routing.ancestry import replay_chain, view_name
from routing.deeplinks import DEFAULT_SCHEME, parse_deep_link


def describe(uri: str, scheme: str) -> dict[str, Any]:
    result = parse_deep_link(uri, scheme=scheme)
    if not result.success or result.route is None:
        error = result.error
        return {
            "uri": uri,
            "success": False,
            "error": error.to_log_dict() if error else None,
        }

    root = result.route
    sub_route = root.route
    return {
        "uri": uri,
        "success": True,
        "feature": root.feature.value,
        "route_id": root.route_id,
        "stack": [step.route_id for step in replay_chain(sub_route)] if sub_route else [],
        "view": view_name(sub_route) if sub_route else None,
    }


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("uris", nargs="+", help="Deep links a parsear.")
    parser.add_argument(
        "--scheme",
        default=DEFAULT_SCHEME,
        help=f"Scheme registrado do app (padrao: {DEFAULT_SCHEME}).",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    failures = 0
    for uri in args.uris:
        description = describe(uri, args.scheme)
        if not description["success"]:
            failures += 1
        print(json.dumps(description, ensure_ascii=False))
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
