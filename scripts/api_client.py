"""Lightweight REST client for the pyroster API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_overrides(raw: str) -> dict:
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid overrides JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pyroster REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("pool", type=Path, nargs="?", help="JSON pool with 'batters' and 'pitchers'")
    parser.add_argument("--weights", default="standard", help="Valuation weight preset")
    parser.add_argument("--strategy", default="balanced", help="Strategy preset")
    parser.add_argument("--requirements", default="standard", help="Roster requirements preset")
    parser.add_argument("--strategy-overrides", default="", help="JSON object of strategy field overrides")
    parser.add_argument("--values-only", action="store_true", help="Fetch player valuations without selecting")
    parser.add_argument("--list-presets", action="store_true", help="List preset names and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_presets:
            resp = client.get("/presets")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.pool is None:
            raise SystemExit("a pool file is required unless using --list-presets")

        pool = json.loads(args.pool.read_text(encoding="utf-8"))
        body = {
            "batters": pool.get("batters", []),
            "pitchers": pool.get("pitchers", []),
            "weights": args.weights,
            "strategy": args.strategy,
            "requirements": args.requirements,
            "strategy_overrides": build_overrides(args.strategy_overrides),
        }

        if args.values_only:
            resp = client.post("/valuations", json=body)
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        resp = client.post("/roster", json=body)
        resp.raise_for_status()
        payload = resp.json()
        print(f"Received {len(payload['batters'])} batters and {len(payload['pitchers'])} pitchers")
        print(f"Total spend: {payload['total_spend']:,}")
        validation = payload["validation"]
        if validation["passed"]:
            print("Roster meets all requirements")
        else:
            for deficit in validation["deficits"]:
                print(f"  - {deficit['message']}")


if __name__ == "__main__":
    main()
