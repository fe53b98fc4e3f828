"""Command-line interface for building a roster from a player pool."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from pyroster.api.schemas import roster_response
from pyroster.config_loader import SettingsProfile
from pyroster.models import BatterRecord, PitcherRecord
from pyroster.selection import PITCHER_BUDGET_RELAXATION, build_roster


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a budget-constrained roster from a player pool")
    parser.add_argument("pool", type=Path, help="Path to a JSON pool with 'batters' and 'pitchers' lists")
    parser.add_argument("--weights", default=None, help="Valuation weight preset (default: standard)")
    parser.add_argument("--strategy", default=None, help="Strategy preset (default: balanced)")
    parser.add_argument("--requirements", default=None, help="Roster requirements preset (default: standard)")
    parser.add_argument("--profile", type=Path, default=None, help="Load a settings profile JSON")
    parser.add_argument("--save-profile", type=Path, default=None, help="Save the resolved settings profile JSON")
    parser.add_argument(
        "--relaxation",
        type=float,
        default=PITCHER_BUDGET_RELAXATION,
        help="Fraction the pitcher budget may stretch for quota-critical picks",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write the selection as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log selection decisions")
    return parser.parse_args(argv)


def load_pool(path: Path) -> Tuple[List[BatterRecord], List[PitcherRecord]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    batters = [BatterRecord.model_validate(row) for row in data.get("batters", [])]
    pitchers = [PitcherRecord.model_validate(row) for row in data.get("pitchers", [])]
    return batters, pitchers


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    profile = SettingsProfile.load(args.profile) if args.profile else SettingsProfile()
    if args.weights:
        profile.weights = args.weights
    if args.strategy:
        profile.strategy = args.strategy
    if args.requirements:
        profile.requirements = args.requirements
    weights, strategy, requirements = profile.resolve()

    if args.save_profile:
        profile.save(args.save_profile)
        print(f"Saved settings profile to {args.save_profile}")

    batters, pitchers = load_pool(args.pool)
    print(f"Loaded {len(batters)} batters and {len(pitchers)} pitchers")

    build = build_roster(
        batters,
        pitchers,
        weights,
        strategy,
        requirements,
        budget_relaxation=args.relaxation,
    )
    selection = build.selection
    print(
        f"Selected {len(selection.batters)} batters ({selection.batter_spend:,}) "
        f"and {len(selection.pitchers)} pitchers ({selection.pitcher_spend:,}); "
        f"total {selection.total_spend:,} of {requirements.salary_cap:,}"
    )
    for entry in selection.pitchers:
        print(f"  P  {entry.player.name:<28} {entry.player.endurance:<8} {entry.salary:>12,} {entry.score:8.2f}")
    for entry in selection.batters:
        positions = "/".join(entry.player.position_codes) or "-"
        print(f"  B  {entry.player.name:<28} {positions:<8} {entry.salary:>12,} {entry.score:8.2f}")

    if build.report.passed:
        print("Roster meets all requirements")
    else:
        print("Roster requirements not met:")
        for deficit in build.report.deficits:
            print(f"  - {deficit.message}")

    if args.output:
        payload = roster_response(build).model_dump()
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote selection to {args.output}")

    return 0 if build.report.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
