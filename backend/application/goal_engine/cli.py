"""Command-line entry point: compute daily goals from body metrics.

Values not given on the command line come from the settings store
(GOAL_STORE_BACKEND / GOAL_STORE_PATH), so repeated runs against a JSON
store behave like reopening the goal screen.
"""

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Optional, Sequence

from domain.goal_engine.core.exceptions.domain_errors import GoalEngineError
from infrastructure.config import GoalEngineSettings, load_environment
from infrastructure.logging_config import configure_logging
from infrastructure.persistence.settings_store_factory import (
    create_settings_store,
)

from .services.goal_engine_service import GoalEngineService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goal-engine",
        description="Estimate maintenance calories and daily macro goals",
    )
    parser.add_argument("--weight", help="Body weight as typed, e.g. 72.5 or 72,5")
    parser.add_argument("--unit", choices=["kg", "lb"], help="Unit of --weight")
    parser.add_argument("--feet", help="Height, whole feet")
    parser.add_argument("--inches", help="Height, remaining inches (default 0)")
    parser.add_argument("--age", help="Age in years")
    parser.add_argument("--sex", help="male or female")
    parser.add_argument(
        "--activity",
        choices=["sedentary", "light", "moderate", "active", "veryActive"],
        help="Activity level",
    )
    parser.add_argument("--mode", choices=["lose", "maintain", "gain"])
    parser.add_argument("--rate", type=float, help="Target kg per week (0.0-1.5)")
    parser.add_argument("--protein-per-kg", type=float, help="Protein g/kg (1.2-2.4)")
    parser.add_argument("--fat-per-kg", type=float, help="Fat g/kg (0.6-1.2)")
    parser.add_argument("--store", type=Path, help="Use this JSON settings file")
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    return parser


def _form_changes(args: argparse.Namespace) -> dict[str, Any]:
    mapping = {
        "weight": "weight_text",
        "feet": "feet_text",
        "inches": "inches_text",
        "age": "age_text",
        "unit": "weight_unit",
        "sex": "sex",
        "activity": "activity_level",
        "mode": "mode",
        "rate": "target_rate_kg_per_week",
        "protein_per_kg": "protein_per_kg",
        "fat_per_kg": "fat_per_kg",
    }
    return {
        field: getattr(args, arg)
        for arg, field in mapping.items()
        if getattr(args, arg) is not None
    }


def _render(service: GoalEngineService) -> dict[str, Any]:
    validation = service.validation
    return {
        "complete": service.outputs is not None,
        "errors": validation.messages() if validation else [],
        "maintenance_calories": service.maintenance_calories,
        "suggested_daily_intake": service.suggested_daily_intake,
        "protein_grams": service.protein_grams,
        "fat_grams": service.fat_grams,
        "carbs_grams": service.carbs_grams,
        "rate": service.rate_label(),
        "summary": service.describe_target(),
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    load_environment()
    try:
        settings = GoalEngineSettings.from_env()
        if args.store is not None:
            settings = replace(settings, store_backend="json", store_path=args.store)
        configure_logging(args.log_level or settings.log_level)
        store = create_settings_store(settings)
    except GoalEngineError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    service = GoalEngineService(store=store)
    changes = _form_changes(args)
    # --unit alone converts the stored weight; with --weight it names its unit
    new_unit = changes.pop("weight_unit", None) if args.weight is None else None
    service.update(**changes)
    if new_unit is not None:
        service.convert_weight_unit(new_unit)
    service.compute_and_persist_if_needed()

    result = _render(service)
    if args.json:
        print(json.dumps(result, indent=2))
    elif not result["complete"]:
        for message in result["errors"]:
            print(message)
        return 1
    else:
        print(f"Estimated maintenance   {result['maintenance_calories']} kcal")
        print(result["summary"])
        print(f"Suggested daily intake  {result['suggested_daily_intake']} kcal")
        print(
            f"Protein {result['protein_grams']} g  "
            f"Fat {result['fat_grams']} g  "
            f"Carbs {result['carbs_grams']} g"
        )

    return 0 if result["complete"] else 1


if __name__ == "__main__":
    sys.exit(main())
