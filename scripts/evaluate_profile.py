"""
scripts/evaluate_profile.py
────────────────────────────────────────────────────────────────────────
Evaluate one onboarding profile from a JSON file and print the result:

    python -m scripts.evaluate_profile profile.json
    python -m scripts.evaluate_profile profile.json --pretty

Exit codes: 0 evaluated (even when blocked), 2 malformed profile.
"""
from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser
from pathlib import Path
from dotenv import load_dotenv
load_dotenv()

from pydantic import ValidationError

from api.v1.plans import engine_policy
from api.v1.schemas import FaultOut, PlanOut, ProfileIn
from config import settings
from engine import evaluate
from engine.models import InputRejection

_LOG = logging.getLogger("evaluate_profile")


def run(path: Path, pretty: bool = False) -> int:
    raw = json.loads(path.read_text(encoding="utf-8"))
    indent = 2 if pretty else None

    try:
        body = ProfileIn.model_validate(raw)
    except ValidationError as exc:
        print(exc.json(indent=indent), file=sys.stderr)
        return 2

    outcome = evaluate(body.to_profile(), engine_policy())
    if isinstance(outcome, InputRejection):
        faults = [
            FaultOut.model_validate(f, from_attributes=True).model_dump(mode="json")
            for f in outcome.faults
        ]
        print(json.dumps({"faults": faults}, indent=indent, default=str), file=sys.stderr)
        return 2

    plan = PlanOut.model_validate(outcome, from_attributes=True)
    print(plan.model_dump_json(indent=indent))
    _LOG.info(
        "evaluated %s: may_proceed=%s blocking=%s",
        path.name,
        plan.may_proceed,
        [f.code for f in plan.blocking],
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = ArgumentParser(description="Evaluate a profile JSON file")
    ap.add_argument("profile", type=Path, help="path to a profile JSON file")
    ap.add_argument("--pretty", action="store_true", help="indent JSON output")
    args = ap.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper(), stream=sys.stderr)
    return run(args.profile, pretty=args.pretty)


if __name__ == "__main__":
    sys.exit(main())
