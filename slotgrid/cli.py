"""
Slotgrid CLI
============

Operator diagnostics for slot matching.

Usage:
    slotgrid match --stereotype '{"browserName": "chrome"}' --request '{"browserName": "chrome"}'
    slotgrid match --stereotype @node.json --request @request.json --cap se:downloadsEnabled=true
    slotgrid compare 131.0.6778.85 131
    slotgrid eligible --slots slots.json --request '{"browserName": "firefox"}'
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional, Tuple

from .capabilities import Capabilities, CapabilitiesFormatError
from .config import SlotgridSettings
from .distributor import Slot, SlotEvaluator
from .matching.version import compare

logger = logging.getLogger("slotgrid.cli")


def parse_capability(cap_str: str) -> Tuple[str, Any]:
    """Parse a capability string like 'key=value' into (key, value).

    Values are auto-coerced: 'true'/'false' -> bool, numeric -> int/float.
    A bare key is read as True.
    """
    if "=" not in cap_str:
        return cap_str.strip(), True

    key, value = cap_str.split("=", 1)
    key = key.strip()
    value = value.strip()

    if value.lower() == "true":
        return key, True
    if value.lower() == "false":
        return key, False

    try:
        return key, int(value)
    except ValueError:
        pass
    try:
        return key, float(value)
    except ValueError:
        pass

    return key, value


def load_capabilities(arg: str, overrides: Optional[List[str]] = None) -> Capabilities:
    """Read capabilities from inline JSON or '@path', then apply KEY=VALUE overrides."""
    if arg.startswith("@"):
        try:
            with open(arg[1:]) as f:
                text = f.read()
        except OSError as e:
            raise CapabilitiesFormatError(f"Cannot read {arg[1:]}: {e}") from e
    else:
        text = arg

    caps = Capabilities.from_json(text)
    if not overrides:
        return caps

    data = caps.as_dict()
    for cap_str in overrides:
        key, value = parse_capability(cap_str)
        data[key] = value
    return Capabilities(data)


def load_slots(path: str) -> List[Slot]:
    """Read a JSON list of slots ({"node_id", "slot_id", "stereotype"})."""
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CapabilitiesFormatError(f"Cannot load slots from {path}: {e}") from e
    if not isinstance(data, list):
        raise CapabilitiesFormatError(f"{path} must contain a JSON list of slots")
    try:
        return [Slot.deserialize(item) for item in data]
    except (TypeError, ValueError) as e:
        raise CapabilitiesFormatError(f"Invalid slot in {path}: {e}") from e


def _cmd_match(args: argparse.Namespace, settings: SlotgridSettings) -> int:
    stereotype = load_capabilities(args.stereotype)
    requested = load_capabilities(args.request, args.cap)
    reason = settings.build_matcher().explain(stereotype, requested)
    if reason is None:
        print("match")
        return 0
    print(f"no match: {reason}")
    return 1


def _cmd_compare(args: argparse.Namespace, settings: SlotgridSettings) -> int:
    print(compare(args.a, args.b))
    return 0


def _cmd_eligible(args: argparse.Namespace, settings: SlotgridSettings) -> int:
    slots = load_slots(args.slots)
    requested = load_capabilities(args.request, args.cap)
    eligible = SlotEvaluator.from_settings(settings).eligible_slots(slots, requested)
    for slot in eligible:
        print(slot.key)
    return 0 if eligible else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slotgrid",
        description="Check whether grid slots satisfy requested session capabilities",
    )
    parser.add_argument(
        "--loglevel",
        default=None,
        choices=["debug", "info", "warning", "error", "critical"],
        help="Log level (default: SLOTGRID_LOG_LEVEL or info)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    match = sub.add_parser("match", help="Match one stereotype against a request")
    match.add_argument("--stereotype", required=True, metavar="JSON|@FILE")
    match.add_argument("--request", required=True, metavar="JSON|@FILE")
    match.add_argument(
        "--cap",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Add a requested capability (e.g., se:downloadsEnabled=true). Repeatable.",
    )
    match.set_defaults(func=_cmd_match)

    cmp = sub.add_parser("compare", help="Compare two browser versions")
    cmp.add_argument("a")
    cmp.add_argument("b")
    cmp.set_defaults(func=_cmd_compare)

    eligible = sub.add_parser("eligible", help="List slots able to host a request")
    eligible.add_argument("--slots", required=True, metavar="FILE")
    eligible.add_argument("--request", required=True, metavar="JSON|@FILE")
    eligible.add_argument("--cap", action="append", default=[], metavar="KEY=VALUE")
    eligible.set_defaults(func=_cmd_eligible)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = SlotgridSettings.from_env()

    logging.basicConfig(
        level=getattr(logging, (args.loglevel or settings.log_level).upper()),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    try:
        return args.func(args, settings)
    except CapabilitiesFormatError as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
