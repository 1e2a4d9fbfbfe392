"""Edition build check.

Usage:
    python -m complianceos_core.editions check              # Resolve and verify
    python -m complianceos_core.editions check --json       # Machine-readable output
    python -m complianceos_core.editions check --require-premium
                                                            # Fail unless premium resolves

Resolves the edition the way the server would, verifies the premium
module's shape and dry-runs its registrar against a scratch registry, so
an unknown slot or a drifted signature fails the build instead of a
request.
"""

import argparse
import json
import sys

from complianceos_core.config import ConfigLoader
from complianceos_core.editions.resolver import resolve_edition
from complianceos_core.errors import ComplianceError
from complianceos_core.extensions.registry import SlotRegistry
from complianceos_core.types import Edition

# Exit codes (following sysexits.h convention)
EX_OK = 0
EX_CONFIG = 78


def run_check(
    config_path: str | None = None,
    require_premium: bool = False,
    as_json: bool = False,
) -> int:
    """Run the build check and print the outcome.

    Returns:
        Process exit code
    """
    try:
        config = ConfigLoader().load(config_path)
        resolution = resolve_edition(
            module_name=config.edition.premium_module,
            disable=config.edition.disable_premium,
        )
        slot_counts: dict[str, int] = {}
        if resolution.registrar is not None:
            scratch = SlotRegistry()
            resolution.registrar(scratch)
            slot_counts = scratch.counts()
    except ComplianceError as e:
        if as_json:
            print(json.dumps({"ok": False, "error": e.to_dict()}, default=str))
        else:
            print(f"Edition check failed: [{e.code}] {e.message}", file=sys.stderr)
            if e.detail:
                print(f"  {e.detail}", file=sys.stderr)
            if e.suggestion:
                print(f"  {e.suggestion}", file=sys.stderr)
        return EX_CONFIG

    ok = not require_premium or resolution.edition == Edition.PREMIUM
    result = {"ok": ok, **resolution.to_dict(), "slots": slot_counts}

    if as_json:
        print(json.dumps(result))
    else:
        print(f"Edition: {resolution.edition.value}")
        print(f"  module:   {resolution.module_name}")
        print(f"  present:  {resolution.present}")
        print(f"  disabled: {resolution.disabled}")
        for slot, count in sorted(slot_counts.items()):
            print(f"  slot {slot}: {count} component(s)")
        if not ok:
            print("Premium edition required but not resolved", file=sys.stderr)

    return EX_OK if ok else EX_CONFIG


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="complianceos-edition",
        description="Resolve and verify the ComplianceOS edition",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Resolve the edition and verify the premium module",
    )
    check_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config file (default: resolved like the server)",
    )
    check_parser.add_argument(
        "--require-premium",
        action="store_true",
        help="Fail unless the premium edition resolves",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Print the result as JSON",
    )

    args = parser.parse_args(argv)

    if args.command == "check":
        return run_check(
            config_path=args.config,
            require_premium=args.require_premium,
            as_json=args.as_json,
        )
    return EX_CONFIG


if __name__ == "__main__":
    sys.exit(main())
