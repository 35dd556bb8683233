"""
cli.py - Command line interface

Usage:
    fleetwatch tree VESSEL_ID [--search TEXT] [--critical all|critical|not_critical] [--expand-all] [--json]
    fleetwatch inventory VESSEL_ID [--search TEXT] [--critical ...] [--json]
    fleetwatch stats VESSEL_ID [--json]
    fleetwatch serve [--host HOST] [--port PORT]
"""

from __future__ import annotations
from typing import List, Optional
import argparse
import asyncio
import json
import logging
import sys

from .api.client import HttpComponentRepository
from .components.display import empty_state_message
from .components.enums import ComponentTab, CriticalityFilter, SessionStatus
from .components.session import ComponentRepository, ComponentSession
from .config import get_config
from .ui.tree_view import render_ascii, render_inventory, visible_rows

logger = logging.getLogger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fleetwatch",
        description="Vessel component hierarchy dashboard",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_view_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("vessel_id", help="Vessel identifier")
        p.add_argument("--search", default="", help="Match name, serial number or asset code")
        p.add_argument(
            "--critical",
            default=CriticalityFilter.ALL.value,
            choices=[c.value for c in CriticalityFilter],
            help="Criticality filter",
        )
        p.add_argument("--json", action="store_true", help="Print JSON instead of text")

    tree = sub.add_parser("tree", help="Show installed components as a tree")
    add_view_args(tree)
    tree.add_argument("--expand-all", action="store_true", help="Show every level")

    inventory = sub.add_parser("inventory", help="List unmounted components")
    add_view_args(inventory)

    stats = sub.add_parser("stats", help="Show component counts")
    stats.add_argument("vessel_id", help="Vessel identifier")
    stats.add_argument("--json", action="store_true", help="Print JSON instead of text")

    serve = sub.add_parser("serve", help="Serve the components API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser


async def _load(repository: ComponentRepository, args: argparse.Namespace) -> ComponentSession:
    session = ComponentSession(repository, emit_events=False)
    try:
        await session.select_vessel(args.vessel_id)
    finally:
        aclose = getattr(repository, "aclose", None)
        if aclose is not None:
            await aclose()
    if session.status == SessionStatus.READY:
        session.set_search_text(getattr(args, "search", ""))
        session.set_criticality_filter(getattr(args, "critical", CriticalityFilter.ALL.value))
    return session


def run_view(args: argparse.Namespace, repository: ComponentRepository) -> int:
    """Run tree / inventory / stats against a repository, print, return exit code."""
    session = asyncio.run(_load(repository, args))

    if session.status == SessionStatus.FAILED:
        print(f"Error: {session.error}", file=sys.stderr)
        return 1

    if args.command == "stats":
        stats = session.get_statistics()
        if args.json:
            print(json.dumps(stats.to_dict(), indent=2))
        else:
            for key, value in stats.to_dict().items():
                print(f"{key:<10} {value}")
        return 0

    if args.command == "tree":
        forest = session.get_forest()
        if args.json:
            print(json.dumps([node.to_dict() for node in forest], indent=2))
            return 0
        if args.expand_all:
            session.expand_all()
        if not forest:
            print(empty_state_message(ComponentTab.INSTALLED, session.has_active_filters, args.vessel_id))
            return 0
        print(render_ascii(visible_rows(forest, session.expansion)))
        return 0

    items = session.get_inventory()
    if args.json:
        print(json.dumps([item.to_dict() for item in items], indent=2))
        return 0
    if not items:
        print(empty_state_message(ComponentTab.INVENTORY, session.has_active_filters, args.vessel_id))
        return 0
    print(render_inventory(items))
    return 0


def serve(host: str, port: int) -> int:
    import uvicorn

    from .api.endpoints import create_app

    session = ComponentSession(HttpComponentRepository())
    uvicorn.run(create_app(session), host=host, port=port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = "DEBUG" if args.verbose else get_config().log_level
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.command == "serve":
        return serve(args.host, args.port)

    return run_view(args, HttpComponentRepository())


if __name__ == "__main__":
    sys.exit(main())
