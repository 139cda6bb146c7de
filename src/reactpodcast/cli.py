"""Command-line interface for reactpodcast.

Provides commands for fetching the episode listing and running the API.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from reactpodcast.config import SimplecastSettings, get_settings
from reactpodcast.logging import setup_logging
from reactpodcast.simplecast import EpisodeFetcher


def cmd_episodes(args: argparse.Namespace) -> int:
    """Fetch the episode listing and print it."""
    settings = get_settings()
    setup_logging(log_level=settings.log_level, json_format=settings.log_json)

    fetcher = EpisodeFetcher(SimplecastSettings())
    response = asyncio.run(fetcher.fetch())

    if response is None:
        print("\nNo episodes available.")
        return 1

    if args.status:
        response.body = response.body.with_status(args.status)

    episodes = response.body.episodes.collection
    print(f"\nEpisodes found: {len(episodes)}\n")

    for i, ep in enumerate(episodes, 1):
        number = f"#{ep.number} " if ep.number is not None else ""
        print(f"{i}. {number}{ep.title}")
        print(f"   Status: {ep.status}")
        if ep.published_at:
            print(f"   Published: {ep.published_at:%Y-%m-%d}")

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(json.dumps(response.to_json_dict(), indent=2))
        print(f"\nSaved episodes to: {output_path}")

    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI server."""
    import uvicorn

    settings = get_settings()
    setup_logging(log_level=settings.log_level, json_format=settings.log_json)

    print(f"\nStarting reactpodcast API on {args.host}:{args.port}")
    uvicorn.run("reactpodcast.api:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def main() -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="reactpodcast",
        description="React Podcast - Simplecast episode listing",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # episodes command
    ep_parser = subparsers.add_parser("episodes", help="Fetch the episode listing")
    ep_parser.add_argument(
        "--status", "-s", choices=["published", "draft"], help="Only list this status"
    )
    ep_parser.add_argument("--output", "-o", help="Output JSON file path")
    ep_parser.set_defaults(func=cmd_episodes)

    # serve command
    sv_parser = subparsers.add_parser("serve", help="Start the episode API")
    sv_parser.add_argument("--host", default="127.0.0.1", help="Host to bind (default: 127.0.0.1)")
    sv_parser.add_argument("--port", "-p", type=int, default=8000, help="Port (default: 8000)")
    sv_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    sv_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
