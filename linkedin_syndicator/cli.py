"""CLI entry point for linkedin-syndicator.

Usage:
    linkedin-syndicate post FILE
    linkedin-syndicate preview FILE
    linkedin-syndicate status

FILE is a JSON document of JF2 post properties, or ``-`` for stdin.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from linkedin_syndicator.config import load_config, SyndicatorConfig
from linkedin_syndicator.content import build_article_content, build_commentary
from linkedin_syndicator.factory import build_syndicator
from linkedin_syndicator.properties import PostProperties
from linkedin_syndicator.syndicator import SyndicationError


def _read_properties(source: str) -> dict[str, Any]:
    text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    data = json.loads(text)
    # Accept either bare properties or a {"properties": {...}} wrapper.
    if isinstance(data, dict) and isinstance(data.get("properties"), dict):
        data = data["properties"]
    if not isinstance(data, dict):
        raise ValueError("Post properties must be a JSON object")
    return data


def cmd_post(cfg: SyndicatorConfig, source: str) -> None:
    syndicator = build_syndicator(cfg)
    try:
        url = syndicator.syndicate(_read_properties(source))
    except SyndicationError as exc:
        print(f"[{exc.status}] {exc}", file=sys.stderr)
        sys.exit(1)
    print(url)


def cmd_preview(cfg: SyndicatorConfig, source: str) -> None:
    properties = PostProperties.from_jf2(_read_properties(source))
    preview: dict[str, Any] = {
        "post_type": properties.post_type,
        "commentary": build_commentary(
            properties, limit=cfg.character_limit, is_article=properties.is_article,
        ),
    }
    if properties.is_article:
        preview["article"] = build_article_content(properties).to_payload()
        if properties.photos and properties.photos[0].url:
            preview["thumbnail_source"] = properties.photos[0].url
    print(json.dumps(preview, indent=2, ensure_ascii=False))


def cmd_status(cfg: SyndicatorConfig) -> None:
    print(f"Live mode:       {cfg.live_mode}")
    print(f"Access token:    {'configured' if cfg.access_token else 'not configured'}")
    print(f"API version:     {cfg.posts_api_version}")
    print(f"Character limit: {cfg.character_limit}")
    print(f"Author:          {cfg.author_name or 'not configured'}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="linkedin-syndicate", description="Syndicate JF2 posts to LinkedIn",
    )
    parser.add_argument("--config", type=Path, default=None, help="Config YAML file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    post_p = sub.add_parser("post", help="Create a LinkedIn post from JF2 properties")
    post_p.add_argument("file", help="JSON file of JF2 properties, or - for stdin")

    preview_p = sub.add_parser("preview", help="Show the payload without posting")
    preview_p.add_argument("file", help="JSON file of JF2 properties, or - for stdin")

    sub.add_parser("status", help="Show configuration status")

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(asctime)s - %(name)s - %(message)s",
    )

    cfg = load_config(args.config)

    if args.command == "post":
        cmd_post(cfg, args.file)
    elif args.command == "preview":
        cmd_preview(cfg, args.file)
    elif args.command == "status":
        cmd_status(cfg)


if __name__ == "__main__":
    main()
