"""
Command line entry point: generate one blueprint without the web page.

Usage:
  shortforge --topic "Explain quantum computing with coffee" --platform TikTok
  shortforge --json > plan.json
"""

import argparse
import asyncio
import json
import os
import sys

from shortforge.agent.export import full_text
from shortforge.agent.planner import make_plan
from shortforge.api.options import FORM_DEFAULTS
from shortforge.api.types import validate_brief
from shortforge.core.config import settings
from shortforge.core.errors import ShortForgeError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shortforge",
        description="Plan a short-form video (hook, beats, CTA, hashtags) from a creative brief.",
    )
    parser.add_argument("--api-key", help="OpenAI API key (default: $OPENAI_API_KEY)")
    parser.add_argument("--topic", "-t", default=FORM_DEFAULTS["topic"], help="Topic / idea")
    parser.add_argument("--audience", "-a", default=FORM_DEFAULTS["audience"])
    parser.add_argument("--tone", default=FORM_DEFAULTS["tone"])
    parser.add_argument("--goal", "-g", default=FORM_DEFAULTS["goal"])
    parser.add_argument("--duration", "-d", default=FORM_DEFAULTS["duration"], help="Runtime target")
    parser.add_argument("--platform", "-p", default=FORM_DEFAULTS["platformFocus"], help="Platform focus")
    parser.add_argument("--no-captions", action="store_true", help="Skip kinetic caption cues")
    parser.add_argument("--no-broll", action="store_true", help="Skip B-roll suggestions")
    parser.add_argument("--json", action="store_true", help="Print the plan as JSON instead of text")
    return parser


MOCK_API_KEY = "mock-no-key"


def _mock_key():
    # the mock provider never sends the key anywhere
    if (settings.LLM_PROVIDER or "").lower().strip() == "mock":
        return MOCK_API_KEY
    return None


def brief_payload(args: argparse.Namespace) -> dict:
    return {
        "apiKey": args.api_key or os.getenv("OPENAI_API_KEY") or _mock_key(),
        "topic": args.topic,
        "audience": args.audience,
        "tone": args.tone,
        "goal": args.goal,
        "duration": args.duration,
        "platformFocus": args.platform,
        "includeCaptions": not args.no_captions,
        "includeBroll": not args.no_broll,
    }


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        brief = validate_brief(brief_payload(args))
        plan = asyncio.run(make_plan(None, brief))
    except ShortForgeError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(plan.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    else:
        print(full_text(plan))
    return 0


if __name__ == "__main__":
    sys.exit(main())
