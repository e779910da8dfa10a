#!/usr/bin/env python3
"""Utility script to extract action items from a local transcript file.

This script:
1. Reads the transcript file (.txt, .md, .doc, .docx) as plain text
2. Sends it to a running analyzer (POST /api/analyze), or with --local runs
   the extraction agent in-process with the real OpenAI API
3. Prints the action items as a table or a list

Usage:
    python scripts/analyze_transcript.py <FILE> [--base-url URL] [--view table|list] [--local]
"""
import argparse
import asyncio
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add parent directory to path to import project packages
sys.path.insert(0, str(Path(__file__).parent.parent))

from client.analyze_client import AnalyzeClient, run_analysis
from client.files import UnsupportedFileError, read_transcript_file
from client.render import render_session
from client.session import TranscriptSession, ViewMode
from services.action_extractor import (
    ActionExtractionError,
    ActionExtractor,
    build_action_agent,
)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract action items from a meeting transcript"
    )
    parser.add_argument("file", type=Path, help="Transcript file to analyze")
    parser.add_argument(
        "--base-url",
        default=None,
        help="Analyzer server URL (default: $ANALYZER_BASE_URL or http://localhost:8000)"
    )
    parser.add_argument(
        "--view",
        choices=[mode.value for mode in ViewMode],
        default=ViewMode.table.value,
        help="How to display the action items"
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="Run the extraction agent in-process instead of calling the server"
    )
    return parser.parse_args(argv)


async def analyze_locally(session: TranscriptSession) -> None:
    """Run one analysis through the extractor directly."""
    extractor = ActionExtractor(build_action_agent())
    token = session.begin_analysis()
    try:
        result = await extractor.extract(session.transcript, request_id="local")
    except ActionExtractionError as e:
        session.fail(token, str(e))
        return
    session.complete(token, result.actions)


async def main(argv=None) -> int:
    """Main execution function."""
    args = parse_args(argv)

    session = TranscriptSession()
    try:
        transcript = read_transcript_file(args.file)
    except (UnsupportedFileError, OSError) as e:
        session.load_failed(args.file.name, str(e))
        print(render_session(session))
        return 1

    session.load_file(args.file.name, transcript)
    session.set_view_mode(ViewMode(args.view))

    if not session.can_analyze:
        print(f"Error: {args.file.name} is empty")
        return 1

    print(f"Reading transcript from: {args.file}")
    print(f"Transcript length: {len(transcript)} characters")

    if args.local:
        await analyze_locally(session)
    else:
        async with AnalyzeClient(base_url=args.base_url) as client:
            await run_analysis(session, client)

    print()
    print(render_session(session))
    return 1 if session.error else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
