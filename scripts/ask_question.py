#!/usr/bin/env python3
"""Answer a single quiz question from the command line."""
import sys
import json
import asyncio
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models.question import SearchMode
from core.services.errors.error_handler import ErrorHandler
from core.services.search.search_service import QuizSearchService


async def ask(question: str, mode: SearchMode) -> int:
    """Run one search and print the answer as JSON. Returns the exit code."""
    service = QuizSearchService()
    try:
        answer = await service.answer(question, mode)
    except Exception as e:
        message = ErrorHandler.handle_search_error(e, question)
        print(json.dumps({"error": message}, ensure_ascii=False), file=sys.stderr)
        return 1

    print(json.dumps(answer.model_dump(), ensure_ascii=False, indent=2))
    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Search the web for the answer to a quiz question",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fast mode, question as an argument
  python ask_question.py "下列哪项属于……？ A. … B. … C. …"

  # Accurate mode, question read from stdin
  cat question.txt | python ask_question.py - --mode accurate
        """
    )

    parser.add_argument(
        "question",
        type=str,
        help="Full question text, or '-' to read it from stdin"
    )

    parser.add_argument(
        "--mode",
        "-m",
        choices=[mode.value for mode in SearchMode],
        default=SearchMode.FAST.value,
        help="fast returns the first answer; accurate also verifies it (default: fast)"
    )

    args = parser.parse_args()

    question = sys.stdin.read() if args.question == "-" else args.question
    sys.exit(asyncio.run(ask(question.strip(), SearchMode(args.mode))))


if __name__ == "__main__":
    main()
