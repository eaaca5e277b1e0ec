"""
Main entry point for the Transcript Digest command line tool.
"""

import sys
import argparse
from typing import List, Optional
from pydantic import ValidationError

from transcript_digest.core.summarizer import TranscriptSummarizer
from transcript_digest.models.schemas import SummarizerConfig, TranscriptDigest
from transcript_digest.config import config
from transcript_digest.utils.error_handling import EmptyInputError, InputTooLargeError
from transcript_digest.utils.helpers import load_text
from transcript_digest.utils.logger import logging

RULE = "=" * 50


def format_report(digest: TranscriptDigest) -> str:
    """Render a digest as the plain text console report."""
    lines = [RULE, "  TRANSCRIPT SUMMARY", RULE]
    lines += ["", f"Word count: {digest.word_count} words", ""]

    lines += ["--- SUMMARY ---", ""]
    for sentence in digest.summary:
        lines += [f"  - {sentence}", ""]

    lines += ["--- KEY TOPICS ---", ""]
    lines += [f"  {', '.join(digest.keywords)}", ""]

    lines += ["--- KEY TAKEAWAYS ---", ""]
    for i, takeaway in enumerate(digest.takeaways, start=1):
        lines += [f"  {i}. {takeaway}", ""]

    lines.append(RULE)
    return "\n".join(lines)


def summarize_transcript(
    path: str = config.DEFAULT_TRANSCRIPT_FILE,
    keyword_count: Optional[int] = None,
    takeaway_count: Optional[int] = None,
) -> TranscriptDigest:
    """
    Read a transcript and build its digest.

    Args:
        path: Transcript file path, "-" for standard input
        keyword_count: Optional override for the number of keywords
        takeaway_count: Optional override for the number of takeaways

    Returns:
        TranscriptDigest object
    """
    summarizer_config = SummarizerConfig.from_app_config(
        keyword_count=keyword_count,
        takeaway_count=takeaway_count,
    )
    logging.info(f"Reading transcript from: {path}")
    text = load_text(path)

    summarizer = TranscriptSummarizer(summarizer_config)
    return summarizer.summarize(text, source=path)


def describe_errors(error: ValidationError) -> str:
    """One line summary of a settings validation error."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'settings'}: {err['msg']}"
        for err in error.errors()
    )


def count_arg(value: str) -> int:
    count = int(value)
    if count < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative count, got {value}")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extractive transcript summarizer")
    parser.add_argument("path", nargs="?", default=config.DEFAULT_TRANSCRIPT_FILE,
                        help="Transcript text file, or - to read standard input")
    parser.add_argument("--json", action="store_true",
                        help="Print the digest as JSON instead of a text report")
    parser.add_argument("--keywords", type=count_arg, metavar="N",
                        help="Number of key topics to list")
    parser.add_argument("--takeaways", type=count_arg, metavar="N",
                        help="Number of key takeaways to list")
    return parser


def main(argv: Optional[List[str]] = None):
    """Main function to run the application from command line."""
    args = build_parser().parse_args(argv)

    try:
        digest = summarize_transcript(args.path, args.keywords, args.takeaways)
    except FileNotFoundError:
        print(f"ERROR: No {args.path} file found!")
        print(f"Paste your YouTube transcript into a file called {args.path} first.")
        sys.exit(1)
    except UnicodeDecodeError:
        print(f"ERROR: {args.path} is not valid UTF-8 text!")
        sys.exit(1)
    except OSError as e:
        print(f"ERROR: Cannot read {args.path}: {e.strerror or e}")
        sys.exit(1)
    except ValidationError as e:
        print(f"ERROR: Invalid settings: {describe_errors(e)}")
        sys.exit(1)
    except EmptyInputError:
        source = "standard input" if args.path == "-" else args.path
        print(f"ERROR: {source} is empty!")
        sys.exit(1)
    except InputTooLargeError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    if args.json:
        print(digest.model_dump_json(indent=2))
    else:
        print(format_report(digest))


if __name__ == "__main__":
    main()
