"""Entry point for the AgeInfo CLI.

Run with:
    python main.py [--locale en|id] [--time HH:MM] [--name NAME] [--agent]

The script configures structured logging, prompts the user for their
birthdate, validates the input, and prints a localized age summary.  With
``--agent`` the validated question is handed to the Strands agent instead.
"""

import argparse
import datetime
import json
import logging
import os
import sys
import time
import uuid

from ageinfo import create_agent
from ageinfo.agent import invoke_with_audit
from ageinfo.calculator import compute_age, system_clock
from ageinfo.errors import AgeInfoError
from ageinfo.formatting import LOCALE_FORMATS, format_breakdown
from ageinfo.locale_detection import parse_accept_language
from ageinfo.messages import render_summary
from ageinfo.validation import parse_birth_input

logger: logging.Logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure logging format based on the LOG_FORMAT environment variable.

    Set LOG_FORMAT=json for structured JSON output (CloudWatch-friendly).
    Any other value (or absent) falls back to human-readable plaintext.
    """
    log_format = os.environ.get("LOG_FORMAT", "text").lower()

    if log_format == "json":
        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload: dict = {
                    "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                }
                # Merge any extra fields passed via logger.info(..., extra={...})
                for key, value in record.__dict__.items():
                    if key not in logging.LogRecord.__dict__ and not key.startswith("_"):
                        payload[key] = value
                return json.dumps(payload, default=str)

        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Calculate your exact age.")
    parser.add_argument(
        "--locale",
        default=None,
        choices=sorted(LOCALE_FORMATS),
        help="Output language. Defaults to the language in $LANG.",
    )
    parser.add_argument("--time", dest="birth_time", default=None, help="Time of birth, HH:MM.")
    parser.add_argument("--name", default=None, help="Name to greet in the summary.")
    parser.add_argument(
        "--agent",
        action="store_true",
        help="Ask the Bedrock-backed assistant instead of printing the summary locally.",
    )
    return parser


def run(argv: list[str] | None = None) -> None:
    """Configure logging, read a birthdate, and print the age.

    Invalid input prints the validation message and exits with code 1 so
    that callers (shell scripts, Docker health checks, etc.) can detect
    failure cleanly.

    After a successful calculation a structured audit record is emitted via
    ``logger.info`` containing session_id, timestamp (ISO UTC), elapsed_ms
    and the locale.  Birthdates are intentionally excluded from the log to
    avoid retaining PII.
    """
    args = _build_parser().parse_args(argv)
    _configure_logging()

    locale = args.locale or parse_accept_language(os.environ.get("LANG"))

    print("Welcome to AgeInfo!")
    birthdate_raw = input("Please enter your birthdate (YYYY-MM-DD, e.g. 1990-05-15): ").strip()

    now = system_clock()
    try:
        birth = parse_birth_input(birthdate_raw, args.birth_time, name=args.name, now=now)
    except AgeInfoError as exc:
        print(f"Error: '{birthdate_raw}' was rejected. {exc}")
        sys.exit(1)

    session_id = str(uuid.uuid4())
    start = time.monotonic()

    if args.agent:
        prompt = f"My birthdate is {birth.birth.date().isoformat()}"
        if birth.has_time:
            prompt += f" at {birth.birth.time().isoformat(timespec='minutes')}"
        prompt += f". How old am I? Please answer with locale {locale}."
        invoke_with_audit(create_agent(), prompt, session_id=session_id)
    else:
        formatted = format_breakdown(compute_age(birth.birth, now), locale)
        print(
            render_summary(
                formatted,
                locale,
                birth_date=birth.birth.date(),
                name=birth.name,
                include_clock=birth.has_time,
            )
        )

    elapsed_ms = (time.monotonic() - start) * 1000
    logger.info(
        "age_calculation",
        extra={
            "session_id": session_id,
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "elapsed_ms": round(elapsed_ms, 1),
            "locale": locale,
            "mode": "agent" if args.agent else "local",
        },
    )


if __name__ == "__main__":
    run()
