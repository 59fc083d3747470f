"""
Command Line Interface for Deck Compiler

Modes, checked in order:
- --auth: run the OAuth flow and store a token
- --config FILE: build a deck from a static slide config (JSON/YAML)
- --template FILE --data FILE: fill a JSON template, then build
- --input FILE (or stdin): build the legacy code review deck
"""

import sys
import json
import logging
import argparse
from typing import Any, Callable, List, Optional

from .config import SlideConfig, load_config, load_data, load_template
from .errors import DeckCompilerError, MissingArgumentError, NoInputError
from .generator import (
    GenerationResult,
    compile_config,
    generate_slides_from_config,
    generate_slides_from_review,
)
from .review import parse_review_data

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("url", "json")


def default_gateway_factory():
    """Build an authenticated Google Slides gateway."""
    from .auth import get_credentials
    from .gateway import GoogleSlidesGateway

    return GoogleSlidesGateway.from_credentials(get_credentials())


def output_result(result: GenerationResult, fmt: str) -> None:
    if fmt == "json":
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(result.presentation_url)


def read_stdin() -> str:
    """Read review JSON piped on stdin."""
    if sys.stdin.isatty():
        raise NoInputError(
            "No input received. Use --config, --template, or provide JSON via stdin."
        )
    return sys.stdin.read()


def _load_slide_config(args: argparse.Namespace) -> Optional[SlideConfig]:
    """Load the config for --config or --template mode, or None for review mode."""
    if args.config:
        config = load_config(args.config)
    elif args.template:
        if not args.data:
            raise MissingArgumentError("--template requires --data to provide values")
        config = load_template(args.template, load_data(args.data))
    else:
        return None

    if args.presentation_id:
        logger.debug("Targeting existing presentation %s", args.presentation_id)
        config = config.model_copy(update={"presentation_id": args.presentation_id})
    return config


def run(args: argparse.Namespace, gateway_factory: Callable[[], Any]) -> int:
    """Execute the selected mode."""
    if args.output not in OUTPUT_FORMATS:
        raise DeckCompilerError(
            f"--output must be one of: {', '.join(OUTPUT_FORMATS)} (got '{args.output}')"
        )

    if args.auth:
        from .auth import run_auth_flow

        run_auth_flow()
        print("Authentication successful.")
        return 0

    config = _load_slide_config(args)

    if config is not None:
        if args.dry_run:
            print(json.dumps(compile_config(config), indent=2))
            return 0
        result = generate_slides_from_config(gateway_factory(), config)
        output_result(result, args.output)
        return 0

    if args.input:
        with open(args.input, "r", encoding="utf-8") as f:
            text = f.read()
        source = args.input
    else:
        text = read_stdin()
        source = "<stdin>"

    review = parse_review_data(text, source)
    result = generate_slides_from_review(gateway_factory(), review)
    output_result(result, args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deck-compiler",
        description="Generate Google Slides decks from slide configs or review data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --auth
  %(prog)s --config deck.json
  %(prog)s --config deck.yaml --presentation-id 1AbC... --output json
  %(prog)s --template weekly.json --data metrics.json
  %(prog)s --input review.json
  cat review.json | %(prog)s
        """
    )

    parser.add_argument('--auth', action='store_true', help='Run interactive OAuth authentication flow')
    parser.add_argument('--config', '-c', metavar='FILE', help='Slide config file (JSON/YAML, static content)')
    parser.add_argument('--template', '-t', metavar='FILE', help='Slide template JSON file (with {{variables}})')
    parser.add_argument('--data', '-d', metavar='FILE', help='Data file (JSON/YAML) for template interpolation')
    parser.add_argument('--input', '-i', metavar='FILE', help='Review data JSON for the legacy review deck (default: stdin)')
    parser.add_argument('--output', '-o', default='url', help='Output format: url or json (default: url)')
    parser.add_argument('--presentation-id', metavar='ID', help='Replace the slides of an existing presentation instead of creating one')
    parser.add_argument('--dry-run', action='store_true', help='Print compiled request batches for --config/--template and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show detailed output')

    return parser


def main(
    argv: Optional[List[str]] = None,
    gateway_factory: Callable[[], Any] = default_gateway_factory,
) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return run(args, gateway_factory)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
