#!/usr/bin/env python3
"""
MimbarPro script studio: CLI entry point.

Generates a Ramadhan sermon (kultum) script from a producer, previews
its structure, exports a print-ready PDF, or scrolls it as a console
teleprompter.

Usage::

    python generate_script.py naskah.pdf --topic "Sabar: Intisari Ibadah Puasa"
    python generate_script.py --from-json saved.json --preview-script
    python generate_script.py out.pdf --from-json saved.json --preview-pages debug/
    python generate_script.py --from-json saved.json --teleprompter --speed 3

Verbosity levels::

    -v 0   Quiet: warnings and errors only.
    -v 1   Normal: phase summaries and progress bars (default).
    -v 2   Debug: per-block detail, all internal decisions.
"""

import argparse
import asyncio
import logging
import sys

from mimbar.errors import ScriptError
from mimbar.export.pdf_exporter import render_previews
from mimbar.pipeline import ScriptConfig, ScriptPipeline
from mimbar.producer import (
    AUDIENCES,
    DURATIONS,
    RAMADHAN_TOPICS,
    TONES,
    FileScriptProducer,
    ScriptRequest,
)
from mimbar.script.models import RenderMode
from mimbar.script.preview import document_lines, preview_document
from mimbar.session import DocumentSession
from mimbar.teleprompter import MAX_SPEED, TerminalViewport, run_teleprompter

logger = logging.getLogger("mimbar")

# Mapping from --verbose integer to logging level
_VERBOSITY_MAP = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


# ------------------------------------------------------------------
# Argument parsing
# ------------------------------------------------------------------


def _speed_level(value: str) -> int:
    """Parse a teleprompter speed level (0-5)."""
    try:
        level = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid speed '{value}'. Use 0-{MAX_SPEED}.")
    if not 0 <= level <= MAX_SPEED:
        raise argparse.ArgumentTypeError(f"Speed must be between 0 and {MAX_SPEED}.")
    return level


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser with all studio options."""
    defaults = ScriptRequest()
    p = argparse.ArgumentParser(
        description="Generate, paginate and export a kultum script.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  python generate_script.py naskah.pdf --topic \"Sabar\"\n"
            "  python generate_script.py --from-json saved.json --preview-script\n"
            "  python generate_script.py --from-json saved.json --teleprompter\n"
        ),
    )

    # -- Positional --------------------------------------------------------
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output PDF file. Defaults to Naskah_MimbarPro_<topic>.pdf "
        "unless only previewing.",
    )

    # -- Request -----------------------------------------------------------
    request = p.add_argument_group("request")
    request.add_argument("--topic", default=defaults.topic, help="Sermon topic")
    request.add_argument(
        "--audience",
        default=defaults.audience,
        help=f"Audience (default: {defaults.audience}). Known: {', '.join(AUDIENCES)}",
    )
    request.add_argument(
        "--duration",
        default=defaults.duration,
        help=f"Duration bucket (default: {defaults.duration}). "
        f"Known: {', '.join(DURATIONS)}",
    )
    request.add_argument(
        "--tone",
        default=defaults.tone,
        help=f"Tone (default: {defaults.tone}). Known: {', '.join(TONES)}",
    )
    request.add_argument(
        "--list-topics",
        action="store_true",
        help="List suggested Ramadhan topics, then exit",
    )

    # -- Producer ----------------------------------------------------------
    producer = p.add_argument_group("producer")
    producer.add_argument(
        "--from-json",
        default=None,
        metavar="FILE",
        help="Use a saved producer response instead of calling the endpoint",
    )
    producer.add_argument(
        "--endpoint",
        default=None,
        metavar="URL",
        help="Producer endpoint (default: $MIMBAR_PRODUCER_URL)",
    )

    # -- Presentation ------------------------------------------------------
    present = p.add_argument_group("presentation")
    present.add_argument(
        "--font-size",
        type=int,
        default=None,
        metavar="PX",
        help="Screen font size, 16-48 (default: 24)",
    )
    present.add_argument(
        "--teleprompter",
        action="store_true",
        help="Scroll the script in the console instead of exporting",
    )
    present.add_argument(
        "--speed",
        type=_speed_level,
        default=3,
        metavar="N",
        help=f"Teleprompter speed level 0-{MAX_SPEED} (default: 3)",
    )
    present.add_argument(
        "--line-height",
        type=int,
        default=36,
        metavar="PX",
        help="Pixels of scrolling per console line (default: 36)",
    )

    # -- Debug / output control --------------------------------------------
    debug = p.add_argument_group("debug & output")
    debug.add_argument(
        "--preview-script",
        action="store_true",
        help="Print the render tree without exporting",
    )
    debug.add_argument(
        "--preview-pages",
        default=None,
        metavar="DIR",
        help="Save PNG previews of the exported pages to DIR",
    )
    debug.add_argument(
        "-v",
        "--verbose",
        type=int,
        choices=[0, 1, 2],
        default=1,
        help="Verbosity: 0=quiet, 1=normal (default), 2=debug",
    )
    debug.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars",
    )

    return p


# ------------------------------------------------------------------
# Logging setup
# ------------------------------------------------------------------


def _configure_logging(verbosity: int) -> None:
    """
    Set up the ``mimbar`` logger.

    At verbosity 0 (WARNING), uses a minimal format. At 1+ (INFO /
    DEBUG), includes more context for traceability.
    """
    level = _VERBOSITY_MAP.get(verbosity, logging.INFO)

    if level <= logging.DEBUG:
        fmt = "%(asctime)s %(name)s %(levelname)s: %(message)s"
        datefmt = "%H:%M:%S"
    elif level <= logging.INFO:
        fmt = "%(message)s"
        datefmt = None
    else:
        fmt = "%(levelname)s: %(message)s"
        datefmt = None

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger("mimbar")
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    # Suppress noisy third-party loggers regardless of verbosity
    for name in ("PIL", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)


# ------------------------------------------------------------------
# Sub-commands
# ------------------------------------------------------------------


def _cmd_list_topics() -> None:
    """Print the suggested topics, then exit."""
    logger.info("Suggested Ramadhan topics:")
    logger.info("")
    for i, topic in enumerate(RAMADHAN_TOPICS, 1):
        logger.info("  %2d. %s", i, topic)


def _cmd_teleprompter(pipeline: ScriptPipeline, session: DocumentSession, args) -> None:
    """Scroll the screen render in the console until the end."""
    document = pipeline.render(session, RenderMode.SCREEN)
    viewport = TerminalViewport(document_lines(document), line_height=args.line_height)
    try:
        scrolled = asyncio.run(
            run_teleprompter(
                viewport,
                args.speed,
                tick_interval_ms=pipeline.config.tick_interval_ms,
                carry_per_level=pipeline.config.carry_per_level,
            )
        )
    except KeyboardInterrupt:
        logger.info("Teleprompter stopped")
        return
    logger.info("Teleprompter finished after %d px", scrolled)


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------


def main():
    """Parse arguments, configure logging, and run the studio."""
    parser = _build_parser()
    args = parser.parse_args()

    _configure_logging(args.verbose)

    if args.list_topics:
        _cmd_list_topics()
        return

    config = ScriptConfig.from_env(
        producer_url=args.endpoint,
        disable_tqdm=args.no_progress or args.verbose == 0,
    )
    producer = FileScriptProducer(args.from_json) if args.from_json else None
    pipeline = ScriptPipeline(config, producer=producer)

    session = pipeline.new_session(
        ScriptRequest(
            topic=args.topic,
            audience=args.audience,
            duration=args.duration,
            tone=args.tone,
        )
    )
    if args.font_size is not None:
        session.font_size = args.font_size
        session.adjust_font_size(0)

    logger.info("MimbarPro Script Studio")
    logger.info("  Topic:    %s", session.request.topic)
    logger.info("  Audience: %s", session.request.audience)
    logger.info("  Duration: %s", session.request.duration)
    logger.info("  Tone:     %s", session.request.tone)
    logger.info("  Producer: %s", pipeline.producer)

    try:
        pipeline.generate(session)
    except ScriptError as e:
        logger.error("%s", e)
        sys.exit(1)

    if args.preview_script:
        logger.info("\n%s", preview_document(pipeline.render(session, RenderMode.PRINT)))
        if not args.output:
            return

    if args.teleprompter:
        _cmd_teleprompter(pipeline, session, args)
        return

    try:
        result = pipeline.export_pdf(session, args.output)
    except ScriptError as e:
        logger.error("%s", e)
        sys.exit(1)

    if args.preview_pages:
        try:
            render_previews(
                result.output_path, args.preview_pages, scale=config.preview_scale
            )
        except ScriptError as e:
            logger.error("%s", e)
            sys.exit(1)


if __name__ == "__main__":
    main()
