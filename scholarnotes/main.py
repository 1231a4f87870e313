"""
ScholarNotes - Main Application Entry Point

With no arguments the CustomTkinter window is launched. Given a PDF, the
notes pipeline runs headless and the result is written as JSON and/or an
HTML report (or the executive summary is printed).

    scholarnotes
    scholarnotes lecture.pdf --output notes.json --html notes.html
    scholarnotes lecture.pdf --offline
"""

import argparse
import json
import sys
from pathlib import Path

from scholarnotes.ai import StubSummarizationClient
from scholarnotes.errors import NotesPipelineError, user_facing_message
from scholarnotes.extraction import validate_upload
from scholarnotes.logging_config import error, info
from scholarnotes.summarization import FixedIntervalThrottle, NotesPipeline
from scholarnotes.ui.note_formatter import render_html_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scholarnotes",
        description="Generate layered study notes from a PDF."
    )
    parser.add_argument("file", nargs="?", type=Path,
                        help="PDF to process. Omit to open the desktop app.")
    parser.add_argument("--output", type=Path,
                        help="Write the processed content as JSON to this path.")
    parser.add_argument("--html", type=Path,
                        help="Write an HTML notes report to this path.")
    parser.add_argument("--offline", action="store_true",
                        help="Use the offline summarizer instead of the API.")
    parser.add_argument("--interval", type=float, default=None,
                        help="Seconds to wait between summarization calls.")
    return parser


def launch_gui():
    """Start the desktop application."""
    import customtkinter as ctk

    from scholarnotes.ui.main_window import MainWindow

    # Set appearance mode (light/dark/system)
    ctk.set_appearance_mode("System")
    ctk.set_default_color_theme("blue")

    app = MainWindow()
    app.mainloop()


class ProgressLine:
    """Single self-overwriting progress line on stdout."""

    def __init__(self):
        self.open = False

    def __call__(self, percent: float):
        print(f"\rProgress: {percent:5.1f}%", end="", flush=True)
        self.open = True
        if percent >= 100:
            self.close()

    def close(self):
        """Finish the line so later output starts on its own line."""
        if self.open:
            print()
            self.open = False


def build_pipeline(offline: bool, interval: float | None) -> NotesPipeline:
    """Pipeline for a headless run; offline runs skip the throttle unless asked."""
    if offline:
        client = StubSummarizationClient()
        throttle = FixedIntervalThrottle(interval if interval is not None else 0.0)
    else:
        client = None
        throttle = FixedIntervalThrottle(interval) if interval is not None else None
    return NotesPipeline(client=client, throttle=throttle)


def run_headless(args) -> int:
    """Process one PDF from the command line. Returns the exit code."""
    progress_line = ProgressLine()
    try:
        path = validate_upload(args.file)
        pipeline = build_pipeline(args.offline, args.interval)
        info(f"[CLI] Processing {path.name}")
        content = pipeline.run(path, on_progress=progress_line)
    except NotesPipelineError as e:
        error(f"[CLI] {type(e).__name__}: {e}")
        progress_line.close()
        print(user_facing_message(e), file=sys.stderr)
        return 1

    if args.output:
        args.output.write_text(json.dumps(content.to_dict(), indent=2), encoding="utf-8")
        print(f"Notes written to {args.output}")
    if args.html:
        args.html.write_text(render_html_report(content, title=path.stem), encoding="utf-8")
        print(f"HTML report written to {args.html}")
    if not (args.output or args.html):
        print(content.executive_summary)
    return 0


def main(argv=None) -> int:
    """
    Main entry point for ScholarNotes.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.interval is not None and args.interval < 0:
        parser.error("--interval must be zero or positive")

    if args.file is None:
        launch_gui()
        return 0
    return run_headless(args)


if __name__ == "__main__":
    sys.exit(main())
