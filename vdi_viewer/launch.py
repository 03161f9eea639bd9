"""Launch-time argument handling.

Position 0 of the argument list is the invocation token, position 1 the image
to open and position 2 the display mode. Logging options are stripped before
positions are read so that they never shift the positional arguments.
"""

from __future__ import annotations

import argparse
import os
import re
from collections.abc import Sequence

from .logger import get_logger, setup_logger
from .models import DisplayDirective, LaunchConfig

_logger = get_logger("launch")

_SIZE_RE = re.compile(r"^(\d+)\s*[xX]\s*(\d+)$")
_IMAGE_ARG = 1
_DISPLAY_MODE_ARG = 2


def strip_logging_options(argv: Sequence[str]) -> list[str]:
    """Remove --log-level/--log-cats from `argv` and apply them to the logger.

    The returned list keeps argv[0] followed by the remaining arguments in order.
    """
    if not argv:
        return []
    parser = argparse.ArgumentParser(add_help=False, exit_on_error=False)
    parser.add_argument("--log-level", help="Set log level")
    parser.add_argument("--log-cats", help="Set log categories")
    try:
        args, remaining = parser.parse_known_args(list(argv[1:]))
    except argparse.ArgumentError as exc:
        # Failing to parse logging options should not prevent the app from running.
        _logger.warning("ignoring logging options: %s", exc)
        return list(argv)
    if args.log_level:
        os.environ["VDI_VIEWER_LOG_LEVEL"] = args.log_level
    if args.log_cats:
        os.environ["VDI_VIEWER_LOG_CATS"] = args.log_cats
    if args.log_level or args.log_cats:
        setup_logger()
    return [argv[0], *remaining]


def resolve_launch_config(args: Sequence[str]) -> LaunchConfig:
    """Build the LaunchConfig from raw process arguments. Never raises."""
    image_path: str | None = None
    if len(args) > _IMAGE_ARG:
        candidate = args[_IMAGE_ARG]
        if candidate and os.path.exists(candidate):
            image_path = candidate
        else:
            _logger.warning("launch image not found: %s", candidate)

    display_mode = args[_DISPLAY_MODE_ARG] if len(args) > _DISPLAY_MODE_ARG else None
    config = LaunchConfig(image_path=image_path, display_mode=display_mode)
    _logger.debug("launch config: %s", config)
    return config


def parse_display_directive(display_mode: str | None) -> DisplayDirective | None:
    """Interpret a display mode string: 'fullscreen', 'maximized' or '<W>x<H>'.

    Returns None for anything else so the shell keeps its default window size.
    """
    if not display_mode:
        return None
    text = display_mode.strip().lower()
    if text == "fullscreen":
        return DisplayDirective("fullscreen")
    if text in {"maximized", "maximize"}:
        return DisplayDirective("maximized")
    m = _SIZE_RE.match(text)
    if m:
        width, height = int(m.group(1)), int(m.group(2))
        if width > 0 and height > 0:
            return DisplayDirective("size", width, height)
    _logger.info("ignoring unrecognized display mode: %r", display_mode)
    return None
