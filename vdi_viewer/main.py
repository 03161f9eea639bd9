from __future__ import annotations

import sys
from pathlib import Path

from vdi_viewer.launch import parse_display_directive, resolve_launch_config, strip_logging_options
from vdi_viewer.logger import get_logger
from vdi_viewer.models import DisplayDirective

logger = get_logger("main")
_BASE_DIR = Path(getattr(sys, "_MEIPASS", Path(__file__).resolve().parent))


def _apply_display_directive(window, directive: DisplayDirective | None) -> None:
    """Size the root window from the launch display mode; None keeps the QML default."""
    if directive is None:
        window.show()
        return
    if directive.kind == "fullscreen":
        window.showFullScreen()
    elif directive.kind == "maximized":
        window.showMaximized()
    else:
        window.resize(directive.width, directive.height)
        window.show()


def run(argv: list[str] | None = None) -> int:
    """Application entrypoint (packaging-friendly)."""
    from PySide6.QtCore import QUrl  # noqa: PLC0415
    from PySide6.QtGui import QGuiApplication  # noqa: PLC0415
    from PySide6.QtQml import QQmlApplicationEngine  # noqa: PLC0415

    from vdi_viewer.app.backend import ShellBackend  # noqa: PLC0415

    if argv is None:
        argv = sys.argv

    args = strip_logging_options(argv)
    launch_config = resolve_launch_config(args)

    app = QGuiApplication(args)
    backend = ShellBackend(launch_config=launch_config)

    qml_engine = QQmlApplicationEngine()
    qml_engine.rootContext().setContextProperty("backend", backend)

    qml_file = _BASE_DIR / "qml" / "Main.qml"
    qml_engine.load(QUrl.fromLocalFile(str(qml_file)))

    roots = qml_engine.rootObjects()
    if not roots:
        logger.error("Failed to load QML: %s", qml_file)
        return 1

    _apply_display_directive(roots[0], parse_display_directive(launch_config.display_mode))
    return app.exec()


if __name__ == "__main__":
    sys.exit(run())
