import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.game_logic import GameLogic
from tictactoe.ui.main_window import TicTacToeWindow

LOG_LEVEL = logging.WARNING

# -----------------------------------------------------------------------------
# DARK THEME
# -----------------------------------------------------------------------------

ACTIVE_ROLES = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.ToolTipBase: Qt.white,
    QPalette.ToolTipText: Qt.black,
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.Highlight: QColor(42, 130, 218),
    QPalette.HighlightedText: Qt.white,
}
DISABLED_TEXT_COLOR = QColor(127, 127, 127)
DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)


def apply_default_palette(app: QApplication):
    """
    Grey-on-dark palette so the board colors stand out.
    """
    palette = QPalette()
    for role, color in ACTIVE_ROLES.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

def setup_logging():
    """
    Configure root logging: warnings and above to stderr.
    """
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main():
    setup_logging()
    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    # the window owns the engine for the whole session
    engine = GameLogic()
    window = TicTacToeWindow(engine)
    engine.setParent(window)
    window.resize(420, 520)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
