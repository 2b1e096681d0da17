from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, Slot, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import Cell

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
CROSS_COLOR = QColor("#8acaff")
NOUGHT_COLOR = QColor("#ff8a8a")
WIN_LINE_COLOR = QColor("#f5f5f5")


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # engine owned by the window
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling
        self.game_logic.state_changed.connect(self._on_state_changed)

    @Slot(object)
    def _on_state_changed(self, _snap):
        self.update()

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square grid centred in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), None if outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        size = self.game_logic.board_size
        cell = side / size
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, size-1)); col = max(0, min(col, size-1))
        return row, col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            snap = self.game_logic.snapshot()
            size = len(snap.board)
            cell_size = side / size
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, size):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))

            def centre(r, c):
                return QPointF(offset_x + c*cell_size + cell_size/2,
                               offset_y + r*cell_size + cell_size/2)

            # marks
            rad = cell_size/2 * 0.7
            for r, row in enumerate(snap.board):
                for c, mark in enumerate(row):
                    if mark is Cell.EMPTY: continue
                    p = centre(r, c)
                    if mark is Cell.CROSS:
                        painter.setPen(QPen(CROSS_COLOR, 4))
                        painter.drawLine(QPointF(p.x()-rad, p.y()-rad), QPointF(p.x()+rad, p.y()+rad))
                        painter.drawLine(QPointF(p.x()+rad, p.y()-rad), QPointF(p.x()-rad, p.y()+rad))
                    else:
                        painter.setPen(QPen(NOUGHT_COLOR, 4))
                        painter.drawEllipse(p, rad, rad)
            # strike through the winning triple
            line = self.game_logic.winning_line() if self.game_logic.game_over else None
            if line:
                painter.setPen(QPen(WIN_LINE_COLOR, 6, Qt.SolidLine, Qt.RoundCap))
                painter.drawLine(centre(*line[0]), centre(*line[-1]))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.game_logic.game_over:
            return
        pos = self.cell_at(event.position().x(), event.position().y())
        if pos is not None:
            self.cell_clicked.emit(*pos)  # notify main window
