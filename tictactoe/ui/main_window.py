import logging

from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QMenuBar, QMenu, QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Tic-Tac-Toe"


class TicTacToeWindow(QMainWindow):
    """
    main window: turn, scores, board and the result dialog
    """
    def __init__(self, game_logic):
        """
        init ui widgets and wire signals of the caller's engine
        """
        super().__init__()
        self.game_logic = game_logic
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self.result_box = None          # open result dialog, if any

        self._setup_ui()
        self.game_logic.state_changed.connect(self._on_state_changed)
        self.game_logic.game_concluded.connect(self._on_game_concluded)
        self._on_state_changed(self.game_logic.snapshot())

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel { color: #eee; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.turn_label = QLabel("")
        f = QFont(); f.setPointSize(18); f.setBold(True); self.turn_label.setFont(f)
        self.turn_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.turn_label)

        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_score_bar()           # crosses / noughts
        self.main_layout.addWidget(self.score_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        round_action = QAction("New Round", self)
        round_action.triggered.connect(self.reset_game)
        match_action = QAction("New Match", self)
        match_action.triggered.connect(self.new_match)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (round_action, match_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_score_bar(self):
        # one label per player, stretch between
        self.score_widget = QWidget()
        hl = QHBoxLayout(self.score_widget)
        self.score_widget.setStyleSheet("background: transparent;")
        f = QFont(); f.setPointSize(14); f.setBold(True)
        self.crosses_label = QLabel(""); self.noughts_label = QLabel("")
        for lbl in (self.crosses_label, self.noughts_label):
            lbl.setFont(f)
            lbl.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.crosses_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.noughts_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        hl.addWidget(self.crosses_label); hl.addStretch(1); hl.addWidget(self.noughts_label)

    @Slot(object)
    def _on_state_changed(self, snap):
        # redraw labels from the engine snapshot
        self.turn_label.setText(self.game_logic.turn_text())
        self.crosses_label.setText(f"Crosses: {snap.crosses_score}")
        self.noughts_label.setText(f"Noughts: {snap.noughts_score}")
        self.board_widget.set_accept_clicks(not snap.outcome.is_concluded)

    @Slot(object)
    def _on_game_concluded(self, outcome):
        # show result, reset on "Okay"
        logger.debug("showing result: %s", outcome.message())
        box = QMessageBox(self)
        box.setWindowTitle(WINDOW_TITLE)
        box.setText(outcome.message())
        box.setStandardButtons(QMessageBox.Ok)
        box.button(QMessageBox.Ok).setText("Okay")
        box.finished.connect(self._on_result_acknowledged)
        self.result_box = box
        box.open()                      # non-blocking

    @Slot(int)
    def _on_result_acknowledged(self, _code=0):
        if self.result_box is not None:
            self.result_box.deleteLater()
            self.result_box = None
        self.game_logic.reset_game()

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        # engine ignores taken cells and finished rounds
        self.game_logic.place_mark(r, c)

    def _close_result_box(self):
        if self.result_box is not None:
            box, self.result_box = self.result_box, None
            box.finished.disconnect(self._on_result_acknowledged)
            box.close(); box.deleteLater()

    @Slot()
    def reset_game(self):
        # new round, scores kept
        self._close_result_box()
        self.game_logic.reset_game()

    @Slot()
    def new_match(self):
        # new round with scores cleared
        self._close_result_box()
        self.game_logic.reset_scores()
