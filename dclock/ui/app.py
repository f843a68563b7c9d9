import sys
from PySide6.QtCore import Qt, QEasingCurve, QPoint, QPropertyAnimation, QTimer
from PySide6.QtWidgets import QApplication, QHBoxLayout, QMainWindow, QWidget
from dclock.common.logger import log
from dclock.core import config
from dclock.core.pager import Page, SwipeDirection
from dclock.core.store import AppStore
from dclock.ui.theme import build_stylesheet
from dclock.ui.widgets import build_clock_page, build_focus_page, update_clock_page, update_focus_page


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# Black window holding the clock page and the focus page side by side on a strip that slides horizontally. It only
# renders snapshots from the store and forwards user intents back to it.
class MainWindow(QMainWindow):

    def __init__(self, store: AppStore, settings: dict):
        super().__init__()
        self.setWindowTitle("Digital Clock")
        self.store = store
        self.settings = settings

        if settings["always_on_top"]:
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)
        self.setStyleSheet(build_stylesheet(settings["accent_color"]))

        snap = store.snapshot()
        self._shown_page = snap.page
        self._press_x = None

        # -- Build UI skeleton. The strip has no layout parent so it can be moved freely.
        viewport = QWidget()
        self.setCentralWidget(viewport)
        self._strip = QWidget(viewport)
        strip_lay = QHBoxLayout(self._strip)
        strip_lay.setContentsMargins(0, 0, 0, 0)
        strip_lay.setSpacing(0)

        font = settings["font"]
        clock_page, self._clock_widgets = build_clock_page(font, snap)
        focus_page, self._focus_widgets = build_focus_page(font, snap, self._on_toggle)
        strip_lay.addWidget(clock_page)
        strip_lay.addWidget(focus_page)

        self._slide = QPropertyAnimation(self._strip, b"pos", self)
        self._slide.setDuration(settings["slide_ms"])
        self._slide.setEasingCurve(QEasingCurve.InOutQuad)

        self._unsubscribe = store.subscribe(self._render)

        # -- Tick timer --
        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(settings["tick_ms"])

        self.resize(settings["window_width"], settings["window_height"])

    # ------------------------------------------------------------------ #
    #  Rendering                                                           #
    # ------------------------------------------------------------------ #

    def _page_offset(self, page):
        return QPoint(-self.centralWidget().width() * page.value, 0)

    def _render(self, snap):
        update_clock_page(self._clock_widgets, snap)
        update_focus_page(self._focus_widgets, snap)
        if snap.page is not self._shown_page:
            self._shown_page = snap.page
            self._slide.stop()
            self._slide.setStartValue(self._strip.pos())
            self._slide.setEndValue(self._page_offset(snap.page))
            self._slide.start()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        viewport = self.centralWidget()
        self._slide.stop()
        self._strip.setGeometry(0, 0, viewport.width() * len(Page), viewport.height())
        self._strip.move(self._page_offset(self._shown_page))

    # ------------------------------------------------------------------ #
    #  Intents                                                             #
    # ------------------------------------------------------------------ #

    def _tick(self):
        self.store.tick()

    def _on_toggle(self):
        self.store.toggle_focus()

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._press_x = event.position().x()
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton and self._press_x is not None:
            dx = event.position().x() - self._press_x
            self._press_x = None
            self.store.swipe(*SwipeDirection.from_displacement(dx))
        super().mouseReleaseEvent(event)

    # Arrow keys stand in for a swipe just past the threshold; space toggles focus while its page is showing.
    def keyPressEvent(self, event):
        past_threshold = self.store.pager.threshold + 1
        if event.key() == Qt.Key_Right:
            self.store.swipe(SwipeDirection.LEFT, past_threshold)
        elif event.key() == Qt.Key_Left:
            self.store.swipe(SwipeDirection.RIGHT, past_threshold)
        elif event.key() == Qt.Key_Space and self._shown_page is Page.FOCUS_TIMER:
            self._on_toggle()
        else:
            super().keyPressEvent(event)

    def closeEvent(self, event):
        self._timer.stop()
        self._unsubscribe()
        log.info(f"Closing with {self.store.timer.formatted()} focused today")
        event.accept()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv=None):
    argv = sys.argv if argv is None else argv
    app = QApplication(argv)
    settings = config.load_settings()
    store = AppStore(swipe_threshold=settings["swipe_threshold"])
    window = MainWindow(store, settings)
    window.show()
    sys.exit(app.exec())
