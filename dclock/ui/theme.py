"""Colours and stylesheet for the clock window."""

BACKGROUND = "#000000"
TEXT = "#FFFFFF"
START_BG = "#34C759"
STOP_BG = "#FF3B30"


def build_stylesheet(accent):
    return f"""
        QMainWindow, QWidget {{ background-color: {BACKGROUND}; color: {TEXT}; }}
        QLabel#accent {{ color: {accent}; }}
        QPushButton#focusButton {{
            color: {TEXT};
            border: none;
            border-radius: 10px;
            padding: 10px;
        }}
    """


def focus_button_css(running):
    return f"QPushButton#focusButton {{ background-color: {STOP_BG if running else START_BG}; }}"
