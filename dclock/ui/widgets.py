"""Page builders for the clock face and the focus timer.

Each builder returns a (container, widget_dict) tuple.  The widget_dict maps
logical names to sub-widgets so the window can update them from snapshots.
"""

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)
from dclock.ui.theme import focus_button_css


def _label(text, font, accent=False, align=Qt.AlignCenter):
    lbl = QLabel(text)
    lbl.setFont(font)
    lbl.setAlignment(align)
    if accent:
        lbl.setObjectName("accent")
    return lbl


def build_clock_page(font_family, snapshot):
    """Build the clock page: HH:MM on the left, weekday over day-month on the right."""
    page = QWidget()
    lay = QHBoxLayout(page)
    lay.setContentsMargins(20, 20, 20, 20)

    digits_font = QFont(font_family, 140)
    digits_font.setBold(True)

    time_lay = QHBoxLayout()
    time_lay.setSpacing(0)
    hour_lbl = _label(snapshot.hour, digits_font, accent=True)
    colon_lbl = _label(":", digits_font, accent=True)
    colon_lbl.setContentsMargins(10, 0, 10, 30)
    minute_lbl = _label(snapshot.minute, digits_font, accent=True)
    time_lay.addWidget(hour_lbl)
    time_lay.addWidget(colon_lbl)
    time_lay.addWidget(minute_lbl)
    lay.addLayout(time_lay)

    lay.addStretch(1)

    weekday_font = QFont(font_family, 40)
    weekday_font.setBold(True)
    date_lay = QVBoxLayout()
    weekday_lbl = _label(snapshot.weekday, weekday_font, accent=True, align=Qt.AlignRight | Qt.AlignVCenter)
    day_month_lbl = _label(snapshot.day_month, QFont(font_family, 32), align=Qt.AlignRight | Qt.AlignVCenter)
    date_lay.addStretch(1)
    date_lay.addWidget(weekday_lbl)
    date_lay.addWidget(day_month_lbl)
    date_lay.addStretch(1)
    lay.addLayout(date_lay)

    widget_dict = {
        "hour": hour_lbl, "minute": minute_lbl,
        "weekday": weekday_lbl, "day_month": day_month_lbl,
    }
    return page, widget_dict


def build_focus_page(font_family, snapshot, on_toggle):
    """Build the focus page: title, today's total, and the single start/stop button."""
    page = QWidget()
    lay = QVBoxLayout(page)
    lay.setSpacing(40)
    lay.addStretch(1)

    title_font = QFont(font_family, 28)
    title_font.setBold(True)
    title_lbl = _label("Focus Timer", title_font)
    lay.addWidget(title_lbl)

    total_font = QFont(font_family, 80)
    total_font.setBold(True)
    total_lbl = _label(snapshot.total_elapsed_formatted, total_font, accent=True)
    lay.addWidget(total_lbl)

    button_font = QFont(font_family, 24)
    button_font.setBold(True)
    toggle_btn = QPushButton(snapshot.button_label)
    toggle_btn.setObjectName("focusButton")
    toggle_btn.setFont(button_font)
    toggle_btn.setStyleSheet(focus_button_css(snapshot.running))
    toggle_btn.setFocusPolicy(Qt.NoFocus)
    toggle_btn.clicked.connect(lambda _=False: on_toggle())
    lay.addWidget(toggle_btn, 0, Qt.AlignHCenter)

    lay.addStretch(1)

    widget_dict = {
        "total": total_lbl, "toggle": toggle_btn,
    }
    return page, widget_dict


def update_clock_page(widget_dict, snapshot):
    widget_dict["hour"].setText(snapshot.hour)
    widget_dict["minute"].setText(snapshot.minute)
    widget_dict["weekday"].setText(snapshot.weekday)
    widget_dict["day_month"].setText(snapshot.day_month)


def update_focus_page(widget_dict, snapshot):
    widget_dict["total"].setText(snapshot.total_elapsed_formatted)
    btn = widget_dict["toggle"]
    if btn.text() != snapshot.button_label:
        btn.setText(snapshot.button_label)
        btn.setStyleSheet(focus_button_css(snapshot.running))
