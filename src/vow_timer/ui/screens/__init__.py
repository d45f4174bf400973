"""Screen states shown by the router."""

from vow_timer.ui.screens.base import ScreenContext, ScreenState
from vow_timer.ui.screens.menu import MenuScreen
from vow_timer.ui.screens.quotes_admin import QuotesAdminScreen
from vow_timer.ui.screens.stats import StatsScreen
from vow_timer.ui.screens.subject_select import SubjectSelectScreen
from vow_timer.ui.screens.timer import TimerScreen

__all__ = [
    "ScreenContext",
    "ScreenState",
    "MenuScreen",
    "QuotesAdminScreen",
    "StatsScreen",
    "SubjectSelectScreen",
    "TimerScreen",
]
