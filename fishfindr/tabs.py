"""Tab bar layout shared by the app shell."""

from collections import namedtuple

# iOS systemGreen
ACCENT_COLOR = "#34C759"

TabEntry = namedtuple("TabEntry", ["key", "title"])

REPORT_TAB = TabEntry("report", "Button")
MAP_TAB = TabEntry("map", "Map")

# First entry is the default tab
TABS = (REPORT_TAB, MAP_TAB)
