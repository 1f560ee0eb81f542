from kivy.app import App
from kivy.lang import Builder
from kivy.properties import ListProperty, ObjectProperty
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.floatlayout import FloatLayout
from kivy.uix.tabbedpanel import TabbedPanel, TabbedPanelItem
from kivy.utils import get_color_from_hex
import logging
import os

from .config import load_config
from .location import GPSLocationProvider
from .logging_config import configure_logging
from .report import Reporter
from .tabs import ACCENT_COLOR, MAP_TAB, REPORT_TAB, TABS

logger = logging.getLogger(__name__)


KV = """
<ReportScreen>:
    Button:
        text: 'Fish Caught!'
        color: 1, 1, 1, 1
        size_hint: None, None
        size: root.width / 2, root.width / 2
        pos_hint: {'center_x': 0.5, 'center_y': 0.5}
        background_normal: ''
        background_down: ''
        background_color: 0, 0, 0, 0
        on_release: app.report_location()
        canvas.before:
            Color:
                rgba: app.accent_color
            RoundedRectangle:
                pos: self.pos
                size: self.size
                radius: [self.width / 2]

<MapScreen>:
    orientation: 'vertical'
    Label:
        text: 'Map'

<AppTabs>:
    do_default_tab: False
    tab_pos: 'bottom_mid'
    tab_width: self.width / 2
"""


class ReportScreen(FloatLayout):
    pass


class MapScreen(BoxLayout):
    pass


class AppTabs(TabbedPanel):
    pass


SCREENS = {
    REPORT_TAB.key: ReportScreen,
    MAP_TAB.key: MapScreen,
}


class FishFindrApp(App):
    title = "FishFindr"
    accent_color = ListProperty(get_color_from_hex(ACCENT_COLOR))
    reporter = ObjectProperty(None, allownone=True)

    def build(self):
        Builder.load_string(KV)
        configure_logging(os.path.join(self.user_data_dir, "logs"))
        self.location_provider = GPSLocationProvider()
        self.reporter = Reporter(self.location_provider, load_config(self.user_data_dir))

        root = AppTabs()
        items = []
        for entry in TABS:
            item = TabbedPanelItem(text=entry.title)
            item.bind(state=self._tint_tab)
            item.add_widget(SCREENS[entry.key]())
            root.add_widget(item)
            items.append(item)
        root.default_tab = items[0]
        root.switch_to(root.default_tab, do_scroll=False)
        return root

    def _tint_tab(self, item, state):
        item.color = self.accent_color if state == "down" else [1, 1, 1, 1]

    def on_start(self):
        # Triggers the permission prompt on first launch
        self.location_provider.start()

    def on_stop(self):
        self.location_provider.stop()

    def on_pause(self):
        return True

    def report_location(self):
        result = self.reporter.submit_current_location()
        if not result.ok:
            logger.info("Location not reported: %s", result.failure)
        return result


def main():
    FishFindrApp().run()


if __name__ == "__main__":
    main()
