"""
Terminal Monitor for the EcoLive dashboard
Interactive console interface using the Rich library.
"""

import asyncio
import json
import logging
from datetime import datetime
from typing import List, Optional

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from ecolive.dashboard.controller import DashboardController
from ecolive.dashboard.generators import (
    AIR_QUALITY,
    CATEGORIES,
    ECOSYSTEM_HEALTH,
    SOIL_QUALITY,
    WATER_QUALITY,
)
from ecolive.dashboard.projections import BAR_COLORS
from ecolive.dashboard.session import SessionGate, ThemePreference
from ecolive.shared.errors import DashboardError, UnknownCategoryError
from ecolive.shared.models import Reading

logger = logging.getLogger(__name__)

CATEGORY_ALIASES = {
    "air": AIR_QUALITY,
    "water": WATER_QUALITY,
    "soil": SOIL_QUALITY,
    "eco": ECOSYSTEM_HEALTH,
    "ecosystem": ECOSYSTEM_HEALTH,
}

BAR_WIDTH = 30

# Rich color names for the condition colors
CONDITION_STYLES = {
    "green": "green",
    "orange": "dark_orange",
    "red": "red",
}

HELP_TEXT = """\
search <city>      fetch weather for a city
on <category>      add a reading (air, water, soil, eco)
off <category>     remove a reading
delete <n>         delete row n of the sensor list
list               redraw the dashboard
theme              switch between light and dark
logout             log out
quit               exit"""


def parse_category(text: str) -> str:
    """Resolve a short alias or a full category name (any case)."""
    key = text.strip().lower()
    if key in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[key]
    for category in CATEGORIES:
        if category.lower() == key:
            return category
    raise UnknownCategoryError(text.strip())


class TerminalMonitor:
    """Terminal-based dashboard using Rich"""

    def __init__(
        self,
        controller: DashboardController,
        gate: SessionGate,
        theme: ThemePreference,
        console: Optional[Console] = None,
    ):
        self.controller = controller
        self.gate = gate
        self.theme = theme
        self.console = console or Console()
        self.controller.state.theme = self.theme.current()

    @property
    def state(self):
        return self.controller.state

    def update_display(self):
        """Redraw the full dashboard from current state and storage"""
        try:
            readings = self.controller.manage_list()
            self.console.print(self._create_dashboard(readings))
        except Exception as e:
            logger.error(f"Display update failed: {e}")
            self._show_error_display(str(e))

    def alert(self, message: str):
        self.console.print(Panel(Text(message, style="bold yellow"), title="ALERT", style="yellow"))

    def _create_dashboard(self, readings: List[Reading]) -> Group:
        return Group(
            self._create_header(),
            self._create_weather_panel(),
            self._create_analysis_panel(),
            self._create_checkbox_panel(),
            self._create_manage_panel(readings),
            self._create_chart_panel(),
            self._create_map_panel(),
        )

    def _create_header(self) -> Panel:
        """Create header with title and timestamp"""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        header_text = Text()
        header_text.append("ECOLIVE ENVIRONMENT MONITOR", style="bold cyan")
        header_text.append(f" - {timestamp}", style="white")
        header_text.append(f" - City: {self.state.current_city or '-'}", style="green")
        header_text.append(f" - Theme: {self.state.theme}", style="white")

        return Panel(Align.center(header_text), style="cyan")

    def _create_weather_panel(self) -> Panel:
        view = self.state.city_view
        if view is None:
            return Panel(Text("Search a city to see its weather.", style="white"), title="WEATHER", style="cyan")
        if view.error:
            return Panel(Text(view.error, style="bold red"), title="WEATHER", style="cyan")

        report = view.report
        content = Text()
        content.append(f"{report.city_name}, {report.country}\n", style="bold white")
        content.append(f"{report.temperature}°C\n", style="bold")
        content.append(f"{report.description.capitalize()}\n", style="white")
        content.append(f"Humidity: {report.humidity}% | Wind: {report.wind_speed} m/s\n", style="dim")
        content.append(f"Icon: {report.icon_url}", style="dim")
        return Panel(content, title="WEATHER", style="cyan")

    def _create_analysis_panel(self) -> Panel:
        view = self.state.city_view
        if view is None or not view.show_analytics:
            return Panel(Text("---", style="dim"), title="WEATHER ANALYSIS", style="cyan")

        assessment = view.assessment
        content = Text()
        content.append("Weather Analysis: ", style=f"bold {assessment.text_color} on {assessment.bg_color}")
        content.append(assessment.status, style=f"{assessment.text_color} on {assessment.bg_color}")
        return Panel(content, title="WEATHER ANALYSIS", style=CONDITION_STYLES.get(assessment.color, "white"))

    def _create_checkbox_panel(self) -> Panel:
        content = Text()
        for i, category in enumerate(CATEGORIES):
            if i > 0:
                content.append("   ")
            checked = self.state.checkboxes.get(category, False)
            content.append(f"[{'x' if checked else ' '}] {category}", style="green" if checked else "white")
        return Panel(content, title="SENSORS", style="cyan")

    def _create_manage_panel(self, readings: List[Reading]) -> Panel:
        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("#", style="white", width=4)
        table.add_column("Name", style="bold white")
        table.add_column("Description", style="white")
        table.add_column("City", style="white")
        table.add_column("Value", style="white", justify="right")

        for idx, reading in enumerate(readings, start=1):
            unit = getattr(reading, "unit", "")
            table.add_row(
                str(idx),
                reading.name,
                reading.description or "",
                reading.city or "-",
                f"{reading.value} {unit}".strip(),
            )

        if not readings:
            return Panel(Text("No sensors yet.", style="dim"), title="MANAGE SENSORS", style="cyan")
        return Panel(table, title="MANAGE SENSORS", style="cyan")

    def _create_chart_panel(self) -> Panel:
        chart = self.state.chart
        if not chart.labels:
            return Panel(Text("No sensor values for this city.", style="dim"), title="SENSOR VALUES", style="cyan")

        bars = []
        for label, value, color in zip(chart.labels, chart.values, chart.colors):
            try:
                bars.append((label, float(value), color))
            except (TypeError, ValueError):
                logger.warning(f"Skipping non-numeric value for {label}: {value!r}")
        if not bars:
            return Panel(Text("No sensor values for this city.", style="dim"), title="SENSOR VALUES", style="cyan")

        peak = max(value for _, value, _ in bars) or 1.0

        table = Table(show_header=False, box=None)
        table.add_column("Label", style="white")
        table.add_column("Bar")
        table.add_column("Value", justify="right")

        for label, value, color in bars:
            bar = "█" * max(1, int(round(value / peak * BAR_WIDTH))) if value > 0 else ""
            table.add_row(label, Text(bar, style=color), f"{value:g}")

        return Panel(table, title="SENSOR VALUES", style="cyan")

    def _create_map_panel(self) -> Panel:
        view = self.state.map
        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Lat", justify="right")
        table.add_column("Lon", justify="right")
        table.add_column("Marker", style="white")

        for marker in view.markers:
            table.add_row(f"{marker.lat:.4f}", f"{marker.lon:.4f}", marker.popup.replace("\n", " | "))

        footer = Text()
        if view.center:
            footer.append(f"Center {view.center[0]:.4f}, {view.center[1]:.4f} (zoom {view.zoom})", style="white")
        else:
            footer.append("No map focus", style="dim")

        circle = self.state.weather_circle
        if circle:
            footer.append(
                f"\nWeather overlay: {circle.radius_m / 1000:g} km around {circle.lat:.4f}, {circle.lon:.4f}",
                style=CONDITION_STYLES.get(circle.color, "white"),
            )

        return Panel(Group(table, footer), title="MAP", style="cyan")

    def _show_error_display(self, error_msg: str):
        """Show error display when the dashboard cannot be drawn"""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self.console.print(
            Panel(
                Align.center(Text(f"DISPLAY ERROR - {timestamp}\n\n{error_msg}", style="bold red")),
                title="System Error",
                style="red",
            )
        )

    def toggle_theme(self) -> str:
        new_theme = self.theme.toggle()
        self.state.theme = new_theme
        chart = self.state.chart
        chart.colors = [BAR_COLORS[new_theme] for _ in chart.values]
        return new_theme

    async def handle_command(self, line: str) -> bool:
        """Run one console command.

        Returns:
            False when the session should end, True otherwise.
        """
        command, _, arg = (line or "").strip().partition(" ")
        command = command.lower()

        try:
            if command in ("quit", "exit"):
                return False
            elif command == "search":
                await self.controller.search_city(arg)
            elif command in ("on", "off"):
                await self.controller.toggle_category(parse_category(arg), command == "on")
                if self.state.error and command == "on":
                    self.alert(self.state.error)
            elif command == "delete":
                self._delete_row(arg)
            elif command == "theme":
                self.toggle_theme()
            elif command == "logout":
                self.gate.logout()
            elif command == "help":
                self.console.print(Panel(HELP_TEXT, title="COMMANDS", style="cyan"))
                return True
            elif command in ("list", ""):
                pass
            else:
                self.alert(f"Unknown command: {command}. Type 'help' for commands.")
                return True
        except DashboardError as e:
            self.alert(str(e))
        except json.JSONDecodeError as e:
            logger.error(f"Stored readings are corrupted: {e}")
            self.alert(f"Storage error: stored readings could not be parsed ({e})")
        return True

    def _delete_row(self, arg: str) -> None:
        try:
            index = int(arg) - 1
        except ValueError as e:
            self.alert(f"Invalid row: {arg or '-'} ({e})")
            return
        try:
            self.controller.delete_reading(index)
        except IndexError as e:
            self.alert(f"Invalid row: {arg} ({e})")

    async def login(self) -> None:
        """Prompt until the demo credentials are entered"""
        while not self.gate.is_logged_in():
            username = await asyncio.to_thread(Prompt.ask, "Username", console=self.console)
            password = await asyncio.to_thread(Prompt.ask, "Password", console=self.console, password=True)
            if not self.gate.login(username, password):
                self.console.print(Text("Invalid credentials", style="bold red"))

    async def run(self):
        """Interactive loop: login, then read and run commands until quit"""
        await self.login()
        self.update_display()

        while True:
            line = await asyncio.to_thread(Prompt.ask, "[bold cyan]ecolive[/]", console=self.console)
            if not await self.handle_command(line):
                break
            if not self.gate.is_logged_in():
                await self.login()
            self.update_display()
