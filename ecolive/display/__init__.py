"""Terminal dashboard."""

from .terminal_monitor import TerminalMonitor


def main():
    """Entry point for the dashboard."""
    import asyncio
    from ecolive.dashboard import DashboardController, SessionGate, ThemePreference
    from ecolive.shared.config import load_config
    from ecolive.shared.logging import setup_logging
    from ecolive.shared.storage import LocalStore, ReadingsStorage
    from ecolive.weather.client import WeatherClient

    config = load_config()
    setup_logging(config.log_level, filename=config.log_file)

    store = LocalStore(config.storage_path)
    storage = ReadingsStorage(store)
    storage.ensure_initialized()

    controller = DashboardController(storage, WeatherClient(config.weather))
    monitor = TerminalMonitor(controller, SessionGate(store), ThemePreference(store))

    try:
        asyncio.run(monitor.run())
    except (KeyboardInterrupt, EOFError):
        pass


__all__ = ["TerminalMonitor", "main"]
