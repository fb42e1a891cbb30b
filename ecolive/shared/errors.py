"""Exceptions raised by dashboard operations."""


class DashboardError(Exception):
    """Base class for errors shown to the user as an alert."""

    pass


class CityNotSelectedError(DashboardError):
    """Raised when a category is toggled before any city was searched."""

    def __init__(self):
        super().__init__("Please search for a city first.")


class EmptyCityError(DashboardError):
    """Raised when a search is submitted without a city."""

    def __init__(self):
        super().__init__("Enter a city to search")


class UnknownCategoryError(DashboardError):
    """Raised for a category name outside the supported set."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Unknown category: {category}")
