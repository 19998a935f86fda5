"""Exceptions raised for malformed locators and coordinates."""


class GridError(ValueError):
    """Base class for every grid square conversion failure."""


class InvalidGrid(GridError):
    """A locator character does not belong to its position's alphabet."""

    def __init__(self, grid: str):
        self.grid = grid
        super().__init__(f"Invalid grid square: {grid!r}")


class InvalidGridLength(GridError):
    """Locator length (or requested precision) is not 4, 6, 8 or 10."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Invalid grid length: {length}. Must be 4, 6, 8, or 10 characters.")


class InvalidLongLat(GridError):
    """Coordinates fall outside [-180, 180] longitude or [-90, 90] latitude."""

    def __init__(self, longitude: float, latitude: float):
        self.longitude = longitude
        self.latitude = latitude
        super().__init__(f"Invalid longitude/latitude: ({longitude}, {latitude})")


class UnknownGridError(GridError):
    """Failed to generate a grid square for otherwise valid input."""

    def __init__(self, message: str = "Failed to generate grid"):
        super().__init__(message)
