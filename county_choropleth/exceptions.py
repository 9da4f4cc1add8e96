# county_choropleth/exceptions.py

class ChoroplethError(Exception):
    """Base class for errors that stop the map from being rendered."""
    pass

class FetchError(ChoroplethError):
    """Raised when a dataset cannot be downloaded or parsed as JSON."""
    pass

class JoinMismatchError(ChoroplethError):
    """Raised when a county identifier has no matching education record."""
    pass

class TopologyError(ChoroplethError):
    """Raised when the geometry payload cannot be decoded."""
    pass
