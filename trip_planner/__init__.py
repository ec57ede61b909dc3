"""Trip Planner: trips and their expenses behind a named-procedure API."""
__version__ = "1.0.0"
