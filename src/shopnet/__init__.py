"""shopnet — shop network reduction."""

__version__ = "0.1.0"
