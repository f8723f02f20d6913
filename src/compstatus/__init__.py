"""compstatus - compliance status derivation for framework dashboards."""

__version__ = "1.0.0"
