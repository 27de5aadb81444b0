"""pomprops — Maven archiver metadata for IDE and script builds."""

__version__ = "0.1.0"
