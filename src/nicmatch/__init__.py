"""nicmatch -- resolve a bind address by matching host network interface names."""

__version__ = '0.1.0'
