"""Audio host, device and stream interfaces, sample formats and a host registry."""

__version__ = "0.1.0"
__all__ = ["sample_format", "traits", "dispatch", "registry"]