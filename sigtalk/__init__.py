"""Text messaging between processes over SIGUSR1 and SIGUSR2, with small string, memory and printf helpers."""

__version__ = "0.1.0"