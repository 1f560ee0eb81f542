"""FishFindr mobile companion.

Reports the device's last known position to the FishFindr server.
"""

__version__ = "0.1.0"
