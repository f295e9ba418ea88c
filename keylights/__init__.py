"""Key Light control package.

A command line utility for adjusting a pair of Elgato-style Key Lights
over their local HTTP API, including:
- Absolute and relative brightness/temperature adjustments
- A circadian mode that picks values from the time of day
- Toggling both lights when nothing is being adjusted
"""

__version__ = "0.1.0"
