"""Map IBGE municipality statistics (PAM, PPM, PEVS) onto the MagPIE grid"""

__version__ = "0.1.0"
