"""enigmalab: a rotor cipher machine simulator.

Research / education only. Do NOT use in production.
"""

__version__ = "0.1.0"
