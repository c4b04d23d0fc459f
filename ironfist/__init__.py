"""
Turn-based one-on-one battle engine.

Builds combatants from stats, origins and equipment, simulates a battle
with an injectable random source and returns a replayable log.
"""

__version__ = "0.1.0"
