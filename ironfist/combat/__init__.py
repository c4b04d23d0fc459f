"""
Combat package for the battle engine.

Handles damage calculation, action selection, the turn loop and the
resolution of the final outcome.
"""
