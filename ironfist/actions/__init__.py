"""
Actions package for the battle engine.

Groups the static ability catalogs consumed by the combat simulator.
"""
