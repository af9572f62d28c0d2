"""
PORTS - Interfaces the domain needs from the outside world.
"""
