"""
DealGame - Pick-a-box game engine

A small rules engine for the "pick a box, open the others, take the
banker's offer" game. The engine provides:
- Sealed containers and the ordered set they live in
- A round-by-round session state machine
- Banker offer computation
- Best-result tracking behind a pluggable store
"""

__version__ = "0.1.0"
