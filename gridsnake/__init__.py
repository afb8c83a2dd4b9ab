"""
gridsnake - Tile-grid Snake with Classic, Survival and Hardcore modes.

Modules:
- core: Abstract game/renderer interfaces and event channels
- games: Game implementations (Snake engine, progress store, renderer)
- visualization: Terminal views of saved progress
- utils: Configuration loading
"""
