"""Domain layer — points, shapes, the grid, commands and the parser.

This layer depends only on the stdlib.
It must never import from services, output, commands, or config.
"""
