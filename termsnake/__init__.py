"""
termsnake — Snake in the terminal, tunable while it runs.

  config      – defaults, limits, key bindings.
  geometry    – Direction, SegmentShape, next_cell().
  styles      – SnakeStyle / AppleStyle glyph sets.
  model       – GameState and its commands.
  stepper     – Simulation tick loop.
  controller  – InputHandler, GameController.
  view        – GameView renderer.
  terminal    – blessed terminal screen.
  window      – pygame window screen.
"""

__version__ = "0.1.0"
