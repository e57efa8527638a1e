"""Grid Runner: a small turn-based terminal grid game.

The player (``@``) walks toward the goal (``G``), picking up stars (``*``)
and dodging randomly wandering enemies (``E``). Game progression is expressed
as pure transitions over an immutable :class:`grid_runner.state.State`; see
:mod:`grid_runner.step` for the reducer and :mod:`grid_runner.game_loop` for
the interactive terminal driver.
"""

__version__ = "0.1.0"
