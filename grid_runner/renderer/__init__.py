"""Rendering subpackage.

Turns immutable ``State`` snapshots into plain-text boards for the terminal.
See :mod:`grid_runner.renderer.text` for the glyph map, board composition and
the stream writer.
"""
