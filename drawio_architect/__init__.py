"""
Draw.io Architect.

Turns free-text descriptions or uploaded documents into Draw.io
(mxGraphModel) diagram XML using a two-phase Gemini pipeline.
"""

__version__ = "0.1.0"
