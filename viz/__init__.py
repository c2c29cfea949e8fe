# -*- coding: utf-8 -*-
"""
Rendering of search frames: ASCII dumps (frames.py) and matplotlib images
(plot.py, imported on demand so text-only callers never load matplotlib).
"""

from .frames import dump_frame, render_ascii

__all__ = ["dump_frame", "render_ascii"]
