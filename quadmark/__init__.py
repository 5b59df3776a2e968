"""
QuadMark - draw and reshape a quadrilateral over an image, then export it.

This package contains the main application modules:
- core: Application core, wiring and background image loading
- ui: Main window
- editor: Geometry, quadrilateral model, history, interaction and canvas
- services: Application services (config, logging)
"""

__version__ = "0.1.0"
