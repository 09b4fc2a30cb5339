"""
The VIEW layer turns a SceneState into pixels.

The renderer itself only talks to the DrawSurface protocol; the Qt widgets and
the QPainter adapter live next to it.
"""
