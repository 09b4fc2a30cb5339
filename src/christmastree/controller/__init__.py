"""
The CONTROLLER layer drives the animation: it arms timers, applies ticks to
the scene and asks the view to repaint.
"""
