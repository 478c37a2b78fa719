"""
The CONTROLLER layer turns field texts into SI knowns, runs the solver and
prepares what the view should display. It has no Qt dependency.
"""
