"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with the kinematic variables, their units and the equation solver.
"""
