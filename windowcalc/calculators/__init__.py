"""
Deterministic dimension engine.

Pure Python math. Given the opening width and height typed into the form,
produce cut lengths for frame track, shutter pipes and glass in eighths notation.
"""
