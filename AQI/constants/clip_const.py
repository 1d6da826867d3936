"""
Constants for display clipping
"""

# The engine never clamps; these bounds only apply to the reported value
CLIP_AQI = {"min": 0, "max": 500}
