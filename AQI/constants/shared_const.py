"""
Shared constants
"""

# 8-hour ozone above this value (ppm) is evaluated on the 1-hour table
OZONE_8H_MAX = 0.2

# Scaled concentrations this close to an integer are snapped before truncation:
# within TRUNCATION_GUARD_ULPS ulps of the input dtype, and never less than
# 10 ** -TRUNCATION_GUARD_DIGITS
TRUNCATION_GUARD_DIGITS = 6
TRUNCATION_GUARD_ULPS = 4

# Sliding window moving average used by the sampling loop (1 s samples)
SMOOTHING_CONST = {
    "window_size": 15,
    "send_every": 15,
    "send_first_at": 15,
}
