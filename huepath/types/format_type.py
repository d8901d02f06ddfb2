# No dependencies
import math

HUE_360 = 360.0
TAU = 2 * math.pi

RGB_MAX = 255
PERCENT_MAX = 100.0

# Saturation/value drift below this is treated as float noise when clamping
CLAMP_TOLERANCE = 1e-9
