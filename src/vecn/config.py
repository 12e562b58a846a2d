# vecn/config.py
import os

# Smallest dimension the default registry will hand out a type for (1 or 2)
MIN_DIMENSION = min(2, max(1, int(os.getenv("VECN_MIN_DIMENSION", "1"))))

# Default tolerance for Vector.approximately_equals
EPSILON = float(os.getenv("VECN_EPSILON", "1e-8"))

# Level used by setup_logging() when none is given
LOG_LEVEL = os.getenv("VECN_LOG_LEVEL", "WARNING").upper()

# Named symbol sets only define four slots
SWIZZLE_MAX_DIMENSION = 4

# Types registered up front and exported as vec2, vec3, vec4
PRESET_DIMENSIONS = (2, 3, 4)
