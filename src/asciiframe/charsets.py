# Luminance ramp, darkest (and fully transparent) first
RAMP = " .,-~+=@"

RAMP_LEVELS = len(RAMP)

# Intensity span covered by one ramp symbol (256 / 8)
LEVEL_WIDTH = 32
