# Reference colors as (hex, rgb, hsv) with hue in degrees, s/v in percent
RED = ("#ff0000", (255, 0, 0), (0.0, 100.0, 100.0))
GREEN = ("#00ff00", (0, 255, 0), (120.0, 100.0, 100.0))
BLUE = ("#0000ff", (0, 0, 255), (240.0, 100.0, 100.0))
YELLOW = ("#ffff00", (255, 255, 0), (60.0, 100.0, 100.0))
CYAN = ("#00ffff", (0, 255, 255), (180.0, 100.0, 100.0))
MAGENTA = ("#ff00ff", (255, 0, 255), (300.0, 100.0, 100.0))
BLACK = ("#000000", (0, 0, 0), (0.0, 0.0, 0.0))
WHITE = ("#ffffff", (255, 255, 255), (0.0, 0.0, 100.0))
ORANGE = ("#ff8800", (255, 136, 0), (32.0, 100.0, 100.0))
PERIWINKLE = ("#8899dd", (136, 153, 221), (228.0, 38.46153846153846, 86.66666666666667))

samples = [RED, GREEN, BLUE, YELLOW, CYAN, MAGENTA, BLACK, WHITE, ORANGE, PERIWINKLE]

samples_hex_rgb = {hex_str: rgb for hex_str, rgb, _ in samples}
samples_rgb_hsv = {rgb: hsv for _, rgb, hsv in samples}
