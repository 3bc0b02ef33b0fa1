# Nightfly palette
BACKGROUND = (1, 22, 39)
SURFACE = (9, 34, 54)
SURFACE_LIGHT = (29, 59, 83)
BORDER = (44, 62, 80)
PRIMARY = (130, 170, 255)
PRIMARY_WEAK = (33, 98, 163)
PRIMARY_STRONG = (180, 204, 255)
TEXT = (214, 222, 235)
TEXT_MUTED = (124, 143, 161)
PLACEHOLDER = (75, 100, 121)
WARNING = (236, 196, 141)
WHITE = (255, 255, 255)
