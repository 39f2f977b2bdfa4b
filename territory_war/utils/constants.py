"""Game rule constants."""

# Dice
DIE_FACES = 6

# Territory text limits (characters)
MAX_NAME_LENGTH = 29
MAX_COLOR_LENGTH = 14

# Registry
DEFAULT_TERRITORY_COUNT = 5
MIN_TERRITORY_COUNT = 2
UNASSIGNED_OWNER = -1

# Demo layout used by the master level (cycled when more slots are requested)
DEMO_NAMES = ("Aldea", "Montanha", "Planície", "Fortaleza", "Vale")
DEMO_COLORS = ("Verde", "Vermelho", "Azul", "Amarelo", "Verde")
DEMO_TROOPS = (3, 4, 2, 5, 1)

# Mission catalog parameters
ELIMINATE_TARGET_COLOR = "Verde"
CONTROL_TARGET_COUNT = 3
