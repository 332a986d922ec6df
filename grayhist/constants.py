APP_TITLE = "Histogram equalization"
IMAGE_FILENAME = "kodim23.png"

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480
ADDITIONAL_WIDTH = 258  # dodatkowa szerokość na histogram (256 słupków + margines)

BITS_PER_CHANNEL = 8
CHANNELS = 4  # RGBA

# wysokość słupka = liczność / HIST_BAR_DIVISOR (dobrane pod obraz testowy)
HIST_BAR_DIVISOR = 17
COL_HIST_BAR = "#00ff00"
COL_BACKGROUND = "#7d7d7d"

# True → piksel szary tylko gdy R == G == B
STRICT_GRAYSCALE_CHECK = True
