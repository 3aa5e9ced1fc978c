"""Project-wide settings for framing, feature extraction and segmentation."""

PROJECT_NAME = "YAZZ"
PROJECT_VERSION = "0.0.2"

# Length of a frame, in milliseconds.
FRAME_LENGTH = 50

# Fraction of a frame shared with the next one (0 <= x < 1).
FRAME_OVERLAP = 0.5

# Minimal size of a word, in frames (a word lasts at least 200 ms).
WORD_MIN_SIZE = int((200 // FRAME_LENGTH) / (1 - FRAME_OVERLAP))

# Minimal number of frames between two words: half the minimal word size.
WORDS_MIN_DISTANCE = int(WORD_MIN_SIZE * 0.50)

# Number of MFCC coefficients.
MFCC_SIZE = 12

# Frequency bounds for the mel filter bank, in Hz.
MFCC_FREQ_MIN = 300
MFCC_FREQ_MAX = 4000

# Entropy parameters used to detect silence.
ENTROPY_BINS = 75
ENTROPY_THRESHOLD = 0.1

# Codebook distance threshold.
CODEBOOK_THRESHOLD = 25.0

DEBUG_ENABLED = False

# Tolerance used when comparing computed values in tests.
EPS_TEST = 1e-4