"""WAV reading, hidden Markov models, Baum-Welch training, an MFCC codebook and DTW for isolated word recognition."""

__version__ = "0.0.2"