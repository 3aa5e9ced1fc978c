# yazz

Building blocks for recognising isolated spoken words: reading 16-bit PCM
WAV data, discrete hidden Markov models with forward-backward scoring and
Baum–Welch training, a codebook that turns MFCC vectors into observation
labels, a plain-text store for models and the codebook, and a dynamic time
warping distance.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

- `yazz.wav` — `read_wav(path)` and `WavData.from_bytes(data)` decode a
  canonical 44-byte-header PCM file (1 or 2 channels, 16 bits per channel).
  Two channels are mixed down as the mean of the absolute sample values.
  `WavData` holds `raw_data`, `normalized_data` (scaled by the largest
  absolute value), `min_val`, `max_val` and `number_of_samples`.
  `WavHeader.unpack` / `WavHeader.pack` convert the header; unsupported or
  malformed data raises `WavFormatError`.
- `yazz.hmm` — `HmModel(states, observations, transitions, emissions,
  initial_dst, text)` checks that every distribution sums to 1 (raising
  `InvalidModelError` otherwise) and lifts near-zero entries to a small
  epsilon with `normalize_vector`. `dump()`, `load(reader)` and
  `from_text(text)` write and read the text format; `describe()` renders it
  for people.
- `yazz.forward_backward` — `forward`, `backward` and
  `calc_possibility(model, sequence)`. Symbols a model does not know get a
  small default emission probability (`yazz.algorithm`).
- `yazz.baum_welch` — `perform(model, sequence)` trains a model in place
  and returns the number of iterations; it raises `ConvergenceError` if it
  does not converge within 50 iterations.
- `yazz.codebook` — `MfccEntry`, `CodeBookEntry` and `CodeBook`.
  `CodeBook.find_label_by_sample` returns the label of the nearest stored
  sample by weighted Euclidean distance (earlier coefficients weigh more),
  or `"?"` when the codebook is empty.
- `yazz.storage` — `Storage(path="models.dat")` keeps models and the
  codebook in one text file. `init()` loads the file, or writes an empty one
  if there is none; `persist()` writes it back; `add_model` gives a model a
  fresh id.
- `yazz.recognizer` — `ModelProcessor(storage)` quantises MFCC vectors with
  the stored codebook (`mfcc_to_observations`), trains a model on them
  (`train_model`) and picks a model with `find_best_model`, which returns
  the model with the lowest computed probability.
- `yazz.dtw` — `calc_distance` and `calc_distance_vector` for sequences of
  numbers or of fixed-size vectors.
- `yazz.basic` — `rms`, histogram `entropy` and Euclidean distances.
- `yazz.printer` and `yazz.textio` — text rendering and the token reader
  used by the storage format (`StorageFormatError` on bad data).

## Example

```python
from yazz.hmm import HmModel
from yazz.forward_backward import calc_possibility
from yazz.baum_welch import perform

model = HmModel(
    ["s", "t"], ["A", "B"],
    [[0.3, 0.7], [0.1, 0.9]],
    [[0.4, 0.6], [0.5, 0.5]],
    [0.85, 0.15],
    "test",
)
print(calc_possibility(model, ["A", "B", "B", "A"]))
perform(model, ["A", "B", "B", "A"])
print(model.describe())
```

## What the package does not do

- It has no command-line program; everything is used from Python.
- It does not compute MFCC from audio, cut samples into frames or split a
  recording into words. MFCC vectors must be supplied as `MfccEntry` values.
- It does not write word WAV files or draw diagrams.