"""Training of word models and recognition of MFCC data against them."""

from collections.abc import Iterable, Sequence

from . import baum_welch
from .codebook import MfccEntry
from .config import DEBUG_ENABLED
from .forward_backward import calc_possibility
from .hmm import HmModel
from .storage import Storage


class ModelProcessor:
    """Trains models and finds the best model for a run of MFCC data."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def mfcc_to_observations(self, mfcc: Iterable[MfccEntry]) -> list[str]:
        """Quantise each MFCC vector to the label of its nearest codebook sample."""
        code_book = self.storage.code_book
        observations = []
        if DEBUG_ENABLED:
            print("Labels:")
        for entry in mfcc:
            label = code_book.find_label_by_sample(entry)
            observations.append(label)
            if DEBUG_ENABLED:
                print(f"{label}: " + "".join(f"{value}, " for value in entry.data))
        return observations

    def train_model(self, model: HmModel, data: Iterable[MfccEntry]) -> int:
        """Train ``model`` in place on the observations of ``data``."""
        return baum_welch.perform(model, self.mfcc_to_observations(data))

    def find_best_model(
        self, models: Sequence[HmModel], data: Iterable[MfccEntry]
    ) -> HmModel | None:
        """Model with the lowest computed probability for ``data``; None if there are no models."""
        observations = self.mfcc_to_observations(data)
        best: HmModel | None = None
        min_probability = 0.0
        for model in models:
            probability = calc_possibility(model, observations)
            print(f'Probability for model "{model.text}" is {probability:g}')
            if best is None or probability < min_probability:
                min_probability = probability
                best = model
        if best is not None:
            print(
                f'The best model is "{best.text}" with {min_probability:g} distance'
            )
        return best