import pytest

from yazz.codebook import UNKNOWN_VALUE, MfccEntry
from yazz.config import MFCC_SIZE
from yazz.forward_backward import calc_possibility
from yazz.hmm import HmModel
from yazz.recognizer import ModelProcessor
from yazz.storage import Storage


def _vector(value):
    return MfccEntry([value] * MFCC_SIZE)


@pytest.fixture
def storage(tmp_path):
    store = Storage(tmp_path / "models.dat")
    store.init()
    return store


def _model_odin():
    return HmModel(
        ["о", "д", "и", "н"],
        ["а", "о", "д", "и", "ы", "н"],
        [[0.6, 0.4, 0.0, 0.0], [0.0, 0.5, 0.5, 0.0],
         [0.0, 0.0, 0.7, 0.3], [0.0, 0.0, 0.0, 1.0]],
        [[0.5, 0.5, 0.0, 0.0, 0.0, 0.0], [0.0, 0.0, 1.0, 0.0, 0.0, 0.0],
         [0.0, 0.0, 0.0, 0.5, 0.5, 0.0], [0.0, 0.0, 0.0, 0.0, 0.0, 1.0]],
        [1.0, 0.0, 0.0, 0.0],
        "один",
    )


def _model_dva():
    return HmModel(
        ["д", "в", "а"],
        ["д", "т", "в", "ф", "а", "о"],
        [[0.5, 0.5, 0.0], [0.0, 0.7, 0.3], [0.0, 0.0, 1.0]],
        [[0.8, 0.2, 0.0, 0.0, 0.0, 0.0], [0.0, 0.0, 0.5, 0.5, 0.0, 0.0],
         [0.0, 0.0, 0.0, 0.0, 0.8, 0.2]],
        [0.9, 0.1, 0.0],
        "два",
    )


def _model_tri():
    return HmModel(
        ["т", "р", "и"],
        ["т", "р", "и", "ы"],
        [[0.2, 0.8, 0.0], [0.0, 0.7, 0.3], [0.0, 0.0, 1.0]],
        [[1.0, 0.0, 0.0, 0.0], [0.0, 1.0, 0.0, 0.0], [0.0, 0.0, 0.7, 0.3]],
        [1.0, 0.0, 0.0],
        "три",
    )


def test_mfcc_to_observations_picks_nearest_label(storage):
    storage.add_label("o", _vector(10.0))
    storage.add_label("d", _vector(-10.0))
    processor = ModelProcessor(storage)

    result = processor.mfcc_to_observations(
        [_vector(9.0), _vector(-8.0), _vector(11.0), _vector(-12.0)]
    )
    assert result == ["o", "d", "o", "d"]


def test_mfcc_to_observations_with_empty_codebook(storage):
    processor = ModelProcessor(storage)
    assert processor.mfcc_to_observations([_vector(1.0), _vector(2.0)]) == [
        UNKNOWN_VALUE,
        UNKNOWN_VALUE,
    ]


def test_find_best_model_returns_lowest_probability(storage):
    storage.add_label("т", _vector(10.0))
    storage.add_label("в", _vector(0.0))
    storage.add_label("а", _vector(-10.0))
    processor = ModelProcessor(storage)
    models = [_model_odin(), _model_dva(), _model_tri()]
    data = [_vector(10.0), _vector(0.0), _vector(-10.0)]

    best = processor.find_best_model(models, data)

    probabilities = {m.text: calc_possibility(m, ["т", "в", "а"]) for m in models}
    assert probabilities[best.text] == min(probabilities.values())
    # "два" is the most probable model for this sequence, so it is not chosen.
    assert probabilities["два"] == max(probabilities.values())
    assert best.text != "два"


def test_find_best_model_without_models(storage):
    processor = ModelProcessor(storage)
    assert processor.find_best_model([], [_vector(1.0)]) is None


def test_train_model_keeps_optimal_model(storage):
    storage.add_label("A", _vector(1.0))
    storage.add_label("B", _vector(-1.0))
    processor = ModelProcessor(storage)
    model = HmModel(
        ["s", "t"], ["A", "B"],
        [[0.0, 1.0], [0.5, 0.5]],
        [[1.0, 0.0], [0.0, 1.0]],
        [1.0, 0.0],
        "test",
    )
    data = [_vector(1.0), _vector(-1.0), _vector(-1.0), _vector(1.0)]

    processor.train_model(model, data)

    expected_transitions = [[0.0, 1.0], [0.5, 0.5]]
    expected_emissions = [[1.0, 0.0], [0.0, 1.0]]
    for row, expected in zip(model.transitions, expected_transitions):
        assert row == pytest.approx(expected, abs=1e-2)
    for row, expected in zip(model.emissions, expected_emissions):
        assert row == pytest.approx(expected, abs=1e-2)
    assert model.initial_dst == pytest.approx([1.0, 0.0], abs=1e-2)