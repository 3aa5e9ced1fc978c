import pytest

from yazz.hmm import HmModel, InvalidModelError, MODEL_EPSILON, normalize_vector
from yazz.textio import StorageFormatError


def model_odin():
    return HmModel(
        ["о", "д", "и", "н"],
        ["а", "о", "д", "и", "ы", "н"],
        [
            [0.6, 0.4, 0.0, 0.0],
            [0.0, 0.5, 0.5, 0.0],
            [0.0, 0.0, 0.7, 0.3],
            [0.0, 0.0, 0.0, 1.0],
        ],
        [
            [0.5, 0.5, 0.0, 0.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 0.5, 0.5, 0.0],
            [0.0, 0.0, 0.0, 0.0, 0.0, 1.0],
        ],
        [1.0, 0.0, 0.0, 0.0],
        "один",
    )


def test_serialisation_round_trip():
    original = model_odin()
    decoded = HmModel.from_text(original.dump())
    assert decoded.state_cnt == original.state_cnt
    assert decoded.states == original.states
    assert decoded.observation_cnt == original.observation_cnt
    assert decoded.observations == original.observations
    assert decoded.text == original.text
    for got, want in zip(decoded.transitions, original.transitions):
        assert got == pytest.approx(want, rel=1e-4)
    assert decoded.initial_dst == pytest.approx(original.initial_dst, rel=1e-4)


def test_dump_starts_with_id_and_text():
    assert model_odin().dump().startswith("MODEL 0\nTEXT один\n")


def test_normalisation_keeps_rows_summing_to_one():
    model = model_odin()
    for row in model.transitions + model.emissions + [model.initial_dst]:
        assert sum(row) == pytest.approx(1.0)
        assert min(row) >= MODEL_EPSILON


def test_normalize_vector_lifts_zeros():
    result = normalize_vector([1.0, 0.0, 0.0, 0.0])
    assert result[1:] == [MODEL_EPSILON] * 3
    assert sum(result) == pytest.approx(1.0)


def test_normalize_vector_all_zero():
    assert normalize_vector([0.0, 0.0]) == [MODEL_EPSILON, MODEL_EPSILON]


def test_invalid_transitions_rejected():
    with pytest.raises(InvalidModelError):
        HmModel(["s"], ["A"], [[0.9]], [[1.0]], [1.0], "bad")


def test_invalid_initial_rejected():
    with pytest.raises(InvalidModelError):
        HmModel(["s", "t"], ["A"], [[0.5, 0.5], [0.5, 0.5]], [[1.0], [1.0]],
                [0.5, 0.4], "bad")


def test_mismatched_sizes_rejected():
    with pytest.raises(InvalidModelError):
        HmModel(["s", "t"], ["A"], [[1.0]], [[1.0], [1.0]], [1.0, 0.0], "bad")


def test_describe_mentions_id_and_text():
    text = model_odin().describe()
    assert text.startswith('[Id 0] Model "один":')
    assert "States: [о, д, и, н]" in text


def test_load_rejects_negative_id():
    dump = model_odin().dump().replace("MODEL 0", "MODEL -3", 1)
    with pytest.raises(StorageFormatError):
        HmModel.from_text(dump)