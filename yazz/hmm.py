"""Hidden Markov model with text serialisation."""

from collections.abc import Sequence

from .printer import format_matrix, format_vector
from .textio import SPACE, TAB, TokenReader, format_number

MODEL = "MODEL"
TEXT = "TEXT"
STATES = "STATES"
OBSERVATIONS = "OBSERVATIONS"
INITIAL = "INITIAL"
TRANSITION = "TRANSITION"
EMISSION = "EMISSION"

MODEL_EPSILON = 1e-4


class InvalidModelError(ValueError):
    """Raised when a model's distributions are inconsistent."""


def normalize_vector(values: Sequence[float]) -> list[float]:
    """Lift near-zero entries to a small epsilon, taking the mass from the rest."""
    size = len(values)
    zero_cnt = sum(1 for value in values if value < MODEL_EPSILON)
    if zero_cnt == size:
        return [MODEL_EPSILON] * size
    decrease = zero_cnt * MODEL_EPSILON / (size - zero_cnt)
    return [
        MODEL_EPSILON if value < MODEL_EPSILON else value - decrease
        for value in values
    ]


class HmModel:
    """A discrete hidden Markov model for one word."""

    def __init__(
        self,
        states: Sequence[str],
        observations: Sequence[str],
        transitions: Sequence[Sequence[float]],
        emissions: Sequence[Sequence[float]],
        initial_dst: Sequence[float],
        text: str,
    ) -> None:
        self._assign(0, states, observations, transitions, emissions, initial_dst, text)
        self._check()
        self._normalize()

    def _assign(self, model_id, states, observations, transitions, emissions,
                initial_dst, text) -> None:
        self.model_id = model_id
        self.states = list(states)
        self.observations = list(observations)
        self.transitions = [[float(v) for v in row] for row in transitions]
        self.emissions = [[float(v) for v in row] for row in emissions]
        self.initial_dst = [float(v) for v in initial_dst]
        self.text = text

    @property
    def state_cnt(self) -> int:
        return len(self.states)

    @property
    def observation_cnt(self) -> int:
        return len(self.observations)

    def _check(self) -> None:
        n, m = self.state_cnt, self.observation_cnt
        if len(self.initial_dst) != n:
            raise InvalidModelError("Invalid initial distribution size")
        if len(self.transitions) != n or any(len(r) != n for r in self.transitions):
            raise InvalidModelError("Invalid transitions matrix size")
        if len(self.emissions) != n or any(len(r) != m for r in self.emissions):
            raise InvalidModelError("Invalid emissions matrix size")
        for row in self.transitions:
            if abs(1 - sum(row)) >= MODEL_EPSILON:
                raise InvalidModelError("Invalid transitions matrix")
        for row in self.emissions:
            if abs(1 - sum(row)) >= MODEL_EPSILON:
                raise InvalidModelError("Invalid emissions matrix")
        if abs(1 - sum(self.initial_dst)) >= MODEL_EPSILON:
            raise InvalidModelError("Invalid initial distribution")

    def _normalize(self) -> None:
        self.initial_dst = normalize_vector(self.initial_dst)
        self.transitions = [normalize_vector(row) for row in self.transitions]
        self.emissions = [normalize_vector(row) for row in self.emissions]

    def dump(self) -> str:
        """Serialise the model in the storage text format."""
        lines = [
            f"{MODEL}{SPACE}{self.model_id}",
            f"{TEXT}{SPACE}{self.text}",
            f"{STATES}{TAB}{TAB}{self.state_cnt}"
            + "".join(SPACE + s for s in self.states),
            f"{OBSERVATIONS}{TAB}{self.observation_cnt}"
            + "".join(SPACE + o for o in self.observations),
            INITIAL,
            "".join(format_number(v) + TAB for v in self.initial_dst),
            TRANSITION,
        ]
        lines += ["".join(format_number(v) + TAB for v in row) for row in self.transitions]
        lines += ["", EMISSION]
        lines += ["".join(format_number(v) + TAB for v in row) for row in self.emissions]
        lines.append("")
        return "\n".join(lines) + "\n"

    @classmethod
    def load(cls, reader: TokenReader) -> "HmModel":
        """Read a model from ``reader`` without re-normalising it."""
        model_id = reader.read_named_int(MODEL, True)
        text = reader.read_named_string(TEXT)
        state_cnt = reader.read_named_int(STATES, True)
        states = [reader.next_token(STATES) for _ in range(state_cnt)]
        observation_cnt = reader.read_named_int(OBSERVATIONS, True)
        observations = [reader.next_token(OBSERVATIONS) for _ in range(observation_cnt)]

        reader.read_header(INITIAL)
        initial = [reader.next_float("INITIAL data") for _ in range(state_cnt)]
        reader.read_header(TRANSITION)
        transitions = [
            [reader.next_float("TRANSITION data") for _ in range(state_cnt)]
            for _ in range(state_cnt)
        ]
        reader.read_header(EMISSION)
        emissions = [
            [reader.next_float("EMISSION data") for _ in range(observation_cnt)]
            for _ in range(state_cnt)
        ]

        model = cls.__new__(cls)
        model._assign(model_id, states, observations, transitions, emissions,
                      initial, text)
        return model

    @classmethod
    def from_text(cls, text: str) -> "HmModel":
        """Read a model from its serialised text."""
        return cls.load(TokenReader(text))

    def describe(self) -> str:
        """Human-readable description of the model."""
        return (
            f'[Id {self.model_id}] Model "{self.text}":\n\n'
            f"States: {format_vector(self.states)}\n"
            f"Observations: {format_vector(self.observations)}\n\n"
            f"Transitions:\n{format_matrix(self.transitions)}\n"
            f"Emissions:\n{format_matrix(self.emissions)}\n"
            f"Initial distribution:\n{format_vector(self.initial_dst)}\n"
        )