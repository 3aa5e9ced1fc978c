"""MFCC samples and the codebook that maps them to observation labels."""

from dataclasses import dataclass, field

from .basic import euclidean_distance_with_weights
from .config import MFCC_SIZE
from .printer import format_vector
from .textio import SPACE, TAB, TokenReader, format_number

CODEBOOK = "CODEBOOK"
UNKNOWN_VALUE = "?"

# The first MFCC coefficients carry more meaning than the last ones.
MFCC_WEIGHTS = (1.2, 1.1, 1.0, 0.9, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3, 0.2, 0.1)


@dataclass
class MfccEntry:
    """One vector of MFCC coefficients."""

    data: list[float]

    def __post_init__(self) -> None:
        self.data = [float(value) for value in self.data]

    @property
    def size(self) -> int:
        return len(self.data)

    def dump(self) -> str:
        """Serialise as space-terminated values."""
        return "".join(format_number(value) + SPACE for value in self.data)

    @classmethod
    def load(cls, reader: TokenReader) -> "MfccEntry":
        """Read ``MFCC_SIZE`` coefficients from ``reader``."""
        return cls([reader.next_float("MFCC data") for _ in range(MFCC_SIZE)])

    def describe(self) -> str:
        """Human-readable form: ``[a, b, ...]`` and a newline."""
        return format_vector(self.data) + "\n"


@dataclass
class CodeBookEntry:
    """All MFCC samples recorded for one label."""

    values: list[MfccEntry] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.values)

    def add_value(self, entry: MfccEntry) -> None:
        self.values.append(entry)

    def describe(self) -> str:
        return "".join(value.describe() for value in self.values)


class CodeBook:
    """Maps MFCC vectors to the label of the nearest stored sample."""

    def __init__(self) -> None:
        self.book: dict[str, CodeBookEntry] = {}

    def add_label(self, label: str, entry: MfccEntry) -> None:
        """Add a sample to ``label``, creating the label if needed."""
        self.book.setdefault(label, CodeBookEntry()).add_value(entry)

    def remove_label(self, label: str) -> None:
        self.book.pop(label, None)

    def items(self):
        """Labels and their entries in label order."""
        return sorted(self.book.items())

    def find_label_by_sample(self, entry: MfccEntry) -> str:
        """Label whose sample is nearest to ``entry``, or ``UNKNOWN_VALUE``."""
        best_distance = None
        label = UNKNOWN_VALUE
        for name, book_entry in self.items():
            for sample in book_entry.values:
                distance = euclidean_distance_with_weights(
                    entry.data[:MFCC_SIZE], sample.data[:MFCC_SIZE], MFCC_WEIGHTS
                )
                if best_distance is None or best_distance > distance:
                    best_distance = distance
                    label = name
        return label

    def dump(self) -> str:
        """Serialise in the storage text format."""
        parts = [f"{CODEBOOK}{SPACE}{len(self.book)}\n"]
        for label, book_entry in self.items():
            parts.append(f"{label}{TAB}{book_entry.size}\n")
            parts.append("".join(value.dump() for value in book_entry.values))
            parts.append("\n")
        return "".join(parts)

    @classmethod
    def load(cls, reader: TokenReader) -> "CodeBook":
        """Read a codebook from ``reader``."""
        codebook = cls()
        book_size = reader.read_named_int(CODEBOOK, True)
        for _ in range(book_size):
            label = reader.next_token("CodeBook label")
            count = reader.next_int("CodeBook examples count")
            if count < 0:
                raise ValueError("Invalid CodeBook: examples count must be positive")
            codebook.book[label] = CodeBookEntry(
                [MfccEntry.load(reader) for _ in range(count)]
            )
        return codebook