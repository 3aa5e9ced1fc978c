"""Text file store for models and the codebook."""

import os
import sys
from pathlib import Path

from .codebook import CodeBook, MfccEntry
from .hmm import HmModel
from .textio import SPACE, TokenReader

STORAGE_FILE = "models.dat"

STORAGE_HEADER = "YAZZ"
MAX_ID = "MAX_ID"
MODELS = "MODELS"


class Storage:
    """Models and codebook kept in a single text file."""

    def __init__(self, path: "str | os.PathLike[str]" = STORAGE_FILE) -> None:
        self.path = Path(path)
        self.max_id = 0
        self.models: dict[int, HmModel] = {}
        self.code_book = CodeBook()
        self._initialised = False

    def init(self) -> bool:
        """Load the store from its file, creating an empty file if there is none."""
        if self._initialised:
            return True
        self._initialised = True
        self.max_id = 0
        self.models = {}
        self.code_book = CodeBook()

        if self.path.exists():
            print("Loading data from the storage...")
            reader = TokenReader(self.path.read_text(encoding="utf-8"))
            reader.read_header(STORAGE_HEADER)
            self.max_id = reader.read_named_int(MAX_ID, True)
            models_cnt = reader.read_named_int(MODELS, True)
            for _ in range(models_cnt):
                model = HmModel.load(reader)
                self.models[model.model_id] = model
            self.code_book = CodeBook.load(reader)
        else:
            print("Storage not found, creating an empty one... ")
            self.persist()
        return True

    def add_model(self, model: HmModel) -> int:
        """Store ``model`` under a fresh id and return that id."""
        self.max_id += 1
        model.model_id = self.max_id
        self.models[self.max_id] = model
        return self.max_id

    def delete_model(self, model_id: int) -> None:
        self.models.pop(model_id, None)

    def add_label(self, label: str, entry: MfccEntry) -> None:
        """Add a sample to a codebook label (created if needed)."""
        self.code_book.add_label(label, entry)

    def delete_label(self, label: str) -> None:
        self.code_book.remove_label(label)

    def dumps(self) -> str:
        """The store serialised as text."""
        parts = [
            f"{STORAGE_HEADER}\n",
            f"{MAX_ID}{SPACE}{self.max_id}\n",
            "\n\n",
            f"{MODELS}{SPACE}{len(self.models)}\n",
            "\n",
        ]
        parts.extend(self.models[key].dump() + "\n" for key in sorted(self.models))
        parts.append("\n")
        parts.append(self.code_book.dump())
        return "".join(parts)

    def persist(self) -> bool:
        """Write the store to its file; False if the file cannot be written."""
        try:
            self.path.write_text(self.dumps(), encoding="utf-8")
        except OSError:
            print("Can't access the data storage :(", file=sys.stderr)
            return False
        print("...storage data successfully updated...")
        return True