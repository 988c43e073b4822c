from enum import Enum


class Classe(Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"

    @property
    def description(self) -> str:
        return CLASSE_DESCRIPTIONS[self]


CLASSE_DESCRIPTIONS = {
    Classe.A: "exactly according to the specification",
    Classe.B: "throwing the elbows to the front",
    Classe.C: "lifting the dumbbell only halfway",
    Classe.D: "lowering the dumbbell only halfway",
    Classe.E: "throwing the hips to the front",
}

SENSORS = ("belt", "arm", "forearm", "dumbbell")

# Identifier, timing and window bookkeeping columns; never used as features.
METADATA_COLUMNS = (
    "X",
    "user_name",
    "raw_timestamp_part_1",
    "raw_timestamp_part_2",
    "cvtd_timestamp",
    "new_window",
    "num_window",
    "problem_id",
)

# Tokens found in place of numbers in the raw export (spreadsheet
# division errors, R-style missing markers, blank cells).
ERROR_TOKENS = ("#DIV/0!", "NA", "")


def get_classe_description(label: str) -> str:
    try:
        return Classe(label).description
    except ValueError:
        return "unknown"
