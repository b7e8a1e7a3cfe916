from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# --- Enums ---
# Declaration order is the sort order for houses.


class House(str, Enum):
    ARRYN = "ARRYN"
    BARATHEON = "BARATHEON"
    BOLTON = "BOLTON"
    FREY = "FREY"
    GREYJOY = "GREYJOY"
    LANNISTER = "LANNISTER"
    MARTELL = "MARTELL"
    MORMONT = "MORMONT"
    SNOW = "SNOW"
    STARK = "STARK"
    TARGARYEN = "TARGARYEN"
    TARLY = "TARLY"
    TULLY = "TULLY"
    TYRELL = "TYRELL"


class Title(str, Enum):
    SIR = "SIR"
    LORD = "LORD"
    LADY = "LADY"
    KING = "KING"
    QUEEN = "QUEEN"


ROYAL_TITLES = frozenset({Title.KING, Title.QUEEN})

_HOUSE_RANK = {house: rank for rank, house in enumerate(House)}

# --- Members ---

class Member(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(min_length=1)
    house: House
    title: Title
    salary: float = Field(ge=0)
    dob: date

    @property
    def is_royal(self) -> bool:
        return self.title in ROYAL_TITLES


# --- Sort keys ---

def natural_order(member: Member) -> int:
    """Natural order of members: ascending id."""
    return member.id


def house_order(member: Member) -> int:
    return _HOUSE_RANK[member.house]
