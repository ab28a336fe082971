from dataclasses import dataclass


@dataclass(frozen=True)
class SchoolSelection:
    id: str
    name: str = ""
    slug: str = ""
    selected: bool = True
    preference: int = 1  # lower is higher priority
