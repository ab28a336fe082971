from dataclasses import dataclass


@dataclass(frozen=True)
class ParentProfile:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    occupation: str = ""
    income: str = ""  # income bracket label, e.g. "5-10 LPA"
