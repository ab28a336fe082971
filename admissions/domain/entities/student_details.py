from dataclasses import dataclass


@dataclass(frozen=True)
class StudentDetails:
    first_name: str = ""
    last_name: str = ""
    date_of_birth: str = ""  # free-form, the form does not enforce a format
    gender: str = ""
    current_grade: str = ""
    current_school: str = ""
    previous_school: str = ""
    caste: str = ""
    religion: str = ""
    special_needs: bool = False
    special_needs_details: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
