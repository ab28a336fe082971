from enum import IntEnum


class WizardStep(IntEnum):
    PARENT_PROFILE = 0
    STUDENT_DETAILS = 1
    DOCUMENTS = 2
    SCHOOL_SELECTION = 3
    REVIEW = 4
    CONFIRMATION = 5
