from examcell.models.classroom import Classroom  # noqa: F401
from examcell.models.exam import Exam, ExamSeat, ExamType  # noqa: F401
from examcell.models.faculty import Faculty, SemesterPreference  # noqa: F401
from examcell.models.student import Student  # noqa: F401
