# Namespace for pipeline steps
from .load_rows import LoadSheetRows  # noqa: F401
from .assemble_applicants import AssembleApplicants  # noqa: F401
from .persist_applicants import PersistApplicants  # noqa: F401
