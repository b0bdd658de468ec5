from .cache import ResultCache
from .metrics import RequestCounter
from .core import (CandidateReport, WordService, compute_candidates, solve,
                   MAX_RESULT_LIST_SIZE, FISHING_WORD_SIZE)

__all__ = ["ResultCache", "RequestCounter", "CandidateReport", "WordService",
           "compute_candidates", "solve", "MAX_RESULT_LIST_SIZE", "FISHING_WORD_SIZE"]
