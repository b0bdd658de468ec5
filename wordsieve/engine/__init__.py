from .words import Word
from .feedback import feedback, is_solved
from .constraints import ConstraintSet
from .restrictions import parse_restrictions
from .filtering import filter_candidates, is_candidate
from .frequency import FrequencyModel, build_frequency_model
from .scoring import ScoredWord, score_word, rank_words

__all__ = [
    "Word", "feedback", "is_solved", "ConstraintSet", "parse_restrictions",
    "filter_candidates", "is_candidate", "FrequencyModel", "build_frequency_model",
    "ScoredWord", "score_word", "rank_words",
]
