# backend/pattern_atlas/errors.py
"""
Exception hierarchy for Pattern Atlas
"""


class PatternAtlasError(Exception):
    """Base class for every error raised by the atlas"""


class PatternNotFoundError(PatternAtlasError, LookupError):
    def __init__(self, pattern_id: str):
        self.pattern_id = pattern_id
        super().__init__(f"Pattern '{pattern_id}' not found")


class DuplicatePatternError(PatternAtlasError, ValueError):
    def __init__(self, pattern_id: str):
        self.pattern_id = pattern_id
        super().__init__(f"Pattern '{pattern_id}' is already registered")


class UnknownProductError(PatternAtlasError, ValueError):
    """Raised by a factory asked for something it cannot make"""

    def __init__(self, kind: str, known: list):
        self.kind = kind
        self.known = known
        super().__init__(f"Cannot create '{kind}', expected one of: {', '.join(known)}")


class IncompleteBuildError(PatternAtlasError, ValueError):
    pass


class BreedNotRegisteredError(PatternAtlasError, LookupError):
    def __init__(self, breed: str):
        self.breed = breed
        super().__init__(f"Breed '{breed}' is not registered in the DNA table")
