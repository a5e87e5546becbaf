from .pipeline import get_default_normalizer, NormalizerPipeline
from .rules import SchemaNormalizer, FieldSpec, FIELD_TABLE, TEXT_FALLBACK
from .decoder import decode, RepairRule, REPAIR_RULES
from .fences import strip_fences
from .locator import locate_candidate
from .types import CallSite, Decoded, DecodeFailure, DecodeResult, NoCandidate, ShapeMismatch
from .base import Normalizer

__all__ = [
    "get_default_normalizer",
    "NormalizerPipeline",
    "SchemaNormalizer",
    "FieldSpec",
    "FIELD_TABLE",
    "TEXT_FALLBACK",
    "decode",
    "RepairRule",
    "REPAIR_RULES",
    "strip_fences",
    "locate_candidate",
    "CallSite",
    "Decoded",
    "DecodeFailure",
    "DecodeResult",
    "NoCandidate",
    "ShapeMismatch",
    "Normalizer",
]
