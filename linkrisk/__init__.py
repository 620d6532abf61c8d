"""linkrisk - heuristic URL risk scoring."""
from .scoring import AnalysisResult, Finding, Verdict, analyze

__all__ = ["AnalysisResult", "Finding", "Verdict", "analyze"]
