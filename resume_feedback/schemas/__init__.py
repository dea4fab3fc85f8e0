from .feedback import AnalysisInput, Category, Report, SectionResult, SectionResults, Tip, TipKind

__all__ = [
    "AnalysisInput",
    "SectionResult",
    "SectionResults",
    "Tip",
    "TipKind",
    "Category",
    "Report",
]
