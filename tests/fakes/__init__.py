from .notion import NotionAssessmentFake

__all__ = ["NotionAssessmentFake"]
