"""Configuration for exercise evaluation.

These models hold the tunable constants of the grading strategies and of the
feedback policy. The defaults reproduce the standard grading behavior; tests
and callers may pass a custom config to ``evaluate``.
"""

from pydantic import BaseModel, Field


class FeedbackTier(BaseModel):
    """A feedback message shown when score / points reaches ``min_ratio``."""

    min_ratio: float = Field(ge=0.0, le=1.0)
    message: str


class FeedbackConfig(BaseModel):
    """Feedback messages, tiers ordered from highest ratio to lowest."""

    perfect: str = "Perfect! You got everything correct."
    tiers: list[FeedbackTier] = Field(
        default_factory=lambda: [
            FeedbackTier(min_ratio=0.8, message="Great work! Just a few minor mistakes."),
            FeedbackTier(
                min_ratio=0.6, message="Good effort! There's room for improvement."
            ),
            FeedbackTier(
                min_ratio=0.4,
                message="Keep practicing! Review the topics and try again.",
            ),
        ]
    )
    fallback: str = "You might want to review the material before trying again."


class TranslationFeedbackConfig(BaseModel):
    """Translation-specific feedback wording."""

    perfect: str = "Perfect translation!"
    tiers: list[FeedbackTier] = Field(
        default_factory=lambda: [
            FeedbackTier(
                min_ratio=0.8,
                message="Very good translation! You captured most of the key elements.",
            ),
            FeedbackTier(
                min_ratio=0.6,
                message="Good attempt! Consider the suggested translations for improvement.",
            ),
        ]
    )
    fallback: str = "Review the suggested translations and key vocabulary."


class EvaluationConfig(BaseModel):
    """Master configuration for all exercise evaluators."""

    score_decimals: int = Field(default=1, ge=0)
    keyword_credit_cap: float = Field(default=0.8, gt=0.0, le=1.0)
    pending_feedback: str = (
        "This submission requires teacher review. "
        "Your score will be updated once reviewed."
    )
    feedback: FeedbackConfig = Field(default_factory=FeedbackConfig)
    translation_feedback: TranslationFeedbackConfig = Field(
        default_factory=TranslationFeedbackConfig
    )


DEFAULT_CONFIG = EvaluationConfig()
