"""Feedback messages tiered by the share of points earned."""

from exercises.config import (
    DEFAULT_CONFIG,
    FeedbackConfig,
    FeedbackTier,
    TranslationFeedbackConfig,
)

# Absorbs float noise such as 7 * 0.8 / 7 == 0.7999999999999999
_RATIO_EPSILON = 1e-9


def score_ratio(score: float, points: float) -> float:
    """Return score / points, or 0.0 when points is not positive."""
    if points <= 0:
        return 0.0
    return score / points


def _pick_tier(
    ratio: float, tiers: list[FeedbackTier], fallback: str
) -> str:
    for tier in sorted(tiers, key=lambda t: t.min_ratio, reverse=True):
        if ratio + _RATIO_EPSILON >= tier.min_ratio:
            return tier.message
    return fallback


def generate_feedback(
    is_correct: bool,
    score: float,
    points: float,
    config: FeedbackConfig = DEFAULT_CONFIG.feedback,
) -> str:
    """Return the generic feedback message for a result.

    Args:
        is_correct: Whether the whole exercise was answered correctly.
        score: Points earned (unrounded).
        points: Maximum achievable points.
        config: Feedback wording and thresholds.
    """
    if is_correct:
        return config.perfect
    return _pick_tier(score_ratio(score, points), config.tiers, config.fallback)


def generate_translation_feedback(
    is_exact_match: bool,
    score: float,
    points: float,
    config: TranslationFeedbackConfig = DEFAULT_CONFIG.translation_feedback,
) -> str:
    """Return the translation-specific feedback message for a result."""
    if is_exact_match:
        return config.perfect
    return _pick_tier(score_ratio(score, points), config.tiers, config.fallback)
