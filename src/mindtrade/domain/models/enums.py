"""Enumerations for domain models."""

from enum import Enum


class TradeAction(str, Enum):
    """Direction of a decision or trade."""

    BUY = "buy"
    SELL = "sell"


class EmotionalLabel(str, Enum):
    """Bucketed reading of the 0-100 emotional state slider."""

    FEARFUL = "Fearful"
    NEUTRAL = "Neutral"
    CONFIDENT = "Confident"
