#file: frontend/categories.py

import math

from frontend.models import AqiLabel, CategoryDescriptor

GOOD = CategoryDescriptor(
    label = AqiLabel.GOOD,
    severity_color = "#00E400",
    description = "Perfect for outdoor activities! 🌳",
    recommendation = "Safe for outdoor activities - enjoy the fresh air! 🏃",
)
MODERATE = CategoryDescriptor(
    label = AqiLabel.MODERATE,
    severity_color = "#FFFF00",
    description = "OK for most people to be outside 👌",
    recommendation = "Sensitive individuals should consider reducing prolonged outdoor activities 🚶",
)
UNHEALTHY_SENSITIVE = CategoryDescriptor(
    label = AqiLabel.UNHEALTHY_SENSITIVE,
    severity_color = "#FF7E00",
    description = "Take it easy if you're sensitive to air quality 🤔",
    recommendation = "Children & elderly should limit outdoor exercise 🏠",
)
UNHEALTHY = CategoryDescriptor(
    label = AqiLabel.UNHEALTHY,
    severity_color = "#FF0000",
    description = "Maybe stay inside if you can 😷",
    recommendation = "Everyone should reduce outdoor activities ⚠️",
)
VERY_UNHEALTHY = CategoryDescriptor(
    label = AqiLabel.VERY_UNHEALTHY,
    severity_color = "#8F3F97",
    description = "Best to stay indoors today! ⚠️",
    recommendation = "Avoid outdoor activities - stay inside! 🏠",
)
HAZARDOUS = CategoryDescriptor(
    label = AqiLabel.HAZARDOUS,
    severity_color = "#7E0023",
    description = "Definitely stay inside! 🏠",
    recommendation = "Emergency conditions - take precautions! ⛔",
)

# Inclusive upper bounds, ascending. Anything above the last bound is hazardous.
BREAKPOINTS = [
    (50, GOOD),
    (100, MODERATE),
    (150, UNHEALTHY_SENSITIVE),
    (200, UNHEALTHY),
    (300, VERY_UNHEALTHY),
]


def classify(index: float) -> CategoryDescriptor:
    """
    Map an AQI value to its category descriptor.

    Fractional values fall into the band whose inclusive upper bound they do
    not exceed, so 50.5 is Moderate. Negative values are clamped to Good.
    NaN has no category and raises ValueError.
    """
    if isinstance(index, float) and math.isnan(index):
        raise ValueError("AQI must be a number, got NaN")
    for upper_bound, category in BREAKPOINTS:
        if index <= upper_bound:
            return category
    return HAZARDOUS
