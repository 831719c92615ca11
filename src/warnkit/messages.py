"""Message synthesis for the future-facing warning kinds.

Deprecation, pending-deprecation and stability warnings may be built from a
structured payload instead of a message. The payload names a feature by type
and/or name, optionally pointing at an alternative and a page with more
information; the most specific sentence the payload supports is produced.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DEPRECATION_DEFAULT = "A feature has been deprecated."
PENDING_DEPRECATION_DEFAULT = "A feature is pending deprecation."
STABILITY_DEFAULT = (
    "A feature is unstable and should not be used in production environments."
)

_VOWELS = "aeiou"


class FeatureData(BaseModel):
    """Structured payload describing a deprecated or unstable feature.

    Both ``feature_name`` and ``featureName`` spellings are accepted.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    feature_type: str | None = None
    feature_name: str | None = None
    about_url: str | None = None
    alternative_feature_name: str | None = None


def _coerce(data: FeatureData | Mapping[str, Any] | None) -> FeatureData:
    if data is None:
        return FeatureData()
    if isinstance(data, FeatureData):
        return data
    return FeatureData.model_validate(dict(data))


def _subject(feature: FeatureData) -> str:
    """Return the sentence subject, e.g. ``An endpoint, /v1/users,``."""
    feature_type = feature.feature_type
    article = "An" if feature_type and feature_type[0].lower() in _VOWELS else "A"
    if feature_type and feature.feature_name:
        return f"{article} {feature_type}, {feature.feature_name},"
    if feature.feature_name:
        return f"A feature, {feature.feature_name},"
    if feature_type:
        return f"{article} {feature_type}"
    return "A feature"


def _read_more(feature: FeatureData) -> str:
    return f" Read more at {feature.about_url}." if feature.about_url else ""


def deprecation_message(data: FeatureData | Mapping[str, Any] | None = None) -> str:
    """Build a deprecation sentence from *data*."""
    feature = _coerce(data)
    text = f"{_subject(feature)} has been deprecated."
    if feature.alternative_feature_name:
        text += f" Use {feature.alternative_feature_name} instead."
    return text + _read_more(feature)


def pending_deprecation_message(data: FeatureData | Mapping[str, Any] | None = None) -> str:
    """Build a pending-deprecation sentence from *data*."""
    feature = _coerce(data)
    return f"{_subject(feature)} is pending deprecation." + _read_more(feature)


def stability_message(data: FeatureData | Mapping[str, Any] | None = None) -> str:
    """Build an instability sentence from *data*."""
    feature = _coerce(data)
    return (
        f"{_subject(feature)} is unstable and should not be used in production environments."
        + _read_more(feature)
    )
