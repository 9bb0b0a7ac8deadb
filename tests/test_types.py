"""Test platform, language and score types."""

import pytest

from postchecker import PLATFORM_MAX_LENGTHS
from postchecker.common.types import (
    Dimension,
    InvalidPlatformError,
    Language,
    Platform,
    ScoreBand,
)


def test_platform_max_lengths():
    """Test every platform has its character limit."""
    assert Platform.TWITTER.max_length == 280
    assert Platform.FACEBOOK.max_length == 63206
    assert Platform.INSTAGRAM.max_length == 2200
    assert Platform.LINKEDIN.max_length == 3000
    assert set(PLATFORM_MAX_LENGTHS) == set(Platform)
    assert PLATFORM_MAX_LENGTHS[Platform.TWITTER] == 280


def test_platform_table_read_only():
    """Test the exposed platform table cannot be modified."""
    with pytest.raises(TypeError):
        PLATFORM_MAX_LENGTHS[Platform.TWITTER] = 500


def test_platform_parse():
    """Test parsing platform identifiers."""
    assert Platform.parse("twitter") is Platform.TWITTER
    assert Platform.parse(" LinkedIn ") is Platform.LINKEDIN
    assert Platform.parse(Platform.FACEBOOK) is Platform.FACEBOOK

    with pytest.raises(InvalidPlatformError, match="myspace"):
        Platform.parse("myspace")


def test_invalid_platform_is_value_error():
    """Test unknown platforms raise a ValueError subclass."""
    with pytest.raises(ValueError):
        Platform.parse("")


@pytest.mark.parametrize(
    "code, expected",
    [
        ("en", Language.EN),
        ("NL", Language.NL),
        ("nld", Language.NL),
        ("eng", Language.EN),
        ("nl-BE", Language.NL),
        ("en_GB", Language.EN),
        ("fr", None),
        ("", None),
        (None, None),
    ],
)
def test_language_lookup(code, expected):
    """Test mapping language codes to supported languages."""
    assert Language.lookup(code) is expected


def test_language_from_code_falls_back_to_default():
    """Test unsupported codes map to the default language."""
    assert Language.DEFAULT is Language.EN
    assert Language.from_code("de") is Language.EN
    assert Language.from_code(None) is Language.EN
    assert Language.from_code("nl") is Language.NL


def test_aida_dimensions_order():
    """Test the AIDA dimensions exclude engagement and keep model order."""
    assert Dimension.aida() == (
        Dimension.ATTENTION,
        Dimension.INTEREST,
        Dimension.DESIRE,
        Dimension.ACTION,
    )


@pytest.mark.parametrize(
    "score, band",
    [(0, ScoreBand.LOW), (29, ScoreBand.LOW), (30, ScoreBand.MEDIUM), (69, ScoreBand.MEDIUM), (70, ScoreBand.HIGH), (100, ScoreBand.HIGH)],
)
def test_score_band(score, band):
    """Test score banding thresholds."""
    assert ScoreBand.of(score) is band
