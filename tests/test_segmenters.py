import pytest

from token_stats.config import TokenStatsConfig, config_from_dict
from token_stats.segmenters import (
    PunktSegmenter,
    UnsupportedLocaleError,
    build_segmenter_from_config,
    create_segmenter,
)


def test_create_segmenter_by_name():
    assert isinstance(create_segmenter("punkt"), PunktSegmenter)
    assert isinstance(create_segmenter(" NLTK "), PunktSegmenter)


def test_create_segmenter_unknown_name():
    with pytest.raises(ValueError):
        create_segmenter("icu")


def test_unsupported_locale():
    with pytest.raises(UnsupportedLocaleError):
        PunktSegmenter(locale="fr_FR")


def test_locale_spelling_is_normalized():
    assert PunktSegmenter(locale="en-US").locale == "en-US"
    assert PunktSegmenter(locale="en").count("One. Two.") == 2


def test_segment_returns_sentence_spans():
    text = "The cat sat. The dog ran."
    spans = PunktSegmenter().segment(text)

    assert len(spans) == 2
    assert text[spans[0][0] : spans[0][1]].startswith("The cat")
    assert text[spans[1][0] : spans[1][1]].startswith("The dog")


def test_segment_blank_text():
    assert PunktSegmenter().segment("") == []
    assert PunktSegmenter().segment(" \n ") == []


def test_extra_abbreviations_suppress_breaks():
    text = "Approx. Ten people came."

    assert PunktSegmenter().count(text) == 2
    assert PunktSegmenter(extra_abbreviations=["Approx."]).count(text) == 1


def test_build_segmenter_from_config():
    assert isinstance(build_segmenter_from_config(TokenStatsConfig()), PunktSegmenter)

    cfg = config_from_dict({"segmenter": {"name": "missing"}})
    with pytest.raises(ValueError):
        build_segmenter_from_config(cfg)
