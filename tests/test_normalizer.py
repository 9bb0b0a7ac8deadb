"""Test text normalization."""

from postchecker.text.normalizer import normalize, split_paragraphs, split_sentences


def test_empty_text():
    """Test empty input yields zero counts and empty segments."""
    normalized = normalize("")
    assert normalized.char_count == 0
    assert normalized.word_count == 0
    assert normalized.paragraphs == ()
    assert normalized.sentences == ()
    assert normalized.avg_word_length == 0.0
    assert normalized.is_empty


def test_counts():
    """Test character and word counts include whitespace correctly."""
    normalized = normalize("  Hello   big\tworld \n")
    assert normalized.char_count == len("  Hello   big\tworld \n")
    assert normalized.word_count == 3
    assert normalized.avg_word_length == (5 + 3 + 5) / 3


def test_paragraphs():
    """Test blank lines separate paragraphs and blank entries are dropped."""
    text = "First paragraph.\n\nSecond one.\n  \nThird.\n\n\n"
    assert split_paragraphs(text) == ["First paragraph.", "Second one.", "Third."]
    assert split_paragraphs("single line\nstill same paragraph") == [
        "single line\nstill same paragraph"
    ]


def test_sentences():
    """Test sentence splitting on punctuation and line breaks."""
    text = "Is this new? Yes! It is.\nAnother line"
    assert split_sentences(text) == ["Is this new?", "Yes!", "It is.", "Another line"]


def test_sentences_non_empty_for_text():
    """Test non-blank text always yields at least one sentence."""
    assert normalize("no punctuation here").sentences == ("no punctuation here",)


def test_sentences_non_empty_for_blank_text():
    """Test whitespace-only text is one sentence with no words."""
    normalized = normalize("   ")

    assert normalized.sentences == ("   ",)
    assert normalized.word_count == 0
    assert normalized.paragraphs == ()
    assert not normalized.is_empty


def test_custom_splitter():
    """Test an injected sentence splitter replaces the regex heuristic."""
    normalized = normalize("a; b; c", splitter=lambda text: text.split(";"))
    assert normalized.sentences == ("a", " b", " c")


def test_custom_splitter_empty_result():
    """Test a splitter returning nothing still yields the whole text."""
    normalized = normalize("some text", splitter=lambda text: [])
    assert normalized.sentences == ("some text",)
