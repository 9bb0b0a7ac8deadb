"""Text segmentation."""

from .normalizer import NormalizedInput, SentenceSplitter, normalize, split_paragraphs, split_sentences

__all__ = ["NormalizedInput", "SentenceSplitter", "normalize", "split_paragraphs", "split_sentences"]
