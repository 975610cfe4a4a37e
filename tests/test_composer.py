import dataclasses

from study_digest.composer import (
    compose_overview,
    extract_key_points,
    rank_sentences,
    select_sentences,
)
from study_digest.config import SummarizerConfig
from study_digest.scoring import FrequencyScorer, ScoringContext
from study_digest.types import ScoredSentence, Sentence


def _sentences(*texts):
    return [Sentence(text, idx) for idx, text in enumerate(texts)]


def test_select_ranks_by_score_then_restores_document_order():
    sentences = _sentences("A one.", "B two.", "C three.", "D four.")
    scored = [
        ScoredSentence(sentences[0], 1.0),
        ScoredSentence(sentences[1], 9.0),
        ScoredSentence(sentences[2], 2.0),
        ScoredSentence(sentences[3], 8.0),
    ]
    selected = select_sentences(scored, 2)
    assert [s.ordinal for s in selected] == [1, 3]


def test_select_breaks_ties_by_document_order():
    sentences = _sentences("A.", "B.", "C.")
    scored = [ScoredSentence(s, 1.0) for s in sentences]
    assert [s.ordinal for s in select_sentences(scored, 2)] == [0, 1]


def test_rank_sentences_honors_scan_cap():
    sentences = _sentences(*[f"Sentence {i}." for i in range(10)])
    scorer = FrequencyScorer(SummarizerConfig())
    context = ScoringContext(total_sentences=10, term_stats={}, keywords=[])
    scored = rank_sentences(sentences, scorer, context, scan_cap=4)
    assert [item.sentence.ordinal for item in scored] == [0, 1, 2, 3]


def test_compose_overview_joins_with_spaces():
    assert compose_overview(_sentences("First.", "Second.")) == "First. Second."


def test_key_points_match_keywords_or_patterns_in_document_order():
    sentences = _sentences(
        "Cats purr at dawn.",
        "Discounted cash flows are the backbone of any valuation model.",
        "Dogs bark.",
        "Remember to check units.",
        "Cash.",
    )
    points = extract_key_points(sentences, ["cash"], SummarizerConfig(), fallback=[])
    assert [p.ordinal for p in points] == [1, 3]


def test_key_points_are_capped():
    config = dataclasses.replace(SummarizerConfig(), key_point_count=2)
    sentences = _sentences(*["This is an important line." for _ in range(5)])
    points = extract_key_points(sentences, [], config, fallback=[])
    assert [p.ordinal for p in points] == [0, 1]


def test_key_points_fall_back_to_overview_sentences():
    sentences = _sentences("Cats purr.", "Dogs bark.", "Birds sing.")
    fallback = _sentences("A.", "B.", "C.", "D.", "E.")
    points = extract_key_points(sentences, ["zebra"], SummarizerConfig(), fallback=fallback)
    assert [p.text for p in points] == ["A.", "B.", "C.", "D."]


def test_key_points_ignore_sentences_beyond_scan_cap():
    config = dataclasses.replace(SummarizerConfig(), key_point_scan_cap=2)
    sentences = _sentences("Cats purr.", "Dogs bark.", "This is important.")
    fallback = _sentences("Fallback.")
    assert extract_key_points(sentences, [], config, fallback=fallback) == fallback
