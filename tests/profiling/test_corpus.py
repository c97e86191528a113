"""Tests for the synthetic corpus generator."""
from __future__ import annotations

import pytest

from rkmatch.profiling.corpus import CorpusGenerator


class TestCorpusGenerator:
    def test_lengths(self):
        corpus = CorpusGenerator(seed=1).generate(query_len=1000, target_len=5000, k=20)
        assert len(corpus.query) == 1000
        assert len(corpus.target) == 5000
        assert corpus.total_chunks == 50

    def test_planted_chunks_present(self):
        corpus = CorpusGenerator(seed=7).generate(
            query_len=2000, target_len=8000, k=20, overlap=0.5,
        )
        assert len(corpus.planted) == 50
        for idx in corpus.planted:
            assert corpus.query[idx * 20:(idx + 1) * 20] in corpus.target

    def test_deterministic(self):
        a = CorpusGenerator(seed=3).generate(query_len=500, target_len=1000, k=10)
        b = CorpusGenerator(seed=3).generate(query_len=500, target_len=1000, k=10)
        assert a.query == b.query
        assert a.target == b.target

    def test_looks_normalized(self):
        text = CorpusGenerator().text(500)
        assert text == text.lower()
        assert b"  " not in text

    def test_zero_overlap(self):
        corpus = CorpusGenerator().generate(query_len=200, target_len=400, k=20, overlap=0.0)
        assert corpus.planted == []

    def test_invalid_overlap(self):
        with pytest.raises(ValueError):
            CorpusGenerator().generate(overlap=1.5)
