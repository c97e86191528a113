"""Tests for DocumentMatcher dispatch and reports."""
from __future__ import annotations

import pytest

from rkmatch.algorithm import Algorithm
from rkmatch.config import MatchConfig
from rkmatch.hashing.rolling import hash_bytes
from rkmatch.matcher import DocumentMatcher

CHUNKED = [Algorithm.SUBSTRING, Algorithm.RABIN_KARP, Algorithm.RABIN_KARP_BATCH]


def _match(algorithm: Algorithm, query: bytes, target: bytes, k: int = 3, **kw):
    return DocumentMatcher(MatchConfig(algorithm=algorithm, k=k, **kw)).match(query, target)


class TestEndToEnd:
    @pytest.mark.parametrize("algo", CHUNKED)
    def test_abcabc_in_xxabcxx(self, algo):
        report = _match(algo, b"abcabc", b"xxabcxx")
        assert report.total_chunks == 2
        assert report.matched == 2
        assert report.percentage == 1.0
        assert report.summary() == "2 chunks matched (out of 2), percentage: 1.00"

    @pytest.mark.parametrize("algo", CHUNKED)
    def test_identical_documents(self, algo):
        doc = b"the quick brown fox jumps over the lazy dog"
        report = _match(algo, doc, doc, k=5)
        assert report.matched == report.total_chunks == len(doc) // 5
        assert report.percentage == 1.0

    def test_exact_identical(self):
        report = _match(Algorithm.EXACT, b"same text", b"same text")
        assert report.exact is True
        assert report.summary() == "Exact match"

    def test_exact_different(self):
        report = _match(Algorithm.EXACT, b"same text", b"same text!")
        assert report.exact is False
        assert report.summary() == "Not an exact match"

    @pytest.mark.parametrize("algo", CHUNKED)
    def test_partial_overlap(self, algo):
        report = _match(algo, b"aaabbbcccddd", b"xxbbbxxdddxx")
        assert report.matched == 2
        assert report.total_chunks == 4
        assert report.summary() == "2 chunks matched (out of 4), percentage: 0.50"


class TestEdgeCases:
    @pytest.mark.parametrize("algo", CHUNKED)
    def test_target_shorter_than_k(self, algo):
        report = _match(algo, b"abcdefghij", b"abc", k=5)
        assert report.matched == 0
        assert report.total_chunks == 2

    @pytest.mark.parametrize("algo", CHUNKED)
    def test_query_without_whole_chunk(self, algo):
        report = _match(algo, b"ab", b"abcdef", k=3)
        assert report.total_chunks == 0
        assert report.percentage == 0.0
        assert report.summary() == "0 chunks matched (out of 0), percentage: 0.00"


class TestDiagnostics:
    def test_rabin_karp_records_hashes(self):
        report = _match(Algorithm.RABIN_KARP, b"abcdef", b"xxabcdefxx")
        assert report.chunk_hashes == [hash_bytes(b"abc"), hash_bytes(b"def")]
        assert len(report.target_hashes) == 5
        assert report.target_hashes[0] == hash_bytes(b"xxa")
        assert report.batch is None

    def test_preview_limited_by_windows(self):
        report = _match(Algorithm.RABIN_KARP, b"abc", b"abcd")
        assert len(report.target_hashes) == 2

    def test_batch_report_carries_bloom(self):
        report = _match(Algorithm.RABIN_KARP_BATCH, b"abcabc", b"xxabcxx")
        assert report.batch is not None
        assert report.batch.bloom_bits == 24
        assert report.matched == report.batch.matched

    def test_substring_has_no_hashes(self):
        report = _match(Algorithm.SUBSTRING, b"abcabc", b"xxabcxx")
        assert report.chunk_hashes == []
        assert report.target_hashes == []


class TestStrategyAgreement:
    @pytest.mark.parametrize("k", [2, 4, 7])
    def test_all_chunked_modes_agree(self, random_bytes, k):
        query = random_bytes(140)
        target = random_bytes(400)
        counts = {algo: _match(algo, query, target, k=k).matched for algo in CHUNKED}
        assert len(set(counts.values())) == 1, counts

    def test_modulus_override(self, random_bytes):
        query = random_bytes(100)
        target = random_bytes(300)
        cfg_big = MatchConfig.create("rabin-karp-batch", k=4)
        cfg_small = MatchConfig.create("rabin-karp-batch", k=4, prime=97)
        big = DocumentMatcher(cfg_big).match(query, target)
        small = DocumentMatcher(cfg_small).match(query, target)
        assert big.matched == small.matched
        assert all(h < 97 for h in small.chunk_hashes)
