"""Tests for the rkmatch command line."""
from __future__ import annotations

import pytest

from rkmatch.cli import main
from rkmatch.hashing.rolling import hash_bytes


@pytest.fixture
def docs(tmp_path):
    query = tmp_path / "query.txt"
    target = tmp_path / "target.txt"
    query.write_bytes(b"ABC abc")
    target.write_bytes(b"xx  ABC\n xx")
    return query, target


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestMatchCommand:
    def test_substring(self, docs, capsys):
        query, target = docs
        # normalized: "abc abc" vs "xx abc xx"; chunks "abc" and " ab"
        assert _run(["match", "-k", "3", str(query), str(target)]) == 0
        out = capsys.readouterr().out.strip().splitlines()
        assert out[-1] == "2 chunks matched (out of 2), percentage: 1.00"

    def test_exact(self, tmp_path, capsys):
        a = tmp_path / "a.txt"
        b = tmp_path / "b.txt"
        a.write_bytes(b"Same   Text")
        b.write_bytes(b"same text\n")
        assert _run(["match", "-t", "exact", str(a), str(b)]) == 0
        assert capsys.readouterr().out.strip() == "Exact match"

    def test_rabin_karp_prints_hashes(self, docs, capsys):
        query, target = docs
        assert _run(["match", "-t", "2", "-k", "3", str(query), str(target)]) == 0
        out = capsys.readouterr().out.strip().splitlines()
        assert out[0].split() == [str(hash_bytes(b"abc")), str(hash_bytes(b" ab"))]
        assert len(out[1].split()) == 5
        assert out[-1].startswith("2 chunks matched")

    def test_batch_prints_bloom_dump(self, docs, capsys):
        query, target = docs
        assert _run(["match", "-t", "rabin-karp-batch", "-k", "3", str(query), str(target)]) == 0
        out = capsys.readouterr().out.strip().splitlines()
        assert len(out) == 4
        # 2 chunks -> 24-bit filter -> three hex bytes
        assert len(out[2].split()) == 3
        assert out[-1] == "2 chunks matched (out of 2), percentage: 1.00"

    def test_multiple_documents(self, docs, tmp_path, capsys):
        query, target = docs
        other = tmp_path / "other.txt"
        other.write_bytes(b"nothing in common here")
        assert _run(["match", "-k", "3", str(query), str(target), str(other)]) == 0
        out = capsys.readouterr().out
        assert f"== {target}" in out
        assert f"== {other}" in out
        assert "0 chunks matched (out of 2)" in out

    def test_modulus_override(self, docs, capsys):
        query, target = docs
        assert _run(["match", "-t", "rabin-karp", "-k", "3", "-q", "101", str(query), str(target)]) == 0
        out = capsys.readouterr().out.strip().splitlines()
        assert all(int(h) < 101 for h in out[0].split())
        assert out[-1].startswith("2 chunks matched")


class TestMatchErrors:
    def test_missing_file(self, docs, tmp_path, capsys):
        query, _ = docs
        assert _run(["match", str(query), str(tmp_path / "nope.txt")]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_bad_algorithm(self, docs):
        query, target = docs
        assert _run(["match", "-t", "7", str(query), str(target)]) == 2

    def test_non_positive_k(self, docs):
        query, target = docs
        assert _run(["match", "-k", "0", str(query), str(target)]) == 2

    def test_modulus_of_one(self, docs):
        query, target = docs
        assert _run(["match", "-q", "1", str(query), str(target)]) == 2

    def test_no_command(self, capsys):
        assert _run([]) == 0
        assert "usage" in capsys.readouterr().out.lower()


class TestBenchCommand:
    def test_bench_runs(self, capsys):
        assert _run([
            "bench", "--query-len", "400", "--target-len", "1500", "-k", "10",
        ]) == 0
        out = capsys.readouterr().out
        assert "rabin-karp-batch" in out
        assert "substring" in out

    def test_bench_bad_overlap(self):
        assert _run(["bench", "--overlap", "1.5", "--query-len", "100"]) == 2
