"""Tests for the command-line entry point and the stdio JSON-RPC loop."""

import io
import json

import pytest

from interview_sources.cli import main, serve

from .conftest import EXAMPLES_DIR


class TestMain:
    def test_missing_corpus_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--corpus", str(tmp_path / "missing"), "stats"])
        assert exc_info.value.code == 1

    def test_stats(self, corpus_dir, capsys):
        assert main(["--corpus", str(corpus_dir), "stats"]) == 0

        stats = json.loads(capsys.readouterr().out)
        assert stats["total_files"] == 6
        assert stats["examples"] == 4

    def test_search(self, corpus_dir, capsys):
        code = main(["--corpus", str(corpus_dir), "search", "show if", "--scope", "examples"])

        assert code == 0
        results = json.loads(capsys.readouterr().out)["results"]
        assert results[0]["path"] == f"{EXAMPLES_DIR}/fields.yml"

    def test_search_with_glob(self, corpus_dir, capsys):
        argv = ["--corpus", str(corpus_dir), "search", "fields", "--glob", "docs/*.md"]
        assert main(argv) == 0
        results = json.loads(capsys.readouterr().out)["results"]
        assert {r["path"] for r in results} == {"docs/fields.md"}

    def test_cite(self, corpus_dir, capsys):
        argv = ["--corpus", str(corpus_dir), "cite", f"{EXAMPLES_DIR}/yesno.yml", "8", "8"]
        assert main(argv) == 0
        assert json.loads(capsys.readouterr().out)["citation"]["excerpt"] == "question: |"

    def test_cite_unknown_file_fails(self, corpus_dir, capsys):
        assert main(["--corpus", str(corpus_dir), "cite", "nope.yml", "1", "2"]) == 1
        assert json.loads(capsys.readouterr().out)["valid"] is False

    def test_invalid_arguments(self, corpus_dir):
        argv = ["--corpus", str(corpus_dir), "search", "x", "--max-results", "0"]
        assert main(argv) == 2

    def test_keyword(self, corpus_dir, capsys):
        assert main(["--corpus", str(corpus_dir), "keyword", "DAList"]) == 0
        assert json.loads(capsys.readouterr().out)["count"] == 1


class TestServe:
    @pytest.mark.asyncio
    async def test_line_delimited_requests(self, ctx):
        requests = [
            json.dumps({"jsonrpc": "2.0", "id": 1, "method": "tools/list"}),
            "",
            "{not json",
            json.dumps(
                {
                    "jsonrpc": "2.0",
                    "id": 2,
                    "method": "tools/call",
                    "params": {"name": "stats", "arguments": {}},
                }
            ),
        ]
        stdin = io.StringIO("\n".join(requests) + "\n")
        stdout = io.StringIO()

        await serve(ctx, stdin, stdout)

        responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
        assert len(responses) == 3
        assert responses[0]["id"] == 1
        assert "tools" in responses[0]["result"]
        assert responses[1]["error"]["code"] == -32700
        assert responses[1]["id"] is None
        assert responses[2]["id"] == 2
        assert json.loads(responses[2]["result"]["content"][0]["text"])["total_files"] == 6
