"""Tests for the embedding worker command line."""

import argparse

import pytest

from brainvault.worker import main as worker_main


def test_malformed_content_id_is_a_usage_error(monkeypatch, capsys):
    def fail_run(message):
        raise AssertionError("worker must not start")

    monkeypatch.setattr(worker_main, "run", fail_run)

    with pytest.raises(SystemExit) as exc:
        worker_main.main(["--content-id", "not-a-uuid"])

    assert exc.value.code == 2
    assert "not a valid UUID" in capsys.readouterr().err


def test_build_message_for_single_item_and_backfill():
    single = worker_main.build_message(
        argparse.Namespace(content_id="0f8fad5b-d9cb-469f-a165-70867728950e", batch_size=100)
    )
    backfill = worker_main.build_message(argparse.Namespace(content_id=None, batch_size=25))

    assert single == {
        "job_type": "embed_content",
        "content_id": "0f8fad5b-d9cb-469f-a165-70867728950e",
    }
    assert backfill == {"job_type": "backfill_embeddings", "batch_size": 25}


def test_valid_arguments_run_the_job(monkeypatch):
    seen = []

    async def fake_run(message):
        seen.append(message)
        return True

    monkeypatch.setattr(worker_main, "run", fake_run)

    assert worker_main.main(["--batch-size", "5"]) == 0
    assert seen == [{"job_type": "backfill_embeddings", "batch_size": 5}]
