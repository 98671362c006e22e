"""Tests for sequential transfer orchestration."""

import queue

import pytest

from plexmove.exceptions import TransferFailed
from plexmove.transfer.orchestrator import TransferJob, TransferOrchestrator, TransferState


def _drain(sink):
    events = []
    while not sink.empty():
        events.append(sink.get_nowait())
    return events


class TestBuildCommand:
    """Tests for TransferOrchestrator.build_command."""

    def test_progress_mode(self, tmp_path):
        """Progress copies use the rsync progress flags."""
        orchestrator = TransferOrchestrator()
        command = orchestrator.build_command(tmp_path / "a.mkv", tmp_path / "b.mkv")
        assert command == [
            "rsync", "-avh", "--info=progress2", "--no-inc-recursive",
            "--partial", "--inplace", "--mkpath",
            str(tmp_path / "a.mkv"), str(tmp_path / "b.mkv"),
        ]

    def test_oneshot_mode(self, tmp_path):
        """Subtitle copies use the simple flags."""
        command = TransferOrchestrator().build_command(tmp_path / "a.srt", tmp_path / "b.srt", oneshot=True)
        assert command[:4] == ["rsync", "-avh", "--inplace", "--mkpath"]

    def test_elevated(self, tmp_path):
        """Elevation prefixes sudo -n."""
        command = TransferOrchestrator(elevated=True).build_command(tmp_path / "a", tmp_path / "b")
        assert command[:3] == ["sudo", "-n", "rsync"]


class TestRun:
    """Tests for TransferOrchestrator.run."""

    def test_copies_jobs_in_order(self, tmp_path, make_file, fake_copy_command):
        """Every job is copied and marked as succeeded."""
        jobs = [
            TransferJob(
                source=make_file(tmp_path / "src" / f"e{i}.mkv", 1000),
                destination=tmp_path / "dst" / "Season 01" / f"e{i}.mkv",
                size=1000,
            )
            for i in (1, 2)
        ]
        sink = queue.Queue()
        TransferOrchestrator(copy_command=fake_copy_command, progress=sink).run(jobs)

        assert all(job.state is TransferState.SUCCEEDED for job in jobs)
        assert all(job.destination.exists() for job in jobs)

        fractions = [e.overall_fraction for e in _drain(sink)]
        assert fractions == sorted(fractions)
        assert fractions.count(1.0) == 1

    def test_failure_stops_later_jobs(self, tmp_path, make_file, fake_copy_command, monkeypatch):
        """A failed video leaves later jobs idle."""
        monkeypatch.setenv("FAKE_RSYNC_FAIL_SUFFIX", "e1.mkv")
        jobs = [
            TransferJob(
                source=make_file(tmp_path / "src" / f"e{i}.mkv"),
                destination=tmp_path / "dst" / f"e{i}.mkv",
                size=1024,
            )
            for i in (1, 2)
        ]
        with pytest.raises(TransferFailed):
            TransferOrchestrator(copy_command=fake_copy_command).run(jobs)
        assert jobs[0].state is TransferState.FAILED
        assert jobs[1].state is TransferState.IDLE

    def test_subtitle_failure_is_not_fatal(self, tmp_path, make_file, fake_copy_command, monkeypatch):
        """Failed subtitle copies are skipped."""
        monkeypatch.setenv("FAKE_RSYNC_FAIL_SUFFIX", ".fr.srt")
        video = make_file(tmp_path / "src" / "movie.mkv")
        english = make_file(tmp_path / "src" / "movie.en.srt", 10)
        french = make_file(tmp_path / "src" / "movie.fr.srt", 10)
        job = TransferJob(
            source=video,
            destination=tmp_path / "dst" / "Movie (2021).mkv",
            size=1024,
            subtitles=[
                (english, tmp_path / "dst" / "Movie (2021).en.srt"),
                (french, tmp_path / "dst" / "Movie (2021).fr.srt"),
            ],
        )
        copied = TransferOrchestrator(copy_command=fake_copy_command).run([job])

        assert copied == [tmp_path / "dst" / "Movie (2021).en.srt"]
        assert job.state is TransferState.SUCCEEDED
        assert not (tmp_path / "dst" / "Movie (2021).fr.srt").exists()

    def test_bounded_queue_never_blocks(self, tmp_path, make_file, fake_copy_command):
        """A full progress queue does not stall the copy."""
        job = TransferJob(
            source=make_file(tmp_path / "src" / "movie.mkv", 4096),
            destination=tmp_path / "dst" / "movie.mkv",
            size=4096,
        )
        sink = queue.Queue(maxsize=1)
        TransferOrchestrator(copy_command=fake_copy_command, progress=sink).run([job])
        assert job.destination.exists()
        assert sink.qsize() == 1
