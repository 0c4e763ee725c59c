"""Test the lyrics progress bar"""

from lrcphile.core.progress import LyricsProgressBar


class TestLyricsProgressBar:
    """Test LyricsProgressBar counters and lifecycle"""

    def test_update_counters(self):
        progress = LyricsProgressBar(total=4)

        progress.update(success=True)
        progress.update(success=True)
        progress.update(success=False, skipped=True)
        progress.update(success=False)

        assert progress.completed == 4
        assert (progress.written, progress.skipped, progress.failed) == (2, 1, 1)

    def test_skipped_takes_precedence(self):
        progress = LyricsProgressBar(total=1)
        progress.update(success=True, skipped=True)
        assert (progress.written, progress.skipped) == (0, 1)

    def test_status_text(self):
        progress = LyricsProgressBar(total=2)
        progress.update(success=True)
        progress.update(success=False)

        status = progress._get_status_text()

        assert "✓ 1" in status
        assert "⊘ 0" in status
        assert "✗ 1" in status

    def test_context_manager_tracks_task(self):
        with LyricsProgressBar(total=2) as progress:
            assert progress.task_id is not None
            progress.update(success=True)
            progress.update(success=False, skipped=True)

        task = progress.progress.tasks[0]
        assert task.completed == 2
        assert task.total == 2
        assert "⊘ 1" in task.fields["status"]
        assert progress._started is False

    def test_stop_without_start(self):
        progress = LyricsProgressBar(total=1)
        progress.stop()
        assert progress.task_id is None
