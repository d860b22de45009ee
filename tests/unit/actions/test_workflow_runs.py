"""Tests for workflow run endpoint bindings."""

import io
import zipfile
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from ghactions import GitHubClient, WorkflowRunTimeoutError, WorkflowStatus
from ghactions.actions.logs import extract_log_archive


def make_log_archive(files):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, text in files.items():
            archive.writestr(name, text)
    return buffer.getvalue()


@pytest.fixture
def client():
    client = GitHubClient(token="test-token")
    client.get = AsyncMock(return_value={"total_count": 0, "workflow_runs": []})
    client.boolean_from_response = AsyncMock(return_value=True)
    return client


class TestWorkflowRunOperations:
    """Test WorkflowRunOperations path and verb selection."""

    @pytest.mark.asyncio
    async def test_workflow_runs(self, client):
        await client.workflow_runs("octocat/hello", "ci.yml", branch="main", event="push")

        client.get.assert_awaited_once_with(
            "repos/octocat/hello/actions/workflows/ci.yml/runs", {"branch": "main", "event": "push"}
        )

    @pytest.mark.asyncio
    async def test_all_workflow_runs(self, client):
        await client.all_workflow_runs("octocat/hello", actor="octocat", status=WorkflowStatus.COMPLETED)

        client.get.assert_awaited_once_with(
            "repos/octocat/hello/actions/runs", {"actor": "octocat", "status": WorkflowStatus.COMPLETED}
        )

    @pytest.mark.asyncio
    async def test_workflow_run(self, client):
        await client.workflow_run("octocat/hello", 30433642)

        client.get.assert_awaited_once_with("repos/octocat/hello/actions/runs/30433642")

    @pytest.mark.asyncio
    async def test_rerun_workflow_run(self, client):
        assert await client.rerun_workflow_run("octocat/hello", 30433642) is True

        client.boolean_from_response.assert_awaited_once_with("POST", "repos/octocat/hello/actions/runs/30433642/rerun")

    @pytest.mark.asyncio
    async def test_cancel_workflow_run(self, client):
        assert await client.cancel_workflow_run("octocat/hello", 30433642) is True

        client.boolean_from_response.assert_awaited_once_with("POST", "repos/octocat/hello/actions/runs/30433642/cancel")

    @pytest.mark.asyncio
    async def test_workflow_run_logs(self, client):
        await client.workflow_run_logs("octocat/hello", 30433642)

        client.get.assert_awaited_once_with("repos/octocat/hello/actions/runs/30433642/logs")


class TestWorkflowRunLogFiles:
    """Test log archive download and extraction."""

    @pytest.mark.asyncio
    async def test_workflow_run_log_files(self, client):
        client.get.return_value = make_log_archive({"build/1_Set up job.txt": "setup", "build/2_Run tests.txt": "ok"})

        logs = await client.workflow_run_log_files("octocat/hello", 30433642)

        assert logs == {"build/1_Set up job.txt": "setup", "build/2_Run tests.txt": "ok"}
        client.get.assert_awaited_once_with("repos/octocat/hello/actions/runs/30433642/logs")

    def test_extract_rejects_non_archives(self):
        with pytest.raises(ValueError, match="Invalid workflow log archive"):
            extract_log_archive(b"not a zip")

    def test_extract_rejects_decoded_bodies(self):
        with pytest.raises(ValueError, match="Expected log archive bytes"):
            extract_log_archive({})

    def test_extract_skips_directories(self):
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as archive:
            archive.writestr("build/", "")
            archive.writestr("build/1_Setup.txt", "setup")

        assert extract_log_archive(buffer.getvalue()) == {"build/1_Setup.txt": "setup"}


class TestWaitForWorkflowRun:
    """Test polling a workflow run until completion."""

    @pytest.mark.asyncio
    async def test_returns_completed_run(self, client):
        client.get.side_effect = [
            {"id": 1, "status": "queued"},
            {"id": 1, "status": "in_progress"},
            {"id": 1, "status": "completed", "conclusion": "success"},
        ]

        with patch("ghactions.actions.workflow_runs.asyncio") as mock_asyncio:
            mock_asyncio.sleep = AsyncMock()
            run = await client.wait_for_workflow_run("octocat/hello", 1, poll_interval=5)

        assert run["conclusion"] == "success"
        assert client.get.await_count == 3
        assert mock_asyncio.sleep.await_count == 2
        mock_asyncio.sleep.assert_awaited_with(5)

    @pytest.mark.asyncio
    async def test_times_out(self, client):
        client.get.return_value = {"id": 1, "status": "in_progress"}

        with patch("ghactions.actions.workflow_runs.asyncio") as mock_asyncio, patch(
            "ghactions.actions.workflow_runs.time"
        ) as mock_time:
            mock_asyncio.sleep = AsyncMock()
            mock_time.monotonic.side_effect = [0, 10, 20, 31]
            with pytest.raises(WorkflowRunTimeoutError, match="did not complete within 30"):
                await client.wait_for_workflow_run("octocat/hello", 1, poll_interval=10, timeout=30)

        assert client.get.await_count == 3
        assert [c.args for c in mock_asyncio.sleep.await_args_list] == [(10,), (10,)]

    @pytest.mark.asyncio
    async def test_last_sleep_stops_at_deadline(self, client):
        client.get.side_effect = [
            {"id": 1, "status": "in_progress"},
            {"id": 1, "status": "completed", "conclusion": "success"},
        ]

        with patch("ghactions.actions.workflow_runs.asyncio") as mock_asyncio, patch(
            "ghactions.actions.workflow_runs.time"
        ) as mock_time:
            mock_asyncio.sleep = AsyncMock()
            mock_time.monotonic.side_effect = [0, 25]
            run = await client.wait_for_workflow_run("octocat/hello", 1, poll_interval=10, timeout=30)

        assert run["status"] == "completed"
        mock_asyncio.sleep.assert_awaited_once_with(5)


class TestWorkflowRunOperationsOverHTTP:
    """Test workflow run bindings against a mock GitHub."""

    @pytest.mark.asyncio
    async def test_enum_filter_is_sent_as_value(self, make_client):
        client = make_client(lambda request: httpx.Response(200, json={"total_count": 0, "workflow_runs": []}))

        await client.all_workflow_runs("octocat/hello", status=WorkflowStatus.IN_PROGRESS, branch=None)

        request = client.transport.requests[0]
        assert request.url.path == "/repos/octocat/hello/actions/runs"
        assert dict(request.url.params) == {"status": "in_progress"}

    @pytest.mark.asyncio
    async def test_cancel_conflict_raises(self, make_client):
        client = make_client(lambda request: httpx.Response(409, json={"message": "Cannot cancel a workflow run that is completed."}))

        with pytest.raises(Exception, match="Cannot cancel"):
            await client.cancel_workflow_run("octocat/hello", 1)

    @pytest.mark.asyncio
    async def test_log_files_over_http(self, make_client):
        archive = make_log_archive({"test/1_Run.txt": "passed"})
        client = make_client(
            lambda request: httpx.Response(200, content=archive, headers={"content-type": "application/zip"})
        )

        assert await client.workflow_run_log_files("octocat/hello", 9) == {"test/1_Run.txt": "passed"}
