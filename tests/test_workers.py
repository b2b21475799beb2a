"""Tests for the Workers generator (create_cloudflare.workers).

Templates are rendered for real into a temporary directory; subprocesses
(git, wrangler) are mocked.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from create_cloudflare.errors import GeneratorError
from create_cloudflare.models import ValidatedArgs
from create_cloudflare.registry import run_chatgpt_plugin_generator
from create_cloudflare.workers import GIT_TIMEOUT, init_git, run_workers_generator

pytestmark = pytest.mark.unit


def _args(type_key: str = "hello-world", **kwargs) -> ValidatedArgs:
    return ValidatedArgs(project_name="./my-worker", type=type_key, **kwargs)


class TestRenderedProject:
    @pytest.mark.asyncio
    async def test_javascript_project(self, workdir):
        await run_workers_generator(_args())
        root = workdir / "my-worker"

        assert (root / "src" / "index.js").is_file()
        assert not (root / "src" / "index.ts").exists()
        assert not (root / "tsconfig.json").exists()
        assert (root / ".gitignore").is_file()
        assert not (root / "gitignore").exists()
        assert "Hello World!" in (root / "src" / "index.js").read_text()

    @pytest.mark.asyncio
    async def test_typescript_project(self, workdir):
        await run_workers_generator(_args(ts=True))
        root = workdir / "my-worker"

        index = (root / "src" / "index.ts").read_text()
        assert "request: Request" in index
        assert not (root / "src" / "index.js").exists()
        tsconfig = json.loads((root / "tsconfig.json").read_text())
        assert tsconfig["compilerOptions"]["types"] == ["@cloudflare/workers-types"]

    @pytest.mark.asyncio
    async def test_javascript_has_no_type_annotations(self, workdir):
        await run_workers_generator(_args())
        index = (workdir / "my-worker" / "src" / "index.js").read_text()
        assert "Promise<Response>" not in index

    @pytest.mark.asyncio
    @pytest.mark.parametrize("ts", [False, True])
    async def test_package_json_is_valid(self, workdir, ts):
        await run_workers_generator(_args(ts=ts))
        package = json.loads((workdir / "my-worker" / "package.json").read_text())
        assert package["name"] == "my-worker"
        assert "wrangler" in package["devDependencies"]
        assert ("typescript" in package["devDependencies"]) is ts

    @pytest.mark.asyncio
    async def test_wrangler_toml(self, workdir):
        await run_workers_generator(_args(ts=True))
        toml = (workdir / "my-worker" / "wrangler.toml").read_text()
        assert 'name = "my-worker"' in toml
        assert 'main = "src/index.ts"' in toml
        assert "compatibility_date = " in toml
        assert "[triggers]" not in toml

    @pytest.mark.asyncio
    async def test_scheduled_has_cron_trigger(self, workdir):
        await run_workers_generator(_args("scheduled"))
        root = workdir / "my-worker"
        assert "[triggers]" in (root / "wrangler.toml").read_text()
        assert "async scheduled(" in (root / "src" / "index.js").read_text()

    @pytest.mark.asyncio
    async def test_queues_have_bindings(self, workdir):
        await run_workers_generator(_args("queues"))
        toml = (workdir / "my-worker" / "wrangler.toml").read_text()
        assert "[[queues.producers]]" in toml
        assert "[[queues.consumers]]" in toml
        assert 'queue = "my-worker-queue"' in toml

    @pytest.mark.asyncio
    async def test_common_router(self, workdir):
        await run_workers_generator(_args("common"))
        assert "/proxy/" in (workdir / "my-worker" / "src" / "index.js").read_text()

    @pytest.mark.asyncio
    async def test_chatgpt_plugin_is_typescript(self, workdir):
        await run_chatgpt_plugin_generator(_args("chatgptPlugin", ts=False))
        root = workdir / "my-worker"
        index = (root / "src" / "index.ts").read_text()
        assert "ai-plugin.json" in index
        assert '"MyWorker"' in index
        assert "my_worker" in index
        assert (root / "tsconfig.json").is_file()

    @pytest.mark.asyncio
    async def test_type_without_templates(self, workdir):
        with pytest.raises(GeneratorError, match="No Worker template") as exc_info:
            await run_workers_generator(_args("webFramework"))
        assert "hello-world" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_git_init(self, workdir, mock_workers_run_command):
        await run_workers_generator(_args(git=True))
        mock_workers_run_command.assert_awaited_once_with(
            ["git", "init", "--quiet"], cwd=Path("my-worker"), timeout=GIT_TIMEOUT
        )

    @pytest.mark.asyncio
    async def test_no_git_by_default(self, workdir, mock_workers_run_command):
        await run_workers_generator(_args())
        mock_workers_run_command.assert_not_awaited()


class TestPreExisting:
    @pytest.mark.asyncio
    async def test_runs_wrangler_from_dash(self, workdir, mock_workers_run_command):
        await run_workers_generator(_args("pre-existing", existing_script="legacy"))

        cmd = mock_workers_run_command.await_args.args[0]
        assert cmd == ["npx", "wrangler@latest", "init", "my-worker", "--from-dash", "legacy"]
        assert mock_workers_run_command.await_args.kwargs["cwd"] == Path(".")
        assert not (workdir / "my-worker" / "wrangler.toml").exists()

    @pytest.mark.asyncio
    async def test_prompts_for_script_name(self, workdir, mock_workers_run_command):
        with patch("create_cloudflare.interactive.Prompt.ask", return_value="from-prompt"):
            await run_workers_generator(_args("pre-existing"))
        assert mock_workers_run_command.await_args.args[0][-1] == "from-prompt"

    @pytest.mark.asyncio
    async def test_missing_script_with_defaults(self, workdir, mock_workers_run_command):
        with pytest.raises(GeneratorError, match="--existing-script"):
            await run_workers_generator(_args("pre-existing", wrangler_defaults=True))
        mock_workers_run_command.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_wrangler_failure(self, workdir):
        with patch(
            "create_cloudflare.workers.run_command",
            new_callable=AsyncMock,
            return_value=(1, "", ""),
        ):
            with pytest.raises(GeneratorError, match="exit code 1") as exc_info:
                await run_workers_generator(_args("pre-existing", existing_script="legacy"))
        assert exc_info.value.command[:3] == ["npx", "wrangler@latest", "init"]


class TestInitGit:
    @pytest.mark.asyncio
    async def test_failure(self, tmp_path):
        with patch(
            "create_cloudflare.workers.run_command",
            new_callable=AsyncMock,
            return_value=(128, "", "not a directory"),
        ):
            with pytest.raises(GeneratorError, match="git init failed: not a directory"):
                await init_git(tmp_path)
