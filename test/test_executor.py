"""Tests for the converter subprocess runner."""

import asyncio
import stat
import sys
import time

import pytest

from conversion import ExecutionFailedError, execute_command


class TestExecuteCommand:
    @pytest.mark.asyncio
    async def test_returns_stdout(self):
        output = await execute_command(sys.executable, ["-c", "print('converted')"])
        assert output.strip() == "converted"

    @pytest.mark.asyncio
    async def test_stderr_is_not_mixed_into_stdout(self):
        code = "import sys; print('out'); sys.stderr.write('warn')"
        output = await execute_command(sys.executable, ["-c", code])
        assert output.strip() == "out"

    @pytest.mark.asyncio
    async def test_nonzero_exit_carries_stderr(self):
        code = "import sys; sys.stderr.write('bad input'); sys.exit(2)"
        with pytest.raises(ExecutionFailedError) as excinfo:
            await execute_command(sys.executable, ["-c", code])

        error = excinfo.value
        assert "exit status 2" in str(error)
        assert error.stderr == "bad input"
        assert error.detail == "bad input"

    @pytest.mark.asyncio
    async def test_nonzero_exit_without_stderr_still_has_detail(self):
        with pytest.raises(ExecutionFailedError) as excinfo:
            await execute_command(sys.executable, ["-c", "raise SystemExit(1)"])
        assert excinfo.value.detail == "exit status 1"

    @pytest.mark.asyncio
    async def test_missing_binary(self, tmp_path):
        with pytest.raises(ExecutionFailedError):
            await execute_command(str(tmp_path / "no-such-converter"), ["convert"])

    @pytest.mark.asyncio
    async def test_timeout_kills_process(self):
        with pytest.raises(ExecutionFailedError, match="timed out"):
            await execute_command(
                sys.executable, ["-c", "import time; time.sleep(30)"], timeout=0.5
            )

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        task = asyncio.create_task(
            execute_command(sys.executable, ["-c", "import time; time.sleep(30)"])
        )
        await asyncio.sleep(0.2)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    @pytest.mark.asyncio
    async def test_timeout_keeps_output_written_before_the_deadline(self):
        code = (
            "import sys, time\n"
            "print('partial-out', flush=True)\n"
            "sys.stderr.write('partial-err'); sys.stderr.flush()\n"
            "time.sleep(30)\n"
        )
        with pytest.raises(ExecutionFailedError) as excinfo:
            await execute_command(sys.executable, ["-c", code], timeout=1.0)

        error = excinfo.value
        assert "partial-out" in error.stdout
        assert error.stderr == "partial-err"
        assert "partial-err" in str(error)

    @pytest.mark.asyncio
    async def test_timeout_is_bounded_when_a_child_holds_the_pipes(self, tmp_path):
        script = tmp_path / "slow-converter"
        script.write_text("#!/bin/sh\nsleep 6\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR)

        started = time.monotonic()
        with pytest.raises(ExecutionFailedError, match="timed out"):
            await execute_command(str(script), ["convert"], timeout=0.5)
        assert time.monotonic() - started < 3.0
