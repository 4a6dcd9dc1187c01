import pytest

from weekly_recs.config import ApplicationConfig
from weekly_recs.jobs import JOBS, run_job


@pytest.fixture
def job_config(tmp_path):
    class JobConfig(ApplicationConfig):
        DB_URI = f"sqlite+aiosqlite:///{tmp_path / 'jobs.db'}"

    return JobConfig


def test_registry_names():
    assert set(JOBS) == {
        "open-cycle",
        "close-cycle",
        "send-reminders",
        "sweep-eligibility",
        "sweep-invitations",
        "cleanup",
    }


@pytest.mark.asyncio
async def test_open_then_close(job_config):
    opened = await run_job("open-cycle", config=job_config)
    assert opened.is_ok()

    again = await run_job("open-cycle", config=job_config)
    assert again.is_err()
    assert again.to_payload()["code"] == "CONFLICT"

    closed = await run_job("close-cycle", config=job_config)
    assert closed.is_ok()
    assert closed.to_payload()["status"] == "compiled"


@pytest.mark.asyncio
async def test_sweep_on_empty_database(job_config):
    result = await run_job("sweep-invitations", config=job_config)

    assert result.to_payload() == {"success": True, "expired_count": 0}


@pytest.mark.asyncio
async def test_unknown_job(job_config):
    with pytest.raises(KeyError):
        await run_job("reboot", config=job_config)
