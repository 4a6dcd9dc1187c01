from datetime import datetime

import pytest

from weekly_recs.app.use_cases.cycles import CleanupOldDataUseCase


@pytest.mark.asyncio
async def test_cleanup_uses_retention_cutoff(mock_uow, settings):
    mock_uow.cycles.delete_compiled_before.return_value = 2
    mock_uow.invitations.delete_expired_before.return_value = 7

    result = await CleanupOldDataUseCase(mock_uow, settings).execute(
        now=datetime(2025, 4, 1, 12, 0)
    )

    cutoff = datetime(2025, 1, 7, 12, 0)  # 12 weeks earlier
    assert result.is_ok()
    assert result.value.cutoff == cutoff
    assert result.value.deleted_cycles == 2
    assert result.value.deleted_invitations == 7
    mock_uow.cycles.delete_compiled_before.assert_called_once_with(cutoff)
    mock_uow.invitations.delete_expired_before.assert_called_once_with(cutoff)
    mock_uow.commit.assert_called_once()
