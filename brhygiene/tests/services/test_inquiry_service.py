import time
import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi import BackgroundTasks
from brhygiene.core.exceptions import StorageUnavailable
from brhygiene.services.inquiry_service import InquiryService, SubmissionState
from brhygiene.services.inquiry_store import InquiryStore
from brhygiene.services.notifier import InquiryNotifier, NotificationOutcome
from brhygiene.tests.constants.inquiry import InquiryTestConstants


@pytest.fixture(scope="function")
def mock_notifier():
    notifier = MagicMock(spec=InquiryNotifier)
    notifier.notify = AsyncMock(return_value=NotificationOutcome(operator_sent=True, acknowledgement_sent=True))
    notifier.dispatch = AsyncMock()
    return notifier


@pytest.fixture(scope="function")
def mock_store(stored_inquiry):
    store = MagicMock(spec=InquiryStore)
    store.save.return_value = stored_inquiry
    return store


@pytest.mark.asyncio
class TestInquiryService:
    async def test_rejected_submission_has_no_side_effects(self, mock_store, mock_notifier, test_settings):
        service = InquiryService(store=mock_store, notifier=mock_notifier, settings=test_settings)

        result = await service.submit({**InquiryTestConstants.VALID_SUBMISSION.value, "phone": "12345"})

        assert result.state == SubmissionState.REJECTED
        assert not result.success
        assert list(result.errors) == ["phone"]
        mock_store.save.assert_not_called()
        mock_notifier.notify.assert_not_called()
        mock_notifier.dispatch.assert_not_called()

    async def test_storage_failure_skips_notification(self, mock_store, mock_notifier, test_settings):
        mock_store.save.side_effect = StorageUnavailable("database down")
        service = InquiryService(store=mock_store, notifier=mock_notifier, settings=test_settings)

        result = await service.submit(InquiryTestConstants.VALID_SUBMISSION.value, BackgroundTasks())

        assert result.state == SubmissionState.PERSIST_FAILED
        assert not result.success
        assert result.inquiry is None
        mock_notifier.notify.assert_not_called()
        mock_notifier.dispatch.assert_not_called()

    async def test_slow_write_that_succeeds_is_notified(
        self, mock_store, mock_notifier, test_settings, stored_inquiry
    ):
        test_settings.STORE_TIMEOUT_SECONDS = 0.05

        def slow_save(inquiry):
            time.sleep(0.3)
            return stored_inquiry

        mock_store.save.side_effect = slow_save
        background_tasks = BackgroundTasks()
        service = InquiryService(store=mock_store, notifier=mock_notifier, settings=test_settings)

        result = await service.submit(InquiryTestConstants.VALID_SUBMISSION.value, background_tasks)

        assert result.state == SubmissionState.RESPONDED
        assert result.inquiry == stored_inquiry
        mock_store.save.assert_called_once()
        assert len(background_tasks.tasks) == 1
        assert background_tasks.tasks[0].args == (stored_inquiry,)

    async def test_background_notification_is_scheduled(
        self, mock_store, mock_notifier, test_settings, stored_inquiry
    ):
        background_tasks = BackgroundTasks()
        service = InquiryService(store=mock_store, notifier=mock_notifier, settings=test_settings)

        result = await service.submit(InquiryTestConstants.VALID_SUBMISSION.value, background_tasks)

        assert result.state == SubmissionState.RESPONDED
        assert result.success
        assert result.inquiry == stored_inquiry
        assert result.notification is None
        assert len(background_tasks.tasks) == 1
        assert background_tasks.tasks[0].func == mock_notifier.dispatch
        assert background_tasks.tasks[0].args == (stored_inquiry,)
        mock_notifier.notify.assert_not_called()

    async def test_inline_notification_without_background_tasks(self, mock_store, mock_notifier, test_settings):
        service = InquiryService(store=mock_store, notifier=mock_notifier, settings=test_settings)

        result = await service.submit(InquiryTestConstants.VALID_SUBMISSION.value)

        assert result.state == SubmissionState.RESPONDED
        assert result.notification.operator_sent is True
        mock_notifier.notify.assert_awaited_once()

    async def test_notification_error_does_not_change_success(self, mock_store, mock_notifier, test_settings):
        test_settings.NOTIFY_IN_BACKGROUND = False
        mock_notifier.notify.side_effect = RuntimeError("SES exploded")
        service = InquiryService(store=mock_store, notifier=mock_notifier, settings=test_settings)

        result = await service.submit(InquiryTestConstants.VALID_SUBMISSION.value, BackgroundTasks())

        assert result.state == SubmissionState.RESPONDED
        assert result.inquiry is not None
        assert result.notification.operator_sent is False

    async def test_store_receives_normalized_inquiry(self, mock_store, mock_notifier, test_settings):
        service = InquiryService(store=mock_store, notifier=mock_notifier, settings=test_settings)

        await service.submit(InquiryTestConstants.VALID_SUBMISSION.value)

        saved = mock_store.save.call_args.args[0]
        assert saved.phone == InquiryTestConstants.NORMALIZED_PHONE.value

    async def test_end_to_end_with_memory_storage(self, memory_inquiry_service, memory_database, test_settings):
        ids = set()
        for _ in range(20):
            result = await memory_inquiry_service.submit(InquiryTestConstants.VALID_SUBMISSION.value)
            ids.add(result.inquiry.id)

        assert len(ids) == 20
        assert len(memory_database.select_data(test_settings.INQUIRIES_TABLE)) == 20
