import httpx
import pytest

from viewmodel.user_viewmodel import UserViewModel


@pytest.mark.asyncio
async def test_load_users_publishes_list_and_toggles_loading(viewmodel, repository, make_user):
    await repository.create_user(make_user(name="Bruno", email="b@example.com"))
    await repository.create_user(make_user(name="Alba", email="a@example.com"))

    loading_changes = []
    viewmodel.is_loading.subscribe(loading_changes.append)

    await viewmodel.load_users()

    assert [u.name for u in viewmodel.users.value] == ["Alba", "Bruno"]
    assert viewmodel.error.value is None
    assert loading_changes == [True, False]


@pytest.mark.asyncio
async def test_create_reloads_list_and_calls_back(viewmodel, make_user):
    called = []

    await viewmodel.create_user(make_user(), on_success=lambda: called.append(True))

    assert called == [True]
    assert viewmodel.success_message.value == "User created successfully"
    assert [u.email for u in viewmodel.users.value] == ["ana@example.com"]
    assert viewmodel.is_loading.value is False


@pytest.mark.asyncio
async def test_update_refreshes_list_and_selected_user(viewmodel, make_user):
    await viewmodel.create_user(make_user())
    user_id = viewmodel.users.value[0].id

    await viewmodel.update_user(user_id, make_user(name="Ana María", phone="5500000000"))

    assert viewmodel.success_message.value == "User updated successfully"
    assert viewmodel.selected_user.value.name == "Ana María"
    assert viewmodel.selected_user.value.phone == "5500000000"
    assert viewmodel.users.value[0].name == "Ana María"


@pytest.mark.asyncio
async def test_delete_removes_from_list_and_clears_selection(viewmodel, make_user):
    await viewmodel.create_user(make_user())
    user_id = viewmodel.users.value[0].id
    await viewmodel.load_user(user_id)
    assert viewmodel.selected_user.value.id == user_id

    called = []
    await viewmodel.delete_user(user_id, on_success=lambda: called.append(True))

    assert called == [True]
    assert viewmodel.users.value == []
    assert viewmodel.selected_user.value is None
    assert viewmodel.success_message.value == "User deleted successfully"


@pytest.mark.asyncio
async def test_failure_publishes_error_and_skips_callback(viewmodel, make_user):
    called = []

    await viewmodel.update_user(99, make_user(), on_success=lambda: called.append(True))

    assert called == []
    assert viewmodel.error.value == "Failed to update user: 404"
    assert viewmodel.success_message.value is None
    assert viewmodel.is_loading.value is False


@pytest.mark.asyncio
async def test_connection_error_keeps_previous_list(mock_repository, viewmodel, make_user):
    await viewmodel.create_user(make_user())
    previous = viewmodel.users.value

    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    viewmodel.repository = mock_repository(refuse)
    await viewmodel.load_users()

    assert viewmodel.users.value == previous
    assert viewmodel.error.value == "Connection error: Connection refused"


@pytest.mark.asyncio
async def test_next_action_clears_stale_error(viewmodel, make_user):
    await viewmodel.load_user(123)
    assert viewmodel.error.value == "Failed to load user: 404"

    await viewmodel.load_users()
    assert viewmodel.error.value is None


def test_clear_messages(viewmodel):
    viewmodel.error.value = "Failed to load users: 500"
    viewmodel.success_message.value = "User created successfully"

    viewmodel.clear_messages()

    assert viewmodel.error.value is None
    assert viewmodel.success_message.value is None


def test_initial_state():
    vm = UserViewModel()
    assert vm.users.value == []
    assert vm.selected_user.value is None
    assert vm.is_loading.value is False
    assert vm.error.value is None
    assert vm.success_message.value is None


@pytest.mark.asyncio
async def test_loading_resets_when_callback_raises(viewmodel, make_user):
    def boom():
        raise RuntimeError("navigation failed")

    with pytest.raises(RuntimeError):
        await viewmodel.create_user(make_user(), on_success=boom)

    assert viewmodel.is_loading.value is False


@pytest.mark.asyncio
async def test_loading_resets_when_repository_raises(viewmodel):
    class BrokenRepository:
        async def get_users(self):
            raise RuntimeError("unexpected")

    viewmodel.repository = BrokenRepository()

    with pytest.raises(RuntimeError):
        await viewmodel.load_users()

    assert viewmodel.is_loading.value is False
