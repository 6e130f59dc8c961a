"""Tests for modules/auth/repository.py."""

import pytest

from modules.auth.repository import ProfileRepository
from tests.conftest import NO_SLEEP_RETRY, db_result, query_chain


@pytest.fixture
def query(mock_db):
    query = query_chain()
    mock_db.table.return_value = query
    return query


@pytest.fixture
def repo(mock_db):
    return ProfileRepository(mock_db, NO_SLEEP_RETRY)


class TestProfileRepository:
    def test_get_profile(self, repo, mock_db, query):
        query.execute.return_value = db_result([{
            "id": "user-1",
            "email": "ada@example.com",
            "role": "admin",
            "user_status": "approved",
            "stripe_customer": "ignored",
        }])

        profile = repo.get_profile("user-1")

        mock_db.table.assert_called_with("profiles")
        query.eq.assert_called_once_with("id", "user-1")
        assert profile.is_admin
        assert profile.user_status == "approved"

    def test_null_role_reads_as_user(self, repo, query):
        query.execute.return_value = db_result([{"id": "user-1", "role": None, "user_status": None}])

        profile = repo.get_profile("user-1")

        assert profile.role == "user"
        assert not profile.is_admin

    def test_list_tolerates_null_roles(self, repo, query):
        query.execute.return_value = db_result([{"id": "a", "role": "admin"}, {"id": "b", "role": None}])
        profiles = repo.list_profiles()
        assert [p.role for p in profiles] == ["admin", "user"]

    def test_get_profile_missing(self, repo, query):
        assert repo.get_profile("missing") is None

    def test_list_pending_admins(self, repo, query):
        query.execute.return_value = db_result([{"id": "a"}, {"id": "b"}])

        profiles = repo.list_profiles(role="admin", pending_only=True)

        assert [p.id for p in profiles] == ["a", "b"]
        query.eq.assert_called_once_with("role", "admin")
        query.or_.assert_called_once_with("user_status.is.null,user_status.eq.pending")
        query.order.assert_called_once_with("created_at", desc=True)

    def test_list_all(self, repo, query):
        repo.list_profiles()
        query.eq.assert_not_called()
        query.or_.assert_not_called()

    def test_count_profiles(self, repo, query):
        query.execute.return_value = db_result(count=4)
        assert repo.count_profiles(user_type="seller") == 4
        query.eq.assert_called_once_with("user_type", "seller")


class TestGetUserStatus:
    @pytest.mark.parametrize("data,expected", [
        ("approved", "approved"),
        ({"status": "rejected", "rejection_reason": "spam"}, "rejected"),
        ([{"status": "suspended"}], "suspended"),
    ])
    def test_shapes(self, repo, mock_db, data, expected):
        mock_db.rpc.return_value.execute.return_value = db_result(data)

        status = repo.get_user_status("user-1")

        mock_db.rpc.assert_called_once_with("get_user_status", {"user_id": "user-1"})
        assert status.status == expected

    @pytest.mark.parametrize("data", [None, [], ""])
    def test_empty(self, repo, mock_db, data):
        mock_db.rpc.return_value.execute.return_value = db_result(data)
        assert repo.get_user_status("user-1") is None

    def test_null_status_reads_as_pending(self, repo, mock_db):
        mock_db.rpc.return_value.execute.return_value = db_result({"status": None})
        assert repo.get_user_status("user-1").status == "pending"
