"""
Tests for auth user administration.
"""

import pytest

from models.user import (
    User,
    get_all_users,
    get_user_by_id,
    get_user_by_email,
    update_user_metadata,
    ban_user,
    unban_user,
    delete_user,
    is_banned,
    can_modify_user,
    create_admin_user,
    set_app_role,
    user_to_dict,
    display_name,
)


@pytest.fixture
def guide(backend):
    return backend.add_user('guide@safari.example.com', 'pw', user_metadata={'full_name': 'Baraka Guide', 'role': 'user'})


class TestUserModel:

    def test_list_newest_first(self, app, backend, guide):
        users = get_all_users()
        assert [u['email'] for u in users] == ['guide@safari.example.com', 'admin@safari.example.com']

    def test_lookup(self, app, guide):
        assert get_user_by_id(guide['id'])['email'] == 'guide@safari.example.com'
        assert get_user_by_id('missing') is None
        assert get_user_by_email('GUIDE@safari.example.com')['id'] == guide['id']

    def test_metadata_merge(self, app, backend, guide):
        updated = update_user_metadata(guide['id'], {'name': 'Baraka', 'bogus': 'x'})
        assert updated['user_metadata'] == {'full_name': 'Baraka Guide', 'role': 'user', 'name': 'Baraka'}

    def test_metadata_bad_role(self, app, guide):
        with pytest.raises(ValueError):
            update_user_metadata(guide['id'], {'role': 'owner'})

    def test_metadata_missing_user(self, app):
        assert update_user_metadata('missing', {'name': 'x'}) is None

    def test_ban_and_unban(self, app, backend, guide):
        ban_user(guide['id'])
        assert is_banned(get_user_by_id(guide['id'])) is True

        unban_user(guide['id'])
        assert is_banned(get_user_by_id(guide['id'])) is False

    def test_is_banned_past_date(self):
        assert is_banned({'banned_until': '2020-01-01T00:00:00Z'}) is False
        assert is_banned({'banned_until': None}) is False

    def test_delete(self, app, backend, guide):
        delete_user(guide['id'])
        assert guide['id'] not in backend.users

    def test_self_guard(self):
        assert can_modify_user('a', 'a', 'ban') == (False, 'cannot_ban_self')
        assert can_modify_user('a', 'a', 'delete') == (False, 'cannot_delete_self')
        assert can_modify_user('a', 'b', 'delete') == (True, '')

    def test_admin_role_commands(self, app, backend, guide):
        created = create_admin_user('new@safari.example.com', 'secret')
        assert created['app_metadata']['role'] == 'admin'

        promoted = set_app_role(guide['id'], 'admin')
        assert promoted['app_metadata'] == {'provider': 'email', 'role': 'admin'}

    def test_user_object(self):
        user = User(user_to_dict({'id': 7, 'email': 'x@y.co', 'user_metadata': None}))
        assert user.get_id() == '7'
        assert user.full_name == 'x@y.co'
        assert user.is_active is True
        assert display_name({'email': 'e', 'user_metadata': {'name': 'N'}}) == 'N'


class TestUserScreens:

    def test_edit_metadata(self, authenticated_client, backend, guide):
        response = authenticated_client.get(f"/admin/users/{guide['id']}/edit")
        assert response.status_code == 200

        authenticated_client.post(f"/admin/users/{guide['id']}/edit", data={
            'full_name': 'Baraka Mwangi', 'name': 'Baraka', 'avatar_url': '', 'role': 'moderator'
        })
        assert backend.users[guide['id']]['user_metadata']['role'] == 'moderator'
        assert backend.users[guide['id']]['user_metadata']['full_name'] == 'Baraka Mwangi'

    def test_editing_self_refreshes_session(self, authenticated_client, backend):
        admin_id = backend.admin_user['id']
        authenticated_client.post(f'/admin/users/{admin_id}/edit', data={
            'full_name': 'Amina W. Otieno', 'name': '', 'avatar_url': '', 'role': 'admin'
        })
        with authenticated_client.session_transaction() as sess:
            assert sess['auth_user']['user_metadata']['full_name'] == 'Amina W. Otieno'
        assert b'Amina W. Otieno' in authenticated_client.get('/admin/').data

    def test_ban_unban_delete(self, authenticated_client, backend, guide):
        authenticated_client.post(f"/admin/users/{guide['id']}/ban")
        assert is_banned(backend.users[guide['id']])
        assert b'banned' in authenticated_client.get('/admin/users?status=banned').data

        authenticated_client.post(f"/admin/users/{guide['id']}/unban")
        assert backend.users[guide['id']]['banned_until'] is None

        authenticated_client.post(f"/admin/users/{guide['id']}/delete")
        assert guide['id'] not in backend.users

    def test_cannot_ban_or_delete_self(self, authenticated_client, backend):
        admin_id = backend.admin_user['id']

        response = authenticated_client.post(f'/admin/users/{admin_id}/ban', follow_redirects=True)
        assert b'You cannot ban your own account' in response.data
        assert backend.users[admin_id]['banned_until'] is None

        response = authenticated_client.post(f'/admin/users/{admin_id}/delete', follow_redirects=True)
        assert b'You cannot delete your own account' in response.data
        assert admin_id in backend.users

    def test_backend_failure_flashes(self, authenticated_client, backend, guide):
        backend.fail_next('auth', 'delete_user')
        response = authenticated_client.post(f"/admin/users/{guide['id']}/delete", follow_redirects=True)
        assert b'Failed to delete user' in response.data
        assert guide['id'] in backend.users
