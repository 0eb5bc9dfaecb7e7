from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from sitecms.common.base.base_service import NotFoundError
from sitecms.features.contacts.dto.contact_request import CreateContactRequest
from sitecms.features.contacts.service.contact_service import ContactService
from sitecms.features.products.dto.product_request import ProductRequest
from sitecms.features.products.service.product_service import ProductService
from sitecms.features.users.dto.user_request import CreateUserRequest
from sitecms.features.users.service.user_service import (
    INITIAL_USERS, EmailAlreadyExistsError, UserService, permissions_for_role,
)

USER_SERVICE = 'sitecms.features.users.service.user_service'


@pytest.mark.parametrize("role,expected", [
    ('super_admin', ['all']),
    ('admin', ['read', 'write', 'delete', 'manage_users', 'manage_content']),
    ('editor', ['read', 'write', 'manage_content']),
    ('user', ['read']),
    (None, ['read']),
])
def test_permissions_for_role(role, expected):
    assert permissions_for_role(role) == expected


def test_create_user_without_password_uses_auto_id():
    repo = MagicMock()
    repo.add.return_value = 'doc-1'
    service = UserService(repo)

    with patch(f'{USER_SERVICE}.auth') as mock_auth:
        user_id = service.create_user(CreateUserRequest(name='Ama', email='ama@willsther.com', role='editor'))

    assert user_id == 'doc-1'
    mock_auth.create_user.assert_not_called()
    saved = repo.add.call_args.args[0]
    assert saved['permissions'] == ['read', 'write', 'manage_content']
    assert saved['status'] == 'pending'


@patch(f'{USER_SERVICE}.initialize_firebase')
def test_create_user_with_password_uses_auth_uid(_init):
    repo = MagicMock()
    service = UserService(repo)

    with patch(f'{USER_SERVICE}.auth') as mock_auth:
        mock_auth.create_user.return_value.uid = 'uid-42'
        user_id = service.create_user(CreateUserRequest(name='Kofi', email='kofi@willsther.com',
                                                        password='secret123', role='admin'))

    assert user_id == 'uid-42'
    repo.set.assert_called_once()
    assert repo.set.call_args.args[0] == 'uid-42'
    repo.add.assert_not_called()


@patch(f'{USER_SERVICE}.initialize_firebase')
def test_create_user_duplicate_email(_init):
    service = UserService(MagicMock())

    with patch(f'{USER_SERVICE}.auth') as mock_auth:
        mock_auth.EmailAlreadyExistsError = type('EmailAlreadyExistsError', (Exception,), {})
        mock_auth.create_user.side_effect = mock_auth.EmailAlreadyExistsError('taken')
        with pytest.raises(EmailAlreadyExistsError):
            service.create_user(CreateUserRequest(name='Kofi', email='kofi@willsther.com', password='secret123'))


def test_short_password_is_rejected():
    with pytest.raises(ValidationError):
        CreateUserRequest(name='Kofi', email='kofi@willsther.com', password='123')


def test_user_stats_counts_roles_and_statuses():
    repo = MagicMock()
    repo.list_with_fallback.return_value = [
        {'id': '1', 'role': 'admin', 'status': 'active'},
        {'id': '2', 'role': 'editor', 'status': 'inactive'},
        {'id': '3', 'role': 'user'},
        {'id': '4', 'role': 'super_admin', 'status': 'active'},
    ]

    stats = UserService(repo).get_stats()

    assert stats == {'total': 4, 'active': 2, 'inactive': 1, 'pending': 1,
                     'admins': 1, 'editors': 1, 'users': 1}


def test_seed_only_runs_on_empty_collection():
    repo = MagicMock()
    service = UserService(repo)

    repo.is_empty.return_value = False
    assert service.seed_initial_users()['seeded'] is False
    repo.add.assert_not_called()

    repo.is_empty.return_value = True
    result = service.seed_initial_users()
    assert result == {'seeded': True, 'count': 3}
    emails = [call.args[0]['email'] for call in repo.add.call_args_list]
    assert emails == [u['email'] for u in INITIAL_USERS]


def test_update_status_of_missing_user():
    repo = MagicMock()
    repo.exists.return_value = False
    with pytest.raises(NotFoundError):
        UserService(repo).update_status('ghost', 'active')


def test_contact_submission_is_stored_as_new():
    repo = MagicMock()
    repo.add.return_value = 'c1'
    service = ContactService(repo)

    service.create_submission(CreateContactRequest(firstName='Esi', lastName='Mensah',
                                                   email='esi@example.com', message=' Need a quote '))

    saved = repo.add.call_args.args[0]
    assert saved['status'] == 'new'
    assert saved['message'] == 'Need a quote'
    assert saved['phone'] == ''


def test_contact_list_is_capped_by_take():
    repo = MagicMock()
    repo.list_with_fallback.return_value = [{'id': str(i)} for i in range(5)]
    assert len(ContactService(repo).list_submissions(take=2)) == 2


def test_contact_list_formats_received_date():
    repo = MagicMock()
    repo.list_with_fallback.return_value = [
        {'id': 'c1', 'createdAt': '2024-03-05T10:00:00+00:00'},
        {'id': 'c2'},
    ]
    submissions = ContactService(repo).list_submissions()
    assert [s['formattedDate'] for s in submissions] == ['05/03/2024', '']


@pytest.mark.parametrize("payload", [
    {'firstName': '', 'lastName': 'M', 'email': 'a@b.com', 'message': 'hi'},
    {'firstName': 'E', 'lastName': 'M', 'email': 'not-an-email', 'message': 'hi'},
    {'firstName': 'E', 'lastName': 'M', 'email': 'a@b.com'},
])
def test_invalid_contact_requests(payload):
    with pytest.raises(ValidationError):
        CreateContactRequest(**payload)


def test_product_requires_title_and_price():
    with pytest.raises(ValidationError, match='Title and price are required'):
        ProductRequest(title='Mop', price=0)
    with pytest.raises(ValidationError, match='Title and price are required'):
        ProductRequest(price=10)


def test_product_delete_removes_hosted_image():
    repo, uploads = MagicMock(), MagicMock()
    repo.find_by_id.return_value = {'id': 'p1', 'imageUrl': 'https://firebasestorage.googleapis.com/v0/b/x/o/p.jpg'}
    service = ProductService(product_repository=repo, upload_service=uploads)

    service.delete_product('p1')

    repo.delete.assert_called_once_with('p1')
    uploads.delete_image.assert_called_once_with('https://firebasestorage.googleapis.com/v0/b/x/o/p.jpg')


def test_product_update_replaces_old_image():
    repo, uploads = MagicMock(), MagicMock()
    repo.find_by_id.return_value = {'id': 'p1', 'title': 'Mop', 'price': 5, 'imageUrl': 'https://old/img.jpg'}
    service = ProductService(product_repository=repo, upload_service=uploads)

    updated = service.update_product('p1', ProductRequest(title='Mop', price=6, imageUrl='https://new/img.jpg'))

    assert updated['price'] == 6
    uploads.delete_image.assert_called_once_with('https://old/img.jpg')


def test_product_stats():
    repo = MagicMock()
    repo.list_all.return_value = [
        {'id': '1', 'price': 10.5, 'inStock': True, 'category': 'Cleaning'},
        {'id': '2', 'price': 4, 'inStock': False},
        {'id': '3', 'price': 1.25, 'inStock': True, 'category': 'Laundry'},
    ]
    stats = ProductService(product_repository=repo, upload_service=MagicMock()).get_stats()
    assert stats['total'] == 3
    assert stats['inStock'] == 2
    assert stats['outOfStock'] == 1
    assert stats['totalValue'] == 15.75
    assert stats['categories'] == {'Cleaning': 2, 'Laundry': 1}
