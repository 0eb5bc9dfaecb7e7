from unittest.mock import patch

import firebase_admin
import pytest

from sitecms.services.firebase import firebase_client
from sitecms.services.firebase.firebase_client import (
    FirebaseNotInitializedError, get_db, initialize_firebase, reset_firebase_state,
)

MISSING_CONFIG = {
    'project_id': None,
    'client_email': None,
    'private_key': None,
    'private_key_id': '',
    'client_id': '',
    'storage_bucket': None,
    'use_application_default': False,
}


@pytest.fixture(autouse=True)
def fresh_state():
    reset_firebase_state()
    with patch.dict(firebase_admin._apps, clear=True), \
            patch.object(firebase_client, 'load_env_file'):
        yield
    reset_firebase_state()


def test_missing_credentials_are_checked_once():
    with patch.object(firebase_client, 'get_firebase_config', return_value=MISSING_CONFIG) as get_config:
        assert initialize_firebase() is None
        assert initialize_firebase() is None
        with pytest.raises(FirebaseNotInitializedError):
            get_db()

    get_config.assert_called_once()


def test_failed_initialize_app_is_not_retried():
    config = dict(MISSING_CONFIG, use_application_default=True)
    with patch.object(firebase_client, 'get_firebase_config', return_value=config), \
            patch.object(firebase_client.firebase_admin, 'initialize_app',
                         side_effect=ValueError('no default credentials')) as initialize_app:
        assert initialize_firebase() is None
        assert initialize_firebase() is None

    initialize_app.assert_called_once()


def test_reset_allows_another_attempt():
    with patch.object(firebase_client, 'get_firebase_config', return_value=MISSING_CONFIG) as get_config:
        initialize_firebase()
        reset_firebase_state()
        initialize_firebase()

    assert get_config.call_count == 2
