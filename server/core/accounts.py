# server/core/accounts.py

import logging
from core.errors import EmptyUsername, InvalidCredentials, UsernameTaken
from core.normalize import normalize_username
from core.store import CredentialStore, UserRecord


logger = logging.getLogger(__name__)


def sign_up(store: CredentialStore, user: UserRecord) -> UserRecord:
    """
    Registers a new account and returns the record as stored.

    The existence check and the insert are two separate store calls, so two
    concurrent sign-ups for the same name can both pass the check. Whether the
    second insert is rejected is up to the store (the SQL table keys on
    username and raises StoreError).
    Empty passwords are accepted.
    """
    try:
        username = normalize_username(user.username)
    except EmptyUsername:
        logger.info("sign-up rejected: empty username")
        raise

    record = UserRecord(username=username, password=user.password)

    if store.username_exists(record):
        logger.info("sign-up rejected: %r already exists", username)
        raise UsernameTaken(username)

    store.insert(record)
    logger.info("signed up %r", username)
    return record


def log_in(store: CredentialStore, user: UserRecord) -> UserRecord:
    """
    Verifies a username/password pair. Unknown users and wrong passwords both
    raise InvalidCredentials.
    """
    try:
        username = normalize_username(user.username)
    except EmptyUsername:
        logger.info("log-in rejected: empty username")
        raise InvalidCredentials() from None

    record = UserRecord(username=username, password=user.password)

    exists = store.username_exists(record)
    matches = store.password_matches(record)
    if not (exists and matches):
        logger.info("log-in failed for %r", username)
        raise InvalidCredentials()

    logger.info("logged in %r", username)
    return record
