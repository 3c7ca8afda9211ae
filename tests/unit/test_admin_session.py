from infrastructure.constants import ADMIN_PASSWORD
from tests.helpers import DummyLogger
from users.admin_session import AdminSession


def test_login_with_correct_password():
    session = AdminSession()

    assert session.login(ADMIN_PASSWORD) is True
    assert session.is_authenticated is True


def test_login_with_wrong_password_stays_unauthenticated():
    logger = DummyLogger()
    session = AdminSession('0921', logger=logger)

    assert session.login('0000') is False
    assert session.login(None) is False
    assert session.is_authenticated is False
    assert logger.levels() == ['warning', 'warning']
    assert all('0000' not in str(args) for _, args, _ in logger.records)


def test_logout_clears_authentication():
    session = AdminSession('0921')
    session.login('0921')

    session.logout()

    assert session.is_authenticated is False


def test_new_session_starts_logged_out():
    first = AdminSession('0921')
    first.login('0921')

    assert AdminSession('0921').is_authenticated is False
