from flask_login import current_user

from yelpcamp.models import User


def test_register_establishes_session_and_redirects(client):
    r = client.post('/register', data={'username': 'alice', 'password': 'secret'})
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/campgrounds')

    with client.session_transaction() as sess:
        assert sess.get('_user_id') == str(User.query.filter_by(username='alice').one().id)


def test_register_hashes_password(client):
    client.post('/register', data={'username': 'alice', 'password': 'secret'})
    user = User.query.filter_by(username='alice').one()
    assert user.password_hash != 'secret'
    assert user.password_hash.startswith('pbkdf2:sha256')
    assert user.check_password('secret')


def test_duplicate_registration_rerenders_form_without_session(client, alice):
    r = client.post('/register', data={'username': 'alice', 'password': 'other'})
    assert r.status_code == 400
    assert 'already registered' in r.get_data(as_text=True)
    with client.session_transaction() as sess:
        assert '_user_id' not in sess
    assert User.query.filter_by(username='alice').count() == 1


def test_register_requires_fields(client):
    r = client.post('/register', data={'username': '', 'password': ''})
    assert r.status_code == 400
    assert User.query.count() == 0


def test_login_after_registration_sets_identity(client):
    client.post('/register', data={'username': 'alice', 'password': 'secret'})
    client.get('/logout')

    with client:
        r = client.post('/login', data={'username': 'alice', 'password': 'secret'})
        assert r.status_code == 302
        assert r.headers['Location'].endswith('/campgrounds')
        assert current_user.username == 'alice'


def test_login_with_wrong_password_fails(client, alice):
    r = client.post('/login', data={'username': 'alice', 'password': 'wrong'})
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/login')
    with client.session_transaction() as sess:
        assert '_user_id' not in sess


def test_login_unknown_user_fails(client):
    r = client.post('/login', data={'username': 'nobody', 'password': 'secret'})
    assert r.headers['Location'].endswith('/login')


def test_login_follows_relative_next(client, alice):
    r = client.post('/login', data={'username': 'alice', 'password': 'secret',
                                     'next': '/campgrounds/1/comments/new'})
    assert r.headers['Location'].endswith('/campgrounds/1/comments/new')


def test_login_ignores_external_next(client, alice):
    r = client.post('/login', data={'username': 'alice', 'password': 'secret',
                                     'next': 'https://evil.example/'})
    assert r.headers['Location'].endswith('/campgrounds')


def test_logout_clears_session(client, alice, login):
    login()
    r = client.get('/logout')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/campgrounds')
    with client.session_transaction() as sess:
        assert '_user_id' not in sess


def test_logout_is_idempotent_when_anonymous(client):
    for _ in range(2):
        r = client.get('/logout')
        assert r.status_code == 302
        assert r.headers['Location'].endswith('/campgrounds')


def test_forms_render(client):
    assert client.get('/login').status_code == 200
    assert client.get('/register').status_code == 200


def test_current_user_shown_in_templates(client, alice, login):
    assert 'Signed in as' not in client.get('/campgrounds').get_data(as_text=True)
    login()
    assert 'Signed in as alice' in client.get('/campgrounds').get_data(as_text=True)


def test_failed_login_keeps_next_target(client, alice):
    r = client.post('/login', data={'username': 'alice', 'password': 'wrong',
                                     'next': '/campgrounds/1/comments/new'})
    assert r.status_code == 302
    assert '/login?next=' in r.headers['Location']
    assert '%2Fcampgrounds%2F1%2Fcomments%2Fnew' in r.headers['Location']


def test_failed_login_drops_external_next(client, alice):
    r = client.post('/login', data={'username': 'alice', 'password': 'wrong',
                                     'next': 'https://evil.example/'})
    assert r.headers['Location'].endswith('/login')
