import pickle

from liteservices import DependencyNotFound


def test_carries_the_missing_service_name():
    err = DependencyNotFound("db")
    assert err.service_name == "db"
    assert err.extra == {"logs_only": {"service_name": "db"}}


def test_describes_the_error_kind():
    err = DependencyNotFound("db")
    assert err.package_name == "liteservices"
    assert err.error_name == "dependency-not-found"
    assert err.status == 500


def test_message_does_not_expose_the_service_name():
    err = DependencyNotFound("secret-db")
    assert str(err) == "requested service not found in the DI container"
    assert "secret-db" in repr(err)


def test_is_a_key_error():
    assert isinstance(DependencyNotFound("db"), KeyError)


def test_survives_pickling():
    err = pickle.loads(pickle.dumps(DependencyNotFound("db")))
    assert isinstance(err, DependencyNotFound)
    assert err.service_name == "db"
