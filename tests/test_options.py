from liteservices import DEFAULT_OPTIONS_PREPARER, clone_options, share_options


def test_clone_options_returns_an_independent_deep_copy():
    options = {"limits": {"retries": 3}, "hosts": ["a", "b"]}
    cloned = clone_options(options)

    assert cloned == options
    assert cloned is not options
    assert cloned["limits"] is not options["limits"]
    assert cloned["hosts"] is not options["hosts"]

    cloned["limits"]["retries"] = 10
    assert options["limits"]["retries"] == 3


def test_clone_options_honours_custom_deepcopy():
    class Settings:
        def __init__(self, name):
            self.name = name

        def __deepcopy__(self, memo):
            return Settings(self.name.upper())

    cloned = clone_options(Settings("db"))
    assert cloned.name == "DB"


def test_clone_options_accepts_none():
    assert clone_options(None) is None


def test_share_options_returns_the_same_object():
    options = {"retries": 3}
    assert share_options(options) is options


def test_default_preparer_clones():
    assert DEFAULT_OPTIONS_PREPARER is clone_options
