from creatorhub_web.domain.cookie_policy import derive_cookie_domain, split_host
from creatorhub_web.domain.session import is_logged_in, read_session


def test_production_cookie_domain_is_parent_of_api_host():
    scope = derive_cookie_domain("https://api.scrcreate.app", development=False)
    assert (scope.domain, scope.tld) == ("scrcreate", "app")
    assert scope.attribute == ".scrcreate.app"


def test_development_mode_leaves_domain_unset():
    scope = derive_cookie_domain("https://api.scrcreate.app", development=True)
    assert scope.attribute is None


def test_scheme_port_and_path_are_ignored():
    assert split_host("http://v2.api.scrcreate.app:8443/api") == ("scrcreate", "app")
    assert split_host("api.scrcreate.app") == ("scrcreate", "app")


def test_single_label_host_falls_back_to_host_only_cookie():
    scope = derive_cookie_domain("http://localhost:4000", development=False)
    assert split_host("http://localhost:4000") is None
    assert scope.attribute is None


def test_session_presence():
    assert is_logged_in({"CH-SESSION": "abc"})
    assert not is_logged_in({})
    assert not is_logged_in({"CH-SESSION": ""})
    assert read_session({"OTHER": "x", "CH-SESSION": "abc"}) == "abc"
