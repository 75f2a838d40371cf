import itertools

import pytest

from creatorhub_web.domain.page_outcome import PageOutcome, after_resource_fetch, after_token_issue, classify


@pytest.mark.parametrize("session_present,token_issued", list(itertools.product([True, False], repeat=2)))
def test_missing_resource_is_not_found_whatever_the_session(session_present, token_issued):
    assert classify(False, session_present, token_issued) is PageOutcome.NOT_FOUND


@pytest.mark.parametrize("token_issued", [True, False])
def test_resource_without_session_redirects(token_issued):
    assert classify(True, False, token_issued) is PageOutcome.LOGIN_REDIRECT


def test_empty_token_redirects_like_missing_session():
    assert classify(True, True, False) is PageOutcome.LOGIN_REDIRECT


def test_only_full_success_renders():
    rendering = [
        combo for combo in itertools.product([True, False], repeat=3) if classify(*combo) is PageOutcome.RENDER
    ]
    assert rendering == [(True, True, True)]


def test_steps_continue_only_with_resource_and_session():
    assert after_resource_fetch(True, True) is None
    assert after_token_issue(True) is PageOutcome.RENDER
