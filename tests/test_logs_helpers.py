import logging

import pytest

from ligen.errors import EmptyHolderError
from ligen.logs_helpers import log_call


@log_call(show_result=True)
def add(a, b=1):
    return a + b


@log_call(show_args=False)
def explode():
    raise ValueError("boom")


class TestLogCall:

    def test_logs_arguments_and_result(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=__name__):
            assert add(2, b=3) == 5

        assert "-> add(2, b=3)" in caplog.text
        assert "<- add => 5" in caplog.text

    def test_quiet_without_debug(self, caplog):
        with caplog.at_level(logging.INFO, logger=__name__):
            add(1)

        assert caplog.text == ""

    def test_logs_and_reraises(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=__name__):
            with pytest.raises(ValueError):
                explode()

        assert "-> explode\n" in caplog.text
        assert "explode failed: boom" in caplog.text

    def test_keeps_metadata(self):
        assert add.__name__ == "add"
        assert add.__wrapped__(1, 1) == 2


class Repo:

    @log_call()
    def load(self, path):
        return path

    @log_call()
    def reject(self):
        raise EmptyHolderError()


class SqlRepo(Repo):
    pass


class TestLogCallMethods:

    def test_names_the_instance_class(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=__name__):
            SqlRepo().load("LICENSE")

        assert "-> SqlRepo.load('LICENSE')" in caplog.text
        assert "<- SqlRepo.load" in caplog.text

    def test_rejected_input_is_not_an_error(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=__name__):
            with pytest.raises(EmptyHolderError):
                Repo().reject()

        assert "Repo.reject rejected" in caplog.text
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
