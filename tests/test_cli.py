"""CLI tests."""

import pytest
from click.testing import CliRunner

from simplebank.cli.main import cli
from simplebank.token import new_token_maker


@pytest.mark.parametrize("maker, length", [("aead", 32), ("jwt", 64)])
def test_gen_key(maker, length):
    result = CliRunner().invoke(cli, ["gen-key", "--maker", maker])
    assert result.exit_code == 0
    key = result.output.strip()
    assert len(key) == length
    # The generated key is accepted by the matching maker
    assert new_token_maker(maker, key)


def test_gen_key_is_random():
    runner = CliRunner()
    keys = {runner.invoke(cli, ["gen-key"]).output for _ in range(5)}
    assert len(keys) == 5


def test_gen_key_rejects_unknown_maker():
    result = CliRunner().invoke(cli, ["gen-key", "--maker", "rsa"])
    assert result.exit_code != 0
